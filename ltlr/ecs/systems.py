"""Per-entity update systems: smoothing, motion, collision, lifetimes and animation."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from ..common import VECTOR2_ZERO, Rectangle, Vector2, sign
from ..context import DT
from .components import CCollider, OnCollisionParams, OnResolution, OnResolutionParams, Resolve, Tag
from .world import World

_COLLIDABLE = Tag.POSITION | Tag.DIMENSION | Tag.COLLIDER
_STEP = 1


def _aabb(world: World, entity: int) -> Rectangle:
    position = world.positions[entity].value
    dimension = world.dimensions[entity]
    return Rectangle(position.x, position.y, dimension.width, dimension.height)


def smooth_update(world: World, entity: int) -> None:
    """Remember the entity's current position for interpolation."""
    if not world.has(entity, Tag.POSITION | Tag.SMOOTH):
        return
    world.smooths[entity].previous = world.positions[entity].value


def kinetic_update(world: World, entity: int) -> None:
    """Integrate acceleration into velocity and velocity into position over one step."""
    if not world.has(entity, Tag.POSITION | Tag.KINETIC):
        return
    position = world.positions[entity]
    kinetic = world.kinetics[entity]

    kinetic.velocity = kinetic.velocity + kinetic.acceleration.scale(DT)
    position.value = position.value + kinetic.velocity.scale(DT)


def _extract_resolution(resolution: Vector2, schema: Resolve) -> Vector2:
    """Keep only the components of ``resolution`` that ``schema`` allows."""
    x = 0.0
    y = 0.0
    if schema & Resolve.LEFT and resolution.x < 0:
        x = resolution.x
    if schema & Resolve.RIGHT and resolution.x > 0:
        x = resolution.x
    if schema & Resolve.UP and resolution.y < 0:
        y = resolution.y
    if schema & Resolve.DOWN and resolution.y > 0:
        y = resolution.y
    if x == 0 and y == 0:
        return VECTOR2_ZERO
    return Vector2(x, y)


def _resolution_is_plausible(
    resolution: Vector2, aabb: Rectangle, other: Rectangle, overlap: Rectangle
) -> bool:
    # The resolution must lie on the axis with the least overlap.
    if resolution.x != 0 and overlap.width >= overlap.height:
        return False
    if resolution.y != 0 and overlap.height >= overlap.width:
        return False

    # The resolution must point in the direction of the smallest offset.
    offset_left = (other.left - aabb.width) - aabb.left
    offset_right = other.right - aabb.left
    offset_down = other.bottom - aabb.top
    offset_up = (other.top - aabb.height) - aabb.top

    if resolution.x < 0 and abs(offset_left) > abs(offset_right):
        return False
    if resolution.x > 0 and abs(offset_right) > abs(offset_left):
        return False
    if resolution.y < 0 and abs(offset_up) > abs(offset_down):
        return False
    if resolution.y > 0 and abs(offset_down) > abs(offset_up):
        return False
    return True


def _simulate_on_axis(
    world: World,
    entity: int,
    aabb: Rectangle,
    collider: CCollider,
    delta: Vector2,
    on_resolution: OnResolution,
) -> tuple[Rectangle, bool, bool]:
    """Step ``aabb`` along one axis, resolving against colliders as it goes."""
    if delta.x != 0 and delta.y != 0:
        raise ValueError("delta must move along a single axis")

    direction = Vector2(sign(delta.x), sign(delta.y))
    remainder_x = abs(delta.x)
    remainder_y = abs(delta.y)
    x_modified = False
    y_modified = False

    while remainder_x > 0 or remainder_y > 0:
        remainder_x -= _STEP * abs(direction.x)
        remainder_y -= _STEP * abs(direction.y)
        aabb = replace(
            aabb,
            x=aabb.x + _STEP * direction.x,
            y=aabb.y + _STEP * direction.y,
        )

        for other in world.entities():
            if other == entity or not world.has(other, _COLLIDABLE):
                continue
            other_collider = world.colliders[other]
            if not collider.mask & other_collider.layer:
                continue

            other_aabb = _aabb(world, other)
            if not aabb.intersects(other_aabb):
                continue

            resolution = _extract_resolution(-direction, other_collider.resolution_schema)
            if resolution.x == 0 and resolution.y == 0:
                continue

            overlap = aabb.overlap(other_aabb)
            if not _resolution_is_plausible(resolution, aabb, other_aabb, overlap):
                continue

            resolved = on_resolution(
                OnResolutionParams(
                    world=world,
                    entity=entity,
                    aabb=aabb,
                    other_entity=other,
                    other_aabb=other_aabb,
                    overlap=overlap,
                    resolution=resolution,
                )
            )
            x_modified |= resolved.x != aabb.x
            y_modified |= resolved.y != aabb.y
            aabb = resolved

        if (direction.x != 0 and x_modified) or (direction.y != 0 and y_modified):
            break

    return aabb, x_modified, y_modified


def _advanced_collision(
    world: World,
    entity: int,
    current: Rectangle,
    previous: Rectangle,
    collider: CCollider,
    on_resolution: OnResolution,
) -> Rectangle:
    delta = Vector2(current.x - previous.x, current.y - previous.y)
    aabb = previous

    # Simulate on whole pixels, rounding away from the direction of travel.
    if delta.x != 0:
        aabb = replace(aabb, x=math.floor(aabb.x) if delta.x > 0 else math.ceil(aabb.x))
    if delta.y != 0:
        aabb = replace(aabb, y=math.floor(aabb.y) if delta.y > 0 else math.ceil(aabb.y))

    x_modified = False
    y_modified = False

    aabb, x_mod, y_mod = _simulate_on_axis(
        world, entity, aabb, collider, Vector2(delta.x, 0), on_resolution
    )
    x_modified |= x_mod
    y_modified |= y_mod
    if not x_modified:
        aabb = replace(aabb, x=current.x)

    aabb, x_mod, y_mod = _simulate_on_axis(
        world, entity, aabb, collider, Vector2(0, delta.y), on_resolution
    )
    x_modified |= x_mod
    y_modified |= y_mod
    if not y_modified:
        aabb = replace(aabb, y=current.y)

    return aabb


def collision_update(world: World, entity: int) -> None:
    """Resolve the entity's movement since the last step against other colliders."""
    if not world.has(entity, Tag.SMOOTH | _COLLIDABLE):
        return
    collider: CCollider = world.colliders[entity]
    on_resolution: Optional[OnResolution] = collider.on_resolution
    if on_resolution is None:
        return

    dimension = world.dimensions[entity]
    previous_position = world.smooths[entity].previous
    previous = Rectangle(
        previous_position.x, previous_position.y, dimension.width, dimension.height
    )
    current = _aabb(world, entity)

    resolved = _advanced_collision(world, entity, current, previous, collider, on_resolution)
    world.positions[entity].value = Vector2(resolved.x, resolved.y)


def post_collision_update(world: World, entity: int) -> None:
    """Report every collider the entity's resolved box overlaps."""
    if not world.has(entity, _COLLIDABLE):
        return
    collider: CCollider = world.colliders[entity]
    if collider.on_collision is None:
        return

    aabb = _aabb(world, entity)
    for other in world.entities():
        if other == entity or not world.has(other, _COLLIDABLE):
            continue
        if not collider.mask & world.colliders[other].layer:
            continue
        other_aabb = _aabb(world, other)
        if aabb.intersects(other_aabb):
            collider.on_collision(
                OnCollisionParams(
                    world=world,
                    entity=entity,
                    aabb=aabb,
                    other_entity=other,
                    other_aabb=other_aabb,
                    overlap=aabb.overlap(other_aabb),
                )
            )


def fleeting_update(world: World, entity: int) -> None:
    """Age the entity and schedule its removal once its lifetime is spent."""
    if not world.has(entity, Tag.FLEETING):
        return
    fleeting = world.fleetings[entity]
    fleeting.age += DT
    if fleeting.age >= fleeting.lifetime:
        world.defer_deallocate(entity)


def animation_update(world: World, entity: int) -> None:
    """Advance the entity's animation frame when its frame time is up."""
    if not world.has(entity, Tag.ANIMATION):
        return
    animation = world.animations[entity]
    animation.frame_timer += DT
    if animation.frame_timer >= animation.frame_duration:
        animation.frame_timer = 0.0
        animation.frame = (animation.frame + 1) % animation.length