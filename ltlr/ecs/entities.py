"""Builders and per-entity logic for the simpler entities of the game."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import IntEnum

from ..animation import Animation
from ..common import VECTOR2_ZERO, Rectangle, Reflection, Vector2
from ..context import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from .components import (
    CAnimation,
    CCollider,
    CDamage,
    CDimension,
    CFleeting,
    CIdentifier,
    CKinetic,
    CPosition,
    CSmooth,
    CSprite,
    EntityType,
    Layer,
    OnCollisionParams,
    OnResolutionParams,
    Resolve,
    Sprite,
    Tag,
)
from .resolution import apply_resolution_perfectly
from .world import World


class SpikeRotation(IntEnum):
    ROTATE_0 = 0
    ROTATE_90 = 1
    ROTATE_180 = 2
    ROTATE_270 = 3


# Offset of the collider within the tile, the sprite's intramural region and its sprite.
_SPIKE_LAYOUTS: dict[SpikeRotation, tuple[Vector2, Rectangle, Sprite]] = {
    SpikeRotation.ROTATE_0: (Vector2(2, 13), Rectangle(2, 13, 12, 3), Sprite.SPIKE_0000),
    SpikeRotation.ROTATE_90: (Vector2(0, 2), Rectangle(0, 2, 3, 12), Sprite.SPIKE_0001),
    SpikeRotation.ROTATE_180: (Vector2(2, 0), Rectangle(2, 0, 12, 3), Sprite.SPIKE_0002),
    SpikeRotation.ROTATE_270: (Vector2(13, 2), Rectangle(13, 2, 3, 12), Sprite.SPIKE_0003),
}


def build_battery(world: World, x: float, y: float) -> int:
    """Create a collectable battery at (x, y); return its entity."""
    entity = world.allocate_entity()
    position = Vector2(x, y)
    intramural = Rectangle(1, 0, 14, 32)

    world.tags[entity] = (
        Tag.IDENTIFIER
        | Tag.POSITION
        | Tag.DIMENSION
        | Tag.SPRITE
        | Tag.COLLIDER
        | Tag.SMOOTH
        | Tag.KINETIC
    )
    world.identifiers[entity] = CIdentifier(EntityType.BATTERY)
    world.positions[entity] = CPosition(position)
    world.dimensions[entity] = CDimension(intramural.width, intramural.height)
    world.sprites[entity] = CSprite(Sprite.BATTERY, intramural, Reflection.NONE)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve.NONE, layer=Layer.INTERACTABLE, mask=Layer.NONE
    )
    world.smooths[entity] = CSmooth(position)
    world.kinetics[entity] = CKinetic(VECTOR2_ZERO, VECTOR2_ZERO)
    return entity


def battery_update(world: World, entity: int) -> None:
    """Bob the battery up and down with the passage of time."""
    if not world.is_type(entity, EntityType.BATTERY) or not world.has(entity, Tag.KINETIC):
        return
    kinetic = world.kinetics[entity]
    kinetic.velocity = replace(
        kinetic.velocity, y=math.sin(world.elapsed_time * 3.0) * 10.0
    )


def build_block(
    world: World, aabb: Rectangle, resolution_schema: Resolve, layer: Layer
) -> int:
    """Create a static collider covering ``aabb``; return its entity."""
    entity = world.allocate_entity()

    world.tags[entity] = Tag.IDENTIFIER | Tag.POSITION | Tag.DIMENSION | Tag.COLLIDER
    world.identifiers[entity] = CIdentifier(EntityType.BLOCK)
    world.positions[entity] = CPosition(Vector2(aabb.x, aabb.y))
    world.dimensions[entity] = CDimension(aabb.width, aabb.height)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve(resolution_schema), layer=Layer(layer), mask=Layer.NONE
    )
    return entity


def _cloud_particle_on_collision(params: OnCollisionParams) -> None:
    # A particle completely buried inside terrain is removed.
    if params.overlap.width >= params.aabb.width and params.overlap.height >= params.aabb.height:
        params.world.defer_deallocate(params.entity)


def build_cloud_particle(
    world: World,
    position: Vector2,
    radius: float,
    initial_velocity: Vector2,
    acceleration: Vector2,
    lifetime: float,
) -> int:
    """Create a short-lived cloud puff; return its entity."""
    entity = world.allocate_entity()

    world.tags[entity] = (
        Tag.IDENTIFIER
        | Tag.POSITION
        | Tag.DIMENSION
        | Tag.KINETIC
        | Tag.SMOOTH
        | Tag.COLLIDER
        | Tag.FLEETING
    )
    world.identifiers[entity] = CIdentifier(EntityType.CLOUD_PARTICLE)
    world.positions[entity] = CPosition(position)
    world.dimensions[entity] = CDimension(radius * 2, radius * 2)
    world.kinetics[entity] = CKinetic(initial_velocity, acceleration)
    world.smooths[entity] = CSmooth(position)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve.NONE,
        layer=Layer.NONE,
        mask=Layer.TERRAIN,
        on_collision=_cloud_particle_on_collision,
    )
    world.fleetings[entity] = CFleeting(lifetime, 0.0)
    return entity


def build_fog_particle(
    world: World, position: Vector2, velocity: Vector2, radius: float, lifetime: float
) -> int:
    """Create a short-lived fog particle; return its entity."""
    entity = world.allocate_entity()

    world.tags[entity] = (
        Tag.IDENTIFIER
        | Tag.POSITION
        | Tag.DIMENSION
        | Tag.KINETIC
        | Tag.SMOOTH
        | Tag.FLEETING
    )
    world.identifiers[entity] = CIdentifier(EntityType.FOG_PARTICLE)
    world.positions[entity] = CPosition(position)
    world.dimensions[entity] = CDimension(radius * 2, radius * 2)
    world.kinetics[entity] = CKinetic(velocity, VECTOR2_ZERO)
    world.smooths[entity] = CSmooth(position)
    world.fleetings[entity] = CFleeting(lifetime, 0.0)
    return entity


def build_lakitu(world: World) -> int:
    """Create the camera-following entity in the middle of the viewport; return it."""
    entity = world.allocate_entity()
    position = Vector2(VIEWPORT_WIDTH * 0.5, VIEWPORT_HEIGHT * 0.5)

    world.tags[entity] = Tag.IDENTIFIER | Tag.POSITION | Tag.KINETIC | Tag.SMOOTH
    world.identifiers[entity] = CIdentifier(EntityType.LAKITU)
    world.positions[entity] = CPosition(position)
    world.kinetics[entity] = CKinetic(Vector2(100, 0), VECTOR2_ZERO)
    world.smooths[entity] = CSmooth(position)
    return entity


def build_solar_panel(world: World, x: float, y: float) -> int:
    """Create a solar panel, initially switched off; return its entity."""
    entity = world.allocate_entity()
    intramural = Rectangle(4, 8, 88, 40)

    world.tags[entity] = (
        Tag.IDENTIFIER | Tag.POSITION | Tag.DIMENSION | Tag.SPRITE | Tag.COLLIDER
    )
    world.identifiers[entity] = CIdentifier(EntityType.SOLAR_PANEL)
    world.positions[entity] = CPosition(Vector2(x, y))
    world.dimensions[entity] = CDimension(intramural.width, intramural.height)
    world.sprites[entity] = CSprite(Sprite.SOLAR_0000, intramural, Reflection.NONE)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve.NONE, layer=Layer.INTERACTABLE, mask=Layer.NONE
    )
    return entity


def build_spike(world: World, x: float, y: float, rotation: SpikeRotation) -> int:
    """Create a lethal spike in the tile at (x, y); unknown rotations face up."""
    entity = world.allocate_entity()
    offset, intramural, sprite = _SPIKE_LAYOUTS.get(
        rotation, _SPIKE_LAYOUTS[SpikeRotation.ROTATE_0]
    )

    world.tags[entity] = (
        Tag.IDENTIFIER
        | Tag.POSITION
        | Tag.DIMENSION
        | Tag.COLLIDER
        | Tag.DAMAGE
        | Tag.SPRITE
    )
    world.identifiers[entity] = CIdentifier(EntityType.SPIKE)
    world.positions[entity] = CPosition(Vector2(x + offset.x, y + offset.y))
    world.sprites[entity] = CSprite(sprite, intramural, Reflection.NONE)
    world.dimensions[entity] = CDimension(intramural.width, intramural.height)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve.NONE, layer=Layer.LETHAL, mask=Layer.NONE
    )
    world.damages[entity] = CDamage(1)
    return entity


def _walker_on_resolution(params: OnResolutionParams) -> Rectangle:
    kinetic = params.world.kinetics[params.entity]
    resolved = apply_resolution_perfectly(params.aabb, params.other_aabb, params.resolution)

    # Walk side to side.
    velocity = kinetic.velocity
    if params.resolution.x != 0:
        velocity = replace(velocity, x=-velocity.x)
    if params.resolution.y != 0:
        velocity = replace(velocity, y=0.0)
    kinetic.velocity = velocity

    return resolved


def build_walker(world: World, x: float, y: float) -> int:
    """Create an enemy that walks back and forth; return its entity."""
    entity = world.allocate_entity()
    position = Vector2(x, y)
    intramural = Rectangle(14, 0, 20, 16)

    world.tags[entity] = (
        Tag.IDENTIFIER
        | Tag.POSITION
        | Tag.DIMENSION
        | Tag.ANIMATION
        | Tag.KINETIC
        | Tag.SMOOTH
        | Tag.COLLIDER
        | Tag.DAMAGE
    )
    world.identifiers[entity] = CIdentifier(EntityType.WALKER)
    world.positions[entity] = CPosition(position)
    world.dimensions[entity] = CDimension(intramural.width, intramural.height)
    world.animations[entity] = CAnimation(
        type=Animation.WALKER_IDLE,
        length=Animation.WALKER_IDLE.length,
        frame_duration=Animation.WALKER_IDLE.frame_duration,
        frame_timer=0.0,
        intramural=intramural,
        reflection=Reflection.NONE,
        frame=0,
    )
    world.kinetics[entity] = CKinetic(Vector2(50, 0), Vector2(0, 1000))
    world.smooths[entity] = CSmooth(position)
    world.colliders[entity] = CCollider(
        resolution_schema=Resolve.ALL,
        layer=Layer.LETHAL,
        mask=Layer.TERRAIN | Layer.INVISIBLE | Layer.LETHAL,
        on_resolution=_walker_on_resolution,
    )
    world.damages[entity] = CDamage(1)
    return entity