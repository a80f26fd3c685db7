import math

import pytest

from ltlr.common import Rectangle, Vector2
from ltlr.ecs.components import (
    EntityType,
    Layer,
    OnCollisionParams,
    OnResolutionParams,
    Resolve,
    Sprite,
    Tag,
)
from ltlr.ecs.entities import (
    SpikeRotation,
    battery_update,
    build_battery,
    build_block,
    build_cloud_particle,
    build_fog_particle,
    build_lakitu,
    build_solar_panel,
    build_spike,
    build_walker,
)
from ltlr.ecs.systems import collision_update, kinetic_update, post_collision_update, smooth_update
from ltlr.ecs.world import World


@pytest.fixture
def world():
    return World()


def test_battery_components(world):
    entity = build_battery(world, 10, 20)
    assert world.is_type(entity, EntityType.BATTERY)
    assert world.positions[entity].value == Vector2(10, 20)
    assert world.smooths[entity].previous == Vector2(10, 20)
    assert world.dimensions[entity].width == 14
    assert world.dimensions[entity].height == 32
    assert world.sprites[entity].type is Sprite.BATTERY
    assert world.colliders[entity].layer == Layer.INTERACTABLE
    assert world.has(entity, Tag.KINETIC | Tag.SPRITE | Tag.COLLIDER)


def test_battery_update_bobs(world):
    entity = build_battery(world, 0, 0)
    world.elapsed_time = math.pi / 6
    battery_update(world, entity)
    assert world.kinetics[entity].velocity.y == pytest.approx(10.0)
    world.elapsed_time = 0.0
    battery_update(world, entity)
    assert world.kinetics[entity].velocity.y == pytest.approx(0.0)


def test_battery_update_ignores_other_entities(world):
    entity = build_lakitu(world)
    before = world.kinetics[entity].velocity
    world.elapsed_time = 1.0
    battery_update(world, entity)
    assert world.kinetics[entity].velocity == before


def test_block_components(world):
    aabb = Rectangle(5, 6, 30, 40)
    entity = build_block(world, aabb, Resolve.UP, Layer.TERRAIN)
    assert world.is_type(entity, EntityType.BLOCK)
    assert world.positions[entity].value == Vector2(5, 6)
    assert (world.dimensions[entity].width, world.dimensions[entity].height) == (30, 40)
    assert world.colliders[entity].resolution_schema == Resolve.UP
    assert world.colliders[entity].mask == Layer.NONE
    assert not world.has(entity, Tag.SMOOTH)


def test_cloud_particle_components(world):
    entity = build_cloud_particle(world, Vector2(1, 2), 3, Vector2(4, 5), Vector2(6, 7), 2.0)
    assert world.is_type(entity, EntityType.CLOUD_PARTICLE)
    assert world.dimensions[entity].width == 6
    assert world.kinetics[entity].velocity == Vector2(4, 5)
    assert world.kinetics[entity].acceleration == Vector2(6, 7)
    assert world.fleetings[entity].lifetime == 2.0
    assert world.fleetings[entity].age == 0.0
    assert world.colliders[entity].mask == Layer.TERRAIN


def test_cloud_particle_removed_when_buried(world):
    entity = build_cloud_particle(world, Vector2(0, 0), 2, Vector2(), Vector2(), 1.0)
    aabb = Rectangle(0, 0, 4, 4)
    params = OnCollisionParams(world, entity, aabb, 99, Rectangle(-5, -5, 20, 20), aabb)
    world.colliders[entity].on_collision(params)
    world.flush()
    assert entity not in list(world.entities())


def test_cloud_particle_kept_when_partially_overlapping(world):
    entity = build_cloud_particle(world, Vector2(0, 0), 2, Vector2(), Vector2(), 1.0)
    aabb = Rectangle(0, 0, 4, 4)
    overlap = Rectangle(2, 0, 2, 4)
    params = OnCollisionParams(world, entity, aabb, 99, Rectangle(2, -5, 20, 20), overlap)
    world.colliders[entity].on_collision(params)
    world.flush()
    assert entity in list(world.entities())


def test_cloud_particle_buried_in_block_via_system(world):
    build_block(world, Rectangle(0, 0, 50, 50), Resolve.ALL, Layer.TERRAIN)
    particle = build_cloud_particle(world, Vector2(10, 10), 2, Vector2(), Vector2(), 1.0)
    count = len(world)
    post_collision_update(world, particle)
    world.flush()
    assert len(world) == count - 1
    assert particle not in list(world.entities())


def test_fog_particle_components(world):
    entity = build_fog_particle(world, Vector2(3, 4), Vector2(40, -2), 5, 0.6)
    assert world.is_type(entity, EntityType.FOG_PARTICLE)
    assert world.dimensions[entity].height == 10
    assert world.kinetics[entity].velocity == Vector2(40, -2)
    assert world.smooths[entity].previous == Vector2(3, 4)
    assert not world.has(entity, Tag.COLLIDER)


def test_lakitu_components(world):
    entity = build_lakitu(world)
    assert world.is_type(entity, EntityType.LAKITU)
    assert world.kinetics[entity].velocity == Vector2(100, 0)
    assert world.positions[entity].value == world.smooths[entity].previous


def test_solar_panel_components(world):
    entity = build_solar_panel(world, 7, 8)
    assert world.is_type(entity, EntityType.SOLAR_PANEL)
    assert world.sprites[entity].type is Sprite.SOLAR_0000
    assert world.dimensions[entity].width == 88
    assert world.dimensions[entity].height == 40
    assert world.colliders[entity].layer == Layer.INTERACTABLE


@pytest.mark.parametrize(
    "rotation, position, size, sprite",
    [
        (SpikeRotation.ROTATE_0, Vector2(2, 13), (12, 3), Sprite.SPIKE_0000),
        (SpikeRotation.ROTATE_90, Vector2(0, 2), (3, 12), Sprite.SPIKE_0001),
        (SpikeRotation.ROTATE_180, Vector2(2, 0), (12, 3), Sprite.SPIKE_0002),
        (SpikeRotation.ROTATE_270, Vector2(13, 2), (3, 12), Sprite.SPIKE_0003),
    ],
)
def test_spike_rotations(world, rotation, position, size, sprite):
    entity = build_spike(world, 0, 0, rotation)
    assert world.positions[entity].value == position
    dimension = world.dimensions[entity]
    assert (dimension.width, dimension.height) == size
    assert world.sprites[entity].type is sprite
    assert world.damages[entity].value == 1
    assert world.colliders[entity].layer == Layer.LETHAL


def test_spike_unknown_rotation_faces_up(world):
    entity = build_spike(world, 0, 0, 9)
    assert world.sprites[entity].type is Sprite.SPIKE_0000


def test_walker_components(world):
    entity = build_walker(world, 0, 0)
    assert world.is_type(entity, EntityType.WALKER)
    assert world.kinetics[entity].velocity == Vector2(50, 0)
    assert world.kinetics[entity].acceleration == Vector2(0, 1000)
    assert world.colliders[entity].resolution_schema == Resolve.ALL
    assert world.animations[entity].length == 4
    assert world.damages[entity].value == 1


def test_walker_turns_around_on_wall(world):
    entity = build_walker(world, 0, 0)
    aabb = Rectangle(0, 0, 20, 16)
    other = Rectangle(19, 0, 10, 10)
    params = OnResolutionParams(
        world, entity, aabb, 99, other, aabb.overlap(other), Vector2(-1, 0)
    )
    resolved = world.colliders[entity].on_resolution(params)
    assert resolved.right == other.left
    assert world.kinetics[entity].velocity.x == -50


def test_walker_lands_on_block(world):
    build_block(world, Rectangle(0, 16, 100, 10), Resolve.ALL, Layer.TERRAIN)
    walker = build_walker(world, 0, 0)
    smooth_update(world, walker)
    kinetic_update(world, walker)
    collision_update(world, walker)
    assert world.positions[walker].value.y == 0
    assert world.kinetics[walker].velocity.y == 0
    assert world.positions[walker].value.x > 0