# ltlr

The simulation core of a small side-scrolling platformer, written in plain Python that uses
only the standard library. Nothing in it draws to a screen. Where drawing is involved, the
package hands back values instead: colours, camera settings, and source and destination
rectangles that a renderer can use.

## Modules

- `ltlr.common`: the frozen value types `Vector2` (`scale`, `dot`, `normalize`, `lerp`,
  `+`, `-` and unary `-`), `Rectangle` (`left`, `right`, `top`, `bottom`, `contains`,
  `intersects`, `overlap`) and `Color` (`multiply`). It also has the `Ordering`,
  `Direction` and `Reflection` enums, `sign`, and constants such as `VECTOR2_ZERO`,
  `COLOR_BLACK` and `COLOR_WHITE`.
- `ltlr.bit_mask`: `BitMask`, a width × height grid of booleans packed into 64-bit words.
  `get` outside the grid returns `False`. `set` outside the grid does nothing. `size` is
  the storage in bytes.
- `ltlr.bytes`: `swap_u32`, `to_big_endian` and `from_big_endian` for 32-bit unsigned
  integers. A value outside that range raises `ValueError`.
- `ltlr.easing`: the curves `ease_linear`, `ease_in_quad`, `ease_out_quad` and
  `ease_in_out_quad`, and `Easer`, which moves along a curve over a duration. Its methods
  are `update`, `is_done`, `lerp`, `lerp_precise` and `reset`.
- `ltlr.deque`: `Deque`, a ring buffer that doubles its capacity when it is full. It
  supports `push_front`/`push_back`, `pop_front`/`pop_back`, `peek_front`/`peek_back`,
  indexing (negative indices included), iteration, `len` and `clear`. Popping, peeking or
  indexing outside its contents raises `IndexError`.
- `ltlr.events`: `EventHandler`. `subscribe` adds a listener. `raise_event` calls every
  listener with the given arguments, in the order they subscribed.
- `ltlr.animation`: the `Animation` enum. Each member has `length` (its frame count) and
  `frame_duration` (seconds per frame).
- `ltlr.geometry`: `LineSegment`, `Polygon`, `polygon_from_rectangle`,
  `rectangle_rectangle_resolution` (the smallest push of one rectangle out of another) and
  `sat_resolution` (separating-axis resolution between polygons).
- `ltlr.context`: the viewport constants (`VIEWPORT_WIDTH`, `VIEWPORT_HEIGHT`, `VIEWPORT`)
  and the fixed time step `DT`. It also defines:
  - `Context`, a dataclass that holds total time, the interpolation alpha and window
    rectangles;
  - `Camera2D`;
  - `calculate_zoom`;
  - `layer_camera`, which gives the camera for a render target;
  - `layer_placement`, which gives the centred, integer-scaled destination rectangle and
    origin on screen.
- `ltlr.fader`: `Fader` and `FadeType`. `update` steps the fade by one fixed step.
  `color(alpha)` returns the overlay colour, interpolated between the last two steps.
- `ltlr.atlas`: `AtlasEntry` and `Atlas`. `Atlas.placement` returns the texture region
  and the screen rectangle for a trimmed sprite, taking its intramural offset, scale and
  reflection into account.
- `ltlr.timestep`: `FixedTimestep`. `tick(current_time)` runs the update callback once
  for each elapsed fixed step and returns how many updates ran. It also tracks `alpha`,
  `total_time` and `average_fps`, and caps the elapsed time of each tick at 25 steps.
- `ltlr.ecs.components`: the `Tag`, `Resolve`, `Layer`, `EntityType` and `Sprite` enums,
  the player state enums, the component dataclasses (`CPosition`, `CKinetic`,
  `CCollider`, …), the `Player` state, and the callback parameter types
  `OnCollisionParams` and `OnResolutionParams`.
- `ltlr.ecs.world`: `World`. It allocates entities (freed slots are reused lowest first),
  stores their tags and components, and answers `has` and `is_type`. `defer_deallocate`,
  `defer_enable_tag` and `defer_disable_tag` queue changes, and `flush` applies them in
  order.
- `ltlr.ecs.resolution`: `apply_resolution_perfectly`, which snaps a box flush against the
  box it hit.
- `ltlr.ecs.systems`: `smooth_update`, `kinetic_update`, `collision_update` (pixel-step
  resolution along each axis in turn), `post_collision_update`, `fleeting_update` and
  `animation_update`.
- `ltlr.ecs.entities`: builders for batteries, blocks, cloud particles, fog particles,
  the camera-following "lakitu", solar panels, spikes (`SpikeRotation`) and walkers, plus
  `battery_update`. Each builder returns the new entity.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ltlr.common import Rectangle
from ltlr.easing import Easer, ease_in_out_quad
from ltlr.geometry import rectangle_rectangle_resolution

easer = Easer(ease_in_out_quad, 1.0)
easer.update(0.5)
print(easer.lerp(0.0, 100.0), easer.is_done())  # 50.0 False

push = rectangle_rectangle_resolution(Rectangle(0, 0, 10, 10), Rectangle(8, 0, 10, 10))
print(push)  # Vector2(x=-2, y=0)
```

To drive a `World`, the caller calls the systems for each entity once per fixed step,
for example from the callback given to `FixedTimestep`, and then calls `World.flush()`.

## What it does not do

The package has no window, renderer, audio or input handling, and it has no command to
run. It also does not include:

- a scene or level loader;
- the player's movement and combat logic (only the `Player` state dataclass is here);
- the fog entity;
- replay files.

A caller that wants a playable game must supply these pieces around the world and the
systems.