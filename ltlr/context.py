"""Viewport constants, shared frame state and camera/letterbox calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .common import Rectangle, Vector2

MAGIC_NUMBER = 20180217

VIEWPORT_WIDTH = 320
VIEWPORT_HEIGHT = 180
VIEWPORT = Rectangle(0, 0, VIEWPORT_WIDTH, VIEWPORT_HEIGHT)

DEFAULT_WINDOW_WIDTH = VIEWPORT_WIDTH * 4
DEFAULT_WINDOW_HEIGHT = VIEWPORT_HEIGHT * 4

# Target (fixed) delta time.
DT = 1.0 / 60.0


@dataclass
class Context:
    """State shared across a frame: simulated time, interpolation alpha and window bounds."""

    total_time: float = 0.0
    alpha: float = 0.0
    monitor: Rectangle = Rectangle()
    previous_render: Rectangle = Rectangle()


@dataclass(frozen=True)
class Camera2D:
    """A 2D camera: screen = (world - target) * zoom + offset."""

    offset: Vector2
    target: Vector2
    rotation: float = 0.0
    zoom: float = 1.0


def calculate_zoom(region: Rectangle, container: Rectangle) -> float:
    """Largest factor ``region`` can be scaled by and still fit in ``container``."""
    # Assume letterboxing first, then check whether pillarboxing fits better.
    zoom = container.width / region.width
    if region.height * zoom > container.height:
        zoom = container.height / region.height
    return zoom


def layer_camera(camera_bounds: Rectangle, bounds: Rectangle) -> Camera2D:
    """Camera that maps ``camera_bounds`` of the world onto a render target of ``bounds``."""
    zoom = calculate_zoom(VIEWPORT, bounds)
    center = Vector2(
        camera_bounds.x + VIEWPORT_WIDTH * 0.5,
        camera_bounds.y + VIEWPORT_HEIGHT * 0.5,
    )
    return Camera2D(
        offset=center.scale(-zoom),
        target=Vector2(-VIEWPORT_WIDTH * 0.5, -VIEWPORT_HEIGHT * 0.5),
        rotation=0.0,
        zoom=zoom,
    )


def layer_placement(render_rectangle: Rectangle) -> tuple[Rectangle, Vector2]:
    """Where layers are drawn on screen, using integer scaling, centred.

    Returns the destination rectangle and the origin around which it is placed.
    """
    zoom = math.floor(calculate_zoom(VIEWPORT, render_rectangle))
    width = int(VIEWPORT_WIDTH * zoom)
    height = int(VIEWPORT_HEIGHT * zoom)

    destination = Rectangle(
        math.floor(render_rectangle.width * 0.5),
        math.floor(render_rectangle.height * 0.5),
        width,
        height,
    )
    origin = Vector2(math.floor(width * 0.5), math.floor(height * 0.5))
    return destination, origin