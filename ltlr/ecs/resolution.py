"""Snapping a bounding box flush against the box it collided with."""

from __future__ import annotations

from dataclasses import replace

from ..common import Rectangle, Vector2


def apply_resolution_perfectly(
    aabb: Rectangle, other_aabb: Rectangle, resolution: Vector2
) -> Rectangle:
    """Move ``aabb`` so it touches ``other_aabb`` on the side ``resolution`` points to."""
    x, y = aabb.x, aabb.y

    if resolution.x < 0:
        x = other_aabb.left - aabb.width
    elif resolution.x > 0:
        x = other_aabb.right

    if resolution.y < 0:
        y = other_aabb.top - aabb.height
    elif resolution.y > 0:
        y = other_aabb.bottom

    return replace(aabb, x=x, y=y)