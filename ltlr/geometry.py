"""Line segments, polygons and collision resolution between shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .common import VECTOR2_ZERO, Rectangle, Vector2

# Single-precision limits; the projection bounds start from these values.
_FLT_MAX = 3.4028234663852886e38
_FLT_MIN = 1.1754943508222875e-38


@dataclass(frozen=True)
class LineSegment:
    """A straight segment between two points."""

    start: Vector2
    end: Vector2


@dataclass(frozen=True)
class Polygon:
    """A closed polygon described by its vertices and the edges joining them."""

    vertices: tuple[Vector2, ...]
    edges: tuple[LineSegment, ...]


def polygon_from_rectangle(rectangle: Rectangle) -> Polygon:
    """Build a four-sided polygon with the corners of ``rectangle``."""
    vertices = (
        Vector2(rectangle.x, rectangle.y),
        Vector2(rectangle.x, rectangle.y + rectangle.height),
        Vector2(rectangle.x + rectangle.width, rectangle.y + rectangle.height),
        Vector2(rectangle.x + rectangle.width, rectangle.y),
    )
    edges = tuple(
        LineSegment(vertex, vertices[(position + 1) % len(vertices)])
        for position, vertex in enumerate(vertices)
    )
    return Polygon(vertices, edges)


def rectangle_rectangle_resolution(a: Rectangle, b: Rectangle) -> Vector2:
    """Return the smallest translation that moves ``a`` out of ``b``.

    A zero vector is returned when the rectangles are apart.
    """
    if b.right < a.left or a.right < b.left:
        return VECTOR2_ZERO
    if b.bottom < a.top or a.bottom < b.top:
        return VECTOR2_ZERO

    x_overlap = min(a.right, b.right) - max(a.left, b.left)
    y_overlap = min(a.bottom, b.bottom) - max(a.top, b.top)

    normal = Vector2(1, 0) if x_overlap < y_overlap else Vector2(0, 1)
    resolution = normal.scale(min(x_overlap, y_overlap))

    difference = Vector2(a.x, a.y) - Vector2(b.x, b.y)
    if difference.dot(resolution) < 0:
        resolution = resolution.scale(-1)
    return resolution


def _bounding_box(vertices: Sequence[Vector2]) -> Rectangle:
    if not vertices:
        raise ValueError("a polygon needs at least one vertex")
    xs = [vertex.x for vertex in vertices]
    ys = [vertex.y for vertex in vertices]
    return Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _projection_bounds(vertices: Sequence[Vector2], axis: Vector2) -> tuple[float, float]:
    low = _FLT_MAX
    high = _FLT_MIN
    for vertex in vertices:
        projection = vertex.dot(axis)
        low = min(low, projection)
        high = max(high, projection)
    return low, high


def _minimum_overlap(a: Polygon, b: Polygon) -> Optional[tuple[Vector2, float]]:
    """Find the edge normal of ``a`` with the least overlap, or None if separated."""
    min_normal = VECTOR2_ZERO
    min_overlap = _FLT_MAX

    for edge in a.edges:
        normal = Vector2(
            edge.end.y - edge.start.y,
            -(edge.end.x - edge.start.x),
        ).normalize()

        min_a, max_a = _projection_bounds(a.vertices, normal)
        min_b, max_b = _projection_bounds(b.vertices, normal)

        overlap = min(max_a, max_b) - max(min_a, min_b)
        if overlap < min_overlap:
            min_overlap = overlap
            min_normal = normal

        if max_b < min_a or max_a < min_b:
            return None

    return min_normal, min_overlap


def _center(rectangle: Rectangle) -> Vector2:
    return Vector2(rectangle.x + rectangle.width * 0.5, rectangle.y + rectangle.height * 0.5)


def sat_resolution(a: Polygon, b: Polygon) -> Vector2:
    """Resolve ``a`` out of ``b`` using the separating axis theorem."""
    a_box = _bounding_box(a.vertices)
    b_box = _bounding_box(b.vertices)

    if not a_box.intersects(b_box):
        return VECTOR2_ZERO

    first = _minimum_overlap(a, b)
    if first is None:
        return VECTOR2_ZERO
    second = _minimum_overlap(b, a)
    if second is None:
        return VECTOR2_ZERO

    normal, overlap = first if first[1] < second[1] else second
    resolution = normal.scale(overlap)

    difference = _center(a_box) - _center(b_box)
    if difference.dot(resolution) < 0:
        resolution = resolution.scale(-1)
    return resolution