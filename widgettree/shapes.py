"""Geometry primitives and the rules that place a child shape inside its parent."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position given by column ``x`` and row ``y``."""

    x: int
    y: int

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """A width (columns) and height (rows)."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; ``min`` is inclusive, ``max`` is exclusive.

    The corners are normalised so that ``min`` is never right of or below ``max``.
    """

    min: Point
    max: Point

    def __post_init__(self) -> None:
        a, b = self.min, self.max
        object.__setattr__(self, "min", Point(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "max", Point(max(a.x, b.x), max(a.y, b.y)))

    @classmethod
    def from_tuples(cls, top_left: tuple[int, int], bottom_right: tuple[int, int]) -> Rect:
        """Build a rectangle from two ``(x, y)`` corner tuples."""
        return cls(Point(*top_left), Point(*bottom_right))

    def width(self) -> int:
        return self.max.x - self.min.x

    def height(self) -> int:
        return self.max.y - self.min.y


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def make_actual_shape(shape: Rect, parent_actual_shape: Rect) -> Rect:
    """Turn a shape relative to its parent into an absolute shape clipped by the parent."""
    parent_min = parent_actual_shape.min
    parent_max = parent_actual_shape.max

    top_left = shape.min + parent_min
    bottom_right = shape.max + parent_min

    actual_top_left = Point(
        _clamp(top_left.x, parent_min.x, parent_max.x),
        _clamp(top_left.y, parent_min.y, parent_max.y),
    )
    actual_bottom_right = Point(
        _clamp(bottom_right.x, parent_min.x, parent_max.x),
        _clamp(bottom_right.y, parent_min.y, parent_max.y),
    )
    return Rect(actual_top_left, actual_bottom_right)


def bound_size(shape: Rect, parent_actual_shape: Rect) -> Rect:
    """Truncate a shape's size so it is no larger than its parent, keeping its top-left."""
    top_left = shape.min
    height = max(min(shape.height(), parent_actual_shape.height()), 0)
    width = max(min(shape.width(), parent_actual_shape.width()), 0)
    return Rect(top_left, Point(top_left.x + width, top_left.y + height))


def _bounded_start(start: int, end: int, limit: int) -> int:
    if start < 0:
        return 0
    if end > limit:
        return start - (end - limit)
    return start


def bound_position(shape: Rect, parent_actual_shape: Rect) -> Rect:
    """Move a shape back inside its parent when it crosses the parent's boundary."""
    x = _bounded_start(shape.min.x, shape.max.x, parent_actual_shape.width())
    y = _bounded_start(shape.min.y, shape.max.y, parent_actual_shape.height())
    return Rect(Point(x, y), Point(x + shape.width(), y + shape.height()))


def bound_shape(shape: Rect, parent_actual_shape: Rect) -> Rect:
    """Bound both the size and the position of a shape by its parent."""
    return bound_position(bound_size(shape, parent_actual_shape), parent_actual_shape)