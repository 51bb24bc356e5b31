"""Common attributes of every node in the widget tree, and node id allocation."""

from __future__ import annotations

import itertools
import threading

from widgettree.shapes import Point, Rect

# Widget ids start here so they never collide with buffer ids.
_FIRST_NODE_ID = 100001

_id_counter = itertools.count(_FIRST_NODE_ID)
_id_lock = threading.Lock()


def next_node_id() -> int:
    """Return the next unique widget node id."""
    with _id_lock:
        return next(_id_counter)


def _as_u16(rect: Rect) -> Rect:
    def wrap(p: Point) -> Point:
        return Point(p.x & 0xFFFF, p.y & 0xFFFF)

    return Rect(wrap(rect.min), wrap(rect.max))


class InodeBase:
    """Attributes shared by all tree nodes.

    ``shape`` is relative to the parent; ``actual_shape`` is the absolute shape
    clipped by the parent, which the tree keeps up to date.
    """

    def __init__(self, shape: Rect) -> None:
        self._id = next_node_id()
        self.depth = 0
        self.shape = shape
        self.actual_shape = _as_u16(shape)
        self.zindex = 0
        self.enabled = True
        self.visible = True

    @property
    def id(self) -> int:
        """The node's unique id."""
        return self._id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, depth={self.depth}, "
            f"shape={self.shape!r}, actual_shape={self.actual_shape!r}, "
            f"zindex={self.zindex}, enabled={self.enabled}, visible={self.visible})"
        )