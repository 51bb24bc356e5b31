"""Moving nodes of a widget tree, freely or bounded by their parent."""

from __future__ import annotations

from widgettree.inode import InodeBase
from widgettree.itree import Itree
from widgettree.shapes import Point, Rect, bound_shape


def _shape_at(shape: Rect, x: int, y: int) -> Rect:
    """The same-sized shape with its top-left corner at ``(x, y)``."""
    return Rect(Point(x, y), Point(x + shape.width(), y + shape.height()))


def move_to(tree: Itree[InodeBase], node_id: int, x: int, y: int) -> Rect | None:
    """Move a node's top-left corner to ``(x, y)``, relative to its parent.

    The depth and actual shape of the node and all its descendants are
    refreshed. Returns the new shape, or ``None`` if the node is unknown.
    Raises ``ValueError`` for the root, which has no parent to move within.
    """
    node = tree.node(node_id)
    if node is None:
        return None
    parent_id = tree.parent_id(node_id)
    if parent_id is None:
        raise ValueError(f"node {node_id} has no parent and cannot be moved")
    next_shape = _shape_at(node.shape, x, y)
    node.shape = next_shape
    tree.refresh_descendants(node_id, parent_id)
    return next_shape


def move_by(tree: Itree[InodeBase], node_id: int, x: int, y: int) -> Rect | None:
    """Move a node by ``x`` columns and ``y`` rows.

    Negative ``x`` moves left, negative ``y`` moves up. Returns the new shape,
    or ``None`` if the node is unknown.
    """
    node = tree.node(node_id)
    if node is None:
        return None
    top_left = node.shape.min
    return move_to(tree, node_id, top_left.x + x, top_left.y + y)


def _bounded_target(
    tree: Itree[InodeBase], node_id: int, x: int, y: int
) -> tuple[InodeBase, Point] | None:
    parent_id = tree.parent_id(node_id)
    if parent_id is None:
        return None
    parent = tree.node(parent_id)
    node = tree.node(node_id)
    if parent is None or node is None:
        return None
    final_shape = bound_shape(_shape_at(node.shape, x, y), parent.actual_shape)
    return node, final_shape.min


def bounded_move_by(
    tree: Itree[InodeBase], node_id: int, x: int, y: int
) -> Rect | None:
    """Like :func:`move_by`, but the node stops at its parent's boundary.

    Returns ``None`` if the node or its parent is unknown.
    """
    node = tree.node(node_id)
    if node is None:
        return None
    current = node.shape.min
    target = _bounded_target(tree, node_id, current.x + x, current.y + y)
    if target is None:
        return None
    _, final = target
    return move_by(tree, node_id, final.x - current.x, final.y - current.y)


def bounded_move_to(
    tree: Itree[InodeBase], node_id: int, x: int, y: int
) -> Rect | None:
    """Like :func:`move_to`, but the node stops at its parent's boundary.

    Returns ``None`` if the node or its parent is unknown.
    """
    target = _bounded_target(tree, node_id, x, y)
    if target is None:
        return None
    _, final = target
    return move_to(tree, node_id, final.x, final.y)