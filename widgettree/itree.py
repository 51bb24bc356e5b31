"""The tree that holds widget nodes, their parent links and z-index ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from widgettree.inode import InodeBase
from widgettree.shapes import bound_shape, make_actual_shape

N = TypeVar("N", bound=InodeBase)


class Itree(Generic[N]):
    """A rooted tree of nodes keyed by node id.

    The children of a node are kept sorted by z-index from lower to higher; among
    children with the same z-index, a later inserted one comes later, so it is
    drawn on top. Each node's ``depth`` and ``actual_shape`` are kept in sync with
    its parent whenever it is inserted.
    """

    def __init__(self, root_node: N) -> None:
        self._root_id = root_node.id
        self._nodes: dict[int, N] = {root_node.id: root_node}
        self._parent_ids: dict[int, int] = {}
        self._children_ids: dict[int, list[int]] = {root_node.id: []}

    def __repr__(self) -> str:
        return f"Itree(root_id={self._root_id}, len={len(self)})"

    def __len__(self) -> int:
        """Number of nodes, the root included."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[N]:
        """Visit every node starting from the root, see :meth:`iter_from`."""
        return self.iter_from(self._root_id)

    def is_empty(self) -> bool:
        """Whether the tree holds nothing but its root."""
        return len(self._nodes) <= 1

    def root_id(self) -> int:
        return self._root_id

    def node_ids(self) -> list[int]:
        """Ids of all nodes in the tree."""
        return list(self._nodes)

    def parent_id(self, node_id: int) -> int | None:
        """The parent's id, or ``None`` for the root or an unknown node."""
        return self._parent_ids.get(node_id)

    def children_ids(self, node_id: int) -> list[int] | None:
        """The children's ids from lower to higher z-index, or ``None`` if unknown."""
        children = self._children_ids.get(node_id)
        return None if children is None else list(children)

    def node(self, node_id: int) -> N | None:
        return self._nodes.get(node_id)

    def iter_from(self, start_id: int | None) -> Iterator[N]:
        """Visit a node and then, level by level, all its descendants.

        Children of the same parent are visited from lower to higher z-index,
        which is also the order the widgets are drawn in.
        """
        queue: deque[int] = deque() if start_id is None else deque([start_id])
        while queue:
            node = self._nodes.get(queue.popleft())
            if node is None:
                return
            queue.extend(
                child_id
                for child_id in self._children_ids.get(node.id, [])
                if child_id in self._nodes
            )
            yield node

    def refresh_descendants(self, start_id: int, start_parent_id: int) -> None:
        """Recompute depth and actual shape of ``start_id`` and all its descendants.

        Raises ``KeyError`` if either node is not in the tree.
        """
        parent = self._nodes[start_parent_id]
        start = self._nodes[start_id]
        queue: deque[tuple[N, int, object]] = deque(
            [(start, parent.depth, parent.actual_shape)]
        )
        while queue:
            node, parent_depth, parent_actual_shape = queue.popleft()
            node.depth = parent_depth + 1
            node.actual_shape = make_actual_shape(node.shape, parent_actual_shape)
            for child_id in self._children_ids.get(node.id, []):
                child = self._nodes.get(child_id)
                if child is not None:
                    queue.append((child, node.depth, node.actual_shape))

    def insert(self, parent_id: int, child_node: N) -> N | None:
        """Attach ``child_node`` under ``parent_id``.

        The child is placed among its siblings by z-index, and its depth and
        actual shape are computed from the parent. Returns the node previously
        stored under the same id, if any. Raises ``KeyError`` if the parent is
        not in the tree.
        """
        if parent_id not in self._nodes or parent_id not in self._children_ids:
            raise KeyError(f"parent node {parent_id} is not in the tree")

        child_id = child_node.id
        child_zindex = child_node.zindex

        self._children_ids[child_id] = []
        self._parent_ids[child_id] = parent_id

        siblings = self._children_ids[parent_id]
        insert_pos = next(
            (
                index
                for index, sibling_id in enumerate(siblings)
                if sibling_id in self._nodes
                and self._nodes[sibling_id].zindex > child_zindex
            ),
            None,
        )
        if insert_pos is None:
            siblings.append(child_id)
        else:
            siblings.insert(insert_pos, child_id)

        parent = self._nodes[parent_id]
        child_node.depth = parent.depth + 1
        child_node.actual_shape = make_actual_shape(
            child_node.shape, parent.actual_shape
        )

        previous = self._nodes.get(child_id)
        self._nodes[child_id] = child_node
        for descendant_id in self._children_ids[child_id]:
            self.refresh_descendants(descendant_id, child_id)
        return previous

    def bounded_insert(self, parent_id: int, child_node: N) -> N | None:
        """Like :meth:`insert`, but first fit the child's shape inside the parent.

        An oversized child is truncated at its bottom-right, and a child that
        crosses the parent's boundary is moved back to it.
        """
        parent = self._nodes.get(parent_id)
        if parent is None:
            raise KeyError(f"parent node {parent_id} is not in the tree")
        child_node.shape = bound_shape(child_node.shape, parent.actual_shape)
        return self.insert(parent_id, child_node)

    def remove(self, node_id: int) -> N | None:
        """Detach a node from its parent and return it, or ``None`` if unknown.

        The links between the removed node and its own children are kept.
        Raises ``ValueError`` for the root, which cannot be removed.
        """
        if node_id == self._root_id:
            raise ValueError("the root node cannot be removed")
        removed = self._nodes.pop(node_id, None)
        if removed is None:
            return None
        parent_id = self._parent_ids.pop(node_id, None)
        if parent_id is not None:
            siblings = self._children_ids.get(parent_id)
            if siblings is not None and node_id in siblings:
                siblings.remove(node_id)
        return removed