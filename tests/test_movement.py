import pytest

from widgettree.inode import InodeBase
from widgettree.itree import Itree
from widgettree.movement import bounded_move_by, bounded_move_to, move_by, move_to
from widgettree.shapes import Rect


class Value(InodeBase):
    def __init__(self, value, shape):
        super().__init__(shape)
        self.value = value


def R(a, b):
    return Rect.from_tuples(a, b)


def make_chain():
    n1 = Value(1, R((0, 0), (20, 20)))
    n2 = Value(2, R((0, 0), (20, 20)))
    n3 = Value(3, R((0, 0), (1, 1)))
    tree = Itree(n1)
    tree.insert(n1.id, n2)
    tree.insert(n2.id, n3)
    return tree, n1.id, n2.id, n3.id


MOVES = [
    (-10, -4),
    (2, -7),
    (1, 90),
    (-70, 41),
    (23, -4),
    (49, -121),
    (8, 3),
    (-10, -7),
    (6, 8),
]


def test_move_by():
    tree, _, _, nid3 = make_chain()
    expects = [
        R((-10, -4), (-9, -3)),
        R((-8, -11), (-7, -10)),
        R((-7, 79), (-6, 80)),
        R((-77, 120), (-76, 121)),
        R((-54, 116), (-53, 117)),
        R((-5, -5), (-4, -4)),
        R((3, -2), (4, -1)),
        R((-7, -9), (-6, -8)),
        R((-1, -1), (0, 0)),
    ]
    for (x, y), expect in zip(MOVES, expects):
        result = move_by(tree, nid3, x, y)
        assert result == expect
        assert tree.node(nid3).shape == expect


def test_bounded_move_by():
    tree, _, _, nid3 = make_chain()
    expects = [
        R((0, 0), (1, 1)),
        R((2, 0), (3, 1)),
        R((3, 19), (4, 20)),
        R((0, 19), (1, 20)),
        R((19, 15), (20, 16)),
        R((19, 0), (20, 1)),
        R((19, 3), (20, 4)),
        R((9, 0), (10, 1)),
        R((15, 8), (16, 9)),
    ]
    for (x, y), expect in zip(MOVES, expects):
        bounded_move_by(tree, nid3, x, y)
        assert tree.node(nid3).shape == expect


def test_move_to():
    tree, _, _, nid3 = make_chain()
    expects = [
        R((-10, -4), (-9, -3)),
        R((2, -7), (3, -6)),
        R((1, 90), (2, 91)),
        R((-70, 41), (-69, 42)),
        R((23, -4), (24, -3)),
        R((49, -121), (50, -120)),
        R((8, 3), (9, 4)),
        R((-10, -7), (-9, -6)),
        R((6, 8), (7, 9)),
    ]
    for (x, y), expect in zip(MOVES, expects):
        move_to(tree, nid3, x, y)
        assert tree.node(nid3).shape == expect


def test_bounded_move_to():
    tree, _, _, nid3 = make_chain()
    moves = [
        (-10, -4),
        (2, -7),
        (1, 90),
        (-70, 41),
        (23, -4),
        (49, -121),
        (8, 3),
        (5, 6),
        (6, 8),
    ]
    expects = [
        R((0, 0), (1, 1)),
        R((2, 0), (3, 1)),
        R((1, 19), (2, 20)),
        R((0, 19), (1, 20)),
        R((19, 0), (20, 1)),
        R((19, 0), (20, 1)),
        R((8, 3), (9, 4)),
        R((5, 6), (6, 7)),
        R((6, 8), (7, 9)),
    ]
    for (x, y), expect in zip(moves, expects):
        bounded_move_to(tree, nid3, x, y)
        assert tree.node(nid3).shape == expect


def test_move_updates_descendants_actual_shape():
    tree, _, nid2, nid3 = make_chain()
    move_to(tree, nid2, 5, 6)
    assert tree.node(nid2).actual_shape == R((5, 6), (20, 20))
    assert tree.node(nid3).actual_shape == R((5, 6), (6, 7))
    assert tree.node(nid3).depth == 2


def test_unknown_node_returns_none():
    tree, _, _, _ = make_chain()
    assert move_by(tree, -1, 1, 1) is None
    assert move_to(tree, -1, 1, 1) is None
    assert bounded_move_by(tree, -1, 1, 1) is None
    assert bounded_move_to(tree, -1, 1, 1) is None


def test_bounded_move_of_root_returns_none():
    tree, nid1, _, _ = make_chain()
    assert bounded_move_by(tree, nid1, 1, 1) is None
    assert bounded_move_to(tree, nid1, 1, 1) is None
    assert tree.node(nid1).shape == R((0, 0), (20, 20))


def test_move_root_raises():
    tree, nid1, _, _ = make_chain()
    with pytest.raises(ValueError):
        move_to(tree, nid1, 3, 3)
    with pytest.raises(ValueError):
        move_by(tree, nid1, 3, 3)