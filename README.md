# widgettree

The building blocks of a text user interface, kept in memory: shapes, cells, a
frame of cells, and a tree of widget nodes.

## Modules

- `widgettree.shapes`: the frozen dataclasses `Point`, `Size` and `Rect`.
  `Rect.from_tuples((x0, y0), (x1, y1))` builds a rectangle, and its corners are
  normalised so that `min` is the top-left. `min` is inclusive and `max` is
  exclusive. Four functions place a child shape relative to its parent:
  - `make_actual_shape(shape, parent_actual_shape)` turns a shape relative to its
    parent into an absolute shape, clipped by the parent.
  - `bound_size` truncates a shape so it is no larger than its parent.
  - `bound_position` moves a shape back inside its parent's width and height.
  - `bound_shape` does both.
- `widgettree.cell`: `Cell` is a dataclass with `symbol`, `fg`, `bg` and
  `attrs`. It has the constructors `Cell.empty()`, `Cell.space()`,
  `Cell.with_char(ch)` and `Cell.with_symbol(s)`. `with_char` raises
  `ValueError` unless given exactly one character. The module also defines the
  `Color` enum (`Color.RESET` is the default) and the `Attribute` flag.
- `widgettree.cursor`: the `Cursor` dataclass has `pos`, `blinking`, `hidden`
  and `style`. By default it sits at `(0, 0)`, blinks, is shown, and has the
  `CursorStyle.DEFAULT_USER_SHAPE` style. The module also has
  `cursor_style_eq(a, b)`.
- `widgettree.iframe` and `widgettree.frame`: `Iframe` is a row-major grid of
  cells. It converts between positions, indexes and ranges (`pos2idx`,
  `idx2xy`, `pos2range`, …). It gets and sets single cells or runs of cells,
  and records which rows are dirty. `Frame` wraps an `Iframe` and adds a
  `cursor` attribute. The `get_*`/`set_*` methods raise `IndexError` outside
  the frame, and their `try_*` counterparts return `None` instead.
  `set_size` resizes the grid and marks every row dirty. `reset_dirty_rows`
  marks every row clean.
- `widgettree.inode`: `InodeBase` holds the attributes shared by tree nodes:
  `id`, `depth`, `shape`, `actual_shape`, `zindex`, `enabled` and `visible`.
  Ids come from `next_node_id()`, which counts up from 100001.
- `widgettree.itree`: `Itree` is a rooted tree of nodes keyed by id.
  - `insert(parent_id, node)` places a child among its siblings by z-index, in
    insertion order for equal z-indexes. It sets the child's depth and actual
    shape.
  - `bounded_insert` first fits the child's shape inside the parent.
  - `remove(node_id)` detaches a node. It raises `ValueError` for the root.
  - Iterating a tree, or using `iter_from(start_id)`, visits a node and then
    its descendants level by level, from lower to higher z-index.
  - `refresh_descendants` recomputes depth and actual shape below a node.
- `widgettree.movement`: `move_by`, `move_to`, `bounded_move_by` and
  `bounded_move_to`. Each moves a node relative to its parent and refreshes the
  node's subtree. The bounded variants stop at the parent's edge. All four
  return the new shape, or `None` for an unknown node.
- `widgettree.widget`: a `Widget` base class whose `draw(canvas)` does nothing.

## Example

```python
from widgettree.shapes import Rect
from widgettree.inode import InodeBase
from widgettree.itree import Itree
from widgettree.movement import bounded_move_by

root = InodeBase(Rect.from_tuples((0, 0), (20, 20)))
child = InodeBase(Rect.from_tuples((0, 0), (1, 1)))

tree = Itree(root)
tree.insert(root.id, child)

bounded_move_by(tree, child.id, -10, -4)
print(tree.node(child.id).shape)   # stays at the top-left corner
```

```python
from widgettree.shapes import Point, Size
from widgettree.cell import Cell
from widgettree.cursor import Cursor
from widgettree.frame import Frame

frame = Frame(Size(10, 10), Cursor())
frame.set_cells_at(Point(0, 0), [Cell.with_char(c) for c in "ABCD"])
print("".join(frame.raw_symbols_with_placeholder(" ")[0]))  # "ABCD      "
print(frame.dirty_rows()[0])                                # True
```

## What it does not do

Nothing here writes to a terminal. There is no canvas that compares frames and
prints the changes. There are also no concrete widgets such as windows or a
root container, and no function that classifies where a node touches its
parent's edges. `Widget.draw` takes a canvas object but draws nothing.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```

The package needs no third-party libraries.