"""The grid of cells behind a canvas frame, with per-row dirty tracking."""

from __future__ import annotations

from widgettree.cell import Cell
from widgettree.shapes import Point, Size


class Iframe:
    """A row-major grid of cells of a fixed size.

    It also records which rows of the grid were changed since the dirty marks
    were last reset.
    """

    def __init__(self, size: Size) -> None:
        self._size = size
        self._cells: list[Cell] = [Cell() for _ in range(size.width * size.height)]
        # A freshly made frame is not dirty.
        self._dirty_rows: list[bool] = [False] * size.height

    def __repr__(self) -> str:
        return f"Iframe(size={self._size!r})"

    # Index conversion

    def pos2range(self, pos: Point, n: int) -> range:
        """Index range of ``n`` cells starting at ``pos``, end exclusive."""
        start = self.pos2idx(pos)
        return range(start, start + n)

    def idx2range(self, index: int, n: int) -> range:
        """Index range of ``n`` cells starting at ``index``, end exclusive."""
        return range(index, index + n)

    def xy2idx(self, x: int, y: int) -> int:
        """Convert column ``x`` and row ``y`` into a cell index."""
        return y * self._size.width + x

    def pos2idx(self, pos: Point) -> int:
        """Convert a position into a cell index."""
        return self.xy2idx(pos.x, pos.y)

    def idx2xy(self, index: int) -> tuple[int, int]:
        """Convert a cell index into ``(x, y)``.

        Raises ``IndexError`` if the index lies beyond the end of the cells.
        """
        if index > len(self._cells):
            raise IndexError(f"index {index} is outside of the frame")
        y, x = divmod(index, self._size.width)
        return x, y

    def idx2pos(self, index: int) -> Point:
        """Convert a cell index into a position."""
        x, y = self.idx2xy(index)
        return Point(x, y)

    # Size

    def size(self) -> Size:
        return self._size

    def zero_sized(self) -> bool:
        """Whether the frame has no rows or no columns."""
        return self._size.width == 0 or self._size.height == 0

    def set_size(self, size: Size) -> Size:
        """Resize the frame, marking every row dirty; returns the old size."""
        old_size = self._size
        self._size = size
        n = size.width * size.height
        if n <= len(self._cells):
            del self._cells[n:]
        else:
            self._cells.extend(Cell() for _ in range(n - len(self._cells)))
        self._dirty_rows = [True] * size.height
        return old_size

    def contains_index(self, index: int) -> bool:
        return index < len(self._cells)

    def contains_range(self, index_range: range) -> bool:
        """Whether a start-inclusive, end-exclusive range lies inside the cells."""
        n = len(self._cells)
        return index_range.start < n and index_range.stop <= n

    # Single cells

    def get_cell(self, pos: Point) -> Cell:
        """The cell at ``pos``; raises ``IndexError`` outside of the frame."""
        cell = self.try_get_cell(pos)
        if cell is None:
            raise IndexError(f"position {pos} is outside of the frame")
        return cell

    def try_get_cell(self, pos: Point) -> Cell | None:
        index = self.pos2idx(pos)
        if self.contains_index(index):
            return self._cells[index]
        return None

    def set_cell(self, pos: Point, cell: Cell) -> Cell:
        """Replace the cell at ``pos`` and return the old one.

        Raises ``IndexError`` outside of the frame.
        """
        old = self.try_set_cell(pos, cell)
        if old is None:
            raise IndexError(f"position {pos} is outside of the frame")
        return old

    def try_set_cell(self, pos: Point, cell: Cell) -> Cell | None:
        index = self.pos2idx(pos)
        if not self.contains_index(index):
            return None
        old = self._cells[index]
        self._cells[index] = cell
        self._dirty_rows[pos.y] = True
        return old

    def set_empty_cell(self, pos: Point) -> Cell:
        return self.set_cell(pos, Cell.empty())

    def try_set_empty_cell(self, pos: Point) -> Cell | None:
        return self.try_set_cell(pos, Cell.empty())

    # Runs of cells

    def cells(self) -> list[Cell]:
        """All cells, row by row."""
        return self._cells

    def get_cells_at(self, pos: Point, n: int) -> list[Cell]:
        """``n`` consecutive cells from ``pos``; raises ``IndexError`` if out of range."""
        cells = self.try_get_cells_at(pos, n)
        if cells is None:
            raise IndexError(f"{n} cells at {pos} are outside of the frame")
        return cells

    def try_get_cells_at(self, pos: Point, n: int) -> list[Cell] | None:
        index_range = self.pos2range(pos, n)
        if self.contains_range(index_range):
            return self._cells[index_range.start : index_range.stop]
        return None

    def raw_symbols(self) -> list[list[str]]:
        """The symbols of all cells, one list per row."""
        width = self._size.width
        return [
            [cell.symbol for cell in self._cells[row * width : (row + 1) * width]]
            for row in range(self._size.height)
        ]

    def raw_symbols_with_placeholder(self, printable: str) -> list[list[str]]:
        """Like :meth:`raw_symbols`, with ``printable`` standing in for empty symbols."""
        return [
            [symbol or printable for symbol in row] for row in self.raw_symbols()
        ]

    def set_cells_at(self, pos: Point, cells: list[Cell]) -> list[Cell]:
        """Replace consecutive cells from ``pos`` and return the old ones.

        Raises ``IndexError`` if any of them falls outside of the frame.
        """
        old = self.try_set_cells_at(pos, cells)
        if old is None:
            raise IndexError(f"{len(cells)} cells at {pos} are outside of the frame")
        return old

    def try_set_cells_at(self, pos: Point, cells: list[Cell]) -> list[Cell] | None:
        cells = list(cells)
        index_range = self.pos2range(pos, len(cells))
        if not self.contains_range(index_range):
            return None
        end_at = self.idx2pos(index_range.stop)
        for row in range(pos.y, end_at.y + 1):
            if row < len(self._dirty_rows):
                self._dirty_rows[row] = True
        start, stop = index_range.start, index_range.stop
        old = self._cells[start:stop]
        self._cells[start:stop] = cells
        return old

    def set_empty_cells_at(self, pos: Point, n: int) -> list[Cell]:
        return self.set_cells_at(pos, [Cell.empty() for _ in range(n)])

    def try_set_empty_cells_at(self, pos: Point, n: int) -> list[Cell] | None:
        return self.try_set_cells_at(pos, [Cell.empty() for _ in range(n)])

    # Dirty rows

    def dirty_rows(self) -> list[bool]:
        """For each row, whether it changed since the last reset."""
        return self._dirty_rows

    def reset_dirty_rows(self) -> None:
        """Mark every row clean, typically after the frame was flushed."""
        self._dirty_rows = [False] * self._size.height