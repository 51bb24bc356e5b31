"""The logical frame that widgets draw on before it is flushed to the terminal."""

from __future__ import annotations

from widgettree.cell import Cell
from widgettree.cursor import Cursor
from widgettree.iframe import Iframe
from widgettree.shapes import Point, Size


class Frame:
    """A grid of cells plus the terminal cursor.

    Widgets draw on the current frame. The canvas then compares it with the
    previous one and prints only the changed rows to the terminal.
    """

    def __init__(self, size: Size, cursor: Cursor | None = None) -> None:
        self._iframe = Iframe(size)
        self.cursor: Cursor = cursor if cursor is not None else Cursor()

    def __repr__(self) -> str:
        return f"Frame(size={self._iframe.size()!r}, cursor={self.cursor!r})"

    # Index conversion

    def pos2range(self, pos: Point, n: int) -> range:
        """Index range of ``n`` cells starting at ``pos``, end exclusive."""
        return self._iframe.pos2range(pos, n)

    def idx2range(self, index: int, n: int) -> range:
        """Index range of ``n`` cells starting at ``index``, end exclusive."""
        return self._iframe.idx2range(index, n)

    def xy2idx(self, x: int, y: int) -> int:
        """Convert column ``x`` and row ``y`` into a cell index."""
        return self._iframe.xy2idx(x, y)

    def pos2idx(self, pos: Point) -> int:
        """Convert a position into a cell index."""
        return self._iframe.pos2idx(pos)

    def idx2xy(self, index: int) -> tuple[int, int]:
        """Convert a cell index into ``(x, y)``; raises ``IndexError`` past the end."""
        return self._iframe.idx2xy(index)

    def idx2pos(self, index: int) -> Point:
        """Convert a cell index into a position; raises ``IndexError`` past the end."""
        return self._iframe.idx2pos(index)

    # Size

    def size(self) -> Size:
        return self._iframe.size()

    def zero_sized(self) -> bool:
        """Whether the frame has no rows or no columns."""
        return self._iframe.zero_sized()

    def set_size(self, size: Size) -> Size:
        """Resize the frame, marking every row dirty; returns the old size."""
        return self._iframe.set_size(size)

    def contains_index(self, index: int) -> bool:
        return self._iframe.contains_index(index)

    def contains_range(self, index_range: range) -> bool:
        """Whether a start-inclusive, end-exclusive range lies inside the cells."""
        return self._iframe.contains_range(index_range)

    # Single cells

    def get_cell(self, pos: Point) -> Cell:
        """The cell at ``pos``; raises ``IndexError`` outside of the frame."""
        return self._iframe.get_cell(pos)

    def try_get_cell(self, pos: Point) -> Cell | None:
        return self._iframe.try_get_cell(pos)

    def set_cell(self, pos: Point, cell: Cell) -> Cell:
        """Replace the cell at ``pos`` and return the old one."""
        return self._iframe.set_cell(pos, cell)

    def try_set_cell(self, pos: Point, cell: Cell) -> Cell | None:
        return self._iframe.try_set_cell(pos, cell)

    def set_empty_cell(self, pos: Point) -> Cell:
        return self._iframe.set_empty_cell(pos)

    def try_set_empty_cell(self, pos: Point) -> Cell | None:
        return self._iframe.try_set_empty_cell(pos)

    # Runs of cells

    def cells(self) -> list[Cell]:
        """All cells, row by row."""
        return self._iframe.cells()

    def get_cells_at(self, pos: Point, n: int) -> list[Cell]:
        """``n`` consecutive cells from ``pos``; raises ``IndexError`` if out of range."""
        return self._iframe.get_cells_at(pos, n)

    def try_get_cells_at(self, pos: Point, n: int) -> list[Cell] | None:
        return self._iframe.try_get_cells_at(pos, n)

    def raw_symbols(self) -> list[list[str]]:
        """The symbols of all cells, one list per row."""
        return self._iframe.raw_symbols()

    def raw_symbols_with_placeholder(self, printable: str) -> list[list[str]]:
        """Like :meth:`raw_symbols`, with ``printable`` standing in for empty symbols."""
        return self._iframe.raw_symbols_with_placeholder(printable)

    def set_cells_at(self, pos: Point, cells: list[Cell]) -> list[Cell]:
        """Replace consecutive cells from ``pos`` and return the old ones."""
        return self._iframe.set_cells_at(pos, cells)

    def try_set_cells_at(self, pos: Point, cells: list[Cell]) -> list[Cell] | None:
        return self._iframe.try_set_cells_at(pos, cells)

    def set_empty_cells_at(self, pos: Point, n: int) -> list[Cell]:
        return self._iframe.set_empty_cells_at(pos, n)

    def try_set_empty_cells_at(self, pos: Point, n: int) -> list[Cell] | None:
        return self._iframe.try_set_empty_cells_at(pos, n)

    # Dirty rows

    def dirty_rows(self) -> list[bool]:
        """For each row, whether it changed since the last reset."""
        return self._iframe.dirty_rows()

    def reset_dirty_rows(self) -> None:
        """Mark every row clean; call after the frame was flushed to the terminal."""
        self._iframe.reset_dirty_rows()