"""The single-symbol rendering unit of a canvas frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto


class Color(Enum):
    """Terminal colours; ``RESET`` means the terminal's default."""

    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


class Attribute(Flag):
    """Text attributes, combinable with ``|``; the empty set is ``Attribute(0)``."""

    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSE = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()


NO_ATTRIBUTES = Attribute(0)


@dataclass
class Cell:
    """One character or grapheme with its colours and attributes.

    The default cell has an empty symbol.
    """

    symbol: str = ""
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    attrs: Attribute = NO_ATTRIBUTES

    @classmethod
    def space(cls) -> Cell:
        return cls(symbol=" ")

    @classmethod
    def empty(cls) -> Cell:
        return cls()

    @classmethod
    def with_char(cls, ch: str) -> Cell:
        """Make a cell holding exactly one character."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return cls(symbol=ch)

    @classmethod
    def with_symbol(cls, symbol: str) -> Cell:
        return cls(symbol=symbol)