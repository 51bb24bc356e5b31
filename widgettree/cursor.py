"""The terminal cursor held by a canvas frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from widgettree.shapes import Point


class CursorStyle(Enum):
    """Cursor shapes a terminal can show."""

    DEFAULT_USER_SHAPE = "DefaultUserShape"
    BLINKING_BLOCK = "BlinkingBlock"
    STEADY_BLOCK = "SteadyBlock"
    BLINKING_UNDER_SCORE = "BlinkingUnderScore"
    STEADY_UNDER_SCORE = "SteadyUnderScore"
    BLINKING_BAR = "BlinkingBar"
    STEADY_BAR = "SteadyBar"


def cursor_style_eq(a: CursorStyle, b: CursorStyle) -> bool:
    """Whether two cursor styles are the same."""
    return a is b


@dataclass(repr=False)
class Cursor:
    """Terminal cursor: position, blinking, hidden and style."""

    pos: Point = field(default_factory=lambda: Point(0, 0))
    blinking: bool = True
    hidden: bool = False
    style: CursorStyle = CursorStyle.DEFAULT_USER_SHAPE

    def __repr__(self) -> str:
        return (
            f"Cursor(pos=Point(x={self.pos.x}, y={self.pos.y}), "
            f"blinking={self.blinking}, hidden={self.hidden}, "
            f"style={self.style.value})"
        )