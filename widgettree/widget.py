"""The base of all UI widgets."""

from __future__ import annotations

from typing import Any


class Widget:
    """Base class for UI widgets.

    A widget draws itself on a canvas; the base widget draws nothing.
    """

    def draw(self, canvas: Any) -> None:
        """Draw the widget on ``canvas``."""
        return None