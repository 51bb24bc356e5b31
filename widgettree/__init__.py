"""Shapes, cells, cursors, frames and a z-ordered widget node tree for text user interfaces."""

__version__ = "0.1.0"