"""Primitive drawing calls and the top-level desktop draw, as text output."""

from __future__ import annotations


def _emit(message: str) -> str:
    print(message)
    return message


def draw_line(x0: int, y0: int, x1: int, y1: int) -> str:
    """Draw a line between two points."""
    return _emit(f"[Graphics] Draw line from ({x0},{y0}) to ({x1},{y1})")


def draw_rect(x: int, y: int, w: int, h: int) -> str:
    """Draw a rectangle."""
    return _emit(f"[Graphics] Draw rect at ({x},{y}) size {w}x{h}")


def draw_circle(x: int, y: int, r: int) -> str:
    """Draw a circle."""
    return _emit(f"[Graphics] Draw circle at ({x},{y}) radius {r}")


def gui_draw() -> list[str]:
    """Draw the desktop and its windows; return the steps taken."""
    return [
        _emit("[GUI] Drawing desktop and windows..."),
        _emit("[GUI] Desktop drawn."),
        _emit("[GUI] Windows drawn."),
    ]