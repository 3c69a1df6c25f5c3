"""Clickable button widget rendered with ANSI colour codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

_RESET = "\033[0m"
_FOCUS = "\033[7m"

_high_contrast = False


def set_high_contrast(enabled: bool) -> None:
    """Switch every button to the high-contrast palette or back."""
    global _high_contrast
    _high_contrast = bool(enabled)


@dataclass
class Button:
    """A rectangular button that runs a callback when clicked.

    The accessibility label defaults to the button's label.
    """

    x: int
    y: int
    width: int
    height: int
    label: str
    on_click: Callable[[], None] | None = None
    accessibility_label: str | None = None
    pressed: bool = False
    focused: bool = False

    def __post_init__(self) -> None:
        if self.accessibility_label is None:
            self.accessibility_label = self.label

    def render(self) -> str:
        """Return the button as terminal text, one line per row."""
        border = "====" if _high_contrast else "----"
        bg = "\033[47;30m" if _high_contrast else "\033[45;37m"
        focus = _FOCUS if self.focused else ""
        pressed = "[PRESSED]" if self.pressed else ""
        lines = [
            f"{bg}{focus}{border}{_RESET}",
            f"{bg}{focus}[Button] '{self.label}'{_RESET} at ({self.x},{self.y}) "
            f"size {self.width}x{self.height} {pressed}",
            f"{bg}{focus}{border}{_RESET}",
        ]
        if self.focused and self.accessibility_label:
            lines.append(f"[ScreenReader] Focused: {self.accessibility_label}")
        if self.pressed and self.accessibility_label:
            lines.append(f"[ScreenReader] Activated: {self.accessibility_label}")
        return "\n".join(lines)

    def handle_click(self, mouse_x: int, mouse_y: int) -> None:
        """Press the button and run its callback if the point is inside it."""
        inside = (
            self.x <= mouse_x < self.x + self.width
            and self.y <= mouse_y < self.y + self.height
        )
        self.pressed = inside
        if inside and self.on_click is not None:
            self.on_click()