"""Static text label widget rendered with ANSI colour codes."""

from __future__ import annotations

from dataclasses import dataclass

_RESET = "\033[0m"
_FOCUS = "\033[7m"

_high_contrast = False


def set_high_contrast(enabled: bool) -> None:
    """Switch every label to the high-contrast palette or back."""
    global _high_contrast
    _high_contrast = bool(enabled)


@dataclass
class Label:
    """A line of text at a screen position.

    The accessibility label defaults to the text itself.
    """

    x: int
    y: int
    text: str
    accessibility_label: str | None = None
    focused: bool = False

    def __post_init__(self) -> None:
        if self.accessibility_label is None:
            self.accessibility_label = self.text

    def render(self) -> str:
        """Return the label as terminal text, one line per row."""
        border = "====" if _high_contrast else "----"
        bg = "\033[47;30m" if _high_contrast else "\033[44;37m"
        focus = _FOCUS if self.focused else ""
        lines = [
            f"{bg}{focus}{border}{_RESET}",
            f"{bg}{focus}| {self.text} |{_RESET} at ({self.x},{self.y})",
            f"{bg}{focus}{border}{_RESET}",
        ]
        if self.focused and self.accessibility_label:
            lines.append(f"[ScreenReader] Focused: {self.accessibility_label}")
        return "\n".join(lines)