"""Selectable list widget rendered with ANSI colour codes."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_LIST_ITEMS = 64

_RESET = "\033[0m"
_FOCUS = "\033[7m"

_high_contrast = False


def set_high_contrast(enabled: bool) -> None:
    """Switch every list to the high-contrast palette or back."""
    global _high_contrast
    _high_contrast = bool(enabled)


@dataclass
class ListItem:
    """One row of a list: its text, an optional icon and colour code."""

    text: str
    icon: str | None = None
    color: str | None = None


@dataclass
class ListWidget:
    """A bounded list of items with an optional selection."""

    x: int
    y: int
    width: int
    height: int
    accessibility_label: str | None = "List"
    items: list[ListItem] = field(default_factory=list)
    selected_index: int | None = None
    focused: bool = False

    def add_item(self, item: str, icon: str | None = None, color: str | None = None) -> None:
        """Append an item; items beyond the capacity are dropped."""
        if len(self.items) < MAX_LIST_ITEMS:
            self.items.append(ListItem(item, icon, color))

    def render(self) -> str:
        """Return the list as terminal text, one line per row."""
        border = "====" if _high_contrast else "----"
        bg = "\033[47;30m" if _high_contrast else "\033[46;37m"
        sel = "\033[7m" if _high_contrast else "\033[1m"
        focus = _FOCUS if self.focused else ""
        lines = [
            f"{bg}{focus}{border}{_RESET}",
            f"{bg}{focus}[List] at ({self.x},{self.y}) size {self.width}x{self.height}{_RESET}",
        ]
        for index, entry in enumerate(self.items):
            color = entry.color or ""
            icon = entry.icon or " "
            selected = index == self.selected_index
            lines.append(
                f"{sel if selected else ''}{color}  {icon}{_RESET}{color} "
                f"{entry.text}{_RESET}{_RESET if selected else ''}"
            )
        lines.append(f"{bg}{focus}{border}{_RESET}")
        if self.focused and self.accessibility_label:
            lines.append(f"[ScreenReader] Focused: {self.accessibility_label}")
        return "\n".join(lines)

    def select_next(self) -> None:
        """Move the selection down, wrapping to the top."""
        if not self.items:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + 1) % len(self.items)

    def select_prev(self) -> None:
        """Move the selection up, wrapping to the bottom."""
        if not self.items:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index - 1) % len(self.items)

    def select_at(self, index: int) -> None:
        """Select the item at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.items):
            self.selected_index = index