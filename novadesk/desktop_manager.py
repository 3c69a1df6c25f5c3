"""Flat window list with workspaces and a simple compositor pass."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_WINDOWS = 32
MAX_WORKSPACES = 8
MAX_TITLE_LENGTH = 63


@dataclass
class ManagedWindow:
    """A window known to the desktop manager; ids start at 1."""

    id: int
    title: str
    x: int
    y: int
    w: int
    h: int
    visible: bool = True


@dataclass
class DesktopManager:
    """Keeps the windows and the active workspace, and composites them."""

    windows: list[ManagedWindow] = field(default_factory=list)
    active_workspace: int = 0

    def add_window(self, title: str, x: int, y: int, w: int, h: int) -> ManagedWindow | None:
        """Add a visible window and return it; None once the manager is full."""
        if len(self.windows) >= MAX_WINDOWS:
            return None
        window = ManagedWindow(len(self.windows) + 1, title[:MAX_TITLE_LENGTH], x, y, w, h)
        self.windows.append(window)
        print(f"[DesktopManager] Window '{title}' added at ({x},{y}) size {w}x{h}")
        return window

    def switch_workspace(self, ws: int) -> None:
        """Make ``ws`` the active workspace; out-of-range numbers are ignored."""
        if 0 <= ws < MAX_WORKSPACES:
            self.active_workspace = ws
            print(f"[DesktopManager] Switched to workspace {ws}")

    def composite(self) -> str:
        """Return the compositor pass: a header and one line per visible window."""
        lines = [
            f"[DesktopManager] Compositing {len(self.windows)} windows "
            f"on workspace {self.active_workspace}"
        ]
        lines.extend(
            f"  Drawing window {w.id}: '{w.title}'" for w in self.windows if w.visible
        )
        return "\n".join(lines)