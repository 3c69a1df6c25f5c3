"""Window manager with several virtual desktops, snapping and tiling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

MAX_WINDOWS_PER_DESKTOP = 32
MAX_DESKTOPS = 8
MAX_TITLE_LENGTH = 63
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
DEFAULT_TRANSPARENCY = 0.92

GESTURE_SWIPE = 0


class SnapType(IntEnum):
    """Where a window can be snapped to."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    FULLSCREEN = 4


@dataclass
class Window:
    """A window on a desktop; ``z_depth`` and ``transparency`` drive the 3D view."""

    id: int
    title: str
    x: int
    y: int
    width: int
    height: int
    z_order: int = 0
    z_depth: float = 1.0
    transparency: float = DEFAULT_TRANSPARENCY
    focused: bool = False
    visible: bool = True


@dataclass
class Desktop:
    """A virtual desktop; its windows are kept newest first."""

    id: int
    windows: list[Window] = field(default_factory=list)

    @property
    def window_count(self) -> int:
        return len(self.windows)


class WindowManager:
    """Owns the desktops and acts on the windows of the current one."""

    def __init__(self) -> None:
        self.desktops = [Desktop(i) for i in range(MAX_DESKTOPS)]
        self.current_desktop = 0
        self.next_window_id = 1

    @property
    def current(self) -> Desktop:
        """The desktop currently shown."""
        return self.desktops[self.current_desktop]

    def find_window(self, window_id: int) -> Window | None:
        """Return the window with this id on the current desktop, or None."""
        return next((w for w in self.current.windows if w.id == window_id), None)

    def create_window(self, title: str, x: int, y: int, w: int, h: int) -> Window | None:
        """Open a window on the current desktop; None once the desktop is full."""
        desktop = self.current
        count = desktop.window_count
        if count >= MAX_WINDOWS_PER_DESKTOP:
            return None
        window = Window(
            id=self.next_window_id,
            title=title[:MAX_TITLE_LENGTH],
            x=x,
            y=y,
            width=w,
            height=h,
            z_order=count,
            z_depth=1.0 + 0.1 * count,
        )
        self.next_window_id += 1
        desktop.windows.insert(0, window)
        print(f"[WindowManager] Created window {window.id}: '{window.title}'")
        return window

    def destroy_window(self, window_id: int) -> None:
        """Close a window on the current desktop; unknown ids are ignored."""
        window = self.find_window(window_id)
        if window is None:
            return
        self.current.windows.remove(window)
        print(f"[WindowManager] Destroyed window {window_id}")

    def move_window(self, window_id: int, new_x: int, new_y: int) -> None:
        """Move a window; unknown ids are ignored."""
        window = self.find_window(window_id)
        if window is None:
            return
        window.x, window.y = new_x, new_y
        print(f"[WindowManager] Moved window {window_id} to ({new_x},{new_y})")

    def resize_window(self, window_id: int, new_w: int, new_h: int) -> None:
        """Resize a window; unknown ids are ignored."""
        window = self.find_window(window_id)
        if window is None:
            return
        window.width, window.height = new_w, new_h
        print(f"[WindowManager] Resized window {window_id} to {new_w}x{new_h}")

    def focus_window(self, window_id: int) -> None:
        """Give focus to one window and take it from every other."""
        for window in self.current.windows:
            window.focused = False
        window = self.find_window(window_id)
        if window is not None:
            window.focused = True
            print(f"[WindowManager] Focused window {window_id}")

    def snap_window(self, window_id: int, snap_type: int) -> None:
        """Snap a window to a screen half or to full screen."""
        window = self.find_window(window_id)
        if window is None:
            return
        if snap_type == SnapType.LEFT:
            window.x = 0
            window.width = int(window.width / 2)
        elif snap_type == SnapType.RIGHT:
            window.x = SCREEN_WIDTH // 2
            window.width = int(window.width / 2)
        elif snap_type == SnapType.TOP:
            window.y = 0
            window.height = int(window.height / 2)
        elif snap_type == SnapType.BOTTOM:
            window.y = SCREEN_HEIGHT // 2
            window.height = int(window.height / 2)
        elif snap_type == SnapType.FULLSCREEN:
            window.x, window.y = 0, 0
            window.width, window.height = SCREEN_WIDTH, SCREEN_HEIGHT
        print(f"[WindowManager] Snapped window {window_id} (type {int(snap_type)})")

    def tile_windows(self) -> None:
        """Arrange the current desktop's windows in a near-square grid."""
        windows = self.current.windows
        n = len(windows)
        if n == 0:
            return
        cols = math.isqrt(n - 1) + 1
        rows = (n + cols - 1) // cols
        cell_w, cell_h = SCREEN_WIDTH // cols, SCREEN_HEIGHT // rows
        for index, window in enumerate(windows):
            row, col = divmod(index, cols)
            window.x, window.y = col * cell_w, row * cell_h
            window.width, window.height = cell_w, cell_h
            print(
                f"[WindowManager] Tiled window {window.id} to "
                f"({window.x},{window.y},{window.width},{window.height})"
            )

    def switch_desktop(self, desktop_id: int) -> None:
        """Show another desktop; out-of-range ids are ignored."""
        if not 0 <= desktop_id < MAX_DESKTOPS:
            return
        self.current_desktop = desktop_id
        print(f"[WindowManager] Switched to desktop {desktop_id}")

    def handle_gesture(self, gesture_type: int, arg0: int, arg1: int) -> None:
        """React to a gesture; a swipe of -1 or 1 moves one desktop left or right."""
        print(f"[WindowManager] Gesture {gesture_type} ({arg0},{arg1})")
        if gesture_type == GESTURE_SWIPE and arg0 in (-1, 1):
            self.switch_desktop(self.current_desktop + arg0)

    def render(self) -> str:
        """Return the current desktop and its windows as text."""
        desktop = self.current
        lines = [
            f"[WindowManager] Rendering desktop {desktop.id} "
            f"with {desktop.window_count} windows:"
        ]
        lines.extend(
            f"  Window {w.id}: '{w.title}' ({w.x},{w.y},{w.width},{w.height}) "
            f"z={w.z_depth:.2f} alpha={w.transparency:.2f} "
            f"{'[FOCUSED]' if w.focused else ''}"
            for w in desktop.windows
        )
        return "\n".join(lines)