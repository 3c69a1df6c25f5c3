"""Top-level UI loop hooks that drive the window manager."""

from __future__ import annotations

from dataclasses import dataclass

from novadesk.window_manager import WindowManager


@dataclass
class UIFramework:
    """Starts, ticks and shuts down the UI, rendering the attached window manager."""

    window_manager: WindowManager | None = None

    def start(self) -> None:
        """Bring the framework up."""
        print("[UIFramework] Initialized.")

    def tick(self) -> str | None:
        """Advance one frame, printing and returning the rendered desktop."""
        print("[UIFramework] Tick.")
        frame = self.render()
        if frame is not None:
            print(frame)
        return frame

    def render(self) -> str | None:
        """Return the window manager's rendering, or None if none is attached."""
        if self.window_manager is None:
            return None
        return self.window_manager.render()

    def shutdown(self) -> None:
        """Shut the framework down."""
        print("[UIFramework] Shutdown.")