"""Depth and transparency effects for the windows of the current desktop."""

from __future__ import annotations

from dataclasses import dataclass

from novadesk.window_manager import WindowManager

MIN_DEPTH = 0.1
MAX_DEPTH = 10.0
DEPTH_STEP = 0.5
MIN_ALPHA = 0.1
MAX_ALPHA = 1.0

FAN_BASE_DEPTH = 1.0
FAN_DEPTH_STEP = 0.2
FAN_BASE_X = 100
FAN_X_STEP = 40
FAN_BASE_Y = 100
FAN_Y_STEP = 20
FAN_BASE_ALPHA = 0.7
FAN_ALPHA_STEP = 0.03


@dataclass
class HoloFlow:
    """Moves windows of a window manager closer, deeper, or fans them out."""

    window_manager: WindowManager

    def pull(self, window_id: int) -> float | None:
        """Bring a window closer; return its new depth, or None if it is unknown."""
        window = self.window_manager.find_window(window_id)
        if window is None:
            return None
        window.z_depth = max(window.z_depth - DEPTH_STEP, MIN_DEPTH)
        print(f"[HoloFlow] Pulled window {window_id} closer (z={window.z_depth:.2f})")
        return window.z_depth

    def push(self, window_id: int) -> float | None:
        """Send a window deeper; return its new depth, or None if it is unknown."""
        window = self.window_manager.find_window(window_id)
        if window is None:
            return None
        window.z_depth = min(window.z_depth + DEPTH_STEP, MAX_DEPTH)
        print(f"[HoloFlow] Pushed window {window_id} deeper (z={window.z_depth:.2f})")
        return window.z_depth

    def fan(self) -> None:
        """Spread the current desktop's windows out in depth, position and alpha."""
        for index, window in enumerate(self.window_manager.current.windows):
            window.z_depth = FAN_BASE_DEPTH + FAN_DEPTH_STEP * index
            window.x = FAN_BASE_X + FAN_X_STEP * index
            window.y = FAN_BASE_Y + FAN_Y_STEP * index
            window.transparency = FAN_BASE_ALPHA + FAN_ALPHA_STEP * index
            print(
                f"[HoloFlow] Fanned window {window.id} to "
                f"(z={window.z_depth:.2f}, alpha={window.transparency:.2f})"
            )

    def set_transparency(self, window_id: int, alpha: float) -> float | None:
        """Set a window's alpha, clamped; return the value used, or None if unknown."""
        window = self.window_manager.find_window(window_id)
        if window is None:
            return None
        alpha = min(max(alpha, MIN_ALPHA), MAX_ALPHA)
        window.transparency = alpha
        print(f"[HoloFlow] Set window {window_id} transparency to {alpha:.2f}")
        return alpha