"""AI companion orb that listens, thinks and offers suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class AiOrbState(Enum):
    """States of the AI orb; the value is its display name."""

    IDLE = "idle"
    LISTENING = "listening"
    THINKING = "thinking"
    SUGGESTING = "suggesting"
    ACTING = "acting"


@dataclass
class AiOrb:
    """An orb representing the assistant, with an optional current suggestion."""

    x: int
    y: int
    radius: int
    color: int
    label: str | None = None
    state: AiOrbState = AiOrbState.IDLE
    suggestion: str | None = None
    listening: bool = False
    animating: bool = False
    anim_phase: float = 0.0
    on_suggest: Callable[["AiOrb", str | None], None] | None = None

    def render(self) -> str:
        """Return the orb's description, with the suggestion on a second line."""
        label = self.label if self.label is not None else "(no label)"
        listening = " [LISTENING]" if self.listening else ""
        lines = [
            f"[AIOrb] {label} at ({self.x},{self.y}) r={self.radius} "
            f"color=#{self.color:06X} state={self.state.value}{listening} "
            f"phase={self.anim_phase:.2f}"
        ]
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)

    def listen(self, enable: bool) -> None:
        """Start or stop listening; the state follows."""
        self.listening = bool(enable)
        self.state = AiOrbState.LISTENING if enable else AiOrbState.IDLE
        print(f"[AIOrb] Listening {'enabled' if enable else 'disabled'}")

    def suggest(self, suggestion: str | None) -> None:
        """Show a suggestion and notify the suggestion callback."""
        self.suggestion = suggestion
        self.state = AiOrbState.SUGGESTING
        print(f"[AIOrb] Suggestion: {suggestion}")
        if self.on_suggest is not None:
            self.on_suggest(self, suggestion)

    def animate(self, phase: float) -> None:
        """Set the animation phase."""
        self.animating = True
        self.anim_phase = phase
        print(f"[AIOrb] Animating phase to {phase:.2f}")
        self.animating = False