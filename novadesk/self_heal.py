"""Monitor that rewinds a window's timeline after repeated instability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from novadesk.quantum_timeline import QuantumTimeline

UNSTABLE_THRESHOLD = 3


@dataclass
class SelfHealMonitor:
    """Counts consecutive unstable ticks and rewinds when the threshold is hit."""

    window_id: int
    timeline: QuantumTimeline | None = None
    unstable_count: int = 0
    last_state_id: int | None = None
    on_rewind: Callable[["SelfHealMonitor", int], None] | None = None

    def _rewind(self, state_id: int) -> None:
        self.timeline.rewind(state_id)
        if self.on_rewind is not None:
            self.on_rewind(self, state_id)
        self.last_state_id = state_id

    def tick(self, is_unstable: bool) -> None:
        """Record one observation; rewind to the previous state after enough instability."""
        if not is_unstable:
            self.unstable_count = 0
            return
        self.unstable_count += 1
        print(f"[SelfHeal] Window {self.window_id} instability detected ({self.unstable_count})")
        if (
            self.unstable_count >= UNSTABLE_THRESHOLD
            and self.timeline is not None
            and self.timeline.states
        ):
            rewind_id = len(self.timeline.states) - 2
            if rewind_id >= 0:
                print(f"[SelfHeal] Auto-rewinding window {self.window_id} to state {rewind_id}")
                self._rewind(rewind_id)
                self.unstable_count = 0

    def trigger_rewind(self, state_id: int) -> None:
        """Rewind to a chosen state; unknown ids are ignored."""
        if self.timeline is not None and 0 <= state_id < len(self.timeline.states):
            print(f"[SelfHeal] Manual rewind window {self.window_id} to state {state_id}")
            self._rewind(state_id)