"""Per-window history of saved states with rewind and branching."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_TIMELINE_STATES = 16
MAX_TIMELINE_BRANCHES = 4
MAX_LABEL_LENGTH = 63
MAX_SNAPSHOT_LENGTH = 255


@dataclass
class TimelineState:
    """A saved snapshot with its label."""

    state_id: int
    label: str
    snapshot: str


@dataclass
class QuantumTimeline:
    """Saved states of one window; ``current_state`` is None until one is saved."""

    window_id: int
    states: list[TimelineState] = field(default_factory=list)
    current_state: int | None = None
    branches: list["QuantumTimeline"] = field(default_factory=list)

    def save(self, label: str, snapshot: str) -> None:
        """Save a new state and make it current; ignored once full."""
        if len(self.states) >= MAX_TIMELINE_STATES:
            return
        state = TimelineState(
            len(self.states), label[:MAX_LABEL_LENGTH], snapshot[:MAX_SNAPSHOT_LENGTH]
        )
        self.states.append(state)
        self.current_state = state.state_id
        print(f"[Timeline] Saved state {state.state_id}: {state.label}")

    def rewind(self, state_id: int) -> None:
        """Make an earlier state current; unknown ids are ignored."""
        if 0 <= state_id < len(self.states):
            self.current_state = state_id
            print(f"[Timeline] Rewound to state {state_id}: {self.states[state_id].label}")

    def branch(self, label: str) -> QuantumTimeline | None:
        """Start a new branch for the same window; None once the branch limit is hit."""
        if len(self.branches) >= MAX_TIMELINE_BRANCHES:
            return None
        branch = QuantumTimeline(self.window_id)
        branch.save(f"Branch: {label}"[:MAX_LABEL_LENGTH], "Initial branch state")
        self.branches.append(branch)
        print(f"[Timeline] Created branch {len(self.branches) - 1}: {label}")
        return branch

    def render(self) -> str:
        """Return the states and, recursively, every branch."""
        current = -1 if self.current_state is None else self.current_state
        lines = [
            f"[Timeline] Window {self.window_id} | States: {len(self.states)} | Current: {current}"
        ]
        lines.extend(
            f"  State {s.state_id}: {s.label} {'[CURRENT]' if s.state_id == self.current_state else ''}"
            for s in self.states
        )
        for index, branch in enumerate(self.branches):
            lines.append(f"  Branch {index}:")
            lines.append(branch.render())
        return "\n".join(lines)