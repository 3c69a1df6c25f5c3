"""Shared collaboration bubble attached to a window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_COLLAB_USERS = 8
MAX_NAME_LENGTH = 31
MAX_ANNOTATION_LENGTH = 255


class BubbleState(Enum):
    """State of a bubble; the value is its display name."""

    IDLE = "idle"
    ACTIVE = "active"
    ANNOTATING = "annotating"


@dataclass
class CollabUser:
    """A participant with a pointer position and voice flag."""

    user_id: int
    name: str
    pointer_x: int = 0
    pointer_y: int = 0
    voice_active: bool = False


@dataclass
class CollabBubble:
    """Users working together on one window, with a shared annotation."""

    window_id: int
    state: BubbleState = BubbleState.IDLE
    users: list[CollabUser] = field(default_factory=list)
    annotation: str = ""

    def _find(self, user_id: int) -> CollabUser | None:
        return next((u for u in self.users if u.user_id == user_id), None)

    def add_user(self, user_id: int, name: str) -> None:
        """Add a participant; ignored once the bubble is full."""
        if len(self.users) >= MAX_COLLAB_USERS:
            return
        self.users.append(CollabUser(user_id, name[:MAX_NAME_LENGTH]))
        self.state = BubbleState.ACTIVE
        print(f"[CollabBubble] Added user {name}")

    def remove_user(self, user_id: int) -> None:
        """Remove a participant; the bubble goes idle when nobody is left."""
        user = self._find(user_id)
        if user is not None:
            self.users.remove(user)
            print(f"[CollabBubble] Removed user {user_id}")
        if not self.users:
            self.state = BubbleState.IDLE

    def annotate(self, annotation: str) -> None:
        """Set the shared annotation."""
        self.annotation = annotation[:MAX_ANNOTATION_LENGTH]
        self.state = BubbleState.ANNOTATING
        print(f"[CollabBubble] Annotation: {annotation}")

    def set_pointer(self, user_id: int, x: int, y: int, voice: bool) -> None:
        """Update a participant's pointer and voice flag; unknown users are ignored."""
        user = self._find(user_id)
        if user is None:
            return
        user.pointer_x, user.pointer_y, user.voice_active = x, y, bool(voice)
        print(f"[CollabBubble] User {user_id} pointer=({x},{y}) voice={int(bool(voice))}")

    def render(self) -> str:
        """Return the bubble, its users and annotation as text."""
        lines = [
            f"[CollabBubble] Window {self.window_id} state={self.state.value} "
            f"users={len(self.users)}"
        ]
        lines.extend(
            f"  User {u.user_id}: {u.name} pointer=({u.pointer_x},{u.pointer_y})"
            f"{' [VOICE]' if u.voice_active else ''}"
            for u in self.users
        )
        if self.annotation:
            lines.append(f"  Annotation: {self.annotation}")
        return "\n".join(lines)