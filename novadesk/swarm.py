"""Swarm sessions: several users merging desktops and federating assistants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_SWARM_USERS = 16
MAX_SWARM_DESKTOPS = 8
MAX_NAME_LENGTH = 31


class SwarmState(Enum):
    """State of a session; the value is its display name."""

    IDLE = "idle"
    ACTIVE = "active"
    MERGED = "merged"
    FEDERATED = "federated"


@dataclass
class SwarmUser:
    """A participant and whether their assistant takes part."""

    user_id: int
    name: str
    ai_enabled: bool


@dataclass
class SwarmSession:
    """A collaboration session spanning users and desktops."""

    session_id: int
    users: list[SwarmUser] = field(default_factory=list)
    desktop_ids: list[int] = field(default_factory=list)
    ai_federated: bool = False
    state: SwarmState = SwarmState.IDLE

    def add_user(self, user_id: int, name: str, ai_enabled: bool) -> None:
        """Add a participant; ignored once the session is full."""
        if len(self.users) >= MAX_SWARM_USERS:
            return
        self.users.append(SwarmUser(user_id, name[:MAX_NAME_LENGTH], bool(ai_enabled)))
        self.state = SwarmState.ACTIVE
        print(f"[Swarm] Added user {name} (AI={int(bool(ai_enabled))})")

    def merge_desktop(self, desktop_id: int) -> None:
        """Merge a desktop into the session; ignored once the limit is hit."""
        if len(self.desktop_ids) >= MAX_SWARM_DESKTOPS:
            return
        self.desktop_ids.append(desktop_id)
        self.state = SwarmState.MERGED
        print(f"[Swarm] Merged desktop {desktop_id}")

    def federate_ai(self) -> None:
        """Join the participants' assistants into one federation."""
        self.ai_federated = True
        self.state = SwarmState.FEDERATED
        print("[Swarm] AI federation enabled")

    def render(self) -> str:
        """Return the session, its users and desktops as text."""
        ai = "federated" if self.ai_federated else "local"
        lines = [
            f"[Swarm] Session {self.session_id} | Users: {len(self.users)} | "
            f"Desktops: {len(self.desktop_ids)} | AI: {ai} | State: {self.state.value}"
        ]
        lines.extend(
            f"  User {u.user_id}: {u.name} (AI={int(u.ai_enabled)})" for u in self.users
        )
        lines.extend(f"  Desktop {d}" for d in self.desktop_ids)
        return "\n".join(lines)