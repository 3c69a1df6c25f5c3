"""Bounded history of recent desktop notifications."""

from __future__ import annotations

from collections import deque
from typing import Iterator

MAX_NOTIFICATIONS = 8
MAX_MESSAGE_LENGTH = 127


class NotificationHistory:
    """Keeps the most recent notifications, dropping the oldest when full."""

    def __init__(self) -> None:
        self._messages: deque[str] = deque(maxlen=MAX_NOTIFICATIONS)

    def add(self, msg: str) -> None:
        """Record a notification, truncated to the maximum length."""
        self._messages.append(msg[:MAX_MESSAGE_LENGTH])

    def render(self) -> str:
        """Return the recent events, oldest first."""
        lines = ["[Notifications] Recent events:"]
        lines.extend(f"  - {m}" for m in self._messages)
        return "\n".join(lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)