"""Bounded, thread-safe message queues and named IPC channels."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

IPC_QUEUE_SIZE = 128
CHANNEL_QUEUE_SIZE = 64
MAX_IPC_CHANNELS = 16
MAX_CHANNEL_NAME_LENGTH = 63
DEFAULT_CHANNEL = "neonova_ipc"


class IpcError(Exception):
    """Base class for IPC errors."""


class QueueFullError(IpcError):
    """The queue cannot take another message."""


class QueueEmptyError(IpcError):
    """There is no message to receive."""


@dataclass(frozen=True)
class IpcMessage:
    """A message from one endpoint to another."""

    src: int
    dest: int
    msg_type: int
    payload: bytes | None = None

    @property
    def payload_size(self) -> int:
        return len(self.payload) if self.payload is not None else 0


class IpcQueue:
    """A ring-style FIFO holding at most ``capacity - 1`` messages."""

    def __init__(self, capacity: int = IPC_QUEUE_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._messages: deque[IpcMessage] = deque()
        self._lock = threading.Lock()

    def send(self, msg: IpcMessage) -> None:
        """Append a message; raises QueueFullError when no slot is free."""
        with self._lock:
            if len(self._messages) >= self.capacity - 1:
                raise QueueFullError("IPC queue full")
            self._messages.append(msg)

    def receive(self) -> IpcMessage:
        """Take the oldest message; raises QueueEmptyError when there is none."""
        with self._lock:
            if not self._messages:
                raise QueueEmptyError("IPC queue empty")
            return self._messages.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


class ChannelRegistry:
    """A bounded set of named channels, each with its own queue."""

    def __init__(self) -> None:
        self._channels: dict[str, IpcQueue] = {}
        self._lock = threading.Lock()

    def channel(self, name: str = DEFAULT_CHANNEL) -> IpcQueue:
        """Return the channel with this name, creating it if there is room."""
        key = name[:MAX_CHANNEL_NAME_LENGTH]
        with self._lock:
            queue = self._channels.get(key)
            if queue is None:
                if len(self._channels) >= MAX_IPC_CHANNELS:
                    raise IpcError("no free IPC channel")
                queue = IpcQueue(CHANNEL_QUEUE_SIZE)
                self._channels[key] = queue
            return queue