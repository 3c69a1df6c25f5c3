"""Registry entries for smart-home devices (Matter, Thread, Home Assistant)."""

from __future__ import annotations

from dataclasses import dataclass

MAX_NAME_LENGTH = 63
MAX_PROTOCOL_LENGTH = 31


@dataclass
class IotDevice:
    """A registered device; it comes online when registered."""

    name: str
    protocol: str
    online: bool = True

    def __post_init__(self) -> None:
        self.name = self.name[:MAX_NAME_LENGTH]
        self.protocol = self.protocol[:MAX_PROTOCOL_LENGTH]
        print(f"[IoT] Registered device '{self.name}' with protocol {self.protocol}")

    def status_line(self) -> str:
        """Return the device's status report."""
        status = "online" if self.online else "offline"
        return f"[IoT] Device '{self.name}' protocol {self.protocol} status: {status}"