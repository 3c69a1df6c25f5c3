"""Objects placed in 3D space for AR/VR views, with portals between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_SPATIAL_OBJECTS = 32
MAX_LABEL_LENGTH = 63


class SpatialType(Enum):
    """Kind of object placed in space; the value is its display name."""

    WINDOW = "window"
    ORB = "orb"
    AGENT = "agent"
    STREAM = "stream"
    PORTAL = "portal"


class SpatialState(Enum):
    """State of a spatial object; the value is its display name."""

    IDLE = "idle"
    MOVING = "moving"
    PINNED = "pinned"
    PORTAL_OPEN = "portal_open"


@dataclass
class SpatialObject:
    """An object with a position and an orientation quaternion (w, x, y, z)."""

    id: int
    kind: SpatialType
    label: str
    x: float
    y: float
    z: float
    orientation: tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.0)
    state: SpatialState = SpatialState.IDLE
    portal_id: int | None = None

    def move(self, x: float, y: float, z: float) -> None:
        """Place the object at a new position."""
        self.x, self.y, self.z = x, y, z
        self.state = SpatialState.MOVING
        print(f"[Spatial] Moved {self.label} to ({x:.1f},{y:.1f},{z:.1f})")

    def render(self) -> str:
        """Return a one-line description of the object."""
        portal = -1 if self.portal_id is None else self.portal_id
        return (
            f"[Spatial] {self.kind.value} {self.id} '{self.label}' "
            f"at ({self.x:.1f},{self.y:.1f},{self.z:.1f}) "
            f"state={self.state.value} portal={portal}"
        )


@dataclass
class SpatialManager:
    """A bounded collection of spatial objects, indexed by id."""

    objects: list[SpatialObject] = field(default_factory=list)

    def create(
        self, kind: SpatialType, label: str, x: float, y: float, z: float
    ) -> SpatialObject | None:
        """Place a new object and return it; None once the space is full."""
        if len(self.objects) >= MAX_SPATIAL_OBJECTS:
            return None
        obj = SpatialObject(len(self.objects), SpatialType(kind), label[:MAX_LABEL_LENGTH], x, y, z)
        self.objects.append(obj)
        return obj

    def open_portal(self, from_id: int, to_id: int) -> None:
        """Open a portal from one object to another; unknown ids are ignored."""
        count = len(self.objects)
        if not (0 <= from_id < count and 0 <= to_id < count):
            return
        source, target = self.objects[from_id], self.objects[to_id]
        source.state = SpatialState.PORTAL_OPEN
        source.portal_id = to_id
        print(f"[Spatial] Opened HoloPortal from '{source.label}' to '{target.label}'")