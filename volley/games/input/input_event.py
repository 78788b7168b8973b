"""
Input Event - Represents a single pointer-down action.

Uses a frozen dataclass so events stay immutable once queued.
"""
from dataclasses import dataclass

from models import Vector2D, EventType


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Attributes:
        position: Where the input occurred, in world (device pixel) coordinates
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        event_type: Type of event (HIT or MISS)
    """
    position: Vector2D
    timestamp: float
    event_type: EventType = EventType.HIT

    def __post_init__(self):
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, type={self.event_type.value})")
