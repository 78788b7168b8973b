"""
Generic game data models.

Input event types and the end-of-run summary reported by games.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field, ConfigDict


class EventType(str, Enum):
    """Types of input events.

    Attributes:
        HIT: A click/impact at a position
        MISS: An input that should not be treated as aimed
    """
    HIT = "hit"
    MISS = "miss"


class RunSummary(BaseModel):
    """Immutable statistics for one run of a game.

    Attributes:
        score: Points scored
        wave: Wave reached (starts at 1)
        shots: Projectiles fired
        hits: Projectiles that struck a target

    Examples:
        >>> RunSummary(score=30, wave=2, shots=4, hits=2).accuracy
        0.5
    """
    score: int = Field(0, ge=0)
    wave: int = Field(1, ge=1)
    shots: int = Field(0, ge=0)
    hits: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def accuracy(self) -> float:
        """Hit ratio in [0, 1]; 0.0 before the first shot."""
        if self.shots == 0:
            return 0.0
        return self.hits / self.shots
