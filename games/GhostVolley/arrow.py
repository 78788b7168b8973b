"""
Arrow entity for Ghost Volley.

Arrows fly in a straight line from the bow toward where the player
clicked. They die when they strike a ghost or leave the field.
"""

import math
from dataclasses import dataclass

from games.GhostVolley.config import ARROW_RADIUS


@dataclass
class Arrow:
    """A projectile with constant velocity.

    Attributes:
        x, y: Center position (device pixels)
        vx, vy: Velocity (device pixels/sec)
        radius: Collision radius
        alive: False once the arrow has hit something
    """
    x: float
    y: float
    vx: float
    vy: float
    radius: float = ARROW_RADIUS
    alive: bool = True

    @property
    def heading(self) -> float:
        """Flight angle in radians, for orienting the sprite."""
        return math.atan2(self.vy, self.vx)

    def step(self, dt: float) -> None:
        """Advance position by velocity * dt."""
        self.x += self.vx * dt
        self.y += self.vy * dt
