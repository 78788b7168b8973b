"""
Ghost entity for Ghost Volley.

Ghosts fall toward the player with a sinusoidal side-to-side sway.
Hitting one splits it into two smaller, faster ghosts until the
smallest tier, which simply vanishes.
"""

import math
from dataclasses import dataclass

from games.GhostVolley.config import GHOST_SWAY_RATE


@dataclass
class Ghost:
    """A falling, swaying ghost.

    Attributes:
        x, y: Center position (device pixels)
        tier: Size class, 0 (largest) to 3 (smallest)
        speed: Downward speed (device pixels/sec)
        drift: Horizontal sway amplitude (device pixels/sec)
        phase: Sway phase in radians; grows without bound
        alive: False once destroyed
    """
    x: float
    y: float
    tier: int
    speed: float
    drift: float
    phase: float = 0.0
    alive: bool = True

    def step(self, dt: float) -> None:
        """Fall by speed * dt and sway along sin(phase)."""
        self.y += self.speed * dt
        self.phase += dt * GHOST_SWAY_RATE
        self.x += math.sin(self.phase) * self.drift * dt
