"""
Shared primitive data types.

Basic geometric types used by the input layer and the game core:
points/vectors, resolutions and the World (play-field) description.
"""

import math
from typing import Tuple

from pydantic import BaseModel, Field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities and directions.

    Attributes:
        x: X coordinate (horizontal, grows to the right)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> Point2D(x=3.0, y=4.0).length
        5.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @property
    def length(self) -> float:
        """Euclidean length when treated as a vector."""
        return math.hypot(self.x, self.y)

    def direction_to(self, other: 'Point2D') -> 'Point2D':
        """Unit vector pointing from this point toward `other`.

        Falls back to (1, 0) when the points coincide.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        length = math.hypot(dx, dy)
        if length == 0:
            return Point2D(x=1.0, y=0.0)
        return Point2D(x=dx / length, y=dy / length)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities and directions read better as vectors
Vector2D = Point2D


class World(BaseModel):
    """The play field in device pixel space.

    Attributes:
        width: Field width in device pixels (>= 1)
        height: Field height in device pixels (>= 1)
        pixel_ratio: Device pixels per layout unit; scales sizes and speeds

    Examples:
        >>> World.fit(640.5, 360, 2.0)
        World(width=1281, height=720, pixel_ratio=2.0)
    """
    width: int = Field(1, gt=0)
    height: int = Field(1, gt=0)
    pixel_ratio: float = Field(1.0, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def fit(
        cls,
        viewport_width: float,
        viewport_height: float,
        pixel_ratio: float = 1.0,
        max_pixel_ratio: float = 2.0,
    ) -> 'World':
        """Compute the world for a viewport measured in layout units.

        The pixel ratio is capped at `max_pixel_ratio` and treated as 1
        when missing or non-positive.
        """
        dpr = min(pixel_ratio if pixel_ratio and pixel_ratio > 0 else 1.0, max_pixel_ratio)
        # floor(1279 / 1.1 * 1.1) must come back as 1279
        width = max(1, math.floor(round(viewport_width * dpr, 6)))
        height = max(1, math.floor(round(viewport_height * dpr, 6)))
        return cls(width=width, height=height, pixel_ratio=dpr)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def clamp_x(self, x: float, margin: float) -> float:
        """Clamp x into [margin, width - margin]."""
        return max(margin, min(self.width - margin, x))

    def contains(self, x: float, y: float, margin_x: float = 0.0, margin_y: float = 0.0) -> bool:
        """Strict containment in the field grown by the given margins."""
        return (-margin_x < x < self.width + margin_x and
                -margin_y < y < self.height + margin_y)
