"""
Data models shared across the Volley games.

- Primitives: Point2D/Vector2D, World
- Game: EventType, RunSummary

Usage:
    >>> from models import Vector2D, World
    >>> from models import RunSummary
"""

from .primitives import (
    Point2D,
    Vector2D,
    World,
)

from .game import (
    EventType,
    RunSummary,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'World',
    'EventType',
    'RunSummary',
]
