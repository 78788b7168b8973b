"""
Volley Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
- input: Common input event handling
"""

from volley.games.game_state import GameState
from volley.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
