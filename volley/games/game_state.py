"""Common GameState enum for all Volley games.

Games can track richer internal state, but must map it to one of these
values through the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        IDLE: Nothing started yet (title screen)
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused by the player
        GAME_OVER: Run ended in a loss
    """
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
