"""Pytest fixtures for Ghost Volley tests."""
import os

# pygame must never try to open a real window or audio device in tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from typing import List, Tuple

import pytest

from games.GhostVolley.game_mode import GameListener, GhostVolleyMode
from games.GhostVolley.arrow import Arrow
from games.GhostVolley.ghost import Ghost


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingListener(GameListener):
    """Listener that records every notification."""

    def __init__(self):
        self.scores: List[int] = []
        self.waves: List[int] = []
        self.game_overs: List[Tuple[str, str]] = []
        self.frames = 0

    def on_score_changed(self, score: int) -> None:
        self.scores.append(score)

    def on_wave_changed(self, wave: int) -> None:
        self.waves.append(wave)

    def on_game_over(self, title: str, description: str) -> None:
        self.game_overs.append((title, description))

    def on_frame(self) -> None:
        self.frames += 1


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def game(clock, listener):
    """An 800x600 game at pixel ratio 1 with a fixed seed, not yet started."""
    return GhostVolleyMode(width=800, height=600, seed=1234, clock=clock, listener=listener)


@pytest.fixture
def started(game):
    game.start_new()
    return game


class Field:
    """Direct access to a game's entity lists for arranging scenarios."""

    def __init__(self, game: GhostVolleyMode):
        self.game = game

    def clear(self) -> None:
        self.game._ghosts.clear()
        self.game._arrows.clear()

    def ghost(self, x: float, y: float, tier: int = 0, speed: float = 0.0,
              drift: float = 0.0, phase: float = 0.0) -> Ghost:
        """Put a ghost on the field; motionless unless speed/drift given."""
        ghost = Ghost(x=x, y=y, tier=tier, speed=speed, drift=drift, phase=phase)
        self.game._ghosts.append(ghost)
        return ghost

    def arrow(self, x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Arrow:
        arrow = Arrow(x=x, y=y, vx=vx, vy=vy)
        self.game._arrows.append(arrow)
        return arrow


@pytest.fixture
def field(started):
    """Helper for a started game whose field has been emptied."""
    helper = Field(started)
    helper.clear()
    return helper
