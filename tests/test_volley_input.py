"""
Input Tests

Tests for InputEvent, InputManager and the pygame mouse source.

Run with: pytest tests/test_volley_input.py -v
"""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

from typing import List

import pygame
import pytest

from models import EventType, Vector2D
from volley.games.input import InputEvent, InputManager, InputSource, MouseInputSource


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.update_count = 0
        self.last_dt = None

    def poll_events(self) -> List[InputEvent]:
        events = self.events.copy()
        self.events.clear()
        return events

    def update(self, dt: float) -> None:
        self.update_count += 1
        self.last_dt = dt


def make_event(x: float = 100.0, y: float = 100.0, t: float = 1.0) -> InputEvent:
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=t, event_type=EventType.HIT)


class TestInputEvent:

    def test_defaults_to_hit(self):
        event = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=0.0)
        assert event.event_type == EventType.HIT

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            make_event(t=-0.1)

    def test_immutable(self):
        event = make_event()
        with pytest.raises(AttributeError):
            event.timestamp = 5.0  # type: ignore

    def test_str(self):
        assert str(make_event(1.5, 2.25, 3.0)) == "InputEvent(pos=(1.50, 2.25), t=3.000, type=hit)"


class TestInputManager:

    def test_without_source(self):
        manager = InputManager()
        manager.update(0.016)
        assert manager.has_source() is False
        assert manager.get_events() == []

    def test_update_delegates(self):
        source = MockInputSource()
        manager = InputManager(source)
        manager.update(0.5)
        assert source.update_count == 1
        assert source.last_dt == 0.5

    def test_get_events_drains_source(self):
        source = MockInputSource()
        manager = InputManager(source)
        source.events.append(make_event())

        assert len(manager.get_events()) == 1
        assert manager.get_events() == []

    def test_clear_events(self):
        source = MockInputSource()
        manager = InputManager(source)
        source.events.append(make_event())
        manager.clear_events()
        assert manager.get_events() == []

    def test_set_source(self):
        manager = InputManager(MockInputSource())
        other = MockInputSource()
        manager.set_source(other)
        assert manager.get_source() is other


class TestMouseInputSource:

    @pytest.fixture(autouse=True)
    def display(self):
        pygame.init()
        pygame.display.set_mode((100, 100))
        pygame.event.clear()
        yield
        pygame.quit()

    def test_left_click_becomes_event(self):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(40, 60), button=1))

        source.update(0.016)
        events = source.poll_events()

        assert len(events) == 1
        assert events[0].position == Vector2D(x=40.0, y=60.0)
        assert events[0].event_type == EventType.HIT
        assert events[0].timestamp >= 0

    def test_other_buttons_ignored(self):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(40, 60), button=3))
        source.update(0.016)
        assert source.poll_events() == []

    def test_non_pointer_events_are_reposted(self):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        source.update(0.016)

        keys = [e for e in pygame.event.get() if e.type == pygame.KEYDOWN]
        assert len(keys) == 1
        assert keys[0].key == pygame.K_p

    def test_clear(self):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=1))
        source.update(0.016)
        source.clear()
        assert source.poll_events() == []
