"""
Mouse Input Source - pointer-down input from the pygame window.
"""
import time
from typing import List

import pygame

from models import Vector2D, EventType
from volley.games.input.input_event import InputEvent
from volley.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Converts left-button presses into InputEvents.

    Window pixels are already device pixels, so positions are passed
    through unchanged. Non-pointer events are re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect pointer-down positions."""
        deferred = []
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._push(*event.pos)
            elif event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                deferred.append(event)

        for event in deferred:
            pygame.event.post(event)

    def _push(self, x: float, y: float) -> None:
        self._event_queue.append(InputEvent(
            position=Vector2D(x=float(x), y=float(y)),
            timestamp=time.monotonic(),
            event_type=EventType.HIT,
        ))

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
