"""
Input abstraction layer for Volley games.

Lets a game consume the same InputEvent stream whether it comes from a
mouse, a touch screen or a scripted test source.
"""

from volley.games.input.input_event import InputEvent
from volley.games.input.input_manager import InputManager
from volley.games.input.sources import InputSource, MouseInputSource

__all__ = ['InputEvent', 'InputManager', 'InputSource', 'MouseInputSource']
