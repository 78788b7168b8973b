"""
Input source implementations.
"""

from volley.games.input.sources.base import InputSource
from volley.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
