"""
Volley - a small framework for pygame arcade games.

Provides:
- logging: per-module leveled loggers and structured record sinks
- games: BaseGame, the standard GameState enum and input handling
"""

__version__ = "1.0.0"
