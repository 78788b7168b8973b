"""
Ghost Volley - Configuration loader.

Loads settings from the .env file in the game directory; real environment
variables take precedence. Tables that define the game's rules (sizes,
rewards) are fixed here rather than read from the environment.
"""
import math
import os
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

GAME_DIR = Path(__file__).parent

# Load .env from game directory
_env_path = GAME_DIR / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 720)
MAX_PIXEL_RATIO: float = _get_float('MAX_PIXEL_RATIO', 2.0)
TARGET_FPS: int = _get_int('TARGET_FPS', 60)

# Player (bow)
PLAYER_RADIUS: float = _get_float('PLAYER_RADIUS', 44)      # x pixel ratio
PLAYER_OFFSET: float = _get_float('PLAYER_OFFSET', 80)      # above bottom edge, x pixel ratio
INITIAL_PLAYER_RADIUS: float = 42                           # before the first resize

# Arrows
ARROW_RADIUS: float = _get_float('ARROW_RADIUS', 6)
ARROW_SPEED: float = _get_float('ARROW_SPEED', 900)          # pixels/sec, x pixel ratio
FIRE_COOLDOWN: float = _get_float('FIRE_COOLDOWN', 0.28)     # seconds between shots

# Simulation step
MAX_FRAME_DT: float = _get_float('MAX_FRAME_DT', 0.033)      # cap on simulated seconds per step

# Ghost motion
GHOST_SWAY_RATE: float = _get_float('GHOST_SWAY_RATE', 1.6)  # radians/sec

# Splitting
SPLIT_SPEED_FACTOR: float = _get_float('SPLIT_SPEED_FACTOR', 1.06)
SPLIT_DRIFT_FACTOR: float = _get_float('SPLIT_DRIFT_FACTOR', 1.08)
SPLIT_OFFSET: float = _get_float('SPLIT_OFFSET', 10)
SPLIT_PHASE_OFFSET: float = _get_float('SPLIT_PHASE_OFFSET', 1.2)
EDGE_MARGIN: float = _get_float('EDGE_MARGIN', 20)

# Tiers: display sizes largest -> smallest, and points per tier destroyed
GHOST_SIZES: List[float] = [78, 56, 40, 30]
DEFAULT_GHOST_SIZE: float = 60
GHOST_REWARDS: List[int] = [10, 20, 40, 80]
DEFAULT_REWARD: int = 10
MAX_TIER: int = len(GHOST_REWARDS) - 1

# Waves
WAVE_MIN_GHOSTS: int = 3
WAVE_MAX_GHOSTS: int = 7
WAVE_GHOSTS_PER_WAVE: float = 0.6
WAVE_SPAWN_BAND: Tuple[float, float] = (0.15, 0.7)   # left edge, width fraction
WAVE_ENTRY_HEIGHT: Tuple[float, float] = (40, 140)   # min above top, random extra
WAVE_BASE_SPEED: float = 60
WAVE_SPEED_STEP: float = 10
WAVE_SPEED_JITTER: float = 35
GHOST_DRIFT_MIN: float = 18
GHOST_DRIFT_JITTER: float = 40
TWO_PI: float = 2 * math.pi

# Cleanup margins beyond the field
ARROW_MARGIN_X: float = 50
ARROW_MARGIN_Y: float = 80
GHOST_DESPAWN_MARGIN: float = 120

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (11, 16, 32)        # #0b1020
ACCENT_COLOR: Tuple[int, int, int] = (124, 92, 255)          # #7c5cff
STAR_ALPHA: int = 15
STAR_COUNT: int = 40
PLAYER_ZONE_HEIGHT: float = 150
BOW_SIZE: Tuple[float, float] = (86, 140)
ARROW_SIZE: Tuple[float, float] = (72, 24)
HUD_COLOR: Tuple[int, int, int] = (231, 240, 255)
SHOW_FPS: bool = _get_bool('SHOW_FPS', False)
