"""
Ghost Volley game mode.

Ghosts fall toward the bow in waves. Every arrow that strikes a ghost
splits it into two smaller, faster ghosts until the smallest size, which
simply vanishes. A wave ends when no ghosts remain; the run ends when a
ghost reaches the bow.

The mode owns the whole simulation. It never schedules itself: the host
calls tick(timestamp) once per frame and draws when tick returns True.
Score, wave and game-over changes are pushed to registered listeners.
"""

import math
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

import pygame

from models import EventType, Point2D, RunSummary, World
from volley.games import BaseGame, GameState
from volley.games.input import InputEvent
from volley.logging import emit_record, get_logger
from games.GhostVolley.arrow import Arrow
from games.GhostVolley.ghost import Ghost
from games.GhostVolley.sprites import ghost_size
from games.GhostVolley.config import (
    ARROW_MARGIN_X,
    ARROW_MARGIN_Y,
    ARROW_SPEED,
    DEFAULT_REWARD,
    EDGE_MARGIN,
    FIRE_COOLDOWN,
    GHOST_DESPAWN_MARGIN,
    GHOST_DRIFT_JITTER,
    GHOST_DRIFT_MIN,
    GHOST_REWARDS,
    GHOST_SIZES,
    INITIAL_PLAYER_RADIUS,
    MAX_FRAME_DT,
    MAX_PIXEL_RATIO,
    MAX_TIER,
    PLAYER_OFFSET,
    PLAYER_RADIUS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPLIT_DRIFT_FACTOR,
    SPLIT_OFFSET,
    SPLIT_PHASE_OFFSET,
    SPLIT_SPEED_FACTOR,
    TWO_PI,
    WAVE_BASE_SPEED,
    WAVE_ENTRY_HEIGHT,
    WAVE_GHOSTS_PER_WAVE,
    WAVE_MAX_GHOSTS,
    WAVE_MIN_GHOSTS,
    WAVE_SPAWN_BAND,
    WAVE_SPEED_JITTER,
    WAVE_SPEED_STEP,
)

if TYPE_CHECKING:
    from games.GhostVolley.skin import GhostVolleySkin
    from games.GhostVolley.sprites import GhostAssets

log = get_logger('ghost_volley')

RECORD_MODULE = 'ghostvolley'


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def circles_overlap(ax: float, ay: float, ar: float,
                    bx: float, by: float, br: float) -> bool:
    """Strict circle-circle overlap on squared distances."""
    dx = ax - bx
    dy = ay - by
    reach = ar + br
    return dx * dx + dy * dy < reach * reach


def wave_ghost_count(wave: int) -> int:
    """Number of ghosts spawned for a wave: 3 at first, growing to 7."""
    count = WAVE_MIN_GHOSTS + math.floor(wave * WAVE_GHOSTS_PER_WAVE)
    return int(clamp(count, WAVE_MIN_GHOSTS, WAVE_MAX_GHOSTS))


def reward_for(tier: int) -> int:
    """Points for destroying a ghost of the given tier."""
    if 0 <= tier < len(GHOST_REWARDS):
        return GHOST_REWARDS[tier]
    return DEFAULT_REWARD


@dataclass
class Player:
    """The bow's anchor point and defensive circle."""
    x: float = 0.0
    y: float = 0.0
    radius: float = INITIAL_PLAYER_RADIUS


class GameListener:
    """Receives change notifications from GhostVolleyMode.

    Every hook is a no-op by default; presentations override the ones
    they care about.
    """

    def on_score_changed(self, score: int) -> None:
        pass

    def on_wave_changed(self, wave: int) -> None:
        pass

    def on_game_over(self, title: str, description: str) -> None:
        """Run ended; show the title/description and offer a restart."""
        pass

    def on_frame(self) -> None:
        """A step completed and the run continues; draw now."""
        pass


class GhostVolleyMode(BaseGame):
    """
    Ghost Volley game mode.

    Lifecycle: IDLE -> PLAYING <-> PAUSED, PLAYING -> GAME_OVER.
    start_new() enters PLAYING from IDLE or GAME_OVER.
    """

    NAME = "Ghost Volley"
    DESCRIPTION = "Shoot the falling ghosts. Each hit splits them smaller and faster."
    VERSION = "1.0.0"
    AUTHOR = "Volley Team"

    ARGUMENTS = [
        {
            'name': '--pixel-ratio',
            'type': float,
            'default': 1.0,
            'help': 'Scale for sprite sizes and speeds (capped at 2)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible waves'
        },
    ]

    def __init__(
        self,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
        pixel_ratio: float = 1.0,
        ghost_sizes: Optional[Sequence[float]] = None,
        assets: Optional['GhostAssets'] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        listener: Optional[GameListener] = None,
        skin: Optional['GhostVolleySkin'] = None,
        **kwargs,
    ):
        """
        Initialize game mode.

        Args:
            width: Viewport width in layout units
            height: Viewport height in layout units
            pixel_ratio: Device pixels per layout unit
            ghost_sizes: Display size per tier (overrides assets)
            assets: Sprite bundle; drawn on first render when omitted
            rng: Random source for wave spawns
            seed: Seed for a fresh random source when rng is omitted
            clock: Monotonic clock in seconds (default: time.monotonic)
            listener: Initial change listener
            skin: Renderer used by render(); created on demand when omitted
            **kwargs: Launcher arguments this mode does not use
        """
        super().__init__()

        self._assets = assets
        if ghost_sizes is not None:
            self._ghost_sizes = list(ghost_sizes)
        elif assets is not None:
            self._ghost_sizes = list(assets.ghost_sizes)
        else:
            self._ghost_sizes = list(GHOST_SIZES)

        self._rng = rng if rng is not None else random.Random(seed)
        self._clock = clock or time.monotonic
        self._listeners: List[GameListener] = []
        if listener is not None:
            self._listeners.append(listener)
        self._skin = skin
        if skin is not None and skin not in self._listeners:
            self._listeners.append(skin)

        self._running = False
        self._paused = False
        self._started = False

        self._cooldown = 0.0
        self._score = 0
        self._wave = 1
        self._shots = 0
        self._hits = 0

        self._arrows: List[Arrow] = []
        self._ghosts: List[Ghost] = []

        self._last_t = 0.0
        self._world = World()
        self._player = Player()

        self.resize(width, height, pixel_ratio)

    # =========================================================================
    # Observation
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        if self._running:
            return GameState.PAUSED if self._paused else GameState.PLAYING
        if self._started:
            return GameState.GAME_OVER
        return GameState.IDLE

    def get_score(self) -> int:
        return self._score

    @property
    def score(self) -> int:
        return self._score

    @property
    def wave(self) -> int:
        return self._wave

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def cooldown(self) -> float:
        """Seconds until the next shot is allowed (may dip below zero)."""
        return self._cooldown

    @property
    def world(self) -> World:
        return self._world

    @property
    def player(self) -> Player:
        return self._player

    @property
    def arrows(self) -> List[Arrow]:
        return list(self._arrows)

    @property
    def ghosts(self) -> List[Ghost]:
        return list(self._ghosts)

    @property
    def ghost_sizes(self) -> List[float]:
        return list(self._ghost_sizes)

    def ghost_radius(self, ghost: Ghost) -> float:
        """Collision radius: half the tier's display size, in device pixels."""
        return ghost_size(self._ghost_sizes, ghost.tier) * 0.5 * self._world.pixel_ratio

    def summary(self) -> RunSummary:
        return RunSummary(score=self._score, wave=self._wave,
                          shots=self._shots, hits=self._hits)

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, listener: GameListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_score(self) -> None:
        for listener in self._listeners:
            listener.on_score_changed(self._score)

    def _notify_wave(self) -> None:
        for listener in self._listeners:
            listener.on_wave_changed(self._wave)

    # =========================================================================
    # Commands
    # =========================================================================

    def resize(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        """Refit the world to a viewport and re-anchor the bow.

        Args:
            width: Viewport width in layout units
            height: Viewport height in layout units
            pixel_ratio: Device pixels per layout unit (capped at MAX_PIXEL_RATIO)
        """
        self._world = World.fit(width, height, pixel_ratio, MAX_PIXEL_RATIO)
        dpr = self._world.pixel_ratio
        self._player.x = self._world.width * 0.5
        self._player.y = self._world.height - PLAYER_OFFSET * dpr
        self._player.radius = PLAYER_RADIUS * dpr
        log.debug("Resized world to %dx%d @%.2fx",
                  self._world.width, self._world.height, dpr)

    def start_new(self) -> None:
        """Reset counters and entities, spawn wave 1 and start running."""
        self._running = True
        self._paused = False
        self._started = True
        self._score = 0
        self._wave = 1
        self._shots = 0
        self._hits = 0
        self._arrows = []
        self._ghosts = []
        self._cooldown = 0.0
        self.spawn_wave()

        self._notify_score()
        self._notify_wave()

        self._last_t = self._clock()
        log.info("New run started with %d ghosts", len(self._ghosts))

    def fire(self, x: float, y: float) -> None:
        """Loose an arrow from the bow toward a world position.

        Ignored unless running, unpaused and off cooldown.
        """
        if not self._running or self._paused:
            return
        if self._cooldown > 0:
            return

        anchor = Point2D(x=self._player.x, y=self._player.y)
        direction = anchor.direction_to(Point2D(x=x, y=y))
        speed = ARROW_SPEED * self._world.pixel_ratio

        self._arrows.append(Arrow(
            x=self._player.x,
            y=self._player.y,
            vx=direction.x * speed,
            vy=direction.y * speed,
        ))
        self._cooldown = FIRE_COOLDOWN
        self._shots += 1

    def toggle_pause(self) -> None:
        """Flip between PLAYING and PAUSED; no effect outside a run."""
        if not self._running:
            return
        self._paused = not self._paused
        if not self._paused:
            self._last_t = self._clock()
        log.debug("Paused" if self._paused else "Resumed")

    def tick(self, timestamp: float) -> bool:
        """Advance one frame to `timestamp` (seconds, same clock as `clock`).

        The simulated step is clamped to [0, MAX_FRAME_DT] seconds.

        Returns:
            True when a frame was produced and the host should draw and
            schedule the next tick; False when nothing ran or the run ended.
        """
        if not self._running or self._paused:
            return False

        dt = clamp(timestamp - self._last_t, 0.0, MAX_FRAME_DT)
        self._last_t = timestamp

        self.step(dt)
        if not self._running:
            return False

        for listener in self._listeners:
            listener.on_frame()
        return True

    def handle_input(self, events: List[InputEvent]) -> None:
        """Fire at each aimed (HIT) pointer-down position."""
        for event in events:
            if event.event_type != EventType.HIT:
                continue
            self.fire(event.position.x, event.position.y)

    def update(self, dt: float) -> None:
        """Advance by a host-measured delta, clamped like tick()."""
        if not self._running or self._paused:
            return
        self.step(clamp(dt, 0.0, MAX_FRAME_DT))

    # =========================================================================
    # Simulation
    # =========================================================================

    def step(self, dt: float) -> None:
        """Run one simulation step of `dt` seconds."""
        if self._cooldown > 0:
            self._cooldown -= dt

        for arrow in self._arrows:
            arrow.step(dt)
        for ghost in self._ghosts:
            ghost.step(dt)

        self._resolve_collisions()
        self._cleanup()

        if not self._ghosts:
            self._wave += 1
            self._notify_wave()
            self.spawn_wave()
            log.info("Wave %d incoming (%d ghosts)", self._wave, len(self._ghosts))

        if self._player_reached():
            self._game_over()

    def _resolve_collisions(self) -> None:
        # First overlapping ghost in insertion order wins, not the nearest.
        for arrow in self._arrows:
            if not arrow.alive:
                continue
            for ghost in self._ghosts:
                if not ghost.alive:
                    continue
                if circles_overlap(arrow.x, arrow.y, arrow.radius,
                                   ghost.x, ghost.y, self.ghost_radius(ghost)):
                    arrow.alive = False
                    self._hits += 1
                    self.split_ghost(ghost)
                    break

    def split_ghost(self, ghost: Ghost) -> List[Ghost]:
        """Score and destroy a ghost, spawning two smaller ones below MAX_TIER.

        Returns:
            The children added to the field (empty for the smallest tier)
        """
        self._score += reward_for(ghost.tier)
        self._notify_score()

        ghost.alive = False

        if ghost.tier >= MAX_TIER:
            log.debug("Ghost eliminated at tier %d", ghost.tier)
            return []

        children = []
        for side in (-1, 1):
            child = Ghost(
                x=ghost.x + side * SPLIT_OFFSET,
                y=ghost.y,
                tier=ghost.tier + 1,
                speed=ghost.speed * SPLIT_SPEED_FACTOR,
                drift=ghost.drift * SPLIT_DRIFT_FACTOR,
                phase=ghost.phase - side * SPLIT_PHASE_OFFSET,
            )
            child.x = self._world.clamp_x(child.x, EDGE_MARGIN)
            children.append(child)

        self._ghosts.extend(children)
        log.debug("Ghost split into tier %d", ghost.tier + 1)
        return children

    def _cleanup(self) -> None:
        world = self._world
        self._arrows = [
            a for a in self._arrows
            if a.alive and world.contains(a.x, a.y, ARROW_MARGIN_X, ARROW_MARGIN_Y)
        ]
        self._ghosts = [
            g for g in self._ghosts
            if g.alive and g.y < world.height + GHOST_DESPAWN_MARGIN
        ]

    def spawn_wave(self) -> List[Ghost]:
        """Add the current wave's tier-0 ghosts above the top edge."""
        width = self._world.width
        dpr = self._world.pixel_ratio
        band_left, band_width = WAVE_SPAWN_BAND
        entry_min, entry_extra = WAVE_ENTRY_HEIGHT
        base_speed = WAVE_BASE_SPEED + self._wave * WAVE_SPEED_STEP
        rng = self._rng

        spawned = []
        for _ in range(wave_ghost_count(self._wave)):
            spawned.append(Ghost(
                x=(band_left + rng.random() * band_width) * width,
                y=-(entry_min + rng.random() * entry_extra) * dpr,
                tier=0,
                speed=(base_speed + rng.random() * WAVE_SPEED_JITTER) * dpr,
                drift=(GHOST_DRIFT_MIN + rng.random() * GHOST_DRIFT_JITTER) * dpr,
                phase=rng.random() * TWO_PI,
            ))

        self._ghosts.extend(spawned)
        return spawned

    def _player_reached(self) -> bool:
        player = self._player
        for ghost in self._ghosts:
            if not ghost.alive:
                continue
            if circles_overlap(ghost.x, ghost.y, self.ghost_radius(ghost),
                               player.x, player.y, player.radius):
                return True
        return False

    def _game_over(self) -> None:
        self._running = False
        summary = self.summary()
        log.info("Game over on wave %d with score %d", self._wave, self._score)
        emit_record(RECORD_MODULE, {'type': 'run_summary', **summary.model_dump()})

        title = "Game Over"
        description = f"Score: {self._score}"
        for listener in self._listeners:
            listener.on_game_over(title, description)

    # =========================================================================
    # Presentation
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        """Draw the current state through the skin."""
        self._ensure_skin().render(self, screen)

    def _ensure_skin(self) -> 'GhostVolleySkin':
        if self._skin is None:
            from games.GhostVolley.skin import GhostVolleySkin
            from games.GhostVolley.sprites import load_assets

            if self._assets is None:
                self._assets = load_assets()
            self._skin = GhostVolleySkin(self._assets)
            self._skin.on_score_changed(self._score)
            self._skin.on_wave_changed(self._wave)
            self.add_listener(self._skin)
        return self._skin
