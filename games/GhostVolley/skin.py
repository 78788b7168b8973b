"""Ghost Volley skin.

The skin handles ALL drawing; the game mode only manages state. It also
listens to the mode so the HUD text and the game-over overlay are driven
by pushed notifications rather than polling.
"""

import math
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import pygame

from volley.games import GameState
from games.GhostVolley.game_mode import GameListener
from games.GhostVolley.sprites import GhostAssets
from games.GhostVolley.config import (
    ACCENT_COLOR,
    ARROW_SIZE,
    BACKGROUND_COLOR,
    BOW_SIZE,
    HUD_COLOR,
    PLAYER_ZONE_HEIGHT,
    STAR_ALPHA,
    STAR_COUNT,
)

if TYPE_CHECKING:
    from games.GhostVolley.game_mode import GhostVolleyMode

IDLE_TITLE = "Ghost Volley"
IDLE_DESCRIPTION = "Click to shoot. Hit ghosts split into smaller ones!"


class GhostVolleySkin(GameListener):
    """Default look: night sky, golden bow, white ghosts."""

    NAME = "default"

    def __init__(self, assets: GhostAssets):
        self._assets = assets
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}
        self._scaled_ratio: Optional[float] = None

        self.score_text = "0"
        self.wave_text = "1"
        self.title = IDLE_TITLE
        self.description = IDLE_DESCRIPTION
        self.show_restart = False

        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    # -- listener hooks -------------------------------------------------------

    def on_score_changed(self, score: int) -> None:
        self.score_text = str(score)

    def on_wave_changed(self, wave: int) -> None:
        self.wave_text = str(wave)

    def on_game_over(self, title: str, description: str) -> None:
        self.title = title
        self.description = description
        self.show_restart = True

    # -- helpers --------------------------------------------------------------

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _get_font_large(self) -> pygame.font.Font:
        if self._font_large is None:
            pygame.font.init()
            self._font_large = pygame.font.Font(None, 72)
        return self._font_large

    def scaled(self, name: str, width: float, height: float) -> pygame.Surface:
        """Sprite `name` scaled to the given size, cached per size."""
        size = (max(1, int(width)), max(1, int(height)))
        key = (name, *size)
        if key not in self._scaled:
            source = getattr(self._assets, name)
            self._scaled[key] = pygame.transform.smoothscale(source, size)
        return self._scaled[key]

    # -- drawing --------------------------------------------------------------

    def render(self, game: 'GhostVolleyMode', screen: pygame.Surface) -> None:
        """Paint one frame of the game's current state."""
        world = game.world
        dpr = world.pixel_ratio

        # Scaled sprites are only valid for one pixel ratio
        if dpr != self._scaled_ratio:
            self._scaled.clear()
            self._scaled_ratio = dpr

        self._render_background(screen, world.width, world.height, dpr)
        self._render_bow(game, screen, dpr)
        self._render_arrows(game, screen, dpr)
        self._render_ghosts(game, screen, dpr)
        self._render_hud(game, screen)

        if game.state in (GameState.IDLE, GameState.GAME_OVER):
            self._render_overlay(screen)

    def _render_background(self, screen: pygame.Surface, w: int, h: int, dpr: float) -> None:
        screen.fill(BACKGROUND_COLOR)

        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        star = max(1, int(2 * dpr))
        for i in range(STAR_COUNT):
            x = (i * 97) % w
            y = ((i * 211) % h) * 0.55
            layer.fill((255, 255, 255, STAR_ALPHA), pygame.Rect(x, int(y), star, star))

        zone_top = int(h - PLAYER_ZONE_HEIGHT * dpr)
        layer.fill((*ACCENT_COLOR, 26), pygame.Rect(0, zone_top, w, h - zone_top))
        pygame.draw.line(layer, (255, 255, 255, 26), (0, zone_top), (w, zone_top),
                         max(1, int(2 * dpr)))
        screen.blit(layer, (0, 0))

    def _render_bow(self, game: 'GhostVolleyMode', screen: pygame.Surface, dpr: float) -> None:
        bow_w, bow_h = BOW_SIZE[0] * dpr, BOW_SIZE[1] * dpr
        bow = self.scaled('bow', bow_w, bow_h)
        player = game.player
        screen.blit(bow, bow.get_rect(center=(int(player.x), int(player.y))))

    def _render_arrows(self, game: 'GhostVolleyMode', screen: pygame.Surface, dpr: float) -> None:
        sprite = self.scaled('arrow', ARROW_SIZE[0] * dpr, ARROW_SIZE[1] * dpr)
        for arrow in game.arrows:
            if not arrow.alive:
                continue
            # pygame rotates counter-clockwise with y up
            angle = -math.degrees(arrow.heading)
            rotated = pygame.transform.rotate(sprite, angle)
            screen.blit(rotated, rotated.get_rect(center=(int(arrow.x), int(arrow.y))))

    def _render_ghosts(self, game: 'GhostVolleyMode', screen: pygame.Surface, dpr: float) -> None:
        for ghost in game.ghosts:
            if not ghost.alive:
                continue
            size = self._assets.size_for(ghost.tier) * dpr
            sprite = self.scaled('ghost', size, size)
            screen.blit(sprite, sprite.get_rect(center=(int(ghost.x), int(ghost.y))))

    def _render_hud(self, game: 'GhostVolleyMode', screen: pygame.Surface) -> None:
        font = self._get_font()

        score = font.render(f"Score: {self.score_text}", True, HUD_COLOR)
        screen.blit(score, (10, 10))

        wave = font.render(f"Wave: {self.wave_text}", True, HUD_COLOR)
        screen.blit(wave, wave.get_rect(topright=(screen.get_width() - 10, 10)))

        if game.state == GameState.PAUSED:
            font_large = self._get_font_large()
            text = font_large.render("PAUSED", True, HUD_COLOR)
            screen.blit(text, text.get_rect(center=screen.get_rect().center))

    def _render_overlay(self, screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        screen.blit(overlay, (0, 0))

        font_large = self._get_font_large()
        font = self._get_font()
        center_x, center_y = width // 2, height // 2

        title = font_large.render(self.title, True, HUD_COLOR)
        screen.blit(title, title.get_rect(center=(center_x, center_y - 60)))

        description = font.render(self.description, True, HUD_COLOR)
        screen.blit(description, description.get_rect(center=(center_x, center_y)))

        prompt = "Press SPACE to play again" if self.show_restart else "Press SPACE to start"
        button = font.render(prompt, True, ACCENT_COLOR)
        screen.blit(button, button.get_rect(center=(center_x, center_y + 60)))
