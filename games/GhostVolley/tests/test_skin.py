"""Tests for the Ghost Volley skin."""

import pygame
import pytest

from games.GhostVolley.config import BACKGROUND_COLOR
from games.GhostVolley.arrow import Arrow
from games.GhostVolley.game_mode import GhostVolleyMode
from games.GhostVolley.ghost import Ghost
from games.GhostVolley.skin import IDLE_TITLE, GhostVolleySkin
from games.GhostVolley.sprites import load_assets


@pytest.fixture(scope="module")
def assets():
    pygame.init()
    pygame.display.set_mode((1, 1))
    yield load_assets()
    pygame.quit()


@pytest.fixture
def skin(assets):
    return GhostVolleySkin(assets)


@pytest.fixture
def skinned(assets, skin, clock, listener):
    game = GhostVolleyMode(width=320, height=240, assets=assets, seed=5,
                           clock=clock, listener=listener, skin=skin)
    screen = pygame.Surface(game.world.size)
    return game, screen


class TestListenerHooks:
    """HUD text is driven by notifications."""

    def test_initial_text(self, skin):
        assert skin.score_text == "0"
        assert skin.wave_text == "1"
        assert skin.title == IDLE_TITLE
        assert skin.show_restart is False

    def test_score_and_wave_updates(self, skinned, skin):
        game, _ = skinned
        game.start_new()
        ghost = game.ghosts[0]
        game.split_ghost(ghost)

        assert skin.score_text == "10"
        assert skin.wave_text == "1"

    def test_game_over_sets_overlay_text(self, skin):
        skin.on_game_over("Game Over", "Score: 90")
        assert skin.title == "Game Over"
        assert skin.description == "Score: 90"
        assert skin.show_restart is True


class TestRender:
    """Rendering each state onto an off-screen surface."""

    def test_render_idle(self, skinned):
        game, screen = skinned
        game.render(screen)
        # Corner is background dimmed by the idle overlay
        corner = screen.get_at((0, screen.get_height() // 3))
        assert corner.r <= BACKGROUND_COLOR[0]

    def test_render_ghost(self, skinned):
        game, screen = skinned
        game.start_new()
        game._ghosts[:] = [Ghost(x=100.0, y=60.0, tier=0, speed=0.0, drift=0.0)]

        game.render(screen)

        body = screen.get_at((100, 60))
        assert body.r > 200 and body.g > 200
        assert tuple(body)[:3] != BACKGROUND_COLOR

    def test_render_arrow(self, skinned):
        game, screen = skinned
        game.start_new()
        game._ghosts.clear()
        game.render(screen)
        empty = screen.copy()

        game._arrows.append(Arrow(x=260.0, y=60.0, vx=900.0, vy=0.0))
        game.render(screen)

        def blue(surface):
            return sum(surface.get_at((x, y)).b
                       for x in range(235, 286) for y in range(54, 67))

        assert blue(screen) > blue(empty)

    def test_render_paused_draws_banner(self, skinned):
        game, screen = skinned
        game.start_new()
        game.render(screen)
        playing = screen.copy()

        game.toggle_pause()
        game.render(screen)

        center_y = screen.get_height() // 2
        changed = [
            (x, y)
            for x in range(60, 260)
            for y in range(center_y - 10, center_y + 10)
            if screen.get_at((x, y)) != playing.get_at((x, y))
        ]
        assert changed

    def test_render_game_over(self, skinned, skin):
        game, screen = skinned
        game.start_new()
        player = game.player
        game._ghosts.append(Ghost(x=player.x, y=player.y, tier=0, speed=0.0, drift=0.0))
        game.step(0.0)

        game.render(screen)
        assert skin.title == "Game Over"

    def test_scaled_cache(self, skin):
        first = skin.scaled('ghost', 78, 78)
        assert skin.scaled('ghost', 78.4, 78.9) is first
        assert first.get_size() == (78, 78)
        assert skin.scaled('ghost', 0, 0).get_size() == (1, 1)

    def test_scaled_cache_dropped_on_pixel_ratio_change(self, skinned, skin):
        game, screen = skinned
        game.render(screen)
        assert ('bow', 86, 140) in skin._scaled

        game.resize(160, 120, 2.0)
        game.render(screen)

        assert ('bow', 86, 140) not in skin._scaled
        assert ('bow', 172, 280) in skin._scaled

    def test_render_creates_default_skin(self, assets, clock):
        game = GhostVolleyMode(width=200, height=150, assets=assets, clock=clock)
        screen = pygame.Surface(game.world.size)
        game.render(screen)

        default_skin = game._skin
        assert isinstance(default_skin, GhostVolleySkin)
        assert default_skin in game._listeners

        game.start_new()
        game.split_ghost(game.ghosts[0])
        assert default_skin.score_text == "10"
        game.render(screen)
        assert game._skin is default_skin
