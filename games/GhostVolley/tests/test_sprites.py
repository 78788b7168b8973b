"""Tests for the procedurally drawn Ghost Volley sprites."""

import pygame
import pytest

from games.GhostVolley.config import DEFAULT_GHOST_SIZE, GHOST_SIZES
from games.GhostVolley.sprites import CANVAS, GhostAssets, ghost_size, load_assets


@pytest.fixture(scope="module")
def assets():
    pygame.init()
    pygame.display.set_mode((1, 1))
    yield load_assets()
    pygame.quit()


class TestGhostSize:
    """Tier size lookup."""

    def test_known_tiers(self):
        assert [ghost_size(GHOST_SIZES, t) for t in range(4)] == [78, 56, 40, 30]

    def test_missing_tier_uses_default(self):
        assert ghost_size([78, 56], 2) == DEFAULT_GHOST_SIZE
        assert ghost_size(GHOST_SIZES, -1) == DEFAULT_GHOST_SIZE


class TestLoadAssets:
    """load_assets() output."""

    def test_sprite_canvas_sizes(self, assets):
        assert assets.ghost.get_size() == (CANVAS, CANVAS)
        assert assets.bow.get_size() == (CANVAS, CANVAS)
        assert assets.arrow.get_size() == (CANVAS, CANVAS)
        assert assets.icon.get_size() == (CANVAS * 2, CANVAS * 2)

    def test_sprites_are_transparent(self, assets):
        assert assets.ghost.get_flags() & pygame.SRCALPHA
        assert assets.ghost.get_at((0, 0)).a == 0

    def test_ghost_body_is_drawn(self, assets):
        assert assets.ghost.get_at((128, 150)).a == 255

    def test_arrow_points_right(self, assets):
        # Tip is red, at the right-hand end of the shaft
        tip = assets.arrow.get_at((185, 128))
        assert tip.r > 200 and tip.g < 120

    def test_ghost_sizes_largest_first(self, assets):
        assert assets.ghost_sizes == [78, 56, 40, 30]
        assert assets.size_for(0) == 78
        assert assets.size_for(9) == DEFAULT_GHOST_SIZE

    def test_sizes_list_is_independent(self, assets):
        other = GhostAssets(ghost=assets.ghost, bow=assets.bow,
                            arrow=assets.arrow, icon=assets.icon)
        other.ghost_sizes.append(10)
        assert GHOST_SIZES == [78, 56, 40, 30]
