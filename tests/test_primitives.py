"""
Model Tests

Tests for the shared pydantic models: points, the world and run summaries.

Run with: pytest tests/test_primitives.py -v
"""

import pytest
from pydantic import ValidationError

from models import Point2D, RunSummary, World


class TestPoint2D:

    def test_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_length(self):
        assert Point2D(x=3.0, y=4.0).length == 5.0

    def test_direction_to(self):
        direction = Point2D(x=10.0, y=10.0).direction_to(Point2D(x=10.0, y=0.0))
        assert direction.x == pytest.approx(0.0)
        assert direction.y == pytest.approx(-1.0)

    def test_direction_to_same_point(self):
        here = Point2D(x=4.0, y=4.0)
        assert here.direction_to(here) == Point2D(x=1.0, y=0.0)


class TestWorld:

    def test_defaults(self):
        world = World()
        assert world.size == (1, 1)
        assert world.pixel_ratio == 1.0

    def test_rejects_non_positive(self):
        with pytest.raises(ValidationError):
            World(width=0, height=10)

    @pytest.mark.parametrize("vw,vh,dpr,expected", [
        (800, 600, 1.0, (800, 600, 1.0)),
        (640.5, 360, 2.0, (1281, 720, 2.0)),
        (1024, 768, 1.5, (1536, 1152, 1.5)),
        (100, 100, 3.0, (200, 200, 2.0)),
        (100, 50, 0, (100, 50, 1.0)),
        (100, 50, -2, (100, 50, 1.0)),
        (0, 0, 1.0, (1, 1, 1.0)),
        (1279 / 1.1, 720 / 1.1, 1.1, (1279, 720, 1.1)),
        (1279.7, 10.2, 1.0, (1279, 10, 1.0)),
    ])
    def test_fit(self, vw, vh, dpr, expected):
        world = World.fit(vw, vh, dpr)
        assert (world.width, world.height, world.pixel_ratio) == expected

    def test_clamp_x(self):
        world = World(width=400, height=300)
        assert world.clamp_x(5.0, 20) == 20
        assert world.clamp_x(395.0, 20) == 380
        assert world.clamp_x(200.0, 20) == 200.0

    def test_contains_is_strict(self):
        world = World(width=400, height=300)
        assert world.contains(0.5, 299.5)
        assert not world.contains(0.0, 100.0)
        assert world.contains(-49.0, -79.0, 50, 80)
        assert not world.contains(450.0, 100.0, 50, 80)


class TestRunSummary:

    def test_accuracy(self):
        assert RunSummary(score=30, wave=2, shots=4, hits=1).accuracy == 0.25

    def test_accuracy_without_shots(self):
        assert RunSummary().accuracy == 0.0

    def test_dump_includes_accuracy(self):
        dumped = RunSummary(shots=2, hits=2).model_dump()
        assert dumped == {'score': 0, 'wave': 1, 'shots': 2, 'hits': 2, 'accuracy': 1.0}

    def test_wave_starts_at_one(self):
        with pytest.raises(ValidationError):
            RunSummary(wave=0)
