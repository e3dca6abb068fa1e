"""
Tests for the shared entity model.

Run with: pytest tests/test_entities.py -v
"""

from dataclasses import dataclass
from unittest.mock import Mock

from cabinet.entities import (
    Box, Collidable, Disc, Drawable, Updatable, draw_all, prune_dead, update_all,
)


@dataclass
class Blinker(Box):
    """Counts its updates and draws one rect."""
    updates: int = 0

    def update(self) -> None:
        self.updates += 1

    def draw(self, canvas) -> None:
        canvas.rect(self.x, self.y, self.w, self.h, (255, 255, 255))


class TestShapes:

    def test_box_edges(self):
        box = Box(x=10.0, y=20.0, w=30.0, h=40.0)
        assert (box.left, box.top, box.right, box.bottom) == (10.0, 20.0, 40.0, 60.0)

    def test_disc_bounds_are_2r_square(self):
        disc = Disc(x=50.0, y=50.0, r=6.0)
        assert tuple(disc.bounds) == (44.0, 44.0, 56.0, 56.0)

    def test_shapes_are_collidable(self):
        assert isinstance(Box(x=0.0, y=0.0), Collidable)
        assert isinstance(Disc(x=0.0, y=0.0), Collidable)


class TestCapabilities:

    def test_protocols_match_structurally(self):
        blinker = Blinker(x=0.0, y=0.0)
        assert isinstance(blinker, Updatable)
        assert isinstance(blinker, Drawable)
        assert not isinstance(Box(x=0.0, y=0.0), Updatable)

    def test_update_all_skips_dead(self):
        live, dead = Blinker(x=0.0, y=0.0), Blinker(x=0.0, y=0.0)
        dead.kill()
        update_all([live, dead])
        assert (live.updates, dead.updates) == (1, 0)

    def test_draw_all_skips_dead(self):
        live, dead = Blinker(x=1.0, y=0.0), Blinker(x=2.0, y=0.0)
        dead.kill()
        canvas = Mock()
        draw_all([live, dead], canvas)
        canvas.rect.assert_called_once_with(1.0, 0.0, 0.0, 0.0, (255, 255, 255))

    def test_prune_dead_keeps_order(self):
        a, b, c = Blinker(x=1.0, y=0.0), Blinker(x=2.0, y=0.0), Blinker(x=3.0, y=0.0)
        b.kill()
        assert prune_dead([a, b, c]) == [a, c]
