"""
Tests for BrickBreakerMode.

Drives the game step by step through the public ArcadeGame interface:
input state in, entity and session state out.
"""

from unittest.mock import Mock

import pygame
import pytest

from cabinet.game import GameState
from cabinet.input import Action
from cabinet.render import Canvas
from cabinet.scores import MemoryHighScoreStore
from cabinet.session import SessionResult
from games.BrickBreaker.game.entities import Brick
from games.BrickBreaker.game_mode import BrickBreakerMode


@pytest.fixture
def sound():
    return Mock()


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def game(sound, store):
    game = BrickBreakerMode(width=800, height=600, seed=7, sound=sound, high_scores=store)
    game.start()
    return game


def park_ball(game, x, y, vx, vy):
    game.ball.x, game.ball.y, game.ball.vx, game.ball.vy = x, y, vx, vy


class TestSetup:
    """Session start and entity layout."""

    def test_idle_until_started(self):
        """A new game does not simulate until start()."""
        game = BrickBreakerMode(width=800, height=600)

        assert game.state == GameState.IDLE
        game.step()
        assert game.session.state.frames == 0
        assert game.paddle is None

    def test_start_lays_out_entities(self, game):
        """Start builds 5x12 bricks, centres the paddle and serves upward."""
        assert game.state == GameState.PLAYING
        assert len(game.bricks) == 60
        assert game.lives == 3

        assert game.paddle.x == 350.0
        assert game.paddle.y == 570.0
        assert (game.ball.x, game.ball.y) == (400.0, 560.0)
        assert game.ball.vy == -3.0
        assert abs(game.ball.vx) == 3.0

    def test_grid_is_centred(self, game):
        """Grid is 12 * 65 - 5 = 775 wide, so it starts 12.5 px in."""
        first, last = game.bricks[0], game.bricks[11]
        assert first.x == pytest.approx(12.5)
        assert last.right == pytest.approx(787.5)
        assert first.y == 30.0
        assert game.bricks[12].y == 50.0

    def test_lives_argument_overrides_tuning(self):
        """--lives takes precedence over the tuning value."""
        game = BrickBreakerMode(width=800, height=600, lives=1)
        game.start()
        assert game.lives == 1

    def test_tuning_preset(self):
        """A bundled preset name loads from the tuning directory."""
        game = BrickBreakerMode(width=800, height=600, tuning='practice')
        game.start()
        assert game.lives == 5
        assert game.paddle.w == 160.0


class TestPaddle:
    """Paddle movement."""

    def test_moves_while_held(self, game):
        """Holding left moves the paddle one speed step per frame."""
        game.input.press(Action.MOVE_LEFT)
        game.step()
        assert game.paddle.x == 345.0

    def test_clamped_to_surface(self, game):
        """The paddle never leaves [0, W - w]."""
        game.paddle.x = 2.0
        game.input.press(Action.MOVE_LEFT)
        game.step()
        assert game.paddle.x == 0.0

        game.input.release(Action.MOVE_LEFT)
        game.input.press(Action.MOVE_RIGHT)
        game.paddle.x = 698.0
        game.step()
        assert game.paddle.x == 700.0


class TestRules:
    """Scoring, lives and the end of the session."""

    def test_brick_hit_scores_and_plays_hit(self, game, sound):
        """One brick hit: +10, brick removed, ball turned around."""
        target = Brick(x=40.0, y=90.0, w=60.0, h=15.0)
        spare = Brick(x=700.0, y=30.0, w=60.0, h=15.0)
        game.bricks = [target, spare]
        park_ball(game, 70.0, 111.0, 0.0, -3.0)

        game.step()

        assert game.session.state.score == 10
        assert game.bricks == [spare]
        assert game.ball.vy == 3.0
        sound.play.assert_any_call('hit')

    def test_losing_a_life_reserves(self, game, sound):
        """A ball past the bottom costs one life and is served again."""
        park_ball(game, 400.0, 606.0, 0.0, 3.0)

        game.step()

        assert game.lives == 2
        assert game.state == GameState.PLAYING
        assert (game.ball.x, game.ball.y) == (400.0, 560.0)
        sound.play.assert_any_call('lose')

    def test_last_life_ends_in_loss(self, sound):
        """The last lost life ends the session with a loss."""
        game = BrickBreakerMode(width=800, height=600, lives=1, sound=sound)
        game.start()
        park_ball(game, 400.0, 606.0, 0.0, 3.0)

        game.step()

        assert game.lives == 0
        assert game.state == GameState.GAME_OVER
        assert game.session.state.result == SessionResult.LOSS
        sound.play.assert_any_call('game_over')

    def test_clearing_bricks_wins(self, game, store):
        """Killing the last brick ends the session with a win."""
        game.bricks = [Brick(x=40.0, y=90.0, w=60.0, h=15.0)]
        park_ball(game, 70.0, 111.0, 0.0, -3.0)

        game.step()

        assert game.state == GameState.WON
        assert game.session.state.high_score == 10
        assert store.writes == 1

    def test_ended_session_is_frozen(self, game):
        """No simulation happens after the session ends."""
        game.bricks = [Brick(x=40.0, y=90.0, w=60.0, h=15.0)]
        park_ball(game, 70.0, 111.0, 0.0, -3.0)
        game.step()
        ball_y = game.ball.y

        game.step()

        assert game.ball.y == ball_y
        assert game.state == GameState.WON

    def test_reset_restores_everything(self, game):
        """Reset after a win starts a fresh session."""
        game.bricks = [Brick(x=40.0, y=90.0, w=60.0, h=15.0)]
        park_ball(game, 70.0, 111.0, 0.0, -3.0)
        game.step()

        game.reset()

        assert game.state == GameState.PLAYING
        assert game.session.state.score == 0
        assert game.session.state.high_score == 10
        assert game.lives == 3
        assert len(game.bricks) == 60


class TestRender:
    """Render step smoke tests."""

    @pytest.fixture
    def canvas(self):
        pygame.font.init()
        yield Canvas(pygame.Surface((800, 600)))
        pygame.font.quit()

    def test_render_before_start(self, canvas):
        """Rendering an idle game draws only the HUD."""
        BrickBreakerMode(width=800, height=600).render(canvas)

    def test_render_does_not_mutate(self, game, canvas):
        """Rendering leaves entity state untouched."""
        before = (game.ball.x, game.ball.y, game.paddle.x, len(game.bricks))
        game.render(canvas)
        assert (game.ball.x, game.ball.y, game.paddle.x, len(game.bricks)) == before

    def test_render_end_overlay(self, game, canvas):
        """The end screen renders after a loss."""
        game.session.deplete(3)
        game.step()
        assert game.state == GameState.GAME_OVER
        game.render(canvas)
