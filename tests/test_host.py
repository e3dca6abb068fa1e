"""
Tests for the pygame host: event routing, capability wiring and run().

Run with: pytest tests/test_host.py -v
"""

from unittest.mock import Mock, patch

import pygame
import pytest

from cabinet.config import DisplaySettings
from cabinet.errors import RenderSurfaceError
from cabinet.game import GameState
from cabinet.host import GameHost, open_surface
from cabinet.input import Action
from cabinet.scores import JsonHighScoreStore
from cabinet.session import SessionResult
from games.FlappyBird.game_mode import FlappyBirdMode


@pytest.fixture
def settings():
    return DisplaySettings(width=320, height=240, audio_enabled=False)


@pytest.fixture
def host(settings):
    return GameHost(settings)


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestCreateGame:

    def test_capabilities_injected(self, host, settings, tmp_path):
        settings.high_score_path = tmp_path / 'scores.json'
        game = host.create_game(FlappyBirdMode, pygame.Surface((320, 240)), seed=1)
        assert (game.width, game.height) == (320, 240)
        assert game.input is host.input
        assert isinstance(game.session._high_scores, JsonHighScoreStore)
        assert game._sound.enabled is False

    def test_no_high_score_path(self, host):
        game = host.create_game(FlappyBirdMode, pygame.Surface((320, 240)))
        assert game.session._high_scores is None


class TestHandleEvent:

    def test_quit_and_escape_stop(self, host):
        assert host.handle_event(pygame.event.Event(pygame.QUIT)) is False
        assert host.handle_event(keydown(pygame.K_ESCAPE)) is False

    def test_game_keys_reach_input(self, host):
        assert host.handle_event(keydown(pygame.K_SPACE)) is True
        assert host.input.is_held(Action.JUMP)

    def test_fullscreen_toggle(self, host):
        with patch.object(host, 'toggle_fullscreen') as toggle:
            host.handle_event(keydown(pygame.K_F11))
        toggle.assert_called_once()

    def test_enter_resets_only_after_end(self, host):
        game = host.create_game(FlappyBirdMode, pygame.Surface((320, 240)))
        game.start()
        game.session.add_score(4)

        host.handle_event(keydown(pygame.K_RETURN))
        assert game.get_score() == 4

        game.session.end(SessionResult.LOSS)
        host.handle_event(keydown(pygame.K_KP_ENTER))
        assert game.state == GameState.PLAYING
        assert game.get_score() == 0

    def test_enter_without_game(self, host):
        assert host.handle_event(keydown(pygame.K_RETURN)) is True


class TestDisplay:

    def test_fullscreen_failure_ignored(self, host):
        with patch('cabinet.host.pygame.display.toggle_fullscreen', side_effect=pygame.error("no")):
            assert host.toggle_fullscreen() is False

    def test_missing_display_is_fatal(self, settings):
        with patch('cabinet.host.pygame.display.set_mode', side_effect=pygame.error("no video")):
            with pytest.raises(RenderSurfaceError):
                open_surface(settings)


class ScriptedFrames:
    """Delivers a fixed number of frames, then stops."""

    def __init__(self, fps=60, on_event=None, frames=5):
        self._pending = None
        self._frames = frames
        self._now = 0.0

    def request_frame(self, callback):
        self._pending = callback

    def cancel_frame(self):
        self._pending = None

    def now_ms(self):
        return self._now

    def run(self):
        for _ in range(self._frames):
            callback, self._pending = self._pending, None
            if callback is None:
                return
            self._now += 16.0
            callback()


class TestRun:

    def test_runs_game_until_frames_stop(self, host):
        games = []

        def factory(**kwargs):
            game = FlappyBirdMode(**kwargs)
            games.append(game)
            return game
        factory.get_slug = FlappyBirdMode.get_slug

        with patch('cabinet.host.PygameFrameSource', ScriptedFrames):
            assert host.run(factory, seed=3) == 0

        game = games[0]
        assert game.session.state.frames == 5
        assert game.state == GameState.PLAYING

    def test_display_error_propagates(self, host):
        with patch('cabinet.host.open_surface', side_effect=RenderSurfaceError("no display")):
            with pytest.raises(RenderSurfaceError):
                host.run(Mock())
