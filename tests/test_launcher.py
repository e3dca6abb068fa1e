"""
Tests for the play.py launcher.

Run with: pytest tests/test_launcher.py -v
"""

import argparse
from unittest.mock import patch

import pytest

import play
from cabinet.errors import RenderSurfaceError
from games.BrickBreaker.game_mode import BrickBreakerMode


class TestParsing:

    def test_parse_resolution(self):
        assert play.parse_resolution('640x480') == (640, 480)
        with pytest.raises(argparse.ArgumentTypeError):
            play.parse_resolution('wide')

    def test_game_arguments_added(self):
        parser = play.build_parser(['brickbreaker'], 'brickbreaker')
        args = parser.parse_args(['brickbreaker', '--skin', 'outline', '--lives', '4'])
        assert args.skin == 'outline'
        assert args.lives == 4

    def test_store_true_game_argument(self):
        parser = play.build_parser(['platformshooter'], 'platformshooter')
        assert parser.parse_args(['platformshooter', '--no-enemies']).no_enemies is True


class TestMain:

    def test_list(self, capsys):
        assert play.main(['--list']) == 0
        out = capsys.readouterr().out
        assert 'flappybird' in out
        assert 'Tuning presets: hard' in out

    def test_no_game(self, capsys):
        assert play.main([]) == 1

    def test_runs_host_with_game_options(self, monkeypatch):
        monkeypatch.setenv('CABINET_HIGHSCORES', 'off')
        with patch('play.GameHost') as host_cls:
            host_cls.return_value.run.return_value = 0
            assert play.main(['brickbreaker', '--lives', '2', '--no-audio', '-r', '640x480']) == 0

        settings = host_cls.call_args[0][0]
        assert (settings.width, settings.height) == (640, 480)
        assert settings.audio_enabled is False

        factory, = host_cls.return_value.run.call_args[0]
        kwargs = host_cls.return_value.run.call_args[1]
        assert factory is BrickBreakerMode
        assert kwargs == {'skin': 'geometric', 'lives': 2}

    def test_display_failure_exit_code(self):
        with patch('play.GameHost') as host_cls:
            host_cls.return_value.run.side_effect = RenderSurfaceError("no display")
            assert play.main(['flappybird']) == 1
