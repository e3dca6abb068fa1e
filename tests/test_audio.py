"""
Tests for best-effort sound playback.

Run with: pytest tests/test_audio.py -v
"""

from unittest.mock import MagicMock, patch

import numpy as np
import pygame

from cabinet.audio import SAMPLE_RATE, TONES, SoundBoard, generate_tone


class TestGenerateTone:

    def test_shape_and_dtype(self):
        samples = generate_tone(440.0, 880.0, 0.1)
        assert samples.shape == (int(SAMPLE_RATE * 0.1), 2)
        assert samples.dtype == np.int16

    def test_fades_in_and_out(self):
        samples = generate_tone(440.0, 440.0, 0.1, volume=0.5)
        assert samples[0, 0] == 0
        assert abs(int(samples[-1, 0])) < 100
        assert np.abs(samples).max() <= int(32767 * 0.5)


class TestSoundBoard:

    def test_disabled_never_touches_mixer(self):
        with patch('cabinet.audio.pygame.mixer.init') as init:
            board = SoundBoard(enabled=False)
            board.play('hit')
        init.assert_not_called()

    def test_mixer_failure_disables_audio(self):
        with patch('cabinet.audio.pygame.mixer.init', side_effect=pygame.error("no device")):
            board = SoundBoard()
        assert board.enabled is False
        board.play('hit')

    def test_generated_tones_used_without_assets(self):
        with patch('cabinet.audio.pygame.mixer.init'), \
                patch('cabinet.audio.pygame.sndarray.make_sound') as make_sound:
            board = SoundBoard(clips=['hit', 'custom'])
        assert make_sound.call_count == 1
        assert board.sounds['custom'] is None
        board.sounds['hit'].set_volume.assert_called_once_with(0.5)

    def test_play_restarts_clip(self):
        board = SoundBoard(enabled=False)
        board.enabled = True
        sound = MagicMock()
        board.sounds = {'flap': sound}
        board.play('flap')
        sound.stop.assert_called_once()
        sound.play.assert_called_once()

    def test_play_failure_swallowed(self):
        board = SoundBoard(enabled=False)
        board.enabled = True
        sound = MagicMock()
        sound.play.side_effect = pygame.error("channel busy")
        board.sounds = {'flap': sound}
        board.play('flap')

    def test_unknown_clip_ignored(self):
        board = SoundBoard(enabled=False)
        board.enabled = True
        board.play('nothing')

    def test_every_game_clip_has_a_tone(self):
        for clip in ('hit', 'lose', 'win', 'game_over', 'flap', 'score',
                     'shoot', 'reload', 'pickup', 'hurt'):
            assert clip in TONES
