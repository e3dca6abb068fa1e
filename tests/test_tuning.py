"""
Tests for YAML tuning loading and the tuning models.

Run with: pytest tests/test_tuning.py -v
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from cabinet.tuning import list_presets, load_tuning, resolve_tuning_path
from models import BrickBreakerTuning, Color, FlappyTuning, PlatformShooterTuning

GAMES = Path(__file__).parent.parent / 'games'


class TestLoadTuning:

    def test_none_gives_defaults(self):
        assert load_tuning(FlappyTuning) == FlappyTuning()

    def test_partial_override(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text("gravity: 0.8\npipe_gap: 120\n")
        tuning = load_tuning(FlappyTuning, path)
        assert tuning.gravity == 0.8
        assert tuning.pipe_gap == 120
        assert tuning.flap_velocity == FlappyTuning().flap_velocity

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_tuning(BrickBreakerTuning, path) == BrickBreakerTuning()

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / 'typo.yaml'
        path.write_text("gravty: 0.8\n")
        with pytest.raises(ValidationError):
            load_tuning(FlappyTuning, path)

    def test_out_of_range_rejected(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("lives: 0\n")
        with pytest.raises(ValidationError):
            load_tuning(BrickBreakerTuning, path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("gravity: [0.8\n")
        with pytest.raises(yaml.YAMLError):
            load_tuning(FlappyTuning, path)

    def test_tuning_is_frozen(self):
        with pytest.raises(ValidationError):
            FlappyTuning().gravity = 2.0


class TestPresets:

    def test_resolve_by_name(self):
        presets = GAMES / 'FlappyBird' / 'tuning'
        assert resolve_tuning_path('hard', presets) == presets / 'hard.yaml'

    def test_missing_preset(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            resolve_tuning_path('nope', tmp_path)

    def test_list_presets(self):
        assert list_presets(GAMES / 'BrickBreaker' / 'tuning') == ['compact', 'practice']
        assert list_presets(None) == []

    @pytest.mark.parametrize("game, model", [
        ('BrickBreaker', BrickBreakerTuning),
        ('FlappyBird', FlappyTuning),
        ('PlatformShooter', PlatformShooterTuning),
    ])
    def test_bundled_presets_validate(self, game, model):
        presets = GAMES / game / 'tuning'
        for name in list_presets(presets):
            load_tuning(model, name, presets)


class TestColor:

    def test_list_or_mapping(self):
        assert Color.model_validate([1, 2, 3]) == Color(r=1, g=2, b=3)
        assert Color(r=1, g=2, b=3).as_tuple == (1, 2, 3)

    def test_range(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
