"""
Tuning Loader - YAML balancing overrides with Pydantic validation.

Every tuning model carries defaults, so a file only needs the values it
changes. Games may ship named presets in a tuning/ directory next to their
game_mode.py; `--tuning` accepts either a preset name or a path.

Examples:
    >>> from models import FlappyTuning
    >>> tuning = load_tuning(FlappyTuning)                 # defaults
    >>> tuning = load_tuning(FlappyTuning, 'hard.yaml')    # overrides
"""

from pathlib import Path
from typing import List, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel

from cabinet.logging import get_logger

log = get_logger('tuning')

M = TypeVar('M', bound=BaseModel)


def resolve_tuning_path(name_or_path: Union[str, Path], presets_dir: Optional[Path] = None) -> Path:
    """Turn a preset name or a file path into a path.

    A value that names an existing file is used as-is. Otherwise it is looked
    up as <presets_dir>/<name>.yaml.

    Raises:
        FileNotFoundError: If neither exists
    """
    path = Path(name_or_path)
    if path.is_file():
        return path

    if presets_dir is not None:
        preset = Path(presets_dir) / f"{path.stem}.yaml"
        if preset.is_file():
            return preset

    raise FileNotFoundError(
        f"Tuning '{name_or_path}' not found. "
        f"Expected a YAML file or a preset in {presets_dir}"
    )


def load_tuning(
    model_cls: Type[M],
    path: Optional[Union[str, Path]] = None,
    presets_dir: Optional[Path] = None,
) -> M:
    """Load and validate a tuning model.

    Args:
        model_cls: Pydantic model to validate against
        path: YAML file or preset name. None returns the defaults.
        presets_dir: Where preset names are looked up

    Returns:
        Validated model instance

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the YAML syntax is malformed
        pydantic.ValidationError: If a value is out of range or unknown
    """
    if path is None:
        return model_cls()

    yaml_path = resolve_tuning_path(path, presets_dir)
    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f)

    # An empty file means "no overrides"
    if data is None:
        data = {}

    tuning = model_cls.model_validate(data)
    log.info("Loaded %s from %s", model_cls.__name__, yaml_path)
    return tuning


def list_presets(presets_dir: Optional[Path]) -> List[str]:
    """Preset names available in a directory, sorted."""
    if presets_dir is None or not Path(presets_dir).is_dir():
        return []
    return sorted(p.stem for p in Path(presets_dir).glob('*.yaml'))
