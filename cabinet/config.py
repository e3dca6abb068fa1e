"""
Cabinet - Configuration loader.

Loads settings from a .env file (current directory) and CABINET_* environment
variables, with sensible defaults. Command-line flags override these in the
launcher.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from models import Resolution

# Load .env from the working directory without overriding the real environment
load_dotenv(Path.cwd() / '.env')


def get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def get_str(key: str, default: Optional[str]) -> Optional[str]:
    """Get string from environment, treating empty values as unset."""
    val = os.getenv(key)
    return val if val else default


def _default_data_dir() -> Path:
    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(xdg_data) / 'cabinet'


@dataclass
class DisplaySettings:
    """Window, frame rate and capability settings for the host."""

    width: int = 800
    height: int = 600
    fps: int = 60
    fullscreen: bool = False
    audio_enabled: bool = True
    high_score_path: Optional[Path] = None   # None = scores are not persisted
    assets_dir: Optional[Path] = None        # None = primitives only

    @property
    def resolution(self) -> Resolution:
        return Resolution(width=self.width, height=self.height)


def load_display_settings() -> DisplaySettings:
    """Build DisplaySettings from CABINET_* environment variables.

    Variables:
        CABINET_WIDTH, CABINET_HEIGHT, CABINET_FPS
        CABINET_FULLSCREEN, CABINET_AUDIO
        CABINET_HIGHSCORES  (path to JSON file, 'off' disables persistence)
        CABINET_ASSETS_DIR
    """
    scores = get_str('CABINET_HIGHSCORES', str(_default_data_dir() / 'highscores.json'))
    assets = get_str('CABINET_ASSETS_DIR', None)

    return DisplaySettings(
        width=get_int('CABINET_WIDTH', 800),
        height=get_int('CABINET_HEIGHT', 600),
        fps=get_int('CABINET_FPS', 60),
        fullscreen=get_bool('CABINET_FULLSCREEN', False),
        audio_enabled=get_bool('CABINET_AUDIO', True),
        high_score_path=None if scores.lower() == 'off' else Path(scores).expanduser(),
        assets_dir=Path(assets).expanduser() if assets else None,
    )
