"""
Pydantic data models shared by the cabinet framework and the games.

- Primitives: Point2D/Vector2D, Resolution, Color, Rectangle
- Scores: HighScoreTable (persisted), SessionSummary (structured log)
- Tuning: per-game balancing data with defaults

Usage:
    >>> from models import Vector2D, HighScoreTable
    >>> from models.tuning import BrickBreakerTuning
"""

from .primitives import (
    Point2D,
    Vector2D,
    Resolution,
    Color,
    Rectangle,
)

from .scores import (
    HighScoreTable,
    SessionSummary,
)

from .tuning import (
    BrickBreakerTuning,
    FlappyTuning,
    PlatformShooterTuning,
    WeaponTuning,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Resolution',
    'Color',
    'Rectangle',
    'HighScoreTable',
    'SessionSummary',
    'BrickBreakerTuning',
    'FlappyTuning',
    'PlatformShooterTuning',
    'WeaponTuning',
]
