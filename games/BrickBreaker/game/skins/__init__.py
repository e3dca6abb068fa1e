"""BrickBreaker skins for rendering."""

from .base import BrickBreakerSkin
from .geometric import GeometricSkin, OutlineSkin

__all__ = [
    'BrickBreakerSkin',
    'GeometricSkin',
    'OutlineSkin',
]
