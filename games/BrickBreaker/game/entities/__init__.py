"""BrickBreaker game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, build_brick_grid

__all__ = [
    'Paddle',
    'Ball',
    'Brick',
    'build_brick_grid',
]
