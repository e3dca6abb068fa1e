"""Base class for BrickBreaker game skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet.render import Canvas
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class BrickBreakerSkin(ABC):
    """Base class for game skins.

    The game mode calls render_* for every live entity once per frame.
    Skins must not change entity state.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    BACKGROUND_COLOR = (0, 0, 0)

    def render_background(self, canvas: 'Canvas') -> None:
        canvas.clear(self.BACKGROUND_COLOR)

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', canvas: 'Canvas') -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', canvas: 'Canvas') -> None:
        """Render the ball."""
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', canvas: 'Canvas') -> None:
        """Render one live brick."""
        pass
