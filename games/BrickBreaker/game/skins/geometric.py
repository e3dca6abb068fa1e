"""Geometric skin - flat shapes, the classic look."""

from typing import TYPE_CHECKING, Tuple

from .base import BrickBreakerSkin

if TYPE_CHECKING:
    from cabinet.render import Canvas
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BrickBreakerSkin):
    """Renders the game using simple geometric shapes.

    - Paddle: filled rectangle
    - Ball: filled circle
    - Bricks: filled rectangles in their row colour
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes"

    def __init__(
        self,
        paddle_color: Tuple[int, int, int] = (0, 204, 255),
        ball_color: Tuple[int, int, int] = (255, 255, 255),
    ):
        self.paddle_color = paddle_color
        self.ball_color = ball_color

    def render_paddle(self, paddle: 'Paddle', canvas: 'Canvas') -> None:
        canvas.rect(paddle.x, paddle.y, paddle.w, paddle.h, self.paddle_color)

    def render_ball(self, ball: 'Ball', canvas: 'Canvas') -> None:
        canvas.circle(ball.x, ball.y, ball.r, self.ball_color)

    def render_brick(self, brick: 'Brick', canvas: 'Canvas') -> None:
        canvas.rect(brick.x, brick.y, brick.w, brick.h, brick.color)


class OutlineSkin(GeometricSkin):
    """Geometric shapes with white outlines, so adjacent bricks stay distinct."""

    NAME = "outline"
    DESCRIPTION = "Flat shapes with outlines"

    OUTLINE_COLOR = (255, 255, 255)

    def render_paddle(self, paddle: 'Paddle', canvas: 'Canvas') -> None:
        super().render_paddle(paddle, canvas)
        canvas.rect(paddle.x, paddle.y, paddle.w, paddle.h, self.OUTLINE_COLOR, outline=2)

    def render_brick(self, brick: 'Brick', canvas: 'Canvas') -> None:
        super().render_brick(brick, canvas)
        canvas.rect(brick.x, brick.y, brick.w, brick.h, self.OUTLINE_COLOR, outline=1)
