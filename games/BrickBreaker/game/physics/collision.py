"""Collision detection and response for BrickBreaker.

Handles ball-wall, ball-paddle and ball-brick collisions. All functions
mutate the entities in place and report what happened; scoring and sounds
are left to the game mode.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from cabinet.collision import bounce_circle_off_rect, first_hit
from cabinet.physics import below_floor, reflect_in_bounds

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick


def check_wall_collision(
    ball: 'Ball',
    screen_width: float,
    screen_height: float,
) -> Tuple[Tuple[str, ...], bool]:
    """Bounce the ball off the side walls and ceiling.

    The bottom edge is open: a ball whose top has passed it is lost.

    Args:
        ball: Ball to check
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels

    Returns:
        Tuple of (walls hit, True if ball fell below screen)
    """
    walls = reflect_in_bounds(ball, screen_width, screen_height, floor=False)
    fell_below = below_floor(ball, screen_height, fully=True)
    return walls, fell_below


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Bounce the ball up off the paddle.

    The ball only bounces while moving down, with its bottom inside the
    band [paddle top, paddle top + |vy|] and its centre strictly between the
    paddle's edges. The band is one step deep, so a ball can never be
    caught inside the paddle and bounce twice.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if the ball bounced
    """
    if ball.vy <= 0:
        return False

    if not (paddle.top <= ball.bottom <= paddle.top + abs(ball.vy)):
        return False

    if not (paddle.left < ball.x < paddle.right):
        return False

    ball.vy = -abs(ball.vy)
    return True


def check_brick_collision(
    ball: 'Ball',
    bricks: List['Brick'],
    prev_y: Optional[float] = None,
) -> Optional['Brick']:
    """Resolve at most one brick hit.

    Bricks are scanned in grid order and the first overlapping live brick
    is the only one resolved this step, even if the ball overlaps several.

    Args:
        ball: Ball to check
        bricks: Bricks in scan order
        prev_y: Previous ball centre y (defaults to y - vy)

    Returns:
        The brick that was hit and killed, or None
    """
    brick = first_hit(ball, bricks)
    if brick is None:
        return None

    bounce_circle_off_rect(ball, brick.bounds, prev_y)
    brick.kill()
    return brick
