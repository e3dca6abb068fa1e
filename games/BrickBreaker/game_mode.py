"""BrickBreaker - classic brick-breaking game.

A paddle at the bottom, a ball that bounces off walls, paddle and bricks,
and a centred grid of bricks. Each brick dies on the first hit. The ball
falling past the bottom edge costs a life; clearing every brick wins.
"""

from pathlib import Path
from typing import Dict, List, Optional

from cabinet.entities import prune_dead
from cabinet.game import ArcadeGame
from cabinet.input import Action
from cabinet.logging import get_logger
from cabinet.physics import clamp_to_bounds, integrate
from cabinet.session import SessionResult
from models import BrickBreakerTuning

from .game.entities import Ball, Brick, Paddle, build_brick_grid
from .game.physics import check_brick_collision, check_paddle_collision, check_wall_collision
from .game.skins import BrickBreakerSkin, GeometricSkin, OutlineSkin

log = get_logger('brickbreaker')


class BrickBreakerMode(ArcadeGame):
    """Brick Breaker game mode.

    Controls: Left/Right (or A/D) move the paddle.
    """

    # Game metadata
    NAME = "Brick Breaker"
    DESCRIPTION = "Bounce the ball off the paddle and clear the bricks."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"
    SLUG = "brickbreaker"

    TUNING_MODEL = BrickBreakerTuning
    TUNING_DIR = Path(__file__).parent / 'tuning'

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric', 'outline'],
            'help': 'Visual skin'
        },
        {
            'name': '--lives',
            'type': int,
            'default': None,
            'help': 'Starting lives (default from tuning)'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
        'outline': OutlineSkin,
    }

    def __init__(self, skin: str = 'geometric', lives: Optional[int] = None, **kwargs):
        """Initialize BrickBreaker game.

        Args:
            skin: Visual skin to use
            lives: Starting lives, overriding the tuning value
            **kwargs: Base game args (width, height, capabilities, tuning)
        """
        # Read by _starting_resource() during super().__init__()
        self._lives_override = lives

        # Game entities (created on start/reset)
        self.paddle: Optional[Paddle] = None
        self.ball: Optional[Ball] = None
        self.bricks: List[Brick] = []

        super().__init__(**kwargs)

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BrickBreakerSkin = skin_class(
            paddle_color=self.tuning.paddle_color.as_tuple,
            ball_color=self.tuning.ball_color.as_tuple,
        )

    @property
    def lives(self) -> int:
        return self.session.state.resource

    # =========================================================================
    # Session
    # =========================================================================

    def _starting_resource(self) -> int:
        if self._lives_override is not None:
            return self._lives_override
        return self.tuning.lives

    def _reset_entities(self) -> None:
        t = self.tuning
        self.paddle = Paddle(
            x=0.0,
            y=self.height - t.paddle_offset_bottom,
            w=t.paddle_width,
            h=t.paddle_height,
            speed=t.paddle_speed,
        )
        self.ball = Ball(x=0.0, y=0.0, r=t.ball_radius)
        self.bricks = build_brick_grid(t, self.width)
        self._serve()

    def _serve(self) -> None:
        """Centre the paddle and launch the ball upward, randomly left or right."""
        self.paddle.x = (self.width - self.paddle.w) / 2
        self.paddle.vx = 0.0
        self.ball.serve(
            self.width / 2,
            self.height - self.tuning.ball_offset_bottom,
            self.tuning.ball_speed,
            self.rng.choice((-1, 1)),
        )

    # =========================================================================
    # Simulation
    # =========================================================================

    def _simulate(self) -> None:
        # Paddle
        direction = int(self.held(Action.MOVE_RIGHT)) - int(self.held(Action.MOVE_LEFT))
        self.paddle.steer(direction)
        integrate(self.paddle)
        clamp_to_bounds(self.paddle, self.width, None)

        # Ball
        integrate(self.ball)
        _, fell_below = check_wall_collision(self.ball, self.width, self.height)
        check_paddle_collision(self.ball, self.paddle)

        brick = check_brick_collision(self.ball, self.bricks)
        if brick is not None:
            self.session.add_score(brick.points)
            self._play('hit')
        self.bricks = prune_dead(self.bricks)

        if fell_below:
            self._lose_life()
        elif not self.bricks:
            log.info("All bricks cleared, score %d", self.session.state.score)
            self._play('win')
            self.session.end(SessionResult.WIN)

    def _lose_life(self) -> None:
        remaining = self.session.deplete(1)
        if remaining > 0:
            self._play('lose')
            self._serve()
        else:
            # step() ends the session once the resource is exhausted
            self.ball.kill()
            self._play('game_over')

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, canvas) -> None:
        """Render the game.

        Args:
            canvas: Canvas to draw on
        """
        self._skin.render_background(canvas)

        for brick in self.bricks:
            if brick.alive:
                self._skin.render_brick(brick, canvas)

        if self.paddle is not None:
            self._skin.render_paddle(self.paddle, canvas)

        if self.ball is not None and self.ball.alive:
            self._skin.render_ball(self.ball, canvas)

        self._render_hud(canvas, f"Lives: {self.lives}")
