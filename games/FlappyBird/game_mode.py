"""FlappyBird - side-scrolling obstacle avoidance.

The bird falls under gravity and flaps upward on each press. Pipe pairs
scroll in from the right with a random gap; passing one scores, touching
one or the ground ends the session.
"""

from pathlib import Path
from typing import List, Optional

from cabinet.entities import prune_dead
from cabinet.game import ArcadeGame
from cabinet.input import Action
from cabinet.logging import get_logger
from cabinet.physics import integrate
from models import FlappyTuning

from .game.collision import check_bounds, check_pipe_collision, has_passed
from .game.entities import Bird, Pipe

log = get_logger('flappybird')


class FlappyBirdMode(ArcadeGame):
    """Flappy Bird game mode.

    Controls: Space, W or Up flaps. Holding does nothing; each press is one
    flap.
    """

    NAME = "Flappy Bird"
    DESCRIPTION = "Flap through the gaps between the pipes."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"
    SLUG = "flappybird"

    TUNING_MODEL = FlappyTuning
    TUNING_DIR = Path(__file__).parent / 'tuning'

    ARGUMENTS = [
        {
            'name': '--sprites',
            'action': 'store_true',
            'default': False,
            'help': 'Draw bird.png / pipe.png from the assets directory'
        },
    ]

    def __init__(self, sprites: bool = False, **kwargs):
        self.bird: Optional[Bird] = None
        self.pipes: List[Pipe] = []
        self._spawn_timer = 0
        self._sprites = sprites
        super().__init__(**kwargs)

    # =========================================================================
    # Session
    # =========================================================================

    def _starting_resource(self) -> int:
        # One crash ends the run
        return 1

    def _reset_entities(self) -> None:
        t = self.tuning
        self.bird = Bird(
            x=t.bird_x,
            y=(self.height - t.bird_height) / 2,
            w=t.bird_width,
            h=t.bird_height,
        )
        self.pipes = []
        self._spawn_timer = 0

    # =========================================================================
    # Simulation
    # =========================================================================

    def spawn_pipe(self, gap_y: Optional[float] = None) -> Pipe:
        """Add a pipe just off the right edge. A random gap if none given."""
        t = self.tuning
        if gap_y is None:
            low = t.pipe_margin
            high = max(low, self.height - t.pipe_margin - t.pipe_gap)
            gap_y = self.rng.uniform(low, high)
        pipe = Pipe(
            x=float(self.width),
            y=0.0,
            vx=-t.pipe_speed,
            w=t.pipe_width,
            h=float(self.height),
            gap_y=gap_y,
            gap=t.pipe_gap,
        )
        self.pipes.append(pipe)
        return pipe

    def _simulate(self) -> None:
        t = self.tuning

        if self.pressed(Action.JUMP):
            self.bird.flap(t.flap_velocity)
            self._play('flap')

        integrate(self.bird, t.gravity, t.max_fall_speed)
        if check_bounds(self.bird, self.height):
            self._crash("ground")
            return

        self._spawn_timer += 1
        if self._spawn_timer >= t.pipe_spawn_frames:
            self._spawn_timer = 0
            self.spawn_pipe()

        for pipe in self.pipes:
            integrate(pipe)
            if pipe.right < 0:
                pipe.kill()
                continue
            if check_pipe_collision(self.bird, pipe):
                self._crash("pipe")
                return
            if not pipe.scored and has_passed(self.bird, pipe):
                pipe.scored = True
                self.session.add_score(t.pipe_points)
                self._play('score')

        self.pipes = prune_dead(self.pipes)

    def _crash(self, into: str) -> None:
        log.debug("Bird hit the %s at frame %d", into, self.session.state.frames)
        self.session.deplete(1)
        self._play('game_over')

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, canvas) -> None:
        t = self.tuning
        canvas.clear(t.sky_color.as_tuple)

        for pipe in self.pipes:
            if not pipe.alive:
                continue
            for segment in pipe.segments():
                if self._sprites:
                    canvas.image('pipe.png', segment.left, segment.top,
                                 segment.width, segment.height, t.pipe_color.as_tuple)
                else:
                    canvas.rect(segment.left, segment.top, segment.width, segment.height,
                                t.pipe_color.as_tuple)

        if self.bird is not None:
            if self._sprites:
                canvas.image('bird.png', self.bird.x, self.bird.y, self.bird.w, self.bird.h,
                             t.bird_color.as_tuple)
            else:
                canvas.rect(self.bird.x, self.bird.y, self.bird.w, self.bird.h,
                            t.bird_color.as_tuple)

        self._render_hud(canvas)
