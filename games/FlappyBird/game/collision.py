"""Collision rules for FlappyBird.

The ceiling clamps, the floor is terminal and pipes are solid only outside
their gap.
"""

from typing import TYPE_CHECKING

from cabinet.collision import rects_overlap
from cabinet.physics import TOP, below_floor, clamp_to_bounds

if TYPE_CHECKING:
    from .entities import Bird, Pipe


def check_bounds(bird: 'Bird', screen_height: float) -> bool:
    """Keep the bird under the ceiling and test the floor.

    A bird pinned at the ceiling loses its upward velocity. A bird touching
    the floor while not rising has crashed.

    Returns:
        True if the bird hit the floor
    """
    hits = clamp_to_bounds(bird, None, screen_height, zero_velocity=False)
    if TOP in hits:
        bird.vy = max(0.0, bird.vy)
    return below_floor(bird, screen_height, fully=False) and bird.vy >= 0


def check_pipe_collision(bird: 'Bird', pipe: 'Pipe') -> bool:
    """True if the bird overlaps either solid segment of the pipe."""
    bounds = bird.bounds
    return any(rects_overlap(bounds, segment) for segment in pipe.segments())


def has_passed(bird: 'Bird', pipe: 'Pipe') -> bool:
    """True once the pipe's trailing edge is behind the bird."""
    return pipe.right < bird.left
