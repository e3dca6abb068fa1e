"""Brick entity and the default brick grid."""

from dataclasses import dataclass
from typing import List, Tuple

from cabinet.entities import Box
from models import BrickBreakerTuning


@dataclass
class Brick(Box):
    """One brick in the grid. Dies on the first hit."""

    row: int = 0
    col: int = 0
    points: int = 10
    color: Tuple[int, int, int] = (255, 255, 255)


def build_brick_grid(tuning: BrickBreakerTuning, surface_width: float) -> List[Brick]:
    """Lay out rows x cols bricks, centred horizontally.

    Rows are listed top to bottom, each row left to right; that is also the
    collision scan order. Row colours alternate through tuning.row_colors.
    """
    total_width = tuning.brick_cols * (tuning.brick_width + tuning.brick_padding) - tuning.brick_padding
    offset_left = (surface_width - total_width) / 2

    bricks = []
    for row in range(tuning.brick_rows):
        color = tuning.row_colors[row % len(tuning.row_colors)].as_tuple
        for col in range(tuning.brick_cols):
            bricks.append(Brick(
                x=offset_left + col * (tuning.brick_width + tuning.brick_padding),
                y=tuning.brick_offset_top + row * (tuning.brick_height + tuning.brick_padding),
                w=tuning.brick_width,
                h=tuning.brick_height,
                row=row,
                col=col,
                points=tuning.brick_points,
                color=color,
            ))
    return bricks
