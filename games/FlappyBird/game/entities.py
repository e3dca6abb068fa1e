"""FlappyBird game entities."""

from dataclasses import dataclass
from typing import Tuple

from cabinet.entities import Bounds, Box


@dataclass
class Bird(Box):
    """The player. Falls under gravity; a flap sets an upward velocity."""

    def flap(self, velocity: float) -> None:
        self.vy = velocity


@dataclass
class Pipe(Box):
    """A pipe pair spanning the full surface height with one gap.

    The box covers the whole column (y=0, h=surface height). Only the two
    segments above and below the gap are solid.

    Attributes:
        gap_y: Top of the gap
        gap: Gap height
        scored: True once the bird has passed this pipe
    """

    gap_y: float = 0.0
    gap: float = 0.0
    scored: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap

    def segments(self) -> Tuple[Bounds, Bounds]:
        """Solid parts: (upper pipe, lower pipe)."""
        return (
            Bounds(self.x, self.y, self.x + self.w, self.gap_y),
            Bounds(self.x, self.gap_bottom, self.x + self.w, self.y + self.h),
        )
