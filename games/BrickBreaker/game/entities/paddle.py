"""Paddle entity.

The paddle moves horizontally at a fixed speed while a direction is held
and is clamped to the surface every step.
"""

from dataclasses import dataclass

from cabinet.entities import Box


@dataclass
class Paddle(Box):
    """Player paddle. (x, y) is the top-left corner."""

    speed: float = 5.0

    def steer(self, direction: int) -> None:
        """Set horizontal velocity from a direction of -1, 0 or +1."""
        self.vx = direction * self.speed
