"""Ball entity.

Moves by a constant velocity each step. Bounces never change its speed,
only the sign of one velocity component.
"""

from dataclasses import dataclass

from cabinet.entities import Disc


@dataclass
class Ball(Disc):
    """Ball. (x, y) is the centre, r the radius."""

    def serve(self, x: float, y: float, speed: float, direction: int) -> None:
        """Place the ball and launch it upward.

        Args:
            x: Centre x
            y: Centre y
            speed: Speed on each axis
            direction: Horizontal sign, -1 or +1
        """
        self.x = x
        self.y = y
        self.vx = speed * direction
        self.vy = -speed
        self.alive = True
