"""PlatformShooter game entities.

Player, enemies, bullets, obstacles and collectables are boxes. Hit
effects are short-lived bursts of disc particles.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List

from cabinet.entities import Box, Disc
from cabinet.physics import integrate


@dataclass
class Player(Box):
    """The player. Health lives in the session, not here.

    Attributes:
        facing: +1 right, -1 left. Used when the aim point is the player.
        on_ground: Resting on the floor or an obstacle this step
        invulnerable: Frames left before contact damage applies again
    """

    facing: int = 1
    on_ground: bool = False
    invulnerable: int = 0


@dataclass
class Enemy(Box):
    """Walks toward the player and hurts on contact."""

    health: int = 30
    speed: float = 1.5
    on_ground: bool = False

    def damage(self, amount: int) -> bool:
        """Apply damage. Returns True if this killed the enemy."""
        self.health -= amount
        if self.health <= 0 and self.alive:
            self.kill()
            return True
        return False


@dataclass
class Bullet(Box):
    """Player projectile. Removed on any hit or once far offscreen."""

    damage: int = 10


@dataclass
class Obstacle(Box):
    """Solid, static platform."""


HEALTH = "health"
AMMO = "ammo"

EFFECT_COLOR = (255, 220, 120)


@dataclass
class Collectable(Box):
    """Pickup: a health pack or a full magazine."""

    kind: str = HEALTH
    collected: bool = False

    def collect(self) -> None:
        self.collected = True
        self.kill()


@dataclass
class Particle(Disc):
    """One fragment of a hit effect."""


@dataclass
class Effect(Box):
    """A burst of particles that fades after `lifetime` steps."""

    lifetime: int = 20
    age: int = 0
    color: tuple = EFFECT_COLOR
    particles: List[Particle] = field(default_factory=list)

    @classmethod
    def burst(
        cls,
        x: float,
        y: float,
        count: int,
        lifetime: int,
        rng: random.Random,
        color: tuple = EFFECT_COLOR,
        speed: float = 3.0,
    ) -> 'Effect':
        """Particles flying out from (x, y) in random directions."""
        particles = []
        for _ in range(count):
            angle = rng.uniform(0, 2 * math.pi)
            magnitude = rng.uniform(0.5, 1.0) * speed
            particles.append(Particle(
                x=x, y=y,
                vx=math.cos(angle) * magnitude,
                vy=math.sin(angle) * magnitude,
                r=2.0,
            ))
        return cls(x=x, y=y, lifetime=lifetime, color=color, particles=particles)

    @property
    def fade(self) -> float:
        """1.0 when new, 0.0 when expired."""
        return max(0.0, 1.0 - self.age / self.lifetime)

    def update(self) -> None:
        self.age += 1
        for particle in self.particles:
            integrate(particle)
        if self.age >= self.lifetime:
            self.kill()

    def draw(self, canvas) -> None:
        shade = tuple(int(c * self.fade) for c in self.color)
        for particle in self.particles:
            canvas.circle(particle.x, particle.y, particle.r, shade)
