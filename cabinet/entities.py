"""Entity model shared by all games.

Entities are small mutable dataclasses. Two shape bases cover every game:

- Box: axis-aligned rectangle, (x, y) is the top-left corner
- Disc: circle, (x, y) is the centre

Games subclass these with their own attributes (health, row/col, gap
geometry) rather than building deeper hierarchies. Behaviour that only some
entities have is described by the capability protocols at the bottom.
"""

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet.render import Canvas


class Bounds(NamedTuple):
    """Axis-aligned bounds (left, top, right, bottom)."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @classmethod
    def from_rect(cls, x: float, y: float, w: float, h: float) -> 'Bounds':
        return cls(x, y, x + w, y + h)


@dataclass
class Body:
    """Position, velocity and liveness common to every entity."""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    alive: bool = True

    def kill(self) -> None:
        """Mark dead. Dead bodies skip collision and rendering."""
        self.alive = False


@dataclass
class Box(Body):
    """Rectangular body, positioned by its top-left corner."""
    w: float = 0.0
    h: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.x, self.y, self.x + self.w, self.y + self.h)


@dataclass
class Disc(Body):
    """Circular body, positioned by its centre.

    For collision the disc is treated as the box of side 2r around it.
    """
    r: float = 0.0

    @property
    def left(self) -> float:
        return self.x - self.r

    @property
    def right(self) -> float:
        return self.x + self.r

    @property
    def top(self) -> float:
        return self.y - self.r

    @property
    def bottom(self) -> float:
        return self.y + self.r

    @property
    def center_x(self) -> float:
        return self.x

    @property
    def center_y(self) -> float:
        return self.y

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.x - self.r, self.y - self.r, self.x + self.r, self.y + self.r)


# =============================================================================
# Capabilities
# =============================================================================

@runtime_checkable
class Collidable(Protocol):
    """Anything with bounds and a liveness flag."""
    alive: bool

    @property
    def bounds(self) -> Bounds: ...


@runtime_checkable
class Updatable(Protocol):
    """Entities that advance themselves once per simulation step."""

    def update(self) -> None: ...


@runtime_checkable
class Drawable(Protocol):
    """Entities that know how to paint themselves."""

    def draw(self, canvas: 'Canvas') -> None: ...


def prune_dead(entities: list) -> list:
    """Return the live entities, preserving order."""
    return [e for e in entities if e.alive]


def update_all(entities: Iterable[Updatable]) -> None:
    """One update for every live entity. Dead ones wait for prune_dead."""
    for entity in entities:
        if getattr(entity, 'alive', True):
            entity.update()


def draw_all(entities: Iterable[Drawable], canvas: 'Canvas') -> None:
    for entity in entities:
        if getattr(entity, 'alive', True):
            entity.draw(canvas)
