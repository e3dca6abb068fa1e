"""Collision detection and response.

Two families of tests:

- Circle-rectangle: the circle is treated as the box of side 2r around
  its centre (not a true distance test). The side of impact comes from the
  circle's previous position, reconstructed as position - velocity.
- Rectangle-rectangle: strict AABB overlap. Solid obstacles push the
  entity out along the axis with the smaller overlap.

Nothing here raises; every function is plain arithmetic on the inputs.
"""

from typing import Iterable, Literal, Optional, Sequence, Tuple, TypeVar

from cabinet.entities import Box, Bounds, Collidable, Disc

T = TypeVar('T', bound=Collidable)

Axis = Literal["vertical", "horizontal"]
Side = Literal["top", "bottom", "left", "right"]


def rects_overlap(a: Bounds, b: Bounds) -> bool:
    """Strict AABB overlap test. Touching edges do not overlap.

    Commutative: rects_overlap(a, b) == rects_overlap(b, a).
    """
    return (
        a.left < b.right
        and a.right > b.left
        and a.top < b.bottom
        and a.bottom > b.top
    )


def circle_rect_overlap(circle: Disc, rect: Bounds) -> bool:
    """Overlap between a circle (as a 2r box) and a rectangle."""
    return rects_overlap(circle.bounds, rect)


def impact_axis(prev_y: float, rect: Bounds) -> Axis:
    """Which way a circle hit a rectangle.

    If the previous centre lay above the top or below the bottom, the hit
    came through a horizontal face and is vertical. Otherwise it came
    through a side.
    """
    if prev_y < rect.top or prev_y > rect.bottom:
        return "vertical"
    return "horizontal"


def bounce_circle_off_rect(
    circle: Disc,
    rect: Bounds,
    prev_y: Optional[float] = None,
) -> Axis:
    """Invert the circle's velocity on the axis it hit the rectangle.

    Args:
        circle: Circle that overlaps the rectangle
        rect: Rectangle that was hit
        prev_y: Previous-frame centre y; defaults to y - vy

    Returns:
        The axis that was inverted
    """
    if prev_y is None:
        prev_y = circle.y - circle.vy

    axis = impact_axis(prev_y, rect)
    if axis == "vertical":
        circle.vy = -circle.vy
    else:
        circle.vx = -circle.vx
    return axis


def first_hit(circle: Disc, targets: Iterable[T]) -> Optional[T]:
    """First live target in scan order that the circle overlaps.

    Scanning stops at the first hit, so at most one target is resolved
    per step even when several overlap.
    """
    for target in targets:
        if not target.alive:
            continue
        if circle_rect_overlap(circle, target.bounds):
            return target
    return None


def overlap_depth(a: Bounds, b: Bounds) -> Tuple[float, float]:
    """Overlap depth on x and y. Non-positive values mean no overlap."""
    depth_x = min(a.right, b.right) - max(a.left, b.left)
    depth_y = min(a.bottom, b.bottom) - max(a.top, b.top)
    return depth_x, depth_y


def resolve_solid(body: Box, obstacle: Bounds) -> Optional[Side]:
    """Push a box out of a solid obstacle along the smaller overlap.

    The box moves fully outside the obstacle, toward the side its centre is
    on, and the velocity component on that axis is zeroed. Equal overlaps
    resolve on the y axis.

    Args:
        body: Moving box (mutated in place)
        obstacle: Solid obstacle bounds

    Returns:
        The obstacle face the box now rests against ("top" means the box
        landed on it), or None if they did not overlap.
    """
    bounds = body.bounds
    if not rects_overlap(bounds, obstacle):
        return None

    depth_x, depth_y = overlap_depth(bounds, obstacle)

    if depth_x < depth_y:
        if bounds.center_x < obstacle.center_x:
            body.x = obstacle.left - body.w
            side: Side = "left"
        else:
            body.x = obstacle.right
            side = "right"
        body.vx = 0.0
    else:
        if bounds.center_y < obstacle.center_y:
            body.y = obstacle.top - body.h
            side = "top"
        else:
            body.y = obstacle.bottom
            side = "bottom"
        body.vy = 0.0

    return side


def resolve_against_all(body: Box, obstacles: Sequence[Bounds]) -> Tuple[Side, ...]:
    """Resolve a box against each obstacle in order, returning the faces touched."""
    sides = []
    for obstacle in obstacles:
        side = resolve_solid(body, obstacle)
        if side is not None:
            sides.append(side)
    return tuple(sides)
