"""Per-step physics integration and boundary policies.

All increments are per simulation step (one step per display frame).
Nothing here is scaled by elapsed time.

Boundary policies:
    reflect_in_bounds: flip the velocity component away from the wall
    clamp_to_bounds:   pin the position inside, optionally zero velocity
    below_floor:       report that the entity left through the bottom

When an entity meets two boundaries in the same step each axis is handled
independently, x first, then y.
"""

from typing import Optional, Tuple, Union

from cabinet.entities import Body, Box, Disc

Shape = Union[Box, Disc]

LEFT = "left"
RIGHT = "right"
TOP = "top"
BOTTOM = "bottom"


def apply_gravity(body: Body, gravity: float, max_fall_speed: Optional[float] = None) -> None:
    """Add a constant per-step downward acceleration to vy."""
    body.vy += gravity
    if max_fall_speed is not None and body.vy > max_fall_speed:
        body.vy = max_fall_speed


def integrate(body: Body, gravity: float = 0.0, max_fall_speed: Optional[float] = None) -> None:
    """Advance one step: velocity += forces, then position += velocity."""
    if gravity:
        apply_gravity(body, gravity, max_fall_speed)
    body.x += body.vx
    body.y += body.vy


def _extent(shape: Shape) -> Tuple[float, float, float, float]:
    """Offsets from (x, y) to the left/top edge and right/bottom edge."""
    if isinstance(shape, Disc):
        return shape.r, shape.r, shape.r, shape.r
    return 0.0, 0.0, shape.w, shape.h


def reflect_in_bounds(
    shape: Shape,
    width: float,
    height: float,
    floor: bool = False,
) -> Tuple[str, ...]:
    """Bounce a shape off the surface edges.

    The velocity component is set to point away from the wall that was
    crossed (never flipped twice for the same crossing), and the position
    is pulled back inside. Speed is unchanged.

    Args:
        shape: Box or Disc to reflect
        width: Surface width
        height: Surface height
        floor: Also reflect off the bottom edge. Off by default because
            most games treat the bottom as terminal.

    Returns:
        Tuple of the walls that were hit, x axis first
    """
    left_off, top_off, right_off, bottom_off = _extent(shape)
    hits = []

    if shape.x - left_off < 0:
        shape.vx = abs(shape.vx)
        shape.x = left_off
        hits.append(LEFT)
    elif shape.x + right_off > width:
        shape.vx = -abs(shape.vx)
        shape.x = width - right_off
        hits.append(RIGHT)

    if shape.y - top_off < 0:
        shape.vy = abs(shape.vy)
        shape.y = top_off
        hits.append(TOP)
    elif floor and shape.y + bottom_off > height:
        shape.vy = -abs(shape.vy)
        shape.y = height - bottom_off
        hits.append(BOTTOM)

    return tuple(hits)


def clamp_to_bounds(
    shape: Shape,
    width: Optional[float],
    height: Optional[float],
    zero_velocity: bool = True,
) -> Tuple[str, ...]:
    """Clamp a shape inside [0, width] x [0, height].

    Pass None for an axis that should not be clamped.

    Returns:
        Tuple of the edges the shape was pinned against, x axis first
    """
    left_off, top_off, right_off, bottom_off = _extent(shape)
    hits = []

    if width is not None:
        if shape.x - left_off < 0:
            shape.x = left_off
            hits.append(LEFT)
        elif shape.x + right_off > width:
            shape.x = width - right_off
            hits.append(RIGHT)
        if hits and zero_velocity:
            shape.vx = 0.0

    if height is not None:
        y_hit = None
        if shape.y - top_off < 0:
            shape.y = top_off
            y_hit = TOP
        elif shape.y + bottom_off > height:
            shape.y = height - bottom_off
            y_hit = BOTTOM
        if y_hit:
            hits.append(y_hit)
            if zero_velocity:
                shape.vy = 0.0

    return tuple(hits)


def below_floor(shape: Shape, height: float, fully: bool = True) -> bool:
    """Terminal boundary test.

    Args:
        shape: Box or Disc
        height: Surface height
        fully: True when the whole shape must be past the edge (a lost
            ball), False when touching the edge is enough (a bird on the
            ground).
    """
    if fully:
        return shape.top > height
    return shape.bottom >= height


def is_offscreen(shape: Shape, width: float, height: float, margin: float = 0.0) -> bool:
    """True once a shape is entirely outside the surface plus margin."""
    return (
        shape.right < -margin
        or shape.left > width + margin
        or shape.bottom < -margin
        or shape.top > height + margin
    )
