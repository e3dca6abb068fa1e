"""
Shared primitive data types.

Basic geometric and color types used by the tuning models, the input state
and the host.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, computed_field, ConfigDict
from typing import Any, Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and directions.

    Attributes:
        x: X coordinate (horizontal, surface pixels)
        y: Y coordinate (vertical, surface pixels, growing downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> aim = Point2D(x=-1.0, y=0.0)  # Pointing left
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


Vector2D = Point2D


class Resolution(BaseModel):
    """Logical size of the drawing surface.

    Examples:
        >>> Resolution(width=800, height=600).aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGB color with validation.

    Tuning files may give colors either as mappings ({r: 40, g: 180, b: 100})
    or as three-element lists ([40, 180, 100]).
    """
    r: int
    g: int
    b: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='before')
    @classmethod
    def accept_sequence(cls, data: Any) -> Any:
        """Accept [r, g, b] lists as well as mappings."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f'Expected 3 color components, got {len(data)}')
            r, g, b = data
            return {'r': r, 'g': g, 'b': b}
        return data

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, int, int]) -> 'Color':
        r, g, b = rgb
        return cls(r=r, g=g, b=b)

    @field_validator('r', 'g', 'b')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @property
    def as_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple for pygame."""
        return (self.r, self.g, self.b)


class Rectangle(BaseModel):
    """Immutable rectangle defined by top-left position and dimensions.

    Used to describe static level geometry in tuning files.

    Examples:
        >>> Rectangle(x=100.0, y=100.0, width=50.0, height=20.0).bottom
        120.0
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
