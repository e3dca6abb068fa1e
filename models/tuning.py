"""
Pydantic v2 models for per-game tuning.

Tuning is balancing data: sizes, speeds, damage, spawn intervals. Every
field has a default so games run without any file; a YAML file can
override any subset (see cabinet.tuning.load_tuning).

Speeds and accelerations are per frame, not per second. The loop runs one
simulation step per display frame and does not scale by elapsed time.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .primitives import Color, Rectangle


class BrickBreakerTuning(BaseModel):
    """Paddle, ball and brick grid for BrickBreaker."""
    model_config = {"frozen": True, "extra": "forbid"}

    lives: int = Field(default=3, ge=1)

    paddle_width: float = Field(default=100.0, gt=0)
    paddle_height: float = Field(default=10.0, gt=0)
    paddle_speed: float = Field(default=5.0, gt=0)
    paddle_offset_bottom: float = Field(
        default=30.0, gt=0,
        description="Distance from the bottom edge to the paddle's top",
    )

    ball_radius: float = Field(default=6.0, gt=0)
    ball_speed: float = Field(default=3.0, gt=0, description="Per-axis speed at serve")
    ball_offset_bottom: float = Field(default=40.0, gt=0)

    brick_rows: int = Field(default=5, ge=1)
    brick_cols: int = Field(default=12, ge=1)
    brick_width: float = Field(default=60.0, gt=0)
    brick_height: float = Field(default=15.0, gt=0)
    brick_padding: float = Field(default=5.0, ge=0)
    brick_offset_top: float = Field(default=30.0, ge=0)
    brick_points: int = Field(default=10, ge=0)

    row_colors: List[Color] = Field(
        default_factory=lambda: [Color(r=34, g=187, b=102), Color(r=102, g=187, b=34)],
        min_length=1,
    )
    paddle_color: Color = Color(r=0, g=204, b=255)
    ball_color: Color = Color(r=255, g=255, b=255)


class FlappyTuning(BaseModel):
    """Bird physics and pipe spawning for FlappyBird."""
    model_config = {"frozen": True, "extra": "forbid"}

    bird_x: float = Field(default=80.0, ge=0)
    bird_width: float = Field(default=34.0, gt=0)
    bird_height: float = Field(default=24.0, gt=0)
    gravity: float = Field(default=0.5, ge=0)
    flap_velocity: float = Field(default=-8.0, lt=0)
    max_fall_speed: float = Field(default=10.0, gt=0)

    pipe_width: float = Field(default=60.0, gt=0)
    pipe_gap: float = Field(default=150.0, gt=0)
    pipe_speed: float = Field(default=3.0, gt=0)
    pipe_spawn_frames: int = Field(default=90, ge=1)
    pipe_margin: float = Field(
        default=60.0, ge=0,
        description="Minimum distance between a gap and the top or bottom edge",
    )
    pipe_points: int = Field(default=1, ge=0)

    bird_color: Color = Color(r=255, g=215, b=0)
    pipe_color: Color = Color(r=60, g=180, b=75)
    sky_color: Color = Color(r=112, g=197, b=206)


class WeaponTuning(BaseModel):
    """One selectable weapon."""
    model_config = {"frozen": True, "extra": "forbid"}

    name: str
    damage: int = Field(..., gt=0)
    bullet_speed: float = Field(..., gt=0)
    magazine: int = Field(..., ge=1)
    reload_ms: int = Field(..., ge=0)
    fire_interval: int = Field(default=10, ge=1, description="Frames between shots")


def _default_weapons() -> List[WeaponTuning]:
    return [
        WeaponTuning(name="pistol", damage=10, bullet_speed=10.0, magazine=8,
                     reload_ms=900, fire_interval=12),
        WeaponTuning(name="rifle", damage=6, bullet_speed=14.0, magazine=24,
                     reload_ms=1600, fire_interval=5),
    ]


def _default_obstacles() -> List[Rectangle]:
    return [
        Rectangle(x=150.0, y=420.0, width=160.0, height=20.0),
        Rectangle(x=480.0, y=340.0, width=180.0, height=20.0),
        Rectangle(x=320.0, y=240.0, width=120.0, height=20.0),
    ]


class PlatformShooterTuning(BaseModel):
    """Player, enemies, weapons and pickups for PlatformShooter."""
    model_config = {"frozen": True, "extra": "forbid"}

    ground_height: float = Field(default=40.0, ge=0)
    gravity: float = Field(default=0.6, ge=0)
    max_fall_speed: float = Field(default=15.0, gt=0)

    player_width: float = Field(default=32.0, gt=0)
    player_height: float = Field(default=48.0, gt=0)
    player_speed: float = Field(default=4.0, gt=0)
    jump_velocity: float = Field(default=-12.0, lt=0)
    max_health: int = Field(default=100, ge=1)
    contact_damage: int = Field(default=10, ge=0)
    invulnerable_frames: int = Field(default=45, ge=0)

    enemy_width: float = Field(default=32.0, gt=0)
    enemy_height: float = Field(default=40.0, gt=0)
    enemy_speed: float = Field(default=1.5, gt=0)
    enemy_health: int = Field(default=30, ge=1)
    enemy_spawn_frames: int = Field(default=150, ge=1)
    max_enemies: int = Field(default=6, ge=0)
    enemy_points: int = Field(default=10, ge=0)

    bullet_size: float = Field(default=6.0, gt=0)
    offscreen_margin: float = Field(default=50.0, ge=0)
    weapons: List[WeaponTuning] = Field(default_factory=_default_weapons, min_length=1)

    collectable_size: float = Field(default=16.0, gt=0)
    collectable_spawn_frames: int = Field(default=300, ge=1)
    max_collectables: int = Field(default=3, ge=0)
    health_pack_amount: int = Field(default=25, ge=0)
    collectable_points: int = Field(default=5, ge=0)

    effect_particles: int = Field(default=6, ge=0)
    effect_lifetime: int = Field(default=20, ge=1, description="Frames")

    obstacles: List[Rectangle] = Field(default_factory=_default_obstacles)

    player_color: Color = Color(r=80, g=160, b=255)
    enemy_color: Color = Color(r=230, g=80, b=80)
    obstacle_color: Color = Color(r=120, g=110, b=100)

    @field_validator('weapons')
    @classmethod
    def validate_unique_weapon_names(cls, v: List[WeaponTuning]) -> List[WeaponTuning]:
        names = [w.name for w in v]
        if len(names) != len(set(names)):
            raise ValueError(f'Weapon names must be unique, got {names}')
        return v
