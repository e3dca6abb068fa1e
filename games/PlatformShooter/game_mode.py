"""PlatformShooter - 2D platformer shooter.

The player runs and jumps across solid platforms, shooting at enemies that
walk in from the edges. Bullets fly toward the mouse pointer. Weapons have
magazines and timed reloads. Health packs and ammo boxes appear on the
ground and on platforms. Touching an enemy costs health; the session ends
when health runs out.

Controls:
    Left/Right or A/D   run
    Space, W or Up      jump
    Mouse / left button aim and shoot (Left Ctrl also shoots)
    R                   reload
    Q                   next weapon
    1-9                 pick a weapon slot
"""

import math
from pathlib import Path
from typing import List, Optional

from cabinet.collision import rects_overlap, resolve_against_all
from cabinet.entities import draw_all, prune_dead, update_all
from cabinet.game import ArcadeGame
from cabinet.input import Action
from cabinet.logging import get_logger
from cabinet.physics import BOTTOM, clamp_to_bounds, integrate, is_offscreen
from models import PlatformShooterTuning

from .game.entities import AMMO, EFFECT_COLOR, HEALTH, Bullet, Collectable, Effect, Enemy, Obstacle, Player
from .game.weapons import Weapon

log = get_logger('platformshooter')

HEALTH_COLOR = (230, 60, 60)
AMMO_COLOR = (240, 200, 60)
BULLET_COLOR = (255, 255, 180)


class PlatformShooterMode(ArcadeGame):
    """Platform shooter game mode."""

    NAME = "Platform Shooter"
    DESCRIPTION = "Run, jump and shoot your way through waves of walkers."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"
    SLUG = "platformshooter"

    TUNING_MODEL = PlatformShooterTuning
    TUNING_DIR = Path(__file__).parent / 'tuning'

    ARGUMENTS = [
        {
            'name': '--no-enemies',
            'action': 'store_true',
            'default': False,
            'help': 'Practice mode: nothing spawns that can hurt you'
        },
    ]

    def __init__(self, no_enemies: bool = False, **kwargs):
        self.player: Optional[Player] = None
        self.enemies: List[Enemy] = []
        self.bullets: List[Bullet] = []
        self.obstacles: List[Obstacle] = []
        self.collectables: List[Collectable] = []
        self.effects: List[Effect] = []
        self.weapons: List[Weapon] = []
        self.weapon_index = 0
        self._spawn_enemies = not no_enemies
        self._enemy_timer = 0
        self._collectable_timer = 0
        super().__init__(**kwargs)

    @property
    def ground_y(self) -> float:
        """Top of the ground strip."""
        return self.height - self.tuning.ground_height

    @property
    def weapon(self) -> Weapon:
        return self.weapons[self.weapon_index]

    @property
    def health(self) -> int:
        return self.session.state.resource

    # =========================================================================
    # Session
    # =========================================================================

    def _starting_resource(self) -> int:
        return self.tuning.max_health

    def _reset_entities(self) -> None:
        t = self.tuning
        self.player = Player(
            x=(self.width - t.player_width) / 2,
            y=self.ground_y - t.player_height,
            w=t.player_width,
            h=t.player_height,
            on_ground=True,
        )
        self.obstacles = [
            Obstacle(x=r.x, y=r.y, w=r.width, h=r.height) for r in t.obstacles
        ]
        self.enemies = []
        self.bullets = []
        self.collectables = []
        self.effects = []
        self._enemy_timer = 0
        self._collectable_timer = 0

        # Weapons outlive sessions; the scheduler has already cancelled
        # their reloads, reset() just refills them
        if not self.weapons:
            self.weapons = [Weapon(stats, self.scheduler) for stats in t.weapons]
        for weapon in self.weapons:
            weapon.reset()
        self.weapon_index = 0

    # =========================================================================
    # Simulation
    # =========================================================================

    def _simulate(self) -> None:
        self._update_weapons()
        self._update_player()
        self._update_bullets()
        self._update_enemies()
        self._update_collectables()
        update_all(self.effects)
        self._spawn()

        self.enemies = prune_dead(self.enemies)
        self.bullets = prune_dead(self.bullets)
        self.collectables = prune_dead(self.collectables)
        self.effects = prune_dead(self.effects)

    def _obstacle_bounds(self):
        return [o.bounds for o in self.obstacles if o.alive]

    def _settle(self, body) -> None:
        """Resolve a falling box against platforms, walls and the ground."""
        body.on_ground = False
        sides = resolve_against_all(body, self._obstacle_bounds())
        if "top" in sides:
            body.on_ground = True
        if BOTTOM in clamp_to_bounds(body, self.width, self.ground_y):
            body.on_ground = True

    # --- weapons -------------------------------------------------------------

    def select_weapon(self, index: int) -> bool:
        """Switch weapons. A reload in progress on the old weapon is abandoned."""
        if not 0 <= index < len(self.weapons) or index == self.weapon_index:
            return False
        self.weapon.cancel_reload()
        self.weapon_index = index
        log.debug("Selected %s", self.weapon.name)
        return True

    def _update_weapons(self) -> None:
        for weapon in self.weapons:
            weapon.tick()

        slot = self.input.take_slot()
        if slot is not None:
            self.select_weapon(slot)
        elif self.pressed(Action.WEAPON_SELECT):
            self.select_weapon((self.weapon_index + 1) % len(self.weapons))

        if self.pressed(Action.RELOAD) and self.weapon.start_reload():
            self._play('reload')

        if self.held(Action.SHOOT):
            self._shoot()

    def _shoot(self) -> None:
        weapon = self.weapon
        if not weapon.fire():
            if weapon.ammo == 0 and weapon.start_reload():
                self._play('reload')
            return

        t = self.tuning
        px, py = self.player.center_x, self.player.center_y
        target = self.input.mouse_position
        dx, dy = target.x - px, target.y - py
        distance = math.hypot(dx, dy)
        if distance < 1e-6:
            dx, dy, distance = float(self.player.facing), 0.0, 1.0

        speed = weapon.stats.bullet_speed
        self.bullets.append(Bullet(
            x=px - t.bullet_size / 2,
            y=py - t.bullet_size / 2,
            vx=dx / distance * speed,
            vy=dy / distance * speed,
            w=t.bullet_size,
            h=t.bullet_size,
            damage=weapon.stats.damage,
        ))
        self._play('shoot')

        if weapon.ammo == 0:
            weapon.start_reload()

    # --- player --------------------------------------------------------------

    def _update_player(self) -> None:
        t = self.tuning
        player = self.player

        direction = int(self.held(Action.MOVE_RIGHT)) - int(self.held(Action.MOVE_LEFT))
        player.vx = direction * t.player_speed
        if direction:
            player.facing = direction

        if self.pressed(Action.JUMP) and player.on_ground:
            player.vy = t.jump_velocity

        integrate(player, t.gravity, t.max_fall_speed)
        self._settle(player)

        if player.invulnerable > 0:
            player.invulnerable -= 1

    # --- bullets -------------------------------------------------------------

    def _update_bullets(self) -> None:
        t = self.tuning
        obstacles = self._obstacle_bounds()
        for bullet in self.bullets:
            integrate(bullet)
            if is_offscreen(bullet, self.width, self.height, t.offscreen_margin):
                bullet.kill()
                continue

            bounds = bullet.bounds
            if bounds.bottom > self.ground_y or any(rects_overlap(bounds, o) for o in obstacles):
                bullet.kill()
                self._spawn_effect(bullet.center_x, bullet.center_y, count=max(1, t.effect_particles // 2))
                continue

            for enemy in self.enemies:
                if enemy.alive and rects_overlap(bounds, enemy.bounds):
                    bullet.kill()
                    self._hit_enemy(enemy, bullet.damage)
                    break

    def _hit_enemy(self, enemy: Enemy, damage: int) -> None:
        self._spawn_effect(enemy.center_x, enemy.center_y)
        if enemy.damage(damage):
            self.session.add_score(self.tuning.enemy_points)
            self._spawn_effect(enemy.center_x, enemy.center_y, color=self.tuning.enemy_color.as_tuple)
            self._play('hit')

    # --- enemies -------------------------------------------------------------

    def _update_enemies(self) -> None:
        t = self.tuning
        player = self.player
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            offset = player.center_x - enemy.center_x
            enemy.vx = 0.0 if abs(offset) < 1.0 else math.copysign(enemy.speed, offset)
            integrate(enemy, t.gravity, t.max_fall_speed)
            self._settle(enemy)

            if player.invulnerable == 0 and rects_overlap(player.bounds, enemy.bounds):
                self.session.deplete(t.contact_damage)
                player.invulnerable = t.invulnerable_frames
                self._spawn_effect(player.center_x, player.center_y, color=HEALTH_COLOR)
                self._play('hurt')

    # --- collectables --------------------------------------------------------

    def _update_collectables(self) -> None:
        t = self.tuning
        bounds = self.player.bounds
        for item in self.collectables:
            if not item.alive or not rects_overlap(bounds, item.bounds):
                continue
            item.collect()
            if item.kind == HEALTH:
                self.session.restore(t.health_pack_amount, cap=t.max_health)
            else:
                self.weapon.refill()
            self.session.add_score(t.collectable_points)
            self._play('pickup')

    # --- effects -------------------------------------------------------------

    def _spawn_effect(self, x: float, y: float, count: Optional[int] = None, color=EFFECT_COLOR) -> None:
        t = self.tuning
        self.effects.append(Effect.burst(
            x, y,
            count=t.effect_particles if count is None else count,
            lifetime=t.effect_lifetime,
            rng=self.rng,
            color=color,
        ))

    # --- spawning ------------------------------------------------------------

    def _spawn(self) -> None:
        t = self.tuning

        self._enemy_timer += 1
        if self._enemy_timer >= t.enemy_spawn_frames:
            self._enemy_timer = 0
            if self._spawn_enemies and len(self.enemies) < t.max_enemies:
                self.spawn_enemy()

        self._collectable_timer += 1
        if self._collectable_timer >= t.collectable_spawn_frames:
            self._collectable_timer = 0
            if len(self.collectables) < t.max_collectables:
                self.spawn_collectable()

    def spawn_enemy(self, from_left: Optional[bool] = None) -> Enemy:
        """Add an enemy standing on the ground at the left or right edge."""
        t = self.tuning
        if from_left is None:
            from_left = self.rng.random() < 0.5
        enemy = Enemy(
            x=0.0 if from_left else self.width - t.enemy_width,
            y=self.ground_y - t.enemy_height,
            w=t.enemy_width,
            h=t.enemy_height,
            health=t.enemy_health,
            speed=t.enemy_speed,
        )
        self.enemies.append(enemy)
        return enemy

    def spawn_collectable(self, kind: Optional[str] = None) -> Collectable:
        """Add a pickup resting on the ground or on top of a random platform."""
        t = self.tuning
        if kind is None:
            kind = self.rng.choice((HEALTH, AMMO))

        size = t.collectable_size
        surfaces = [(0.0, float(self.width), self.ground_y)]
        surfaces += [(o.left, o.right, o.top) for o in self.obstacles if o.alive]
        left, right, top = self.rng.choice(surfaces)
        x = self.rng.uniform(left, max(left, right - size))

        item = Collectable(x=x, y=top - size, w=size, h=size, kind=kind)
        self.collectables.append(item)
        return item

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, canvas) -> None:
        t = self.tuning
        canvas.clear((20, 22, 32))
        canvas.rect(0, self.ground_y, self.width, t.ground_height, t.obstacle_color.as_tuple)

        for obstacle in self.obstacles:
            canvas.rect(obstacle.x, obstacle.y, obstacle.w, obstacle.h, t.obstacle_color.as_tuple)

        for item in self.collectables:
            if item.alive:
                color = HEALTH_COLOR if item.kind == HEALTH else AMMO_COLOR
                canvas.rect(item.x, item.y, item.w, item.h, color)

        for enemy in self.enemies:
            if not enemy.alive:
                continue
            canvas.rect(enemy.x, enemy.y, enemy.w, enemy.h, t.enemy_color.as_tuple)
            fraction = max(0.0, enemy.health / t.enemy_health)
            canvas.rect(enemy.x, enemy.y - 6, enemy.w * fraction, 3, (120, 230, 120))

        player = self.player
        if player is not None and player.invulnerable % 6 < 3:
            canvas.rect(player.x, player.y, player.w, player.h, t.player_color.as_tuple)

        for bullet in self.bullets:
            if bullet.alive:
                canvas.rect(bullet.x, bullet.y, bullet.w, bullet.h, BULLET_COLOR)

        draw_all(self.effects, canvas)

        aim = self.input.mouse_position
        canvas.line((aim.x - 6, aim.y), (aim.x + 6, aim.y), (255, 255, 255))
        canvas.line((aim.x, aim.y - 6), (aim.x, aim.y + 6), (255, 255, 255))

        label = f"Health: {self.health}"
        if self.weapons:
            weapon = self.weapon
            status = "reloading" if weapon.reloading else f"{weapon.ammo}/{weapon.stats.magazine}"
            label += f"   {weapon.name}: {status}"
        self._render_hud(canvas, label)
