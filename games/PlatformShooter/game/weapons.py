"""Weapons with magazines, fire-rate cooldowns and timed reloads.

A reload is a task on the game's TaskScheduler. The weapon keeps the task
handle so switching away or resetting the session can cancel it; a
cancelled reload never refills the magazine.
"""

from typing import Optional

from cabinet.logging import get_logger
from cabinet.scheduling import ScheduledTask, TaskScheduler
from models import WeaponTuning

log = get_logger('weapons')


class Weapon:
    """Runtime state for one weapon.

    Args:
        stats: Damage, speed, magazine size, reload time and fire interval
        scheduler: Scheduler that runs the reload completion
    """

    def __init__(self, stats: WeaponTuning, scheduler: TaskScheduler):
        self.stats = stats
        self._scheduler = scheduler
        self.ammo = stats.magazine
        self.cooldown = 0
        self._reload_task: Optional[ScheduledTask] = None

    @property
    def name(self) -> str:
        return self.stats.name

    @property
    def reloading(self) -> bool:
        return self._reload_task is not None and self._reload_task.pending

    @property
    def can_fire(self) -> bool:
        return self.ammo > 0 and self.cooldown == 0 and not self.reloading

    def tick(self) -> None:
        """Count down the fire-rate cooldown. Call once per step."""
        if self.cooldown > 0:
            self.cooldown -= 1

    def fire(self) -> bool:
        """Spend one round if possible. Returns True if a shot was fired."""
        if not self.can_fire:
            return False
        self.ammo -= 1
        self.cooldown = self.stats.fire_interval
        return True

    def start_reload(self) -> bool:
        """Begin a reload. Returns False if already reloading or full."""
        if self.reloading or self.ammo >= self.stats.magazine:
            return False
        self._reload_task = self._scheduler.call_later(
            self.stats.reload_ms, self._finish_reload, name=f"reload {self.name}",
        )
        return True

    def _finish_reload(self) -> None:
        self.ammo = self.stats.magazine
        self._reload_task = None
        log.debug("%s reloaded", self.name)

    def cancel_reload(self) -> bool:
        """Abandon a pending reload. The magazine keeps its current count."""
        task, self._reload_task = self._reload_task, None
        return task is not None and task.cancel()

    def refill(self) -> None:
        """Fill the magazine at once (ammo pickup)."""
        self.cancel_reload()
        self.ammo = self.stats.magazine

    def reset(self) -> None:
        """Back to a full magazine with no cooldown or pending reload."""
        self.refill()
        self.cooldown = 0
