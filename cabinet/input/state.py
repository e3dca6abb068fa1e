"""
Input State - which logical actions are held right now.

Input sources write into one InputState between frames; the simulation step
reads it once per frame. Only the latest value is kept, so a press and
release that both land between two frames are never seen.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional

from models import Vector2D


class Action(Enum):
    """Logical controls, independent of the physical key."""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    JUMP = "jump"                    # also "flap"
    SHOOT = "shoot"
    WEAPON_SELECT = "weapon_select"
    RELOAD = "reload"


class InputState:
    """Held flags per action plus the last pointer position.

    Attributes:
        mouse_position: Pointer position in surface coordinates
        weapon_slot: Slot chosen with a number key, or None. Consumers
            clear it once applied.
    """

    def __init__(self):
        self._held: Dict[Action, bool] = {action: False for action in Action}
        self.mouse_position = Vector2D(x=0.0, y=0.0)
        self.weapon_slot: Optional[int] = None

    def press(self, action: Action) -> None:
        self._held[action] = True

    def release(self, action: Action) -> None:
        self._held[action] = False

    def is_held(self, action: Action) -> bool:
        return self._held[action]

    def move_pointer(self, x: float, y: float) -> None:
        self.mouse_position = Vector2D(x=float(x), y=float(y))

    def select_slot(self, slot: int) -> None:
        self.weapon_slot = slot

    def take_slot(self) -> Optional[int]:
        """Return the pending weapon slot and clear it."""
        slot, self.weapon_slot = self.weapon_slot, None
        return slot

    def snapshot(self) -> FrozenSet[Action]:
        """Actions held at this instant, for rising-edge detection."""
        return frozenset(a for a, held in self._held.items() if held)

    def clear(self) -> None:
        """Release everything (window focus lost, session reset)."""
        for action in self._held:
            self._held[action] = False
        self.weapon_slot = None

    def __str__(self) -> str:
        held = ', '.join(sorted(a.value for a in self.snapshot())) or 'nothing'
        return (f"InputState(held={held}, "
                f"mouse=({self.mouse_position.x:.0f}, {self.mouse_position.y:.0f}))")


def pressed_since(previous: FrozenSet[Action], current: FrozenSet[Action], action: Action) -> bool:
    """True if action went from released to held between two snapshots."""
    return action in current and action not in previous
