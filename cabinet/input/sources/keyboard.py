"""
Keyboard and Mouse Input Source - pygame events into InputState.

Key and button bindings map physical inputs to logical actions. Events the
source does not handle (quit, restart, fullscreen) are left to the host.
"""
from typing import Dict, Optional

import pygame

from cabinet.input.state import Action, InputState

DEFAULT_KEY_BINDINGS: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_SPACE: Action.JUMP,
    pygame.K_UP: Action.JUMP,
    pygame.K_w: Action.JUMP,
    pygame.K_r: Action.RELOAD,
    pygame.K_q: Action.WEAPON_SELECT,
    pygame.K_LCTRL: Action.SHOOT,
}

DEFAULT_BUTTON_BINDINGS: Dict[int, Action] = {
    1: Action.SHOOT,  # Left mouse button
}

# Number keys 1-9 pick a weapon slot directly (slot 0 = key 1)
_SLOT_KEYS: Dict[int, int] = {
    getattr(pygame, f'K_{n}'): n - 1 for n in range(1, 10)
}


class KeyboardMouseSource:
    """Applies pygame keyboard and mouse events to an InputState."""

    def __init__(
        self,
        state: InputState,
        key_bindings: Optional[Dict[int, Action]] = None,
        button_bindings: Optional[Dict[int, Action]] = None,
    ):
        self._state = state
        self._keys = dict(DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings)
        self._buttons = dict(DEFAULT_BUTTON_BINDINGS if button_bindings is None else button_bindings)

    @property
    def state(self) -> InputState:
        return self._state

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event. Returns True if the event was consumed."""
        if event.type == pygame.KEYDOWN:
            if event.key in _SLOT_KEYS:
                self._state.select_slot(_SLOT_KEYS[event.key])
                return True
            action = self._keys.get(event.key)
            if action is not None:
                self._state.press(action)
                return True
        elif event.type == pygame.KEYUP:
            action = self._keys.get(event.key)
            if action is not None:
                self._state.release(action)
                return True
        elif event.type == pygame.MOUSEMOTION:
            self._state.move_pointer(*event.pos)
            return True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._state.move_pointer(*event.pos)
            action = self._buttons.get(event.button)
            if action is not None:
                self._state.press(action)
                return True
        elif event.type == pygame.MOUSEBUTTONUP:
            action = self._buttons.get(event.button)
            if action is not None:
                self._state.release(action)
                return True
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._state.clear()
            return True
        return False
