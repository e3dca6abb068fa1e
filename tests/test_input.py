"""
Tests for InputState and the keyboard/mouse source.

Run with: pytest tests/test_input.py -v
"""

import pygame
import pytest

from cabinet.input import Action, InputState, pressed_since
from cabinet.input.sources import KeyboardMouseSource


@pytest.fixture
def state():
    return InputState()


@pytest.fixture
def source(state):
    return KeyboardMouseSource(state)


def key(event_type, key_code):
    return pygame.event.Event(event_type, key=key_code)


class TestInputState:

    def test_nothing_held_initially(self, state):
        assert state.snapshot() == frozenset()
        assert not state.is_held(Action.JUMP)

    def test_press_release(self, state):
        state.press(Action.SHOOT)
        assert state.is_held(Action.SHOOT)
        state.release(Action.SHOOT)
        assert not state.is_held(Action.SHOOT)

    def test_only_latest_value_kept(self, state):
        """A press and release between two reads is never seen."""
        before = state.snapshot()
        state.press(Action.JUMP)
        state.release(Action.JUMP)
        assert not pressed_since(before, state.snapshot(), Action.JUMP)

    def test_rising_edge(self, state):
        before = state.snapshot()
        state.press(Action.JUMP)
        after = state.snapshot()
        assert pressed_since(before, after, Action.JUMP)
        assert not pressed_since(after, state.snapshot(), Action.JUMP)

    def test_slot_taken_once(self, state):
        state.select_slot(2)
        assert state.take_slot() == 2
        assert state.take_slot() is None

    def test_clear(self, state):
        state.press(Action.MOVE_LEFT)
        state.select_slot(1)
        state.clear()
        assert state.snapshot() == frozenset()
        assert state.weapon_slot is None

    def test_str(self, state):
        state.press(Action.JUMP)
        assert 'jump' in str(state)


class TestKeyboardMouseSource:

    @pytest.mark.parametrize("key_code, action", [
        (pygame.K_LEFT, Action.MOVE_LEFT),
        (pygame.K_d, Action.MOVE_RIGHT),
        (pygame.K_SPACE, Action.JUMP),
        (pygame.K_w, Action.JUMP),
        (pygame.K_r, Action.RELOAD),
        (pygame.K_q, Action.WEAPON_SELECT),
    ])
    def test_key_bindings(self, source, state, key_code, action):
        assert source.handle_event(key(pygame.KEYDOWN, key_code)) is True
        assert state.is_held(action)
        source.handle_event(key(pygame.KEYUP, key_code))
        assert not state.is_held(action)

    def test_number_keys_pick_slots(self, source, state):
        source.handle_event(key(pygame.KEYDOWN, pygame.K_3))
        assert state.take_slot() == 2

    def test_unbound_key_not_consumed(self, source):
        assert source.handle_event(key(pygame.KEYDOWN, pygame.K_z)) is False

    def test_mouse_motion_and_button(self, source, state):
        source.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 80), rel=(0, 0), buttons=(0, 0, 0)))
        assert (state.mouse_position.x, state.mouse_position.y) == (120.0, 80.0)

        source.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 20), button=1))
        assert state.is_held(Action.SHOOT)
        assert state.mouse_position.x == 10.0

        source.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(10, 20), button=1))
        assert not state.is_held(Action.SHOOT)

    def test_focus_lost_releases_everything(self, source, state):
        source.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
        source.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        assert state.snapshot() == frozenset()

    def test_custom_bindings(self, state):
        source = KeyboardMouseSource(state, key_bindings={pygame.K_j: Action.JUMP})
        source.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE))
        assert not state.is_held(Action.JUMP)
        source.handle_event(key(pygame.KEYDOWN, pygame.K_j))
        assert state.is_held(Action.JUMP)
