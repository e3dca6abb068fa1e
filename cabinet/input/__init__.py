"""
Input handling: logical actions, held state and the pygame source.
"""

from cabinet.input.state import Action, InputState, pressed_since

__all__ = ['Action', 'InputState', 'pressed_since']
