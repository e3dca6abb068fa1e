"""
Input source implementations.
"""

from cabinet.input.sources.keyboard import (
    DEFAULT_BUTTON_BINDINGS,
    DEFAULT_KEY_BINDINGS,
    KeyboardMouseSource,
)

__all__ = ['KeyboardMouseSource', 'DEFAULT_KEY_BINDINGS', 'DEFAULT_BUTTON_BINDINGS']
