"""Exception types raised by the cabinet framework.

Only conditions the game cannot run without are raised. Missing optional
capabilities (sound, fullscreen, high-score storage) degrade silently and
are never represented here.
"""


class CabinetError(Exception):
    """Base class for cabinet errors."""
    pass


class RenderSurfaceError(CabinetError):
    """Raised when no drawing surface can be created. Fatal at startup."""
    pass


class UnknownGameError(CabinetError):
    """Raised when the registry is asked for a game it does not know."""
    pass
