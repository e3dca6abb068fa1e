"""
Cabinet - shared core for single-screen arcade games.

One simulation step and one render step per display frame, a small entity
model with per-step physics, axis-aligned collision resolution and a
session state machine. Games live in the games/ package and derive from
ArcadeGame.
"""

from cabinet.errors import CabinetError, RenderSurfaceError, UnknownGameError
from cabinet.game import ArcadeGame, GameState
from cabinet.input import Action, InputState
from cabinet.loop import LoopDriver, ManualFrameSource
from cabinet.scheduling import ScheduledTask, TaskScheduler
from cabinet.session import SessionController, SessionPhase, SessionResult, SessionState

__all__ = [
    'Action',
    'ArcadeGame',
    'CabinetError',
    'GameState',
    'InputState',
    'LoopDriver',
    'ManualFrameSource',
    'RenderSurfaceError',
    'ScheduledTask',
    'SessionController',
    'SessionPhase',
    'SessionResult',
    'SessionState',
    'TaskScheduler',
    'UnknownGameError',
]
