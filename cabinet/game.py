"""Base class for all cabinet games.

All games inherit from ArcadeGame so the launcher, the host and the game
registry can drive them the same way.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS) are
declared as class attributes. Balancing values come from a pydantic tuning
model (TUNING_MODEL), optionally overridden from YAML.

The loop driver only needs three things from a game:

    game.scheduler   due tasks are run before each frame
    game.session     simulation runs only while session.state.running
    game.step()      one simulation step
    game.render(c)   one render step, every frame

Subclasses implement:
    - _starting_resource() -> int: lives or health at session start
    - _reset_entities(): rebuild entity collections for a fresh session
    - _simulate(): the game-specific simulation step
    - render(canvas): draw the current state
"""
import random
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Type, TYPE_CHECKING

from pydantic import BaseModel

from cabinet.input import Action, InputState, pressed_since
from cabinet.logging import get_logger
from cabinet.scheduling import TaskScheduler
from cabinet.session import SessionController, SessionPhase, SessionResult
from cabinet.tuning import load_tuning

if TYPE_CHECKING:
    from cabinet.audio import SoundBoard
    from cabinet.render import Canvas
    from cabinet.scores import HighScoreStore

log = get_logger('game')


class GameState(Enum):
    """Externally visible game state, derived from the session phase.

    States:
        IDLE: Created but not started
        PLAYING: Session running
        GAME_OVER: Session ended in a loss
        WON: Session ended in a win
    """
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"


class ArcadeGame(ABC):
    """Abstract base class for all cabinet games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        SLUG: Identifier for high scores and the registry
        ARGUMENTS: List of CLI argument definitions for argparse
        TUNING_MODEL: Pydantic model holding the balancing values
        TUNING_DIR: Directory of bundled YAML tuning presets, if any
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"
    SLUG: str = ""

    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    TUNING_MODEL: Type[BaseModel] = BaseModel
    TUNING_DIR: Optional[Path] = None

    # Always available, after the game-specific ones
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--tuning',
            'type': str,
            'default': None,
            'help': 'Tuning preset name or YAML file overriding balancing values'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for spawns (default: unseeded)'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Duplicates by name are removed; game-specific arguments take
        precedence.
        """
        seen_names = set()
        result = []
        for arg in list(cls.ARGUMENTS) + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)
        return result

    @classmethod
    def get_slug(cls) -> str:
        return cls.SLUG or cls.__name__.lower()

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, slug, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'slug': cls.get_slug(),
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        input_state: Optional[InputState] = None,
        scheduler: Optional[TaskScheduler] = None,
        sound: Optional['SoundBoard'] = None,
        high_scores: Optional['HighScoreStore'] = None,
        tuning: Optional[BaseModel] = None,
        seed: Optional[int] = None,
        **kwargs,
    ):
        """Initialize base game.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels
            input_state: Shared input record (a private one if omitted)
            scheduler: Deferred-task scheduler (a private one if omitted)
            sound: Sound capability; None plays nothing
            high_scores: High-score capability; None keeps it in memory
            tuning: Tuning model instance, or a preset/path string. None
                uses the model defaults.
            seed: Random seed for spawn positions and serve direction
        """
        # Launcher passes through every parsed CLI value
        kwargs.pop('tuning_path', None)
        if kwargs:
            log.debug("%s ignoring unused options: %s", self.NAME, sorted(kwargs))

        self.width = width
        self.height = height
        self.input = input_state if input_state is not None else InputState()
        self.scheduler = scheduler if scheduler is not None else TaskScheduler()
        self._sound = sound
        self.rng = random.Random(seed)

        if tuning is None or isinstance(tuning, (str, Path)):
            tuning = load_tuning(self.TUNING_MODEL, tuning, self.TUNING_DIR)
        self.tuning = tuning

        self._held: FrozenSet[Action] = frozenset()
        self._previous_held: FrozenSet[Action] = frozenset()

        self.session = SessionController(
            game=self.get_slug(),
            starting_resource=self._starting_resource(),
            on_reset=self._on_reset,
            high_scores=high_scores,
        )

    # =========================================================================
    # Session
    # =========================================================================

    @property
    def state(self) -> GameState:
        """Current game state (standard interface)."""
        session = self.session.state
        if session.phase == SessionPhase.IDLE:
            return GameState.IDLE
        if session.phase == SessionPhase.RUNNING:
            return GameState.PLAYING
        if session.result == SessionResult.WIN:
            return GameState.WON
        return GameState.GAME_OVER

    def get_score(self) -> int:
        return self.session.state.score

    def start(self) -> None:
        self.session.start()

    def reset(self) -> None:
        """Explicit restart. The only way out of an ended session."""
        self.session.reset()

    def _on_reset(self) -> None:
        cancelled = self.scheduler.cancel_all()
        if cancelled:
            log.debug("%s reset cancelled %d pending task(s)", self.NAME, cancelled)
        # Keys still held across a restart must not count as fresh presses
        self._held = self._previous_held = self.input.snapshot()
        self.input.take_slot()
        self._reset_entities()

    # =========================================================================
    # Simulation
    # =========================================================================

    def step(self) -> None:
        """One simulation step. Does nothing unless the session is running."""
        if not self.session.state.running:
            return
        self.session.state.frames += 1
        self._held = self.input.snapshot()
        self._simulate()
        self._previous_held = self._held
        self.session.evaluate()

    def held(self, action: Action) -> bool:
        """True if the action is held this step."""
        return action in self._held

    def pressed(self, action: Action) -> bool:
        """True only on the step where the action goes from released to held."""
        return pressed_since(self._previous_held, self._held, action)

    @abstractmethod
    def _starting_resource(self) -> int:
        """Lives or health at the start of each session."""
        pass

    @abstractmethod
    def _reset_entities(self) -> None:
        """Replace every entity collection with a fresh session's."""
        pass

    @abstractmethod
    def _simulate(self) -> None:
        """Read input, integrate, resolve collisions and apply game rules."""
        pass

    @abstractmethod
    def render(self, canvas: 'Canvas') -> None:
        """Draw the current state. Must not mutate entities."""
        pass

    # =========================================================================
    # Helpers for subclasses
    # =========================================================================

    def _play(self, clip: str) -> None:
        """Fire-and-forget sound effect."""
        if self._sound is not None:
            self._sound.play(clip)

    def _render_hud(self, canvas: 'Canvas', resource_label: Optional[str] = None) -> None:
        """Score, resource and high score, plus the end-of-session overlay."""
        session = self.session.state
        canvas.text(f"Score: {session.score}", 10, 10)
        if resource_label:
            canvas.text(resource_label, 10, 36)
        canvas.text(f"High: {session.displayed_high_score}", canvas.width - 140, 10)

        if not session.ended:
            return

        canvas.overlay()
        cx, cy = canvas.width / 2, canvas.height / 2
        if session.result == SessionResult.WIN:
            canvas.text("YOU WIN!", cx, cy - 40, color=(120, 255, 120), size=64, center=True)
        else:
            canvas.text("GAME OVER", cx, cy - 40, color=(255, 90, 90), size=64, center=True)
        canvas.text(f"Score: {session.score}", cx, cy + 10, center=True)
        canvas.text("Press Enter to play again", cx, cy + 45, size=24, center=True)
