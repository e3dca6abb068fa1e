"""Session state machine.

    IDLE --start--> RUNNING --end(win|loss)--> ENDED --reset--> RUNNING

A session never leaves ENDED on its own; only an explicit reset starts the
next one. Win and loss are both ENDED, told apart by `result`.

SessionState replaces the loose score/running/lives globals: the controller
owns it and the game hands it to the simulation and render steps.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from cabinet.logging import emit_record, get_logger
from cabinet.scores import HighScoreStore
from models import SessionSummary

log = get_logger('session')


class SessionPhase(Enum):
    """Where the session is in its lifecycle."""
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class SessionResult(Enum):
    """How an ended session finished."""
    WIN = "win"
    LOSS = "loss"


@dataclass
class SessionState:
    """Score, high score and the depletable resource for one game."""
    phase: SessionPhase = SessionPhase.IDLE
    score: int = 0
    high_score: int = 0
    resource: int = 0                    # lives or health
    result: Optional[SessionResult] = None
    frames: int = 0                      # simulation steps this session

    @property
    def running(self) -> bool:
        return self.phase == SessionPhase.RUNNING

    @property
    def ended(self) -> bool:
        return self.phase == SessionPhase.ENDED

    @property
    def displayed_high_score(self) -> int:
        """The high score as the HUD shows it: beaten scores show at once.

        high_score itself only moves when the session ends.
        """
        return max(self.score, self.high_score)


class SessionController:
    """Owns SessionState and every transition on it.

    Args:
        game: Game slug, used for high-score storage and session records
        starting_resource: Lives or health at the start of each session
        on_reset: Re-seeds the game's entity collections
        high_scores: Optional persisted high-score capability. Without it
            the high score lives only as long as the process.
    """

    def __init__(
        self,
        game: str,
        starting_resource: int,
        on_reset: Callable[[], None],
        high_scores: Optional[HighScoreStore] = None,
    ):
        self._game = game
        self._starting_resource = starting_resource
        self._on_reset = on_reset
        self._high_scores = high_scores
        self.state = SessionState(resource=starting_resource)
        self.state.high_score = self._load_high_score()

    def _load_high_score(self) -> int:
        if self._high_scores is None:
            log.debug("%s: no high-score store, scores will not persist", self._game)
            return 0
        return max(0, self._high_scores.get())

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self) -> None:
        """IDLE -> RUNNING. From any other phase this is a reset."""
        if self.state.phase != SessionPhase.IDLE:
            self.reset()
            return
        self._on_reset()
        self.state.phase = SessionPhase.RUNNING
        log.info("%s: session started", self._game)

    def reset(self) -> None:
        """Start a fresh session: zero the score, refill, re-seed entities."""
        self.state.score = 0
        self.state.resource = self._starting_resource
        self.state.result = None
        self.state.frames = 0
        self._on_reset()
        self.state.phase = SessionPhase.RUNNING
        log.info("%s: session reset", self._game)

    def end(self, result: SessionResult) -> None:
        """RUNNING -> ENDED. Finalises the score and the high score."""
        if self.state.phase != SessionPhase.RUNNING:
            return
        self.state.phase = SessionPhase.ENDED
        self.state.result = result
        new_high = self.commit_high_score()
        log.info("%s: session ended (%s) score=%d high=%d",
                 self._game, result.value, self.state.score, self.state.high_score)
        emit_record('sessions', SessionSummary(
            game=self._game,
            result=result.value,
            score=self.state.score,
            high_score=self.state.high_score,
            new_high_score=new_high,
            frames=self.state.frames,
        ).model_dump())

    # =========================================================================
    # Score and resource
    # =========================================================================

    def add_score(self, points: int) -> int:
        """Add points. Negative amounts are rejected so score never decreases."""
        if points < 0:
            raise ValueError(f"Score increments must be non-negative, got {points}")
        self.state.score += points
        return self.state.score

    def deplete(self, amount: int = 1) -> int:
        """Take from the resource, clamped at zero. Returns what is left."""
        self.state.resource = max(0, self.state.resource - amount)
        return self.state.resource

    def restore(self, amount: int, cap: Optional[int] = None) -> int:
        """Give back resource (health packs), optionally capped."""
        value = self.state.resource + amount
        if cap is not None:
            value = min(cap, value)
        self.state.resource = value
        return self.state.resource

    def evaluate(self) -> bool:
        """End the session with a loss if the resource is exhausted.

        Returns:
            True if this call ended the session
        """
        if self.state.running and self.state.resource <= 0:
            self.end(SessionResult.LOSS)
            return True
        return False

    def commit_high_score(self) -> bool:
        """Raise the high score to the current score if it beats it.

        Values at or below the current high score never change it. The store
        is written once per qualifying call.

        Returns:
            True if the high score changed
        """
        if self.state.score <= self.state.high_score:
            return False
        self.state.high_score = self.state.score
        if self._high_scores is not None:
            self._high_scores.set(self.state.high_score)
        return True
