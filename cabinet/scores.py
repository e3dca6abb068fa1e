"""High-score storage capabilities.

A game only sees get() and set(). The storage format belongs to the store:
JsonHighScoreStore keeps one HighScoreTable file shared by every game.
Storage failures are logged and never reach the game.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from cabinet.logging import get_logger
from models import HighScoreTable

log = get_logger('scores')


@runtime_checkable
class HighScoreStore(Protocol):
    """Persisted high score for one game."""

    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """High score kept in memory. Counts writes, which tests rely on."""

    def __init__(self, initial: int = 0):
        self._value = initial
        self.writes = 0

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = value
        self.writes += 1


class JsonHighScoreStore:
    """High score for one game slug inside a shared JSON table.

    A missing file reads as 0. A corrupt file is logged and treated as
    empty; the next write replaces it.
    """

    def __init__(self, path: Path, game: str):
        self._path = Path(path)
        self._game = game

    def _read_table(self) -> HighScoreTable:
        if not self._path.exists():
            return HighScoreTable()
        try:
            return HighScoreTable.load(self._path)
        except (OSError, ValueError) as e:  # ValidationError is a ValueError
            log.warning("Could not read high scores from %s: %s", self._path, e)
            return HighScoreTable()

    def get(self) -> int:
        return self._read_table().get(self._game)

    def set(self, value: int) -> None:
        table = self._read_table()
        scores = dict(table.scores)
        scores[self._game] = value
        updated = table.model_copy(update={'scores': scores, 'updated': datetime.now()})
        try:
            updated.save(self._path)
        except OSError as e:
            log.warning("Could not save high score to %s: %s", self._path, e)
            return
        log.debug("Saved high score %d for %s", value, self._game)


def create_high_score_store(path: Optional[Path], game: str) -> Optional[HighScoreStore]:
    """Factory: a JSON-backed store, or None when persistence is off."""
    if path is None:
        return None
    return JsonHighScoreStore(path, game)
