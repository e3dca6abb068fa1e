"""
Pydantic models for persisted high scores and session summaries.

The high-score table is the only persisted state: one non-negative integer
per game slug, stored as JSON.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field


class HighScoreTable(BaseModel):
    """High scores for every game, keyed by game slug."""
    version: str = "1.0"
    scores: Dict[str, int] = Field(default_factory=dict)
    updated: Optional[datetime] = None

    def get(self, game: str) -> int:
        return self.scores.get(game, 0)

    def save(self, filepath: Path) -> None:
        """Save the table to a JSON file, creating parent directories."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, filepath: Path) -> 'HighScoreTable':
        """Load the table from a JSON file.

        Raises:
            OSError: If the file cannot be read
            ValidationError: If the content is not a valid table (bad
                encoding included)
        """
        return cls.model_validate_json(Path(filepath).read_bytes())


class SessionSummary(BaseModel):
    """What a finished session looked like, for the structured session log."""
    game: str
    result: str
    score: int = Field(..., ge=0)
    high_score: int = Field(..., ge=0)
    new_high_score: bool = False
    frames: int = Field(default=0, ge=0)
