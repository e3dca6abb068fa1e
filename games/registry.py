"""
Game Registry - Auto-discovery of cabinet games.

Games are discovered by scanning the games/ directory for subdirectories
containing a game_mode.py with a class inheriting from ArcadeGame.

Game metadata and CLI arguments are read from the game class itself (via
ArcadeGame class attributes).

Usage:
    from games.registry import get_registry

    registry = get_registry()
    available = registry.list_games()  # ['brickbreaker', 'flappybird', ...]

    info = registry.get_game_info('flappybird')
    args = registry.get_game_arguments('platformshooter')

    game = registry.create_game('brickbreaker', width=800, height=600)
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from cabinet.errors import UnknownGameError
from cabinet.game import ArcadeGame
from cabinet.logging import get_logger

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.FlappyBird'

    arguments: List[Dict[str, Any]] = field(default_factory=list)

    # Bundled tuning presets (tuning/*.yaml)
    presets: List[str] = field(default_factory=list)


class GameRegistry:
    """
    Registry for auto-discovering cabinet games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Importing it as games.<Dir>.game_mode
    3. Taking the first ArcadeGame subclass defined in that module
    4. Reading metadata from its class attributes (NAME, SLUG, etc.)
    """

    SKIP_DIRS = {'base', 'common', '__pycache__', 'tests'}

    def __init__(self, games_dir: Path = GAMES_DIR, package: str = 'games'):
        """
        Args:
            games_dir: Directory holding one subdirectory per game
            package: Import name of games_dir
        """
        self._games_dir = Path(games_dir)
        self._package = package
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type[ArcadeGame]] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        if not self._games_dir.exists():
            log.warning("Games directory %s does not exist", self._games_dir)
            return

        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith('_') or game_dir.name.startswith('.'):
                continue
            if game_dir.name.lower() in self.SKIP_DIRS:
                continue
            if (game_dir / 'game_mode.py').exists():
                self._register_game(game_dir)

        log.debug("Discovered games: %s", ', '.join(self.list_games()) or 'none')

    def _register_game(self, game_dir: Path) -> None:
        """Register a game from its directory. Broken games are skipped."""
        module_path = f"{self._package}.{game_dir.name}"

        try:
            game_class = self._find_game_class(module_path)
        except Exception as e:
            log.warning("Failed to load game from %s: %s", game_dir, e)
            return

        if game_class is None:
            log.warning("No ArcadeGame subclass in %s/game_mode.py", game_dir)
            return

        slug = game_class.get_slug()
        if slug in self._games:
            log.warning("Duplicate game slug %r in %s, keeping %s",
                        slug, game_dir, self._games[slug].module_path)
            return

        presets = []
        if game_class.TUNING_DIR is not None and Path(game_class.TUNING_DIR).is_dir():
            presets = sorted(p.stem for p in Path(game_class.TUNING_DIR).glob('*.yaml'))

        self._game_classes[slug] = game_class
        self._games[slug] = GameInfo(
            name=game_class.NAME,
            slug=slug,
            description=game_class.DESCRIPTION,
            version=game_class.VERSION,
            author=game_class.AUTHOR,
            module_path=module_path,
            arguments=game_class.get_arguments(),
            presets=presets,
        )

    @staticmethod
    def _find_game_class(module_path: str) -> Optional[Type[ArcadeGame]]:
        """Find the ArcadeGame subclass defined in <module_path>.game_mode."""
        module = importlib.import_module(f"{module_path}.game_mode")

        for _, obj in inspect.getmembers(module, inspect.isclass):
            # Skip imported classes (only want classes defined in this module)
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, ArcadeGame) and obj is not ArcadeGame and not inspect.isabstract(obj):
                return obj

        return None

    def list_games(self) -> List[str]:
        """Sorted slugs of every registered game."""
        return sorted(self._games.keys())

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """CLI argument definitions for a game, or [] if unknown."""
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def get_game_class(self, slug: str) -> Type[ArcadeGame]:
        """
        Get the game class for a slug.

        Raises:
            UnknownGameError: If no game has that slug
        """
        game_class = self._game_classes.get(slug.lower())
        if game_class is None:
            available = ', '.join(self.list_games())
            raise UnknownGameError(f"Unknown game: {slug}. Available: {available}")
        return game_class

    def get_all_games(self) -> Dict[str, GameInfo]:
        return self._games.copy()

    def create_game(self, slug: str, **kwargs) -> ArcadeGame:
        """
        Create a game instance.

        Args:
            slug: Game identifier
            **kwargs: Passed to the game constructor (width, height,
                capabilities and game-specific options)

        Raises:
            UnknownGameError: If no game has that slug
        """
        return self.get_game_class(slug)(**kwargs)


# Singleton instance for convenience
_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get the global game registry, discovering games on first use."""
    global _registry
    if _registry is None:
        _registry = GameRegistry()
    return _registry
