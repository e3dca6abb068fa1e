"""
Game Host - pygame window, event pump and capability wiring.

The host owns everything outside the game: the display surface, the sound
board, the high-score store, the keyboard/mouse source and the loop. It
hands the game its capabilities at construction and then runs frames until
the window is closed.

Host keys (not game actions):
    Enter   start a new session once the current one has ended
    F11     toggle fullscreen (best effort)
    Esc     quit
"""

from typing import Any, Callable, Optional

import pygame

from cabinet.audio import SoundBoard
from cabinet.config import DisplaySettings
from cabinet.errors import RenderSurfaceError
from cabinet.game import ArcadeGame
from cabinet.input import InputState
from cabinet.input.sources import KeyboardMouseSource
from cabinet.logging import close_all_sinks, get_logger, open_record_sink, register_sink
from cabinet.loop import LoopDriver, PygameFrameSource
from cabinet.render import Canvas, ImageCache
from cabinet.scores import create_high_score_store

log = get_logger('host')

GameFactory = Callable[..., ArcadeGame]

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def open_surface(settings: DisplaySettings) -> pygame.Surface:
    """Create the display surface.

    Raises:
        RenderSurfaceError: If no display is available
    """
    flags = pygame.FULLSCREEN if settings.fullscreen else 0
    size = (0, 0) if settings.fullscreen else (settings.width, settings.height)
    try:
        surface = pygame.display.set_mode(size, flags)
    except pygame.error as e:
        raise RenderSurfaceError(f"Could not create a {size[0]}x{size[1]} display: {e}") from e
    if surface is None:
        raise RenderSurfaceError("Display returned no surface")
    return surface


class GameHost:
    """Runs one game in a pygame window.

    Args:
        settings: Window, frame rate and capability settings
    """

    def __init__(self, settings: DisplaySettings):
        self.settings = settings
        self.input = InputState()
        self.source = KeyboardMouseSource(self.input)
        self.game: Optional[ArcadeGame] = None
        self._frames: Optional[PygameFrameSource] = None

    def create_game(self, factory: GameFactory, surface: pygame.Surface, **game_kwargs: Any) -> ArcadeGame:
        """Build the game with the host's capabilities injected."""
        width, height = surface.get_size()
        slug = getattr(factory, 'get_slug', lambda: 'game')()

        sound = SoundBoard(enabled=self.settings.audio_enabled, assets_dir=self.settings.assets_dir)
        high_scores = create_high_score_store(self.settings.high_score_path, slug)
        if high_scores is None:
            log.debug("High scores are not persisted")

        self.game = factory(
            width=width,
            height=height,
            input_state=self.input,
            sound=sound,
            high_scores=high_scores,
            **game_kwargs,
        )
        return self.game

    def toggle_fullscreen(self) -> bool:
        """Flip fullscreen. Unsupported displays are logged and ignored."""
        try:
            pygame.display.toggle_fullscreen()
        except pygame.error as e:
            log.debug("Fullscreen toggle unavailable: %s", e)
            return False
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one pygame event. Returns False to stop the host."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_F11:
                self.toggle_fullscreen()
                return True
            if event.key in RESTART_KEYS:
                if self.game is not None and not self.game.session.state.running:
                    self.game.reset()
                return True

        self.source.handle_event(event)
        return True

    def run(self, factory: GameFactory, **game_kwargs: Any) -> int:
        """Open the window, start the game and block until it is closed.

        Raises:
            RenderSurfaceError: If the display cannot be created
        """
        pygame.init()
        try:
            surface = open_surface(self.settings)
            game = self.create_game(factory, surface, **game_kwargs)
            pygame.display.set_caption(game.NAME)
            register_sink('sessions', open_record_sink('sessions', session_name=game.get_slug()))

            canvas = Canvas(surface, ImageCache(self.settings.assets_dir))
            self._frames = PygameFrameSource(self.settings.fps, on_event=self.handle_event)
            driver = LoopDriver(game, canvas, self._frames)

            log.info("Running %s at %dx%d, %d fps",
                     game.NAME, surface.get_width(), surface.get_height(), self.settings.fps)
            game.start()
            driver.start()
            self._frames.run()
            driver.stop()
            log.info("Final score: %d (high %d)",
                     game.get_score(), game.session.state.high_score)
        finally:
            close_all_sinks()
            pygame.quit()
        return 0
