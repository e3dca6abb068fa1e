"""Frame-driven game loop.

The loop is a "run on next frame" primitive: a FrameSource calls back once
per display refresh, and the LoopDriver re-requests a frame at the end of
each callback. Each frame:

    1. run due scheduled tasks (reload timers and the like)
    2. if the session is running, run exactly one simulation step
    3. always run one render step

There is no catch-up and no fixed-timestep accumulator, so simulation speed
follows the display refresh rate. If the frame source never calls back, the
game never advances; there is no fallback poller. Stopping is simply not
requesting another frame.
"""

import time
from typing import Callable, List, Optional, Protocol, TYPE_CHECKING

import pygame

from cabinet.logging import LogLevel, get_logger

if TYPE_CHECKING:
    from cabinet.game import ArcadeGame
    from cabinet.render import Canvas

log = get_logger('loop')

FrameCallback = Callable[[], None]


class FrameSource(Protocol):
    """Something that calls back once per display refresh."""

    def request_frame(self, callback: FrameCallback) -> None: ...

    def cancel_frame(self) -> None: ...

    def now_ms(self) -> float: ...


class ManualFrameSource:
    """Frames on demand with a synthetic clock.

    Used for headless runs and tests: advance(n) delivers n frames, each
    moving the clock forward by one frame period.
    """

    def __init__(self, fps: int = 60):
        self._period_ms = 1000.0 / fps
        self._now_ms = 0.0
        self._pending: Optional[FrameCallback] = None
        self.frames_delivered = 0

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel_frame(self) -> None:
        self._pending = None

    def now_ms(self) -> float:
        return self._now_ms

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def advance(self, frames: int = 1) -> int:
        """Deliver up to `frames` frames. Returns how many were delivered."""
        delivered = 0
        for _ in range(frames):
            callback, self._pending = self._pending, None
            if callback is None:
                break
            self._now_ms += self._period_ms
            callback()
            delivered += 1
        self.frames_delivered += delivered
        return delivered


class PygameFrameSource:
    """Frames paced by pygame's clock, with the event pump in between.

    Args:
        fps: Target frame rate passed to Clock.tick
        on_event: Receives every pygame event before the frame callback.
            Return False from it to stop the source (window closed).
    """

    def __init__(self, fps: int = 60, on_event: Optional[Callable[[pygame.event.Event], bool]] = None):
        self._fps = fps
        self._on_event = on_event
        self._clock = pygame.time.Clock()
        self._pending: Optional[FrameCallback] = None
        self._running = False

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel_frame(self) -> None:
        self._pending = None

    def now_ms(self) -> float:
        return float(pygame.time.get_ticks())

    def stop(self) -> None:
        self._running = False

    def run(self) -> None:
        """Block delivering frames until stopped or no frame is requested."""
        self._running = True
        while self._running and self._pending is not None:
            for event in pygame.event.get():
                if self._on_event is not None and self._on_event(event) is False:
                    self._running = False
            if not self._running:
                break

            callback, self._pending = self._pending, None
            callback()
            pygame.display.flip()
            self._clock.tick(self._fps)


class LoopDriver:
    """Runs simulation and render steps for one game, one frame at a time."""

    def __init__(self, game: 'ArcadeGame', canvas: 'Canvas', frames: FrameSource):
        self._game = game
        self._canvas = canvas
        self._frames = frames
        self._stopped = True
        self.frame_count = 0
        self.steps_simulated = 0
        self._after_frame: List[FrameCallback] = []

    @property
    def running(self) -> bool:
        return not self._stopped

    def add_after_frame(self, callback: FrameCallback) -> None:
        """Extra work after each render (HUD mirroring, diagnostics)."""
        self._after_frame.append(callback)

    def start(self) -> None:
        if not self._stopped:
            return
        self._stopped = False
        log.debug("Loop started for %s", self._game.NAME)
        self._frames.request_frame(self._on_frame)

    def stop(self) -> None:
        """Stop rescheduling and drop the requested frame.

        Called from inside a frame, that frame still completes.
        """
        self._stopped = True
        self._frames.cancel_frame()
        log.debug("Loop stopped after %d frames", self.frame_count)

    def frame(self) -> None:
        """One frame: due tasks, at most one simulation step, one render."""
        self._game.scheduler.run_due(self._frames.now_ms())
        if self._game.session.state.running:
            started = time.perf_counter()
            self._game.step()
            self.steps_simulated += 1
            if log.is_enabled_for(LogLevel.TRACE):
                log.trace("step %d took %.2f ms", self.steps_simulated,
                          (time.perf_counter() - started) * 1000.0)
        self._game.render(self._canvas)
        for callback in self._after_frame:
            callback()
        self.frame_count += 1

    def _on_frame(self) -> None:
        if self._stopped:
            return
        self.frame()
        if not self._stopped:
            self._frames.request_frame(self._on_frame)
