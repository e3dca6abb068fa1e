"""Drawing surface wrapper used by every render step.

Canvas exposes the handful of primitives the games need: fills, rectangles,
circles, image blits and text. Images come from an optional assets
directory. A missing or undecodable image is logged once and drawn as a
plain rectangle from then on.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from cabinet.logging import get_logger

log = get_logger('render')

RGB = Tuple[int, int, int]


class ImageCache:
    """Loads images by name from an assets directory, caching failures too."""

    def __init__(self, assets_dir: Optional[Path] = None):
        self._assets_dir = Path(assets_dir) if assets_dir else None
        self._images: Dict[str, Optional[pygame.Surface]] = {}

    def get(self, name: str) -> Optional[pygame.Surface]:
        """Return the image, or None if it is unavailable."""
        if name not in self._images:
            self._images[name] = self._load(name)
        return self._images[name]

    def _load(self, name: str) -> Optional[pygame.Surface]:
        if self._assets_dir is None:
            return None
        path = self._assets_dir / name
        try:
            return pygame.image.load(str(path))
        except (FileNotFoundError, pygame.error) as e:
            log.warning("Image %s unavailable, drawing placeholder: %s", path, e)
            return None


class Canvas:
    """Primitive draw operations on a pygame surface."""

    def __init__(self, surface: pygame.Surface, images: Optional[ImageCache] = None):
        self._surface = surface
        self._images = images or ImageCache()
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def clear(self, color: RGB = (0, 0, 0)) -> None:
        self._surface.fill(color)

    def rect(self, x: float, y: float, w: float, h: float, color: RGB, outline: int = 0) -> None:
        pygame.draw.rect(self._surface, color, pygame.Rect(int(x), int(y), int(w), int(h)), outline)

    def circle(self, x: float, y: float, r: float, color: RGB) -> None:
        pygame.draw.circle(self._surface, color, (int(x), int(y)), max(1, int(r)))

    def line(self, start: Tuple[float, float], end: Tuple[float, float], color: RGB, width: int = 1) -> None:
        pygame.draw.line(self._surface, color, start, end, width)

    def image(self, name: str, x: float, y: float, w: float, h: float, fallback: RGB) -> None:
        """Blit a named image scaled to (w, h), or a filled rectangle if missing."""
        img = self._images.get(name)
        if img is None:
            self.rect(x, y, w, h, fallback)
            return
        if img.get_size() != (int(w), int(h)):
            img = pygame.transform.scale(img, (int(w), int(h)))
        self._surface.blit(img, (int(x), int(y)))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def text(
        self,
        text: str,
        x: float,
        y: float,
        color: RGB = (255, 255, 255),
        size: int = 28,
        center: bool = False,
    ) -> None:
        rendered = self._font(size).render(text, True, color)
        rect = rendered.get_rect()
        if center:
            rect.center = (int(x), int(y))
        else:
            rect.topleft = (int(x), int(y))
        self._surface.blit(rendered, rect)

    def overlay(self, color: RGB = (0, 0, 0), alpha: int = 160) -> None:
        """Darken the whole surface (end-of-session screens)."""
        shade = pygame.Surface(self._surface.get_size(), pygame.SRCALPHA)
        shade.fill((*color, alpha))
        self._surface.blit(shade, (0, 0))
