"""Shared pytest setup: headless SDL so pygame works without a display."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
# Keep test runs from writing session logs or picking up a developer's .env levels
os.environ.setdefault('CABINET_LOG_LEVEL', 'WARNING')

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def pygame_init():
    """Initialise pygame (display and font) for a test, quit after."""
    pygame.init()
    yield
    pygame.quit()
