"""Screen settings and display initialisation."""

from __future__ import annotations

import pygame

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
GAME_TITLE = "CLICKER ALPHA"


class InitError(RuntimeError):
    """Raised when the display or one of its subsystems cannot be started."""


def init_display() -> pygame.Surface:
    """Start the video and font subsystems and open the game window.

    Returns the window surface that everything is drawn onto.
    """
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise InitError(f"video could not initialize: {exc}") from exc

    if not pygame.image.get_extended():
        raise InitError("image loading could not initialize: PNG support is missing")

    try:
        pygame.font.init()
    except pygame.error as exc:
        raise InitError(f"fonts could not initialize: {exc}") from exc

    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SHOWN)
    except pygame.error as exc:
        raise InitError(f"window could not be created: {exc}") from exc

    pygame.display.set_caption(GAME_TITLE)
    return window