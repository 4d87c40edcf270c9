from __future__ import annotations

from dataclasses import dataclass

import pygame

from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    size: tuple[int, int]
    caption: str = "Pookalam"
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        logger.info("Opening %dx%d window", *self.size)
        self.screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        pygame.display.set_caption(self.caption)
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")
