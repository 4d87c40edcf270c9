from __future__ import annotations

import pygame

from pookalam.runtime.streams import RuntimeStreams
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    def __init__(self, streams: RuntimeStreams) -> None:
        self._streams = streams

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, stopping")
                running = False
            else:
                self._streams.events.on_next(event)
        return running
