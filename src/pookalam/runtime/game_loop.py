from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

import pygame

from pookalam.runtime.display_context import DisplayContext
from pookalam.runtime.event_handler import PygameEventHandler
from pookalam.runtime.streams import RuntimeStreams
from pookalam.utilities.logging import get_logger

if TYPE_CHECKING:
    from pookalam.renderers import StatefulBaseRenderer

logger = get_logger(__name__)

DEFAULT_MAX_FPS = 60
BACKGROUND = (0, 0, 0)


class GameLoop:
    """Single-threaded frame loop: events, tick, render, flip, pace."""

    def __init__(
        self,
        display: DisplayContext,
        streams: RuntimeStreams,
        event_handler: PygameEventHandler,
        max_fps: int = DEFAULT_MAX_FPS,
    ) -> None:
        self.display = display
        self.streams = streams
        self.event_handler = event_handler
        self.max_fps = max_fps
        self.renderers: list["StatefulBaseRenderer[Any]"] = []
        self.initialized = False
        self.running = False
        self._frames = itertools.count()

    def add_renderer(self, renderer: "StatefulBaseRenderer[Any]") -> None:
        self.renderers.append(renderer)

    def _initialize(self) -> None:
        self.display.initialize()
        self.display.ensure_initialized()
        for renderer in self.renderers:
            logger.info("Initializing renderer %s", renderer.name)
            renderer.initialize(
                window=self.display.screen,
                clock=self.display.clock,
                streams=self.streams,
            )
        self.initialized = True

    def one_loop(self) -> None:
        screen = self.display.screen
        screen.fill(BACKGROUND)
        self.streams.game_tick.on_next(next(self._frames))
        for renderer in self.renderers:
            renderer._internal_process(screen, self.display.clock)
        pygame.display.flip()

    def start(self) -> None:
        logger.info("Starting GameLoop")
        if not self.renderers:
            raise RuntimeError("Unable to start as no renderers were added.")
        if not self.initialized:
            self._initialize()

        self.running = True
        try:
            while self.running:
                self.running = self.event_handler.handle_events()
                if not self.running:
                    break
                self.one_loop()
                self.display.clock.tick(self.max_fps)
        finally:
            logger.info("Shutting down GameLoop.")
            for renderer in self.renderers:
                renderer.reset()
            pygame.quit()
