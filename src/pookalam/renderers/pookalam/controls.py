from __future__ import annotations

from dataclasses import replace

import pygame

from pookalam.patterns.parameters import PRESETS, GenerationParameters
from pookalam.renderers.pookalam.provider import PookalamStateProvider
from pookalam.renderers.pookalam.render import RenderOptions
from pookalam.renderers.pookalam.view import (DEFAULT_MAX_ZOOM,
                                              DEFAULT_MIN_ZOOM,
                                              DEFAULT_ZOOM_STEP, Viewport,
                                              ViewTransform, reset_view)
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

SPEED_STEP = 0.5
LEFT_BUTTON = 1


class PookalamControls:
    """Own the view transform and display toggles; forward transport to the provider."""

    def __init__(
        self,
        provider: PookalamStateProvider,
        viewport: Viewport,
        *,
        options: RenderOptions = RenderOptions(),
        zoom_step: float = DEFAULT_ZOOM_STEP,
        min_zoom: float = DEFAULT_MIN_ZOOM,
        max_zoom: float = DEFAULT_MAX_ZOOM,
    ) -> None:
        self.provider = provider
        self.viewport = viewport
        self.options = options
        self.zoom_step = zoom_step
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.view = ViewTransform()
        self.dragging = False
        self._last_mouse: tuple[int, int] = (0, 0)
        self._preset_names = list(PRESETS)
        self._preset_index = -1
        self._publish_bounds()

    def _publish_bounds(self) -> None:
        if self.provider.view_dependent:
            self.provider.set_bounds(self.view.visible_bounds(self.viewport))

    def set_view(self, view: ViewTransform) -> None:
        if view == self.view:
            return
        self.view = view
        self._publish_bounds()

    def resize(self, size: tuple[int, int]) -> None:
        width, height = size
        if (width, height) == (self.viewport.width, self.viewport.height):
            return
        self.viewport = replace(self.viewport, width=width, height=height)
        self._publish_bounds()

    def reset_view(self) -> None:
        self.set_view(reset_view())

    def zoom_at(self, pivot: tuple[float, float], direction: int) -> None:
        self.set_view(
            self.view.wheel_zoom(
                self.viewport,
                pivot,
                direction,
                step=self.zoom_step,
                min_zoom=self.min_zoom,
                max_zoom=self.max_zoom,
            )
        )

    def zoom_at_center(self, direction: int) -> None:
        self.zoom_at((self.viewport.width / 2, self.viewport.height / 2), direction)

    def toggle_grid(self) -> None:
        self.options = replace(self.options, show_grid=not self.options.show_grid)

    def toggle_labels(self) -> None:
        self.options = replace(self.options, show_labels=not self.options.show_labels)

    def next_preset(self) -> GenerationParameters:
        self._preset_index = (self._preset_index + 1) % len(self._preset_names)
        name = self._preset_names[self._preset_index]
        current = self.provider.parameters
        # Presets are authored at size 100; keep the current on-screen size.
        parameters = PRESETS[name].with_changes(size=current.size)
        logger.info("Switching to preset '%s'", name)
        self.provider.set_parameters(parameters)
        return parameters

    def shift_style(self, delta: int) -> None:
        current = self.provider.parameters
        self.provider.set_parameters(current.with_changes(style=int(current.style) + delta))

    def handle_event(self, event: pygame.event.Event) -> None:
        match event.type:
            case pygame.MOUSEBUTTONDOWN if event.button == LEFT_BUTTON:
                self.dragging = True
                self._last_mouse = event.pos
            case pygame.MOUSEBUTTONUP if event.button == LEFT_BUTTON:
                self.dragging = False
            case pygame.WINDOWLEAVE:
                self.dragging = False
            case pygame.MOUSEMOTION if self.dragging:
                dx = event.pos[0] - self._last_mouse[0]
                dy = event.pos[1] - self._last_mouse[1]
                self._last_mouse = event.pos
                self.set_view(self.view.dragged(self.viewport, dx, dy))
            case pygame.MOUSEWHEEL:
                self.zoom_at(pygame.mouse.get_pos(), event.y)
            case pygame.KEYDOWN:
                self._handle_key(event.key)

    def _handle_key(self, key: int) -> None:
        match key:
            case pygame.K_SPACE:
                self.provider.toggle()
            case pygame.K_p:
                self.provider.play()
            case pygame.K_r:
                self.provider.reset()
            case pygame.K_v:
                self.reset_view()
            case pygame.K_g:
                self.toggle_grid()
            case pygame.K_l:
                self.toggle_labels()
            case pygame.K_UP:
                self.provider.set_speed(self.provider.speed + SPEED_STEP)
            case pygame.K_DOWN:
                self.provider.set_speed(self.provider.speed - SPEED_STEP)
            case pygame.K_EQUALS | pygame.K_PLUS | pygame.K_KP_PLUS:
                self.zoom_at_center(1)
            case pygame.K_MINUS | pygame.K_KP_MINUS:
                self.zoom_at_center(-1)
            case pygame.K_TAB:
                self.next_preset()
            case pygame.K_LEFTBRACKET:
                self.shift_style(-1)
            case pygame.K_RIGHTBRACKET:
                self.shift_style(1)
