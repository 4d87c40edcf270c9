from __future__ import annotations

from dataclasses import dataclass, replace

from pookalam.patterns.sampler import ViewBounds

DEFAULT_MIN_ZOOM = 0.1
DEFAULT_MAX_ZOOM = 10.0
DEFAULT_ZOOM_STEP = 0.1


@dataclass(frozen=True)
class Viewport:
    """Drawing surface size and world units to pixels at zoom 1."""

    width: int
    height: int
    scale: float = 45.0


@dataclass(frozen=True)
class ViewTransform:
    offset_x: float = 0.0
    offset_y: float = 0.0
    zoom: float = 1.0

    def pixels_per_unit(self, viewport: Viewport) -> float:
        return viewport.scale * self.zoom

    def to_surface(self, viewport: Viewport, x: float, y: float) -> tuple[float, float]:
        ppu = self.pixels_per_unit(viewport)
        return (
            viewport.width / 2 + (x + self.offset_x) * ppu,
            viewport.height / 2 - (y + self.offset_y) * ppu,
        )

    def to_world(self, viewport: Viewport, sx: float, sy: float) -> tuple[float, float]:
        ppu = self.pixels_per_unit(viewport)
        return (
            (sx - viewport.width / 2) / ppu - self.offset_x,
            (viewport.height / 2 - sy) / ppu - self.offset_y,
        )

    def visible_bounds(self, viewport: Viewport) -> ViewBounds:
        x_min, y_max = self.to_world(viewport, 0, 0)
        x_max, y_min = self.to_world(viewport, viewport.width, viewport.height)
        return ViewBounds(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)

    def dragged(self, viewport: Viewport, dx: float, dy: float) -> ViewTransform:
        """Pan by a surface-space delta; surface y grows downwards."""

        ppu = self.pixels_per_unit(viewport)
        return replace(
            self,
            offset_x=self.offset_x + dx / ppu,
            offset_y=self.offset_y - dy / ppu,
        )

    def zoomed_to(
        self, viewport: Viewport, zoom: float, pivot: tuple[float, float]
    ) -> ViewTransform:
        """Change zoom keeping the world point under ``pivot`` fixed on screen."""

        sx, sy = pivot
        world_x, world_y = self.to_world(viewport, sx, sy)
        ppu = viewport.scale * zoom
        return ViewTransform(
            offset_x=(sx - viewport.width / 2) / ppu - world_x,
            offset_y=(viewport.height / 2 - sy) / ppu - world_y,
            zoom=zoom,
        )

    def wheel_zoom(
        self,
        viewport: Viewport,
        pivot: tuple[float, float],
        direction: int,
        *,
        step: float = DEFAULT_ZOOM_STEP,
        min_zoom: float = DEFAULT_MIN_ZOOM,
        max_zoom: float = DEFAULT_MAX_ZOOM,
    ) -> ViewTransform:
        """Zoom in for a positive ``direction`` and out for a negative one."""

        if direction == 0:
            return self
        delta = step if direction > 0 else -step
        zoom = min(max(min_zoom, self.zoom + delta * self.zoom), max_zoom)
        if zoom == self.zoom:
            return self
        return self.zoomed_to(viewport, zoom, pivot)


def reset_view() -> ViewTransform:
    return ViewTransform()
