"""Pure frame description: grid, axes, labels, path so far and marker.

:func:`build_draw_commands` never touches pygame; :func:`execute` is the
dumb executor that paints a command list onto a surface.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from pookalam.patterns.sampler import PointSequence
from pookalam.renderers.pookalam.animation import AnimationPhase, AnimationState
from pookalam.renderers.pookalam.commands import (Circle, Clear, DrawCommand,
                                                  Line, MarkerBlit, Polyline,
                                                  SurfacePoint, Text)
from pookalam.renderers.pookalam.view import Viewport, ViewTransform

BACKGROUND = (255, 255, 255)
GRID_COLOR = (238, 238, 238)
AXIS_COLOR = (136, 136, 136)
LABEL_COLOR = (85, 85, 85)
FALLBACK_MARKER_COLOR = (255, 0, 0)

MARKER_SIZE = 24
FALLBACK_MARKER_RADIUS = 4
LABEL_SPACING_PX = 50
# Grid lines closer than this are skipped to keep far zoom-outs cheap.
MIN_GRID_SPACING_PX = 2.0
PATH_WIDTH = 3


@dataclass(frozen=True)
class RenderOptions:
    show_grid: bool = True
    show_labels: bool = True


@dataclass(frozen=True)
class MarkerPose:
    x: float
    y: float
    angle: float


def path_end_index(sequence: PointSequence, animation: AnimationState) -> int:
    if animation.phase == AnimationPhase.DRAWING:
        return min(math.floor(animation.progress), sequence.last_index)
    return sequence.last_index


def marker_pose(points: list[SurfacePoint], progress: float) -> MarkerPose | None:
    """Interpolated marker position and the path tangent around it."""

    if not points:
        return None

    last_index = len(points) - 1
    safe_progress = max(0.0, min(progress, float(last_index)))
    index = math.floor(safe_progress)
    frac = safe_progress - index

    if index >= last_index:
        x, y = points[last_index]
    else:
        (cx, cy), (nx, ny) = points[index], points[index + 1]
        x = cx + (nx - cx) * frac
        y = cy + (ny - cy) * frac

    angle = 0.0
    if 0 < index < last_index:
        (px, py), (nx, ny) = points[index - 1], points[index + 1]
        angle = math.atan2(ny - py, nx - px)
    elif len(points) > 1:
        (ax, ay), (bx, by) = points[0], points[1]
        angle = math.atan2(by - ay, bx - ax)
    return MarkerPose(x=x, y=y, angle=angle)


def _format_tick(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def _grid_commands(view: ViewTransform, viewport: Viewport) -> list[DrawCommand]:
    if view.pixels_per_unit(viewport) < MIN_GRID_SPACING_PX:
        return []
    bounds = view.visible_bounds(viewport)
    commands: list[DrawCommand] = []
    for x in range(math.floor(bounds.x_min), math.ceil(bounds.x_max) + 1):
        sx, _ = view.to_surface(viewport, x, 0)
        commands.append(Line((sx, 0), (sx, viewport.height), GRID_COLOR))
    for y in range(math.floor(bounds.y_min), math.ceil(bounds.y_max) + 1):
        _, sy = view.to_surface(viewport, 0, y)
        commands.append(Line((0, sy), (viewport.width, sy), GRID_COLOR))
    return commands


def _label_commands(view: ViewTransform, viewport: Viewport) -> list[DrawCommand]:
    bounds = view.visible_bounds(viewport)
    origin_x, origin_y = view.to_surface(viewport, 0, 0)
    step = max(1, math.ceil(LABEL_SPACING_PX / view.pixels_per_unit(viewport)))

    commands: list[DrawCommand] = []
    for x in range(math.floor(bounds.x_min / step) * step, math.ceil(bounds.x_max / step) * step + 1, step):
        if x != 0:
            sx, _ = view.to_surface(viewport, x, 0)
            commands.append(Text(_format_tick(x), (sx, origin_y + 5), LABEL_COLOR, "midtop"))
    for y in range(math.floor(bounds.y_min / step) * step, math.ceil(bounds.y_max / step) * step + 1, step):
        if y != 0:
            _, sy = view.to_surface(viewport, 0, y)
            commands.append(Text(_format_tick(y), (origin_x - 5, sy), LABEL_COLOR, "midright"))
    commands.append(Text("0", (origin_x - 5, origin_y + 15), LABEL_COLOR, "midright"))
    return commands


def _path_commands(
    sequence: PointSequence,
    points: list[SurfacePoint],
    end_index: int,
    alpha: float,
) -> list[DrawCommand]:
    if len(points) < 2 or end_index < 1:
        return []
    commands: list[DrawCommand] = []
    for segment in sequence.segments:
        if segment.start > end_index:
            break
        # Overlap one point into the next segment so the path has no gaps.
        stop = min(segment.stop, end_index) + 1
        run = points[segment.start:stop]
        if len(run) > 1:
            commands.append(Polyline(tuple(run), segment.color, alpha, PATH_WIDTH))
    return commands


def build_draw_commands(
    sequence: PointSequence,
    animation: AnimationState,
    view: ViewTransform,
    viewport: Viewport,
    options: RenderOptions = RenderOptions(),
    *,
    marker_available: bool = False,
) -> list[DrawCommand]:
    commands: list[DrawCommand] = [Clear(BACKGROUND)]

    if options.show_grid:
        commands.extend(_grid_commands(view, viewport))

    origin_x, origin_y = view.to_surface(viewport, 0, 0)
    commands.append(Line((0, origin_y), (viewport.width, origin_y), AXIS_COLOR, 2))
    commands.append(Line((origin_x, 0), (origin_x, viewport.height), AXIS_COLOR, 2))

    if options.show_labels:
        commands.extend(_label_commands(view, viewport))

    if len(sequence) == 0:
        return commands

    points = [view.to_surface(viewport, point.x, point.y) for point in sequence]
    commands.extend(
        _path_commands(
            sequence, points, path_end_index(sequence, animation), animation.path_alpha
        )
    )

    pose = marker_pose(points, animation.progress)
    if pose is not None:
        if marker_available:
            commands.append(
                MarkerBlit((pose.x, pose.y), pose.angle, MARKER_SIZE, animation.sprite_alpha)
            )
        else:
            commands.append(
                Circle(
                    (pose.x, pose.y),
                    FALLBACK_MARKER_RADIUS,
                    FALLBACK_MARKER_COLOR,
                    animation.sprite_alpha,
                )
            )
    return commands


def _alpha_byte(alpha: float) -> int:
    return max(0, min(255, round(alpha * 255)))


class _TranslucentLayer:
    """One SRCALPHA surface shared by every translucent command of a frame.

    Consecutive translucent draws collect on the layer, which is blitted once
    before the next opaque draw or at the end of the frame.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self._target = target
        self._surface: pygame.Surface | None = None
        self._dirty = False

    def surface(self) -> pygame.Surface:
        if self._surface is None:
            self._surface = pygame.Surface(self._target.get_size(), pygame.SRCALPHA)
        self._dirty = True
        return self._surface

    def flush(self) -> None:
        if not self._dirty or self._surface is None:
            return
        self._target.blit(self._surface, (0, 0))
        self._surface.fill((0, 0, 0, 0))
        self._dirty = False


def execute(
    surface: pygame.Surface,
    commands: list[DrawCommand],
    *,
    marker: pygame.Surface | None = None,
    font: pygame.font.Font | None = None,
) -> None:
    layer = _TranslucentLayer(surface)
    for command in commands:
        match command:
            case Polyline(points=points, color=color, alpha=alpha, width=width) if alpha < 1.0:
                pygame.draw.lines(layer.surface(), (*color, _alpha_byte(alpha)), False, points, width)
                continue
            case Circle(center=center, radius=radius, color=color, alpha=alpha) if alpha < 1.0:
                pygame.draw.circle(layer.surface(), (*color, _alpha_byte(alpha)), center, radius)
                continue

        layer.flush()
        match command:
            case Clear(color=color):
                surface.fill(color)
            case Line(start=start, end=end, color=color, width=width):
                pygame.draw.line(surface, color, start, end, width)
            case Polyline(points=points, color=color, width=width):
                pygame.draw.lines(surface, color, False, points, width)
            case Circle(center=center, radius=radius, color=color):
                pygame.draw.circle(surface, color, center, radius)
            case MarkerBlit(center=center, angle=angle, size=size, alpha=alpha):
                if marker is None:
                    continue
                glyph = pygame.transform.smoothscale(marker, (size, size))
                # Surface y points down, so a clockwise screen angle is negative here.
                glyph = pygame.transform.rotate(glyph, -math.degrees(angle))
                glyph.set_alpha(_alpha_byte(alpha))
                surface.blit(glyph, glyph.get_rect(center=(round(center[0]), round(center[1]))))
            case Text(text=text, position=position, color=color, anchor=anchor):
                if font is None:
                    continue
                rendered = font.render(text, True, color)
                rect = rendered.get_rect(**{anchor: (round(position[0]), round(position[1]))})
                surface.blit(rendered, rect)
    layer.flush()
