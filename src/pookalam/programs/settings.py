from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pookalam.patterns.parameters import PRESETS, GenerationParameters
from pookalam.renderers.pookalam.animation import AnimationTiming
from pookalam.renderers.pookalam.render import RenderOptions
from pookalam.renderers.pookalam.state import DEFAULT_SPEED
from pookalam.utilities.env import Configuration

DEFAULT_SIZE = 6.0


def _default_parameters() -> GenerationParameters:
    return PRESETS["traditional"].with_changes(size=DEFAULT_SIZE)


def _default_timing() -> AnimationTiming:
    return AnimationTiming(
        speed_scale=Configuration.speed_scale(),
        hold_ms=Configuration.hold_duration_ms(),
        fade_ms=Configuration.fade_duration_ms(),
    )


def _default_options() -> RenderOptions:
    return RenderOptions(
        show_grid=Configuration.show_grid(),
        show_labels=Configuration.show_labels(),
    )


@dataclass(frozen=True)
class ProgramSettings:
    """Everything a program configuration needs to build its scene."""

    parameters: GenerationParameters = field(default_factory=_default_parameters)
    resolution: float = field(default_factory=Configuration.resolution)
    turns: float = field(default_factory=Configuration.turns)
    speed: float = DEFAULT_SPEED
    depth_sort: bool = field(default_factory=Configuration.depth_sort_enabled)
    timing: AnimationTiming = field(default_factory=_default_timing)
    options: RenderOptions = field(default_factory=_default_options)
    world_scale: float = field(default_factory=Configuration.world_scale)
    marker_path: Path | None = field(default_factory=Configuration.marker_image_path)
