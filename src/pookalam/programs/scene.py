from __future__ import annotations

from typing import Any, Callable

from pookalam import DrawMode
from pookalam.assets.loader import Loader
from pookalam.patterns.composer import compose
from pookalam.programs.settings import ProgramSettings
from pookalam.renderers.pookalam import (PookalamControls, PookalamScene,
                                         PookalamStateProvider)
from pookalam.renderers.pookalam.provider import ComposerFactory
from pookalam.renderers.pookalam.view import Viewport
from pookalam.runtime.game_loop import GameLoop
from pookalam.utilities.env import Configuration


def add_pookalam_scene(
    loop: GameLoop,
    settings: ProgramSettings,
    *,
    mode: DrawMode = DrawMode.FRACTAL,
    composer_factory: ComposerFactory = compose,
    equation: Callable[..., Any] | None = None,
) -> PookalamScene:
    provider = PookalamStateProvider(
        loop.streams,
        parameters=settings.parameters,
        mode=mode,
        composer_factory=composer_factory,
        equation=equation,
        resolution=settings.resolution,
        turns=settings.turns,
        depth_sort=settings.depth_sort,
        speed=settings.speed,
        timing=settings.timing,
    )
    width, height = loop.display.size
    min_zoom, max_zoom = Configuration.zoom_limits()
    controls = PookalamControls(
        provider,
        Viewport(width=width, height=height, scale=settings.world_scale),
        options=settings.options,
        zoom_step=Configuration.zoom_step(),
        min_zoom=min_zoom,
        max_zoom=max_zoom,
    )
    scene = PookalamScene(
        provider, controls, marker=Loader.load_marker(settings.marker_path)
    )
    loop.add_renderer(scene)
    return scene
