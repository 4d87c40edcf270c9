from pathlib import Path
from typing import Annotated, Optional

import typer

from pookalam.patterns.parameters import PRESETS, morph_parameters
from pookalam.programs.registry import ConfigurationRegistry
from pookalam.programs.settings import DEFAULT_SIZE, ProgramSettings
from pookalam.renderers.pookalam.state import DEFAULT_SPEED
from pookalam.runtime.container import build_runtime_container
from pookalam.runtime.game_loop import GameLoop
from pookalam.utilities.env import Configuration
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PROGRAM = "fractal"
DEFAULT_PRESET = "traditional"


def _resolve_preset(name: str):
    parameters = PRESETS.get(name)
    if parameters is None:
        logger.error("Preset '%s' not found; choose from %s", name, ", ".join(PRESETS))
        raise typer.Exit(code=1)
    return parameters


def run_command(
    program: Annotated[str, typer.Option("--program")] = DEFAULT_PROGRAM,
    preset: Annotated[str, typer.Option("--preset")] = DEFAULT_PRESET,
    size: Annotated[float, typer.Option("--size", min=0.1)] = DEFAULT_SIZE,
    style: Annotated[Optional[int], typer.Option("--style")] = None,
    density: Annotated[Optional[float], typer.Option("--density", min=0.0)] = None,
    petals: Annotated[Optional[int], typer.Option("--petals", min=0)] = None,
    complexity: Annotated[
        Optional[float], typer.Option("--complexity", min=0.0, max=1.0)
    ] = None,
    symmetry: Annotated[
        Optional[float], typer.Option("--symmetry", min=0.0, max=1.0)
    ] = None,
    blend_with: Annotated[
        Optional[str],
        typer.Option("--blend-with", help="Second preset to morph towards"),
    ] = None,
    blend: Annotated[float, typer.Option("--blend", min=0.0, max=1.0)] = 0.5,
    speed: Annotated[float, typer.Option("--speed", min=0.1, max=10.0)] = DEFAULT_SPEED,
    resolution: Annotated[
        Optional[float], typer.Option("--resolution", min=0.1)
    ] = None,
    marker: Annotated[
        Optional[Path], typer.Option("--marker", help="Image drawn at the pen tip")
    ] = None,
) -> None:
    registry = ConfigurationRegistry()
    configure = registry.get(program)
    if configure is None:
        logger.error(
            "Program '%s' not found in registry; choose from %s",
            program,
            ", ".join(registry.names()),
        )
        raise typer.Exit(code=1)

    parameters = _resolve_preset(preset)
    if blend_with is not None:
        parameters = morph_parameters(parameters, _resolve_preset(blend_with), blend)
    overrides = {
        "size": size,
        "style": style,
        "density": density,
        "petals": petals,
        "complexity": complexity,
        "symmetry": symmetry,
    }
    parameters = parameters.with_changes(
        **{key: value for key, value in overrides.items() if value is not None}
    )

    settings = ProgramSettings(
        parameters=parameters,
        speed=speed,
        resolution=resolution if resolution is not None else Configuration.resolution(),
        marker_path=marker if marker is not None else Configuration.marker_image_path(),
    )
    logger.info("Running program '%s' with %s", program, parameters)

    resolver = build_runtime_container({ConfigurationRegistry: registry})
    loop = resolver[GameLoop]
    configure(loop, settings)
    loop.start()
