from dataclasses import replace

from pookalam import DrawMode
from pookalam.patterns.composer import RingPookalam
from pookalam.programs.scene import add_pookalam_scene
from pookalam.programs.settings import ProgramSettings
from pookalam.runtime.game_loop import GameLoop

# Density is a plain layer count for the ring composer.
RING_LAYERS = 12


def configure(loop: GameLoop, settings: ProgramSettings) -> None:
    parameters = settings.parameters
    if parameters.density < 1:
        parameters = parameters.with_changes(density=RING_LAYERS)
    add_pookalam_scene(
        loop,
        replace(settings, parameters=parameters, depth_sort=False),
        mode=DrawMode.FRACTAL,
        composer_factory=RingPookalam.from_parameters,
    )
