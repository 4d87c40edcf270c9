import math

from pookalam import DrawMode
from pookalam.programs.scene import add_pookalam_scene
from pookalam.programs.settings import ProgramSettings
from pookalam.runtime.game_loop import GameLoop


def _rose(petals: int, size: float):
    def curve(t: float) -> tuple[float, float]:
        r = size * math.cos(petals * t / 2)
        return r * math.cos(t), r * math.sin(t)

    return curve


def configure(loop: GameLoop, settings: ProgramSettings) -> None:
    parameters = settings.parameters
    add_pookalam_scene(
        loop,
        settings,
        mode=DrawMode.PARAMETRIC,
        equation=_rose(max(3, int(parameters.petals)), parameters.size),
    )
