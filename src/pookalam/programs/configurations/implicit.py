import math

from pookalam import DrawMode
from pookalam.programs.scene import add_pookalam_scene
from pookalam.programs.settings import ProgramSettings
from pookalam.runtime.game_loop import GameLoop


def configure(loop: GameLoop, settings: ProgramSettings) -> None:
    petals = max(3, int(settings.parameters.petals))

    def flower(x: float, y: float) -> float:
        return math.hypot(x, y) - 3 - 0.8 * math.cos(petals * math.atan2(y, x))

    add_pookalam_scene(loop, settings, mode=DrawMode.IMPLICIT, equation=flower)
