import math

from pookalam import DrawMode
from pookalam.programs.scene import add_pookalam_scene
from pookalam.programs.settings import ProgramSettings
from pookalam.runtime.game_loop import GameLoop


def configure(loop: GameLoop, settings: ProgramSettings) -> None:
    add_pookalam_scene(
        loop,
        settings,
        mode=DrawMode.FUNCTION,
        equation=lambda x: math.sin(x) * math.cos(x / 3),
    )
