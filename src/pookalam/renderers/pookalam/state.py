from dataclasses import dataclass
from enum import StrEnum

from pookalam.patterns.sampler import PointSequence
from pookalam.renderers.pookalam.animation import AnimationState

DEFAULT_SPEED = 2.0
MIN_SPEED = 0.1
MAX_SPEED = 10.0


class PlaybackCommand(StrEnum):
    PLAY = "play"
    PAUSE = "pause"
    RESET = "reset"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class SpeedChange:
    speed: float


@dataclass(frozen=True)
class FrameTick:
    now_ms: float


@dataclass(frozen=True)
class PookalamState:
    sequence: PointSequence = PointSequence()
    animation: AnimationState = AnimationState()
    speed: float = DEFAULT_SPEED
