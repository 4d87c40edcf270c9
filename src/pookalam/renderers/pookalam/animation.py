"""Progressive-draw animation state machine.

``drawing -> holding -> fading -> drawing``. Every transition is a pure
function returning a new :class:`AnimationState`; the provider owns the
only live instance and replaces it once per tick.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SPEED_SCALE = 50.0
DEFAULT_HOLD_MS = 1500.0
DEFAULT_FADE_MS = 2000.0


class AnimationPhase(StrEnum):
    DRAWING = "drawing"
    HOLDING = "holding"
    FADING = "fading"


@dataclass(frozen=True)
class AnimationTiming:
    # Progress units per second for a speed of 1.
    speed_scale: float = DEFAULT_SPEED_SCALE
    hold_ms: float = DEFAULT_HOLD_MS
    fade_ms: float = DEFAULT_FADE_MS


@dataclass(frozen=True)
class AnimationState:
    progress: float = 0.0
    phase: AnimationPhase = AnimationPhase.DRAWING
    phase_entered_at_ms: float | None = None
    sprite_alpha: float = 1.0
    path_alpha: float = 1.0
    running: bool = True
    last_tick_ms: float | None = None


def reset(state: AnimationState) -> AnimationState:
    """Return to the start of the drawing phase; also resumes playback."""

    return replace(
        state,
        progress=0.0,
        phase=AnimationPhase.DRAWING,
        phase_entered_at_ms=None,
        sprite_alpha=1.0,
        path_alpha=1.0,
        running=True,
    )


def play(state: AnimationState) -> AnimationState:
    return replace(state, running=True)


def pause(state: AnimationState) -> AnimationState:
    return replace(state, running=False)


def _enter(state: AnimationState, phase: AnimationPhase, now_ms: float) -> AnimationState:
    logger.debug("Animation phase %s -> %s", state.phase, phase)
    return replace(state, phase=phase, phase_entered_at_ms=now_ms)


def advance(
    state: AnimationState,
    *,
    now_ms: float,
    sequence_length: int,
    speed: float,
    timing: AnimationTiming = AnimationTiming(),
) -> AnimationState:
    """Advance one frame.

    ``delta`` is measured from the previous tick, which is recorded even while
    paused so resuming does not jump ahead.
    """

    delta_ms = 0.0 if state.last_tick_ms is None else max(0.0, now_ms - state.last_tick_ms)
    state = replace(state, last_tick_ms=now_ms)

    if not state.running or sequence_length <= 0:
        return state

    match state.phase:
        case AnimationPhase.DRAWING:
            last_index = sequence_length - 1
            progress = state.progress + speed * timing.speed_scale * delta_ms / 1000
            if progress >= last_index:
                return _enter(
                    replace(state, progress=float(last_index)),
                    AnimationPhase.HOLDING,
                    now_ms,
                )
            return replace(state, progress=max(0.0, progress))

        case AnimationPhase.HOLDING:
            entered = now_ms if state.phase_entered_at_ms is None else state.phase_entered_at_ms
            if now_ms - entered >= timing.hold_ms:
                return _enter(state, AnimationPhase.FADING, now_ms)
            return state

        case AnimationPhase.FADING:
            entered = now_ms if state.phase_entered_at_ms is None else state.phase_entered_at_ms
            alpha = max(0.0, 1 - (now_ms - entered) / timing.fade_ms)
            if alpha <= 0:
                logger.debug("Animation faded out; restarting")
                return reset(state)
            return replace(state, sprite_alpha=alpha, path_alpha=alpha)
