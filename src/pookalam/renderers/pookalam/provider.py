from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Callable

import reactivex
from reactivex import operators as ops
from reactivex.subject import Subject
from reactivex.subject.behaviorsubject import BehaviorSubject

from pookalam import DrawMode
from pookalam.patterns.composer import compose
from pookalam.patterns.parameters import GenerationParameters
from pookalam.patterns.sampler import PointSequence, ViewBounds, sample
from pookalam.renderers.pookalam import animation
from pookalam.renderers.pookalam.animation import AnimationState, AnimationTiming
from pookalam.renderers.pookalam.state import (DEFAULT_SPEED, MAX_SPEED,
                                               MIN_SPEED, FrameTick,
                                               PlaybackCommand, PookalamState,
                                               SpeedChange)
from pookalam.runtime.providers import ObservableProvider
from pookalam.runtime.streams import RuntimeStreams
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

VIEW_DEPENDENT_MODES = frozenset({DrawMode.FUNCTION, DrawMode.IMPLICIT})

ComposerFactory = Callable[[GenerationParameters], Callable[[float], Any]]


@dataclass(frozen=True)
class SampleRequest:
    mode: DrawMode
    parameters: GenerationParameters
    resolution: float
    turns: float
    depth_sort: bool
    bounds: ViewBounds | None = None


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


def clamp_speed(speed: float) -> float:
    return min(max(MIN_SPEED, speed), MAX_SPEED)


class PookalamStateProvider(ObservableProvider[PookalamState]):
    """Regenerate point sequences on input changes and animate the latest one.

    Each new sequence starts a fresh animation scan, so a progress value never
    outlives the sequence it indexes.
    """

    def __init__(
        self,
        streams: RuntimeStreams,
        *,
        parameters: GenerationParameters = GenerationParameters(),
        mode: DrawMode = DrawMode.FRACTAL,
        composer_factory: ComposerFactory = compose,
        equation: Callable[..., Any] | None = None,
        resolution: float = 15.0,
        turns: float = 1.0,
        depth_sort: bool = True,
        speed: float = DEFAULT_SPEED,
        timing: AnimationTiming = AnimationTiming(),
        now_ms: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self._streams = streams
        self.mode = mode
        self._composer_factory = composer_factory
        self._equation = equation
        self._resolution = resolution
        self._turns = turns
        self._depth_sort = depth_sort
        self._speed = clamp_speed(speed)
        self._timing = timing
        self._now_ms = now_ms
        self._parameters = BehaviorSubject[GenerationParameters](parameters)
        self._bounds = BehaviorSubject[ViewBounds | None](None)
        self._commands: Subject[Any] = Subject()

    @property
    def parameters(self) -> GenerationParameters:
        return self._parameters.value

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def view_dependent(self) -> bool:
        return self.mode in VIEW_DEPENDENT_MODES

    def set_parameters(self, parameters: GenerationParameters) -> None:
        self._parameters.on_next(parameters)

    def set_bounds(self, bounds: ViewBounds) -> None:
        self._bounds.on_next(bounds)

    def play(self) -> None:
        self._commands.on_next(PlaybackCommand.PLAY)

    def pause(self) -> None:
        self._commands.on_next(PlaybackCommand.PAUSE)

    def reset(self) -> None:
        self._commands.on_next(PlaybackCommand.RESET)

    def toggle(self) -> None:
        self._commands.on_next(PlaybackCommand.TOGGLE)

    def set_speed(self, speed: float) -> None:
        self._speed = clamp_speed(speed)
        self._commands.on_next(SpeedChange(self._speed))

    def request_for(
        self, parameters: GenerationParameters, bounds: ViewBounds | None
    ) -> SampleRequest:
        return SampleRequest(
            mode=self.mode,
            parameters=parameters,
            resolution=self._resolution,
            turns=self._turns,
            depth_sort=self._depth_sort,
            bounds=bounds if self.view_dependent else None,
        )

    def build_sequence(self, request: SampleRequest) -> PointSequence:
        if request.mode == DrawMode.FRACTAL:
            source = self._composer_factory(request.parameters)
        else:
            source = self._equation

        if request.mode in VIEW_DEPENDENT_MODES and request.bounds is None:
            return PointSequence()

        start = time.perf_counter()
        sequence = sample(
            source,
            request.mode,
            resolution=request.resolution,
            bounds=request.bounds,
            turns=request.turns,
            depth_sort=request.depth_sort,
        )
        logger.info(
            "Generated %d points (%d segments) for %s mode in %.1f ms",
            len(sequence),
            len(sequence.segments),
            request.mode,
            (time.perf_counter() - start) * 1000,
        )
        return sequence

    def initial_state(self, sequence: PointSequence) -> PookalamState:
        return PookalamState(
            sequence=sequence, animation=AnimationState(), speed=self._speed
        )

    def reduce(self, state: PookalamState, event: Any) -> PookalamState:
        match event:
            case FrameTick(now_ms=now_ms):
                advanced = animation.advance(
                    state.animation,
                    now_ms=now_ms,
                    sequence_length=len(state.sequence),
                    speed=state.speed,
                    timing=self._timing,
                )
                return replace(state, animation=advanced)
            case PlaybackCommand.PLAY:
                return replace(state, animation=animation.play(state.animation))
            case PlaybackCommand.PAUSE:
                return replace(state, animation=animation.pause(state.animation))
            case PlaybackCommand.RESET:
                return replace(state, animation=animation.reset(state.animation))
            case PlaybackCommand.TOGGLE:
                toggle = animation.pause if state.animation.running else animation.play
                return replace(state, animation=toggle(state.animation))
            case SpeedChange(speed=speed):
                return replace(state, speed=speed)
        return state

    def observable(self) -> reactivex.Observable[PookalamState]:
        requests = reactivex.combine_latest(self._parameters, self._bounds).pipe(
            ops.map(lambda latest: self.request_for(*latest)),
            ops.distinct_until_changed(),
        )

        def build_stream(sequence: PointSequence) -> reactivex.Observable[PookalamState]:
            initial_state = self.initial_state(sequence)
            ticks = self._streams.game_tick.pipe(
                ops.filter(lambda tick: tick is not None),
                ops.map(lambda _: FrameTick(now_ms=self._now_ms())),
            )
            return reactivex.merge(ticks, self._commands).pipe(
                ops.scan(self.reduce, seed=initial_state),
                ops.start_with(initial_state),
            )

        return requests.pipe(
            ops.map(self.build_sequence),
            ops.map(build_stream),
            ops.switch_latest(),
            ops.share(),
        )
