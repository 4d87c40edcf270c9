"""Turn point sources into ordered, segmented point sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from pookalam import DrawMode
from pookalam.patterns.composer import Point
from pookalam.patterns.rng import Mulberry32
from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

Color = tuple[int, int, int]

PATH_COLOR: Color = (52, 152, 219)
# Marigold, chrysanthemum, hibiscus and leaf tones used for fractal paths.
SEGMENT_PALETTE: tuple[Color, ...] = (
    (255, 140, 0),
    (255, 200, 40),
    (220, 30, 60),
    (250, 245, 235),
    (150, 60, 170),
    (40, 140, 70),
    (235, 80, 150),
    (255, 105, 30),
)
MIN_SEGMENT_RUN = 8
MAX_SEGMENT_RUN = 48

PARAMETRIC_RANGE = math.pi * 4
IMPLICIT_TOLERANCE = 0.1
IMPLICIT_GRID_FACTOR = 20
PARAMETRIC_STEP_FACTOR = 100


@dataclass(frozen=True)
class ViewBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


@dataclass(frozen=True)
class Segment:
    start: int
    stop: int
    color: Color

    def __len__(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True)
class PointSequence:
    """Fully materialized, indexable point path plus its color partition."""

    points: tuple[Point, ...] = ()
    segments: tuple[Segment, ...] = ()
    dropped: int = field(default=0, compare=False)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __iter__(self):
        return iter(self.points)

    @property
    def last_index(self) -> int:
        return max(0, len(self.points) - 1)


def _finite(*values: Any) -> bool:
    try:
        return all(math.isfinite(value) for value in values)
    except TypeError:
        return False


def _evaluate(fn: Callable[..., Any], *args: float) -> Any:
    """Call an external evaluator, mapping any failure to ``None``."""

    try:
        return fn(*args)
    except Exception as exc:  # evaluator errors are sample-local
        logger.debug("Dropping sample at %s: %s", args, exc)
        return None


def build_segments(
    length: int,
    palette: Sequence[Color] = SEGMENT_PALETTE,
    *,
    min_run: int = MIN_SEGMENT_RUN,
    max_run: int = MAX_SEGMENT_RUN,
) -> tuple[Segment, ...]:
    """Partition ``range(length)`` into contiguous runs of cycling colors.

    Run lengths come from a generator seeded by ``length`` so a given
    sequence always gets the same coloring.
    """

    if length <= 0:
        return ()
    rng = Mulberry32(length)
    segments = []
    start = 0
    while start < length:
        run = min_run + rng.next_index(max_run - min_run + 1)
        stop = min(length, start + run)
        segments.append(Segment(start, stop, palette[len(segments) % len(palette)]))
        start = stop
    return tuple(segments)


def _single_segment(length: int, color: Color = PATH_COLOR) -> tuple[Segment, ...]:
    if length <= 0:
        return ()
    return (Segment(0, length, color),)


def angle_steps(resolution: float, turns: float = 1.0) -> np.ndarray:
    """Sampled angles covering ``[0, 2*pi*turns)`` at ``resolution`` per radian."""

    count = max(1, math.ceil(2 * math.pi * turns * resolution))
    return np.arange(count, dtype=np.float64) / resolution


def sample_fractal(
    source: Callable[[float], Iterable[Point]],
    *,
    resolution: float,
    turns: float = 1.0,
    depth_sort: bool = True,
) -> PointSequence:
    points: list[Point] = []
    dropped = 0
    for t in angle_steps(resolution, turns):
        fragment = _evaluate(source, float(t))
        if fragment is None:
            dropped += 1
            continue
        for point in fragment:
            if _finite(point.x, point.y):
                points.append(point)
            else:
                dropped += 1

    if depth_sort:
        # Stable: equal depths keep angle order so each ring stays continuous.
        points.sort(key=lambda point: point.depth, reverse=True)

    return PointSequence(
        points=tuple(points),
        segments=build_segments(len(points)),
        dropped=dropped,
    )


def sample_function(
    fn: Callable[[float], float] | None,
    *,
    resolution: float,
    bounds: ViewBounds,
) -> PointSequence:
    fn = fn or math.sin
    points: list[Point] = []
    dropped = 0
    step = 1 / resolution
    count = math.floor((bounds.x_max - bounds.x_min) / step) + 1
    for x in bounds.x_min + np.arange(max(0, count)) * step:
        y = _evaluate(fn, float(x))
        if y is not None and _finite(y):
            points.append(Point(x=float(x), y=float(y)))
        else:
            dropped += 1
    return PointSequence(
        points=tuple(points), segments=_single_segment(len(points)), dropped=dropped
    )


def sample_parametric(
    fn: Callable[[float], Any],
    *,
    resolution: float,
) -> PointSequence:
    points: list[Point] = []
    dropped = 0
    step = PARAMETRIC_RANGE / (resolution * PARAMETRIC_STEP_FACTOR)
    count = math.floor(2 * PARAMETRIC_RANGE / step) + 1
    for t in -PARAMETRIC_RANGE + np.arange(count) * step:
        result = _evaluate(fn, float(t))
        xy = _coerce_xy(result)
        if xy is None:
            dropped += 1
            continue
        points.append(Point(x=xy[0], y=xy[1]))
    return PointSequence(
        points=tuple(points), segments=_single_segment(len(points)), dropped=dropped
    )


def sample_implicit(
    fn: Callable[[float, float], float],
    *,
    resolution: float,
    bounds: ViewBounds,
    tolerance: float = IMPLICIT_TOLERANCE,
) -> PointSequence:
    steps = resolution * IMPLICIT_GRID_FACTOR
    step_x = (bounds.x_max - bounds.x_min) / steps
    step_y = (bounds.y_max - bounds.y_min) / steps
    if step_x <= 0 or step_y <= 0:
        return PointSequence()

    xs = bounds.x_min + np.arange(math.floor(steps) + 1) * step_x
    ys = bounds.y_min + np.arange(math.floor(steps) + 1) * step_y
    points: list[Point] = []
    dropped = 0
    for x in xs:
        for y in ys:
            value = _evaluate(fn, float(x), float(y))
            if value is None or not _finite(value):
                dropped += 1
            elif abs(value) < tolerance:
                points.append(Point(x=float(x), y=float(y)))
    return PointSequence(
        points=tuple(points), segments=_single_segment(len(points)), dropped=dropped
    )


def _coerce_xy(result: Any) -> tuple[float, float] | None:
    if result is None:
        return None
    if isinstance(result, dict):
        x, y = result.get("x"), result.get("y")
    elif hasattr(result, "x") and hasattr(result, "y"):
        x, y = result.x, result.y
    else:
        try:
            x, y = result
        except (TypeError, ValueError):
            return None
    if not _finite(x, y):
        return None
    return float(x), float(y)


def sample(
    source: Callable[..., Any] | None,
    mode: DrawMode,
    *,
    resolution: float,
    bounds: ViewBounds | None = None,
    turns: float = 1.0,
    depth_sort: bool = True,
) -> PointSequence:
    """Drive ``source`` across the sampling domain for ``mode``."""

    match mode:
        case DrawMode.FRACTAL:
            if source is None:
                return PointSequence()
            sequence = sample_fractal(
                source, resolution=resolution, turns=turns, depth_sort=depth_sort
            )
        case DrawMode.PARAMETRIC:
            if source is None:
                return PointSequence()
            sequence = sample_parametric(source, resolution=resolution)
        case DrawMode.FUNCTION:
            if bounds is None:
                raise ValueError("Function sampling requires view bounds")
            sequence = sample_function(source, resolution=resolution, bounds=bounds)
        case DrawMode.IMPLICIT:
            if bounds is None:
                raise ValueError("Implicit sampling requires view bounds")
            if source is None:
                return PointSequence()
            sequence = sample_implicit(source, resolution=resolution, bounds=bounds)
        case _:
            raise ValueError(f"Unknown draw mode: {mode!r}")

    if sequence.dropped:
        logger.debug(
            "Dropped %d invalid samples while sampling %s", sequence.dropped, mode
        )
    return sequence
