import math

import pytest

from pookalam import DrawMode
from pookalam.patterns import Layer, Point, compose
from pookalam.patterns.parameters import GenerationParameters
from pookalam.patterns.sampler import (PATH_COLOR, PointSequence, ViewBounds,
                                       angle_steps, build_segments, sample)

BOUNDS = ViewBounds(x_min=-2.0, x_max=2.0, y_min=-1.5, y_max=1.5)


def _line_source(t: float) -> list[Point]:
    return [Point(x=t, y=0.0)]


class TestSampleFractal:
    """Cover sampling of layered fractal sources."""

    def test_emission_order_without_depth_sort(self) -> None:
        sequence = sample(_line_source, DrawMode.FRACTAL, resolution=2, depth_sort=False)

        xs = [point.x for point in sequence]
        assert xs == sorted(xs)
        assert len(sequence) == math.ceil(2 * math.pi * 2)

    def test_non_finite_points_are_dropped(self) -> None:
        """Verify NaN and infinite points never reach the sequence."""

        def source(t: float) -> list[Point]:
            return [Point(x=t, y=1.0), Point(x=math.nan, y=0.0), Point(x=0.0, y=math.inf)]

        sequence = sample(source, DrawMode.FRACTAL, resolution=1)

        assert len(sequence) == 7
        assert sequence.dropped == 14
        assert all(math.isfinite(point.x) and math.isfinite(point.y) for point in sequence)

    def test_evaluator_exceptions_skip_the_sample(self) -> None:
        def source(t: float) -> list[Point]:
            if t > 3:
                raise ZeroDivisionError("boom")
            return [Point(x=t, y=t)]

        sequence = sample(source, DrawMode.FRACTAL, resolution=1)

        assert [point.x for point in sequence] == [0.0, 1.0, 2.0, 3.0]
        assert sequence.dropped == 3

    def test_depth_sort_is_descending_and_stable(self) -> None:
        """Verify deeper layers draw first and equal depths keep angle order."""

        def source(t: float) -> list[Point]:
            return [Point(x=t, y=0.0, depth=0), Point(x=t, y=1.0, depth=1000)]

        sequence = sample(source, DrawMode.FRACTAL, resolution=2)

        depths = [point.depth for point in sequence]
        assert depths == sorted(depths, reverse=True)
        core = [point.x for point in sequence if point.depth == 1000]
        assert core == sorted(core)

    def test_composed_pookalam_draws_core_first(self) -> None:
        pookalam = compose(GenerationParameters(size=5.0))

        sequence = sample(pookalam, DrawMode.FRACTAL, resolution=4)

        assert sequence[0].layer is Layer.CORE
        assert sequence[len(sequence) - 1].layer is Layer.MAIN

    def test_missing_source_is_empty(self) -> None:
        assert len(sample(None, DrawMode.FRACTAL, resolution=10)) == 0

    def test_angle_steps_cover_turns(self) -> None:
        steps = angle_steps(10, turns=2)

        assert steps[0] == 0.0
        assert steps[-1] < 4 * math.pi
        assert len(steps) == math.ceil(4 * math.pi * 10)


class TestSegments:
    def test_segments_partition_the_sequence(self) -> None:
        """Verify runs are contiguous, non-empty and cover every index."""

        segments = build_segments(500)

        assert segments[0].start == 0
        assert segments[-1].stop == 500
        for previous, current in zip(segments, segments[1:]):
            assert previous.stop == current.start
        assert all(len(segment) > 0 for segment in segments)

    def test_segments_are_deterministic(self) -> None:
        assert build_segments(321) == build_segments(321)

    def test_empty_sequence_has_no_segments(self) -> None:
        assert build_segments(0) == ()


class TestSampleFunction:
    def test_default_function_is_sine(self) -> None:
        sequence = sample(None, DrawMode.FUNCTION, resolution=4, bounds=BOUNDS)

        assert sequence[0].x == pytest.approx(-2.0)
        assert sequence[len(sequence) - 1].x == pytest.approx(2.0)
        for point in sequence:
            assert point.y == pytest.approx(math.sin(point.x))

    def test_domain_errors_are_dropped(self) -> None:
        sequence = sample(math.sqrt, DrawMode.FUNCTION, resolution=2, bounds=BOUNDS)

        assert all(point.x >= 0 for point in sequence)
        assert sequence.dropped == 4

    def test_single_path_color(self) -> None:
        sequence = sample(math.cos, DrawMode.FUNCTION, resolution=2, bounds=BOUNDS)

        assert [segment.color for segment in sequence.segments] == [PATH_COLOR]

    def test_requires_bounds(self) -> None:
        with pytest.raises(ValueError):
            sample(math.sin, DrawMode.FUNCTION, resolution=2)


class TestSampleParametric:
    def test_accepts_tuples_mappings_and_points(self) -> None:
        """Verify every supported result shape becomes a point."""

        shapes = [
            lambda t: (math.cos(t), math.sin(t)),
            lambda t: {"x": math.cos(t), "y": math.sin(t)},
            lambda t: Point(x=math.cos(t), y=math.sin(t)),
        ]

        lengths = {len(sample(shape, DrawMode.PARAMETRIC, resolution=1)) for shape in shapes}

        assert len(lengths) == 1
        assert lengths.pop() > 0

    def test_invalid_results_are_dropped(self) -> None:
        valid = sample(lambda t: (t, t), DrawMode.PARAMETRIC, resolution=1)
        sequence = sample(lambda t: "nope", DrawMode.PARAMETRIC, resolution=1)

        assert len(sequence) == 0
        assert sequence.dropped == len(valid)


class TestSampleImplicit:
    def test_unit_circle(self) -> None:
        sequence = sample(
            lambda x, y: x * x + y * y - 1,
            DrawMode.IMPLICIT,
            resolution=2,
            bounds=BOUNDS,
        )

        assert len(sequence) > 0
        for point in sequence:
            assert abs(point.x**2 + point.y**2 - 1) < 0.1

    def test_degenerate_bounds_are_empty(self) -> None:
        flat = ViewBounds(x_min=0.0, x_max=0.0, y_min=-1.0, y_max=1.0)

        assert sample(lambda x, y: 0.0, DrawMode.IMPLICIT, resolution=2, bounds=flat) == PointSequence()

    def test_requires_bounds(self) -> None:
        with pytest.raises(ValueError):
            sample(lambda x, y: 0.0, DrawMode.IMPLICIT, resolution=2)
