import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pookalam.patterns import PRESETS, GenerationParameters, Layer, compose
from pookalam.patterns.basis import BasisFunction
from pookalam.patterns.composer import (FractalPookalam, RingPookalam,
                                        _layer_progress)

parameter_strategy = st.builds(
    GenerationParameters,
    size=st.floats(min_value=1.0, max_value=250.0, allow_nan=False),
    density=st.floats(min_value=0.3, max_value=1.0, allow_nan=False),
    petals=st.integers(min_value=3, max_value=16),
    style=st.integers(min_value=0, max_value=10_000),
    complexity=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
    symmetry=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
)
sample_angles = [index * 2 * math.pi / 24 for index in range(24)]


class TestFractalPookalam:
    """Cover the layered composer resolved from generation parameters."""

    def test_traditional_outer_ring_starts_on_positive_x_axis(self) -> None:
        """Verify the outermost main point at angle zero sits on +x within size."""

        pookalam = compose(PRESETS["traditional"])

        outer = next(
            point
            for point in pookalam.points_at(0.0)
            if point.layer is Layer.MAIN and point.depth == 0
        )

        assert outer.y == pytest.approx(0.0, abs=1e-9)
        assert 80.0 <= outer.x <= 100.0

    def test_low_density_floors_to_three_layers(self) -> None:
        pookalam = compose(GenerationParameters(density=0.3, complexity=0.2))

        mains = [p for p in pookalam.points_at(1.0) if p.layer is Layer.MAIN]

        assert pookalam.layer_count == 3
        assert len(mains) == 3

    def test_petal_count_has_a_floor(self) -> None:
        assert compose(GenerationParameters(petals=2)).petal_count == 4

    def test_low_complexity_skips_petals(self) -> None:
        pookalam = compose(GenerationParameters(complexity=0.4))

        assert all(p.layer is not Layer.PETALS for p in pookalam.points_at(0.5))

    def test_core_points_only_on_inner_layers(self) -> None:
        """Verify cores appear for the inner 40% of layers with boosted depth."""

        pookalam = compose(GenerationParameters(density=1.0, complexity=0.2))

        cores = [p for p in pookalam.points_at(0.3) if p.layer is Layer.CORE]

        assert pookalam.layer_count == 10
        assert [p.depth for p in cores] == [1000 + 50 * i for i in range(6, 10)]
        assert all(p.color in (7, 8) for p in cores)

    def test_missing_complexity_and_symmetry_use_defaults(self) -> None:
        pookalam = FractalPookalam.from_parameters(
            GenerationParameters(complexity=None, symmetry=None)
        )

        assert pookalam.complexity == 0.7
        assert pookalam.asymmetry_offset == 0.0

    def test_full_symmetry_has_no_offset(self) -> None:
        for style in range(10):
            assert compose(GenerationParameters(style=style)).asymmetry_offset == 0.0

    def test_style_selects_registered_bases(self) -> None:
        registry = BasisFunction.registry()
        chosen = {compose(GenerationParameters(style=style)).primary for style in range(40)}

        assert chosen <= set(registry)
        assert len(chosen) > 1

    def test_outer_layer_plan_starts_at_full_size(self) -> None:
        base = compose(GenerationParameters())
        plan = base.layers[0]

        assert plan.progress == 0.0
        assert plan.current_radius == base.parameters.size

    @given(parameter_strategy)
    def test_same_parameters_yield_identical_points(
        self, parameters: GenerationParameters
    ) -> None:
        first = compose(parameters)
        second = compose(parameters)

        for t in sample_angles[:6]:
            assert first.points_at(t) == second.points_at(t)

    @given(parameter_strategy)
    def test_every_point_stays_within_size(
        self, parameters: GenerationParameters
    ) -> None:
        pookalam = compose(parameters)
        limit = parameters.size * (1 + 1e-9)

        for t in sample_angles:
            for point in pookalam.points_at(t):
                assert point.radius <= limit

    @given(parameter_strategy)
    def test_main_ring_never_exceeds_layer_radius(
        self, parameters: GenerationParameters
    ) -> None:
        pookalam = compose(parameters)

        for t in sample_angles:
            mains = [p for p in pookalam.points_at(t) if p.layer is Layer.MAIN]
            for layer, point in zip(pookalam.layers, mains):
                assert point.radius <= layer.current_radius * (1 + 1e-9)

    def test_callable_alias_matches_points_at(self) -> None:
        pookalam = compose(PRESETS["ornate"])

        assert pookalam(1.25) == pookalam.points_at(1.25)


class TestRingPookalam:
    def test_layer_and_petal_floors(self) -> None:
        ring = RingPookalam.from_parameters(GenerationParameters(density=0.2, petals=1))

        assert ring.layer_count == 1
        assert ring.petal_count == 3

    def test_points_per_angle(self) -> None:
        """Verify each layer contributes one outer, one core and N petal points."""

        ring = RingPookalam.from_parameters(
            GenerationParameters(size=2.0, density=4, petals=6)
        )

        points = ring.points_at(0.7)

        assert len(points) == 4 * (1 + 6 + 1)
        assert {p.layer for p in points} == {Layer.MAIN, Layer.PETALS, Layer.CORE}

    def test_single_layer_uses_full_scale(self) -> None:
        ring = RingPookalam.from_parameters(
            GenerationParameters(size=10.0, density=1, petals=8)
        )

        outer = ring.points_at(0.0)[0]

        assert outer.x == pytest.approx(10.0 * 1.04)


def test_layer_progress_handles_single_layer() -> None:
    assert _layer_progress(0, 1) == 0.0
    assert _layer_progress(2, 3) == 1.0
