"""Layered pookalam point synthesis.

A composer is resolved once from :class:`GenerationParameters` and then
queried per sampled angle. ``FractalPookalam`` blends two seeded basis
functions across concentric layers; ``RingPookalam`` is the plain
three-ring variant driven by an integer layer count.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from pookalam.patterns.basis import PHI_INV, BasisFunction
from pookalam.patterns.parameters import (DEFAULT_COMPLEXITY, DEFAULT_SYMMETRY,
                                          GenerationParameters)
from pookalam.patterns.rng import Mulberry32

STYLE_SEED_OFFSET = 54321
GOLDEN_ANGLE = 2 * math.pi * PHI_INV

MIN_LAYERS = 3
MIN_PETALS = 4
PETAL_COMPLEXITY_THRESHOLD = 0.4
CORE_LAYER_FRACTION = 0.6

LAYER_DEPTH_STEP = 50
PETAL_DEPTH_OFFSET = 500
CORE_DEPTH_OFFSET = 1000


class Layer(StrEnum):
    MAIN = "main"
    PETALS = "petals"
    CORE = "core"


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    depth: int = 0
    layer: Layer = Layer.MAIN
    color: int = 0
    pattern: BasisFunction | None = None

    @property
    def radius(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class LayerPlan:
    index: int
    progress: float
    current_radius: float
    primary_weight: float
    secondary_weight: float
    amplitude: float
    has_core: bool


def _layer_progress(index: int, count: int) -> float:
    if count <= 1:
        return 0.0
    return index / (count - 1)


@dataclass(frozen=True)
class FractalPookalam:
    parameters: GenerationParameters
    layer_count: int
    petal_count: int
    primary: BasisFunction
    secondary: BasisFunction
    asymmetry_offset: float
    layers: tuple[LayerPlan, ...]

    @classmethod
    def from_parameters(cls, parameters: GenerationParameters) -> FractalPookalam:
        complexity = _or_default(parameters.complexity, DEFAULT_COMPLEXITY)
        symmetry = _or_default(parameters.symmetry, DEFAULT_SYMMETRY)
        layer_count = max(MIN_LAYERS, math.floor(parameters.density * 10))
        petal_count = max(MIN_PETALS, math.floor(parameters.petals))

        rng = Mulberry32(int(parameters.style) + STYLE_SEED_OFFSET)
        registry = BasisFunction.registry()
        primary = registry[rng.next_index(len(registry))]
        secondary = registry[rng.next_index(len(registry))]
        asymmetry_offset = (1 - symmetry) * (rng.next() - 0.5) * 0.3

        layers = []
        for index in range(layer_count):
            progress = _layer_progress(index, layer_count)
            blend = math.sin(progress * math.pi)
            layers.append(
                LayerPlan(
                    index=index,
                    progress=progress,
                    current_radius=parameters.size * (1 - progress * 0.9),
                    primary_weight=blend,
                    secondary_weight=1 - blend,
                    amplitude=(0.05 + complexity * 0.15) * (1 + blend),
                    has_core=index >= layer_count * CORE_LAYER_FRACTION,
                )
            )

        return cls(
            parameters=parameters.with_changes(
                complexity=complexity, symmetry=symmetry
            ),
            layer_count=layer_count,
            petal_count=petal_count,
            primary=primary,
            secondary=secondary,
            asymmetry_offset=asymmetry_offset,
            layers=tuple(layers),
        )

    @property
    def complexity(self) -> float:
        return self.parameters.complexity

    def points_at(self, t: float) -> list[Point]:
        points: list[Point] = []
        for layer in self.layers:
            points.append(self._main_point(layer, t))
            if self.complexity > PETAL_COMPLEXITY_THRESHOLD:
                points.extend(self._petal_points(layer, t))
            if layer.has_core:
                points.append(self._core_point(layer, t))
        return points

    __call__ = points_at

    def _main_point(self, layer: LayerPlan, t: float) -> Point:
        r1 = self.primary(t, layer.current_radius, self.petal_count, layer.amplitude)
        r2 = self.secondary(
            t + self.asymmetry_offset,
            layer.current_radius,
            self.petal_count * 0.7,
            layer.amplitude * 0.6,
        )
        # A layer's ring never grows past its nominal radius.
        radius = min(
            r1 * layer.primary_weight + r2 * layer.secondary_weight,
            layer.current_radius,
        )
        return Point(
            x=radius * math.cos(t),
            y=radius * math.sin(t),
            depth=layer.index * LAYER_DEPTH_STEP,
            layer=Layer.MAIN,
            color=math.floor((layer.index * 7) / self.layer_count),
            pattern=self.primary,
        )

    def _petal_points(self, layer: LayerPlan, t: float) -> list[Point]:
        size = self.parameters.size
        complexity = self.complexity
        petal_radius = layer.current_radius * (0.4 + complexity * 0.3)
        detail_count = math.floor(self.petal_count * (0.5 + complexity * 0.5))
        frequency = math.floor(4 + complexity * 4)
        center_radius = layer.current_radius * 0.6

        points = []
        for petal_index in range(detail_count):
            petal_angle = (
                petal_index / detail_count * 2 * math.pi + layer.index * 0.1
            )
            local_t = t * (1 + petal_index * 0.1) + petal_angle
            r_petal = self.secondary(
                local_t, petal_radius * 0.4, frequency, layer.amplitude * 1.5
            )
            x = center_radius * math.cos(petal_angle) + r_petal * math.cos(local_t)
            y = center_radius * math.sin(petal_angle) + r_petal * math.sin(local_t)

            distance = math.hypot(x, y)
            if distance > size:
                x *= size / distance
                y *= size / distance

            points.append(
                Point(
                    x=x,
                    y=y,
                    depth=layer.index * LAYER_DEPTH_STEP + PETAL_DEPTH_OFFSET,
                    layer=Layer.PETALS,
                    color=((petal_index + layer.index) % 5) + 2,
                    pattern=self.secondary,
                )
            )
        return points

    def _core_point(self, layer: LayerPlan, t: float) -> Point:
        core_radius = layer.current_radius * 0.25
        core_frequency = math.floor(4 + self.complexity * 8)
        core_amplitude = layer.amplitude * (2 - layer.progress)

        radius = core_radius
        for harmonic in range(1, 4):
            harmonic_scale = core_radius / (harmonic * 2)
            radius += (
                self.primary(
                    t * harmonic,
                    harmonic_scale,
                    core_frequency * harmonic,
                    core_amplitude / harmonic,
                )
                - harmonic_scale
            )
        radius = min(radius, core_radius)

        angle = t + layer.index * GOLDEN_ANGLE
        return Point(
            x=radius * math.cos(angle),
            y=radius * math.sin(angle),
            depth=layer.index * LAYER_DEPTH_STEP + CORE_DEPTH_OFFSET,
            layer=Layer.CORE,
            color=7 + (layer.index % 2),
            pattern=self.primary,
        )


@dataclass(frozen=True)
class RingPookalam:
    """Three concentric phases per layer: outer ripple, petal ring and core."""

    parameters: GenerationParameters
    layer_count: int
    petal_count: int

    @classmethod
    def from_parameters(cls, parameters: GenerationParameters) -> RingPookalam:
        return cls(
            parameters=parameters,
            layer_count=max(1, math.floor(parameters.density)),
            petal_count=max(3, math.floor(parameters.petals)),
        )

    def points_at(self, t: float) -> list[Point]:
        size = self.parameters.size
        petals = self.petal_count
        points: list[Point] = []
        for index in range(self.layer_count):
            ring_scale = (
                index / (self.layer_count - 1) if self.layer_count > 1 else 1.0
            )
            ring_depth = self.layer_count - index

            outer = size * (
                1 + 0.15 * math.sin(petals * t) + 0.04 * math.cos(petals * 3 * t)
            )
            outer *= ring_scale
            points.append(
                Point(
                    x=outer * math.cos(t),
                    y=outer * math.sin(t),
                    depth=ring_depth,
                    layer=Layer.MAIN,
                    color=0,
                )
            )

            petal = size * 0.28 * (1 + 0.3 * math.cos(5 * t)) * ring_scale
            for petal_index in range(petals):
                petal_angle = petal_index / petals * math.pi * 2
                points.append(
                    Point(
                        x=size * 0.6 * math.cos(petal_angle)
                        + petal * math.cos(t + math.pi / 4),
                        y=size * 0.6 * math.sin(petal_angle)
                        + petal * math.sin(t + math.pi / 4),
                        depth=ring_depth + 1000,
                        layer=Layer.PETALS,
                        color=2 + petal_index % 5,
                    )
                )

            core = size * 0.35 * (1 - 0.3 * math.sin(petals * t + math.pi / 2))
            core *= ring_scale
            points.append(
                Point(
                    x=core * math.cos(t),
                    y=core * math.sin(t),
                    depth=ring_depth + 2000,
                    layer=Layer.CORE,
                    color=7,
                )
            )
        return points

    __call__ = points_at


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value


def compose(parameters: GenerationParameters) -> FractalPookalam:
    return FractalPookalam.from_parameters(parameters)
