from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

DEFAULT_COMPLEXITY = 0.7
DEFAULT_SYMMETRY = 1.0


@dataclass(frozen=True)
class GenerationParameters:
    """Immutable snapshot of the knobs that drive one pattern synthesis.

    ``density`` is a 0.3-1.0 layer driver for the fractal composer and an
    integer layer count for the ring composer. Out-of-range values are not
    rejected here; composers floor and clamp what they consume.
    """

    size: float = 100.0
    density: float = 0.6
    petals: float = 8
    style: int = 1
    complexity: float = DEFAULT_COMPLEXITY
    symmetry: float = DEFAULT_SYMMETRY

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GenerationParameters:
        known = {field.name for field in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    def with_changes(self, **changes: Any) -> GenerationParameters:
        return replace(self, **changes)


PRESETS: dict[str, GenerationParameters] = {
    "traditional": GenerationParameters(
        size=100, density=0.6, petals=8, complexity=0.5, symmetry=1.0, style=1
    ),
    "ornate": GenerationParameters(
        size=100, density=0.9, petals=12, complexity=0.8, symmetry=0.95, style=2
    ),
    "minimalist": GenerationParameters(
        size=100, density=0.4, petals=6, complexity=0.3, symmetry=1.0, style=3
    ),
    "organic": GenerationParameters(
        size=100, density=0.7, petals=10, complexity=0.9, symmetry=0.7, style=4
    ),
    "geometric": GenerationParameters(
        size=100, density=0.8, petals=16, complexity=0.6, symmetry=1.0, style=5
    ),
}


def morph_parameters(
    start: GenerationParameters,
    end: GenerationParameters,
    progress: float,
) -> GenerationParameters:
    """Linearly interpolate every field between ``start`` and ``end``.

    ``style`` is an integer seed, so it switches from the start value to the
    end value halfway through instead of being interpolated.
    """

    values: dict[str, Any] = {}
    for field in fields(GenerationParameters):
        a = getattr(start, field.name)
        b = getattr(end, field.name)
        if field.name == "style":
            values[field.name] = a if progress < 0.5 else b
        else:
            values[field.name] = a + (b - a) * progress
    return GenerationParameters(**values)
