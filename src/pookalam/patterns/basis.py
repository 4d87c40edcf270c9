"""Fractal-inspired radius modulation functions.

Each member maps ``(t, scale, freq, amplitude)`` to a radius close to
``scale``. Outputs stay within ``scale * (1 +/- amplitude * K)`` for a small
``K`` so composed layers can be clamped reliably.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Callable

PHI = (1 + math.sqrt(5)) / 2
PHI_INV = 1 / PHI
TAU = 2 * math.pi

MANDELBROT_C = complex(0.3, 0.1)
MANDELBROT_MAX_ITERATIONS = 8
MANDELBROT_ESCAPE_RADIUS = 2.0
KOCH_HARMONICS = 4

RadiusFn = Callable[[float, float, float, float], float]


class BasisFunction(StrEnum):
    # Declaration order is the registry order; seeded selection indexes into it.
    FIBONACCI = "fibonacci"
    DRAGON = "dragon"
    KOCH = "koch"
    MANDELBROT = "mandelbrot"
    FERN = "fern"

    @classmethod
    def registry(cls) -> tuple["BasisFunction", ...]:
        return tuple(cls)

    def __call__(
        self, t: float, scale: float, freq: float, amplitude: float
    ) -> float:
        return _DISPATCH[self](t, scale, freq, amplitude)


def fibonacci(t: float, scale: float, freq: float, amplitude: float) -> float:
    # Logarithmic spiral growth; negative phases are treated as the origin.
    fib_scale = 1 + math.log1p(max(t, 0.0) / TAU) * PHI_INV
    return scale * fib_scale * (1 + amplitude * math.sin(freq * t))


def dragon(t: float, scale: float, freq: float, amplitude: float) -> float:
    n = math.floor((t * freq) / TAU)
    sign = 1 if ((n & -n) << 1) & n else -1
    return scale * (1 + amplitude * sign * math.cos(t * freq))


def koch(t: float, scale: float, freq: float, amplitude: float) -> float:
    ripple = 0.0
    for i in range(KOCH_HARMONICS):
        factor = 3**i
        ripple += math.cos(freq * factor * t) / factor
    return scale * (1 + amplitude * ripple)


def mandelbrot(t: float, scale: float, freq: float, amplitude: float) -> float:
    z = complex(math.cos(t), math.sin(t))
    magnitude = 0.0
    for _ in range(MANDELBROT_MAX_ITERATIONS):
        z = z * z + MANDELBROT_C
        magnitude = abs(z)
        if magnitude > MANDELBROT_ESCAPE_RADIUS:
            break
    return scale * (1 + amplitude * math.sin(magnitude * freq * t))


def fern(t: float, scale: float, freq: float, amplitude: float) -> float:
    leaf = math.exp(-t * 0.5) * math.cos(freq * t) * math.sin(t * 2)
    return scale * (1 + amplitude * leaf)


_DISPATCH: dict[BasisFunction, RadiusFn] = {
    BasisFunction.FIBONACCI: fibonacci,
    BasisFunction.DRAGON: dragon,
    BasisFunction.KOCH: koch,
    BasisFunction.MANDELBROT: mandelbrot,
    BasisFunction.FERN: fern,
}


def evaluate(
    basis: BasisFunction, t: float, scale: float, freq: float, amplitude: float
) -> float:
    return _DISPATCH[basis](t, scale, freq, amplitude)
