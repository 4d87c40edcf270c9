from enum import StrEnum


class DrawMode(StrEnum):
    FRACTAL = "fractal"
    FUNCTION = "function"
    PARAMETRIC = "parametric"
    IMPLICIT = "implicit"
