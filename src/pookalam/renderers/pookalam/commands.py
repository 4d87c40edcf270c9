from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]
SurfacePoint = tuple[float, float]


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class Line:
    start: SurfacePoint
    end: SurfacePoint
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Polyline:
    points: tuple[SurfacePoint, ...]
    color: Color
    alpha: float = 1.0
    width: int = 3


@dataclass(frozen=True)
class Circle:
    center: SurfacePoint
    radius: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True)
class MarkerBlit:
    """Draw the marker image centred on ``center`` rotated by ``angle`` radians."""

    center: SurfacePoint
    angle: float
    size: int
    alpha: float = 1.0


@dataclass(frozen=True)
class Text:
    text: str
    position: SurfacePoint
    color: Color
    anchor: str = "midtop"


DrawCommand = Clear | Line | Polyline | Circle | MarkerBlit | Text
