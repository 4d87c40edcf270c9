import os
from pathlib import Path

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(
    env_var: str, *, default: int, minimum: int | None = None
) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_float(
    env_var: str, *, default: float, minimum: float | None = None
) -> float:
    """Return the float value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a number") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


class Configuration:
    @classmethod
    def display_size(cls) -> tuple[int, int]:
        return (
            _env_int("POOKALAM_WIDTH", default=800, minimum=1),
            _env_int("POOKALAM_HEIGHT", default=600, minimum=1),
        )

    @classmethod
    def world_scale(cls) -> float:
        return _env_float("POOKALAM_WORLD_SCALE", default=45.0, minimum=1e-6)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("POOKALAM_MAX_FPS", default=60, minimum=1)

    @classmethod
    def resolution(cls) -> float:
        return _env_float("POOKALAM_RESOLUTION", default=15.0, minimum=1e-3)

    @classmethod
    def turns(cls) -> float:
        return _env_float("POOKALAM_TURNS", default=1.0, minimum=1e-3)

    @classmethod
    def hold_duration_ms(cls) -> float:
        return _env_float("POOKALAM_HOLD_MS", default=1500.0, minimum=0.0)

    @classmethod
    def fade_duration_ms(cls) -> float:
        return _env_float("POOKALAM_FADE_MS", default=2000.0, minimum=1e-3)

    @classmethod
    def speed_scale(cls) -> float:
        return _env_float("POOKALAM_SPEED_SCALE", default=50.0, minimum=0.0)

    @classmethod
    def zoom_limits(cls) -> tuple[float, float]:
        minimum = _env_float("POOKALAM_MIN_ZOOM", default=0.1, minimum=1e-6)
        maximum = _env_float("POOKALAM_MAX_ZOOM", default=10.0, minimum=1e-6)
        if maximum < minimum:
            raise ValueError("POOKALAM_MAX_ZOOM must be at least POOKALAM_MIN_ZOOM")
        return minimum, maximum

    @classmethod
    def zoom_step(cls) -> float:
        return _env_float("POOKALAM_ZOOM_STEP", default=0.1, minimum=1e-6)

    @classmethod
    def depth_sort_enabled(cls) -> bool:
        return _env_flag("POOKALAM_DEPTH_SORT", default=True)

    @classmethod
    def show_grid(cls) -> bool:
        return _env_flag("POOKALAM_SHOW_GRID", default=True)

    @classmethod
    def show_labels(cls) -> bool:
        return _env_flag("POOKALAM_SHOW_LABELS", default=True)

    @classmethod
    def marker_image_path(cls) -> Path | None:
        value = os.environ.get("POOKALAM_MARKER_IMAGE")
        if not value:
            return None
        return Path(value).expanduser()
