from os import PathLike
from pathlib import Path

import pygame

from pookalam.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FONT_SIZE = 16


class Loader:
    _image_cache: dict[Path, pygame.Surface] = {}

    @classmethod
    def reset_caches(cls) -> None:
        cls._image_cache = {}

    @classmethod
    def resolve_path(cls, path: str | PathLike[str]) -> Path:
        """Resolve relative paths against ``src/pookalam/assets``."""

        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return Path(__file__).resolve().parent / candidate

    @classmethod
    def load(cls, path: str | PathLike[str]) -> pygame.Surface:
        resolved_path = cls.resolve_path(path)
        cached = cls._image_cache.get(resolved_path)
        if cached is not None:
            return cached
        loaded = pygame.image.load(resolved_path)
        if pygame.display.get_surface() is not None:
            loaded = loaded.convert_alpha()
        cls._image_cache[resolved_path] = loaded
        return loaded

    @classmethod
    def load_marker(cls, path: str | PathLike[str] | None) -> pygame.Surface | None:
        """Return the decoded marker image, or ``None`` so callers draw a dot."""

        if path is None:
            return None
        try:
            return cls.load(path)
        except (FileNotFoundError, pygame.error) as exc:
            logger.warning("Marker image %s unavailable, using dot marker: %s", path, exc)
            return None

    @classmethod
    def load_font(cls, font_size: int = DEFAULT_FONT_SIZE) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, font_size)
