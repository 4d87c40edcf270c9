from typing import Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings

from tests.helpers.time import DeterministicClock

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    patcher.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POOKALAM_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def deterministic_clock_factory() -> Callable[..., DeterministicClock]:
    def _factory(start: float = 0.0) -> DeterministicClock:
        return DeterministicClock(start)

    return _factory
