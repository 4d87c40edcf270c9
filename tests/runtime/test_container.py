from pookalam.programs.registry import ConfigurationRegistry
from pookalam.runtime.container import build_runtime_container
from pookalam.runtime.display_context import DisplayContext
from pookalam.runtime.game_loop import GameLoop
from pookalam.runtime.streams import RuntimeStreams


class TestRuntimeContainer:
    """Validate runtime container wiring so the loop and its services resolve once."""

    def test_container_build_registers_core_singletons(self) -> None:
        container = build_runtime_container()

        loop = container.resolve(GameLoop)

        assert loop is container.resolve(GameLoop)
        assert loop.streams is container.resolve(RuntimeStreams)
        assert loop.display is container.resolve(DisplayContext)

    def test_display_size_comes_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("POOKALAM_WIDTH", "320")
        monkeypatch.setenv("POOKALAM_HEIGHT", "200")

        display = build_runtime_container().resolve(DisplayContext)

        assert display.size == (320, 200)

    def test_container_honors_overrides(self) -> None:
        """Ensure tests can swap services without touching runtime code."""

        registry = ConfigurationRegistry()
        streams = RuntimeStreams()
        container = build_runtime_container(
            {ConfigurationRegistry: registry, RuntimeStreams: streams}
        )

        assert container.resolve(ConfigurationRegistry) is registry
        assert container.resolve(GameLoop).streams is streams
