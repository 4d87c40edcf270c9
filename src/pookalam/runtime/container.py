from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from pookalam.programs.registry import ConfigurationRegistry
from pookalam.runtime.display_context import DisplayContext
from pookalam.runtime.event_handler import PygameEventHandler
from pookalam.runtime.game_loop import GameLoop
from pookalam.runtime.streams import RuntimeStreams
from pookalam.utilities.env import Configuration
from pookalam.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def build_runtime_container(
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for runtime configuration.")
    configure_runtime_container(container=container, overrides=overrides)
    return container


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, RuntimeStreams, Singleton(RuntimeStreams))
    _bind(
        container,
        overrides,
        DisplayContext,
        Singleton(lambda resolver: DisplayContext(size=Configuration.display_size())),
    )
    _bind(
        container,
        overrides,
        PygameEventHandler,
        Singleton(lambda resolver: PygameEventHandler(resolver[RuntimeStreams])),
    )
    _bind(
        container,
        overrides,
        GameLoop,
        Singleton(
            lambda resolver: GameLoop(
                display=resolver[DisplayContext],
                streams=resolver[RuntimeStreams],
                event_handler=resolver[PygameEventHandler],
                max_fps=Configuration.max_fps(),
            )
        ),
    )
    _bind(container, overrides, ConfigurationRegistry, Singleton(ConfigurationRegistry))


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
