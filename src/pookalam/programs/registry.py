from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pookalam.programs.settings import ProgramSettings
    from pookalam.runtime.game_loop import GameLoop
from pookalam.utilities.module_registry import discover_registry

Configure = Callable[["GameLoop", "ProgramSettings"], None]


class ConfigurationRegistry:
    @cached_property
    def registry(self) -> dict[str, Configure]:
        configurations_dir = Path(__file__).resolve().parent / "configurations"
        return discover_registry(
            configurations_dir,
            "pookalam.programs.configurations",
            attribute="configure",
            log_imports=True,
        )

    def get(self, name: str) -> Configure | None:
        return self.registry.get(name)

    def names(self) -> list[str]:
        return sorted(self.registry)
