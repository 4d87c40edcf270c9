from dataclasses import asdict

import typer

from pookalam.patterns.parameters import PRESETS


def presets_command() -> None:
    """List the named parameter presets."""

    for name, parameters in PRESETS.items():
        values = ", ".join(f"{key}={value}" for key, value in asdict(parameters).items())
        typer.echo(f"{name}: {values}")
