import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from pookalam.cli.commands.presets import presets_command
from pookalam.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="presets")(presets_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
