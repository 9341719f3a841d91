import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from bloom.cli.commands.describe import describe_command
from bloom.cli.commands.run import run_command
from bloom.utilities.logging import configure_logging

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="describe")(describe_command)


def main() -> None:
    configure_logging()
    app()


if __name__ == "__main__":
    main()
