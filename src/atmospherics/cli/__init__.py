"""
The atmospherics command-line interface, built with Typer and Rich.
"""

import logging
from enum import Enum

import typer
from rich.logging import RichHandler
from typing_extensions import Annotated

from . import profile, show


class LogLevel(str, Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


app = typer.Typer(
    help="atmospherics: the International Standard Atmosphere with typed "
    "quantities.",
    pretty_exceptions_enable=False,
)


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    log_level: Annotated[
        LogLevel, typer.Option(help="Set log level.")
    ] = LogLevel.WARNING,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Display version information and exit.",
        ),
    ] = False,
):
    if version:
        from atmospherics import __version__

        print(f"atmospherics version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        ctx.exit()

    logging.basicConfig(
        level=log_level.name,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


app.command(name="show", help=show.__doc__)(show.main)
app.command(name="profile", help=profile.__doc__)(profile.main)


def main():
    app()


if __name__ == "__main__":
    app()
