"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from notec import __version__
from notec.config import LOG_LEVELS, ViewerConfig
from notec.errors import NotecError
from notec.log import setup_logging


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"notec {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="notec",
        help="A minimal full-screen terminal text viewer.",
        add_completion=False,
        rich_markup_mode="rich",
    )

    @app.command()
    def view(
        filename: Annotated[Optional[Path], typer.Argument(help="File to open (empty buffer if omitted)")] = None,
        keys: Annotated[bool, typer.Option("--keys", "-k", help="Show how each keypress decodes, then exit on [bold]q[/]")] = False,
        timeout: Annotated[int, typer.Option("--timeout", "-t", min=0, max=255, envvar="NOTEC_READ_TIMEOUT", help="Input poll timeout in tenths of a second")] = 1,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="NOTEC_LOG_FILE", help="Write a debug log to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", envvar="NOTEC_LOG_LEVEL", help=f"One of {', '.join(LOG_LEVELS)}")] = "WARNING",
        version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = False,
    ) -> None:
        """View a text file. [bold]Ctrl-Q[/] quits."""
        from notec.cli.core.terminal import die

        try:
            config = ViewerConfig(read_timeout_ds=timeout, log_file=log_file, log_level=log_level)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
        setup_logging(config)

        try:
            if keys:
                from notec.cli.studio.keys import run_key_inspector
                run_key_inspector(config)
            else:
                from notec.cli.studio.viewer import run_viewer
                run_viewer(filename, config)
        except NotecError as e:
            die(e)

    return app
