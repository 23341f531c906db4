"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from mgc_sdk import __version__
from mgc_sdk.client.errors import err_console
from mgc_sdk.commands import compute, config_cmd, storage

app = typer.Typer(
    name="mgc",
    help="CLI for Magalu Cloud compute and object storage.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"mgc {__version__}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    """Route ``mgc_sdk`` log records to stderr through rich."""
    logger = logging.getLogger("mgc_sdk")
    if debug and not logger.handlers:
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    debug: bool = typer.Option(False, "--debug", help="Log requests and pagination to stderr."),
) -> None:
    """Magalu Cloud CLI: manage instances, images, snapshots and buckets."""
    configure_logging(debug)


app.add_typer(config_cmd.app, name="config")
app.add_typer(compute.app, name="compute")
app.add_typer(storage.app, name="storage")


def main() -> None:
    app()
