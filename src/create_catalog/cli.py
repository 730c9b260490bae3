"""Typer application for the ``create-catalog`` command."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from create_catalog import __version__
from create_catalog.config import START_SCRIPT, CreateCatalogSettings, InitOptions
from create_catalog.errorhandler import handle_cli_errors
from create_catalog.initializer import InitResult, run
from create_catalog.logging_setup import configure_logging, console
from create_catalog.package_manager import detect_package_manager

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="create-catalog",
    help="Set up Catalog in a new or existing project.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"create-catalog {__version__}")
        raise typer.Exit


def _print_summary(result: InitResult) -> None:
    hint = escape(result.package_manager.run_script_hint(START_SCRIPT))
    if result.layout.app_dir_is_cwd:
        next_step = f"Run [yellow]{hint}[/yellow] to get started."
    else:
        next_step = (
            f"Go to [yellow]{escape(result.layout.display_dir)}[/yellow] "
            f"and run [yellow]{hint}[/yellow] to get started."
        )
    console.print(f"\n  [green]Catalog is ready to go! 🙌[/green]\n\n  {next_step}\n", highlight=False)


@app.command()
def main(
    app_dir: Annotated[str, typer.Argument(metavar="[APP_DIR]", help="Directory of the app to set up Catalog in")] = ".",
    catalog_dir: Annotated[
        str | None,
        typer.Option("--catalog-dir", "-d", help="Catalog directory within <app directory>  [default: catalog]"),
    ] = None,
    *,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks on failure")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = None,
) -> None:
    """Set up Catalog in APP_DIR (defaults to the current directory)."""
    settings = CreateCatalogSettings()
    configure_logging("DEBUG" if debug else settings.log_level)

    try:
        options = InitOptions(catalog_dir=catalog_dir if catalog_dir is not None else settings.catalog_dir)
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        raise typer.BadParameter(message, param_hint="'--catalog-dir'") from e

    with handle_cli_errors(debug=debug):
        package_manager = detect_package_manager(settings.package_manager)
        logger.debug("Setting up %s with %s", app_dir, package_manager.value)
        result = run(app_dir, options, package_manager=package_manager)

    _print_summary(result)


__all__ = ["app", "main"]
