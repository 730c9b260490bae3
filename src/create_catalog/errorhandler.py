"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.markup import escape

from create_catalog.exceptions import (
    AlreadyInitializedError,
    FilesystemError,
    ManifestParseError,
    SubprocessFailureError,
)
from create_catalog.logging_setup import error_console as console


def _print_already_initialized(error: AlreadyInitializedError) -> None:
    catalog_dir = escape(error.catalog_dir)
    console.print(
        f"\n  [yellow]The directory \"{catalog_dir}\" already exists.[/yellow]\n\n"
        "  Some suggestions:\n\n"
        "    - Maybe Catalog is already installed? Try starting it with [yellow]catalog start[/yellow]\n"
        "    - Install Catalog in another directory using the [yellow]--catalog-dir[/yellow] option.\n"
        f"    - Delete \"{catalog_dir}\" and try again.\n\n"
        "  For available options run [yellow]create-catalog --help[/yellow].\n",
        highlight=False,
    )


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Report failures on stderr and exit with status 1.

    Args:
        debug: If True, re-raise known errors and print full tracebacks for
            unexpected ones.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except AlreadyInitializedError as e:
        if debug:
            raise
        _print_already_initialized(e)
        raise typer.Exit(1) from e
    except SubprocessFailureError as e:
        if debug:
            raise
        console.print(f"[bold red]Package manager failed:[/bold red] [red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    except ManifestParseError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid package.json:[/bold red] [red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    except FilesystemError as e:
        if debug:
            raise
        console.print(f"[bold red]Filesystem error:[/bold red] [red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] [red]{escape(str(e))}[/red]")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
