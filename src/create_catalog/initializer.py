"""Set up Catalog inside a project directory.

The flow is strictly sequential: every filesystem check, subprocess and
write completes before the next step starts, and the first failure aborts
the run. Nothing is rolled back across steps.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from create_catalog.config import REQUIRED_DEPENDENCIES, InitOptions
from create_catalog.exceptions import AlreadyInitializedError, ProjectDirectoryError
from create_catalog.layout import TargetLayout
from create_catalog.logging_setup import console as default_console
from create_catalog.manifest import (
    create_manifest,
    dependency_name,
    read_manifest,
    write_manifest,
)
from create_catalog.package_manager import PackageManager
from create_catalog.runner import CommandRunner, SubprocessRunner
from create_catalog.template import copy_template_tree

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InitResult:
    """What a successful run did."""

    layout: TargetLayout
    package_manager: PackageManager
    manifest_created: bool = False
    scripts_written: bool = False
    installed: list[str] = field(default_factory=list)
    full_install: bool = False
    copied_files: list[Path] = field(default_factory=list)


@contextmanager
def _step(console: Console, message: str) -> Generator[None, None, None]:
    logger.info(message)
    try:
        with console.status(message):
            yield
    except BaseException:
        console.print(f"[red]✖[/red] {message}", highlight=False)
        raise
    console.print(f"[green]✔[/green] {message}", highlight=False)


def _names(specifiers: list[str]) -> str:
    return ", ".join(dependency_name(spec) for spec in specifiers)


class Initializer:
    """Runs the setup flow for one project directory."""

    def __init__(
        self,
        package_manager: PackageManager,
        runner: CommandRunner | None = None,
        console: Console | None = None,
    ) -> None:
        self.package_manager = package_manager
        self.runner = runner or SubprocessRunner()
        self.console = console or default_console

    def run(self, target_directory: str | Path, options: InitOptions, *, cwd: Path | None = None) -> InitResult:
        layout = TargetLayout.resolve(target_directory, options.catalog_dir, cwd=cwd)

        if layout.catalog_dir.exists():
            raise AlreadyInitializedError(layout.display_catalog_dir)

        self.console.print(
            f"\n  [green]Setting up Catalog in[/green] {escape(layout.display_catalog_dir)}\n", highlight=False
        )

        try:
            layout.app_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ProjectDirectoryError(layout.app_dir, str(exc)) from exc

        result = InitResult(layout=layout, package_manager=self.package_manager)
        if layout.manifest_path.exists():
            self._update_existing_app(layout, options, result)
        else:
            self._create_fresh_app(layout, options, result)

        if not layout.dependency_cache_dir.exists():
            with _step(self.console, "Installing dependencies"):
                self.runner.run(self.package_manager.install_command(), layout.app_dir)
            result.full_install = True

        with _step(self.console, "Creating Catalog files"):
            result.copied_files = copy_template_tree(layout.template_dir, layout.catalog_dir)

        logger.info("Catalog set up in %s", layout.catalog_dir)
        return result

    def _update_existing_app(self, layout: TargetLayout, options: InitOptions, result: InitResult) -> None:
        with _step(self.console, "Checking dependencies"):
            manifest = read_manifest(layout.manifest_path)
            missing = manifest.missing_dependencies()
            logger.debug("Missing dependencies: %s", missing or "none")

        if missing:
            with _step(self.console, f"Installing {_names(missing)}"):
                self.runner.run(self.package_manager.add_command(missing), layout.app_dir)
            result.installed = missing

        if not manifest.has_catalog_scripts():
            with _step(self.console, "Adding Catalog scripts to package.json"):
                # The install step may have rewritten package.json.
                manifest = read_manifest(layout.manifest_path)
                write_manifest(layout.manifest_path, manifest.with_catalog_scripts(options.catalog_dir))
            result.scripts_written = True

    def _create_fresh_app(self, layout: TargetLayout, options: InitOptions, result: InitResult) -> None:
        with _step(self.console, "Creating package.json"):
            create_manifest(layout.manifest_path, layout.app_name, options.catalog_dir)
        result.manifest_created = True
        result.scripts_written = True

        dependencies = list(REQUIRED_DEPENDENCIES)
        with _step(self.console, f"Installing {_names(dependencies)}"):
            self.runner.run(self.package_manager.add_command(dependencies), layout.app_dir)
        result.installed = dependencies


def run(
    target_directory: str | Path,
    options: InitOptions,
    *,
    package_manager: PackageManager,
    runner: CommandRunner | None = None,
    console: Console | None = None,
    cwd: Path | None = None,
) -> InitResult:
    """Set up Catalog in ``target_directory``.

    Raises:
        AlreadyInitializedError: The catalog directory already exists. Nothing
            is written in this case.
        SubprocessFailureError: A package-manager command failed.
        FilesystemError: Reading, writing or copying failed.

    """
    initializer = Initializer(package_manager, runner=runner, console=console)
    return initializer.run(target_directory, options, cwd=cwd)


__all__ = ["InitResult", "Initializer", "run"]
