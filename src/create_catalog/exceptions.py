"""Exceptions raised while setting up Catalog in a project."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CreateCatalogError(Exception):
    """Base exception for all create-catalog errors."""


class AlreadyInitializedError(CreateCatalogError):
    """Raised when the catalog directory already exists in the target project."""

    def __init__(self, catalog_dir: str) -> None:
        self.catalog_dir = catalog_dir
        super().__init__(f'The directory "{catalog_dir}" already exists.')


class SubprocessFailureError(CreateCatalogError):
    """Raised when a package-manager command fails or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: int | None = None, reason: str | None = None) -> None:
        self.command = list(command)
        self.returncode = returncode
        message = f"Command failed: {' '.join(self.command)}"
        if returncode is not None:
            message += f" (exit code {returncode})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FilesystemError(CreateCatalogError):
    """Base exception for read, write and copy failures."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ProjectDirectoryError(FilesystemError):
    """Raised when the project root cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Could not create project directory '{path}': {reason}")


class ManifestReadError(FilesystemError):
    """Raised when package.json exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Could not read '{path}': {reason}")


class ManifestParseError(FilesystemError):
    """Raised when package.json is not a valid JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Invalid manifest '{path}': {reason}")


class ManifestWriteError(FilesystemError):
    """Raised when package.json cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Could not write '{path}': {reason}")


class TemplateNotFoundError(FilesystemError):
    """Raised when the installed catalog package ships no setup template."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            path,
            f"Catalog setup template not found at '{path}'. Is the catalog dependency installed correctly?",
        )


class TemplateCopyError(FilesystemError):
    """Raised when copying the setup template fails."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Failed to create Catalog files in '{path}': {reason}")


__all__ = [
    "AlreadyInitializedError",
    "CreateCatalogError",
    "FilesystemError",
    "ManifestParseError",
    "ManifestReadError",
    "ManifestWriteError",
    "ProjectDirectoryError",
    "SubprocessFailureError",
    "TemplateCopyError",
    "TemplateNotFoundError",
]
