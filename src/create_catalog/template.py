"""Copying the Catalog setup template into the project."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from create_catalog.exceptions import TemplateCopyError, TemplateNotFoundError

logger = logging.getLogger(__name__)


def copy_template_tree(source: Path, destination: Path) -> list[Path]:
    """Recursively copy ``source`` to ``destination``.

    Files land in a hidden staging directory beside ``destination`` which is
    renamed into place once the copy finishes, so a failed copy never leaves
    a half-populated ``destination`` behind.

    Returns:
        The copied files, relative to ``destination``.

    Raises:
        TemplateNotFoundError: If ``source`` is not a directory.
        TemplateCopyError: If ``destination`` exists or any I/O step fails.

    """
    if not source.is_dir():
        raise TemplateNotFoundError(source)
    if destination.exists():
        raise TemplateCopyError(destination, "destination already exists")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{destination.name}-", dir=destination.parent))
    except OSError as exc:
        raise TemplateCopyError(destination, str(exc)) from exc

    try:
        shutil.copytree(source, staging, dirs_exist_ok=True)
        staging.rename(destination)
    except OSError as exc:
        shutil.rmtree(staging, ignore_errors=True)
        raise TemplateCopyError(destination, str(exc)) from exc

    copied = sorted(path.relative_to(destination) for path in destination.rglob("*") if path.is_file())
    logger.debug("Copied %d template files into %s", len(copied), destination)
    return copied


__all__ = ["copy_template_tree"]
