"""Path resolution for a create-catalog run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from create_catalog.config import (
    DEPENDENCY_CACHE_DIR,
    MANIFEST_FILENAME,
    SETUP_TEMPLATE_PATH,
)


@dataclass(frozen=True, slots=True)
class TargetLayout:
    """Resolved absolute paths for the project being initialized."""

    app_dir: Path
    catalog_dir: Path
    display_dir: str
    display_catalog_dir: str
    app_dir_is_cwd: bool

    @classmethod
    def resolve(cls, target_directory: str | Path, catalog_dir: str, cwd: Path | None = None) -> TargetLayout:
        """Resolve ``target_directory`` and ``catalog_dir`` against ``cwd``.

        ``display_*`` keep the paths as the user typed them, for messages.
        """
        # Normalised but not dereferenced: a symlinked app dir keeps its own name.
        base = Path(os.path.abspath(cwd or Path.cwd()))
        display_dir = str(target_directory)
        app_dir = Path(os.path.abspath(base / Path(target_directory).expanduser()))
        return cls(
            app_dir=app_dir,
            catalog_dir=Path(os.path.abspath(app_dir / catalog_dir)),
            display_dir=display_dir,
            display_catalog_dir=os.path.join(display_dir, catalog_dir),
            app_dir_is_cwd=app_dir == base,
        )

    @property
    def app_name(self) -> str:
        return self.app_dir.name

    @property
    def manifest_path(self) -> Path:
        return self.app_dir / MANIFEST_FILENAME

    @property
    def dependency_cache_dir(self) -> Path:
        return self.app_dir / DEPENDENCY_CACHE_DIR

    @property
    def template_dir(self) -> Path:
        return self.dependency_cache_dir.joinpath(*SETUP_TEMPLATE_PATH)


__all__ = ["TargetLayout"]
