"""Node package manager detection and command construction."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from enum import Enum

logger = logging.getLogger(__name__)


class PackageManager(str, Enum):
    """Package managers create-catalog knows how to drive."""

    YARN = "yarn"
    NPM = "npm"

    def add_command(self, dependencies: Sequence[str]) -> list[str]:
        """Return the command that adds ``dependencies`` to the manifest."""
        if self is PackageManager.YARN:
            return ["yarn", "add", *dependencies]
        return ["npm", "install", "--save", *dependencies]

    def install_command(self) -> list[str]:
        """Return the command that installs everything the manifest declares."""
        return [self.value, "install"]

    def run_script_hint(self, script: str) -> str:
        return f"{self.value} run {script}"


def _yarn_available() -> bool:
    yarnpkg = shutil.which("yarnpkg")
    if not yarnpkg:
        return False
    try:
        subprocess.run(  # nosec B603
            [yarnpkg, "--version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError):
        return False
    return True


def detect_package_manager(preferred: str | PackageManager | None = None) -> PackageManager:
    """Pick the package manager for this invocation.

    An explicit preference wins. Otherwise yarn is used when ``yarnpkg
    --version`` succeeds and npm is the fallback. Callers compute this once
    and pass the result along.
    """
    if preferred:
        manager = PackageManager(preferred)
        logger.debug("Using configured package manager: %s", manager.value)
        return manager

    manager = PackageManager.YARN if _yarn_available() else PackageManager.NPM
    logger.debug("Detected package manager: %s", manager.value)
    return manager


__all__ = ["PackageManager", "detect_package_manager"]
