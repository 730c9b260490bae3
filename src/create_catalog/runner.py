"""Subprocess execution for package-manager commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from create_catalog.exceptions import SubprocessFailureError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Runs an external command to completion in a working directory."""

    def run(self, command: Sequence[str], cwd: Path) -> None: ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, raising on any failure."""

    def run(self, command: Sequence[str], cwd: Path) -> None:
        if not command:
            msg = "empty command"
            raise ValueError(msg)

        executable = shutil.which(command[0])
        if not executable:
            raise SubprocessFailureError(command, reason=f"'{command[0]}' was not found on PATH")

        logger.debug("Running %s in %s", " ".join(command), cwd)
        try:
            subprocess.run(  # nosec B603
                [executable, *command[1:]],
                cwd=cwd,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            reason = (exc.stderr or "").strip() or None
            raise SubprocessFailureError(command, returncode=exc.returncode, reason=reason) from exc
        except OSError as exc:
            raise SubprocessFailureError(command, reason=str(exc)) from exc


__all__ = ["CommandRunner", "SubprocessRunner"]
