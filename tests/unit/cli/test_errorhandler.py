from pathlib import Path
from unittest.mock import patch

import pytest
import typer

from create_catalog.errorhandler import handle_cli_errors
from create_catalog.exceptions import (
    AlreadyInitializedError,
    ManifestParseError,
    SubprocessFailureError,
    TemplateCopyError,
)


def _printed(mock_print) -> list[str]:
    return [str(arg) for call in mock_print.call_args_list for arg in call[0]]


def test_handle_cli_errors_already_initialized():
    """Verify AlreadyInitializedError prints suggestions and exits with 1."""
    with patch("create_catalog.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise AlreadyInitializedError("app/catalog")

    assert excinfo.value.exit_code == 1
    printed = _printed(mock_print)
    assert any('"app/catalog" already exists' in arg for arg in printed)
    assert any("catalog start" in arg for arg in printed)


def test_handle_cli_errors_subprocess_failure():
    with patch("create_catalog.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise SubprocessFailureError(["yarn", "add", "react"], returncode=1)

    assert excinfo.value.exit_code == 1
    assert any("Package manager failed" in arg for arg in _printed(mock_print))
    assert any("yarn add react" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_invalid_manifest():
    with patch("create_catalog.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit):
            with handle_cli_errors(debug=False):
                raise ManifestParseError(Path("package.json"), "Expecting value")

    assert any("Invalid package.json" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_filesystem_error():
    with patch("create_catalog.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit):
            with handle_cli_errors(debug=False):
                raise TemplateCopyError(Path("catalog"), "disk full")

    assert any("Filesystem error" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_debug_mode_re_raises():
    """Verify debug mode re-raises known exceptions."""
    with pytest.raises(AlreadyInitializedError):
        with handle_cli_errors(debug=True):
            raise AlreadyInitializedError("catalog")


def test_handle_cli_errors_unexpected_exception():
    with patch("create_catalog.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                msg = "Oops"
                raise ValueError(msg)

    assert excinfo.value.exit_code == 1
    assert any("An unexpected error occurred" in arg for arg in _printed(mock_print))


def test_handle_cli_errors_unexpected_exception_debug():
    """Verify debug mode prints the traceback and exits."""
    with patch("create_catalog.errorhandler.console.print_exception") as mock_print_exc:
        with pytest.raises(typer.Exit):
            with handle_cli_errors(debug=True):
                msg = "Oops"
                raise ValueError(msg)

    mock_print_exc.assert_called_once()


def test_handle_cli_errors_passes_exit_through():
    with pytest.raises(typer.Exit) as excinfo:
        with handle_cli_errors(debug=False):
            raise typer.Exit(3)

    assert excinfo.value.exit_code == 3
