"""Shared fixtures for create-catalog tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tests.helpers.package_manager import FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=200)
