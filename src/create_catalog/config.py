"""Configuration for create-catalog.

Settings come from defaults and ``CREATE_CATALOG_*`` environment variables;
per-run options come from the command line.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_DIR = "catalog"
CATALOG_VERSION_RANGE = "^3.0.0-rc.4"

# Order matters: it is the order dependencies are reported and installed in.
REQUIRED_DEPENDENCIES: tuple[str, ...] = (
    f"catalog@{CATALOG_VERSION_RANGE}",
    "react",
    "react-dom",
)

MANIFEST_FILENAME = "package.json"
DEPENDENCY_CACHE_DIR = "node_modules"
SETUP_TEMPLATE_PATH: tuple[str, ...] = ("catalog", "dist", "setup-template")

START_SCRIPT = "catalog-start"
BUILD_SCRIPT = "catalog-build"


class CreateCatalogSettings(BaseSettings):
    """Process-level settings.

    Supports environment variable overrides such as
    ``CREATE_CATALOG_PACKAGE_MANAGER=npm``.
    """

    catalog_dir: str = DEFAULT_CATALOG_DIR
    package_manager: Literal["yarn", "npm"] | None = None
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="CREATE_CATALOG_",
    )


class InitOptions(BaseModel):
    """Options for a single initialization run."""

    catalog_dir: str = DEFAULT_CATALOG_DIR

    model_config = ConfigDict(frozen=True)

    @field_validator("catalog_dir")
    @classmethod
    def _validate_catalog_dir(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "catalog directory must not be empty"
            raise ValueError(msg)
        if PurePath(value).is_absolute():
            msg = f"catalog directory must be relative to the app directory, got '{value}'"
            raise ValueError(msg)
        return value


__all__ = [
    "BUILD_SCRIPT",
    "CATALOG_VERSION_RANGE",
    "DEFAULT_CATALOG_DIR",
    "DEPENDENCY_CACHE_DIR",
    "MANIFEST_FILENAME",
    "REQUIRED_DEPENDENCIES",
    "SETUP_TEMPLATE_PATH",
    "START_SCRIPT",
    "CreateCatalogSettings",
    "InitOptions",
]
