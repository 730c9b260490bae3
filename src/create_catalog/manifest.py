"""Reading, analysing and writing the project's package.json."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from create_catalog.config import (
    BUILD_SCRIPT,
    DEFAULT_CATALOG_DIR,
    REQUIRED_DEPENDENCIES,
    START_SCRIPT,
)
from create_catalog.exceptions import (
    ManifestParseError,
    ManifestReadError,
    ManifestWriteError,
)

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("create_catalog", "templates"),
    autoescape=select_autoescape(),
    keep_trailing_newline=True,
)
# Same encoding as write_manifest, so both writers agree on non-ASCII names.
_env.filters["json_value"] = lambda value: json.dumps(value, ensure_ascii=False)


def dependency_name(specifier: str) -> str:
    """Strip the version range from a dependency specifier.

    >>> dependency_name("catalog@^3.0.0-rc.4")
    'catalog'
    >>> dependency_name("@scope/pkg@1.0.0")
    '@scope/pkg'
    """
    if specifier.startswith("@"):
        name, _, _ = specifier[1:].partition("@")
        return f"@{name}"
    name, _, _ = specifier.partition("@")
    return name


def catalog_scripts(catalog_dir: str = DEFAULT_CATALOG_DIR) -> dict[str, str]:
    """Return the convenience scripts for a catalog living in ``catalog_dir``."""
    suffix = f" {catalog_dir}" if catalog_dir != DEFAULT_CATALOG_DIR else ""
    return {
        START_SCRIPT: f"catalog start{suffix}",
        BUILD_SCRIPT: f"catalog build{suffix}",
    }


@dataclass(slots=True)
class ManifestState:
    """In-memory view of a parsed package.json.

    The raw object is kept as-is so keys this tool does not know about
    survive a write-back.
    """

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        name = self.data.get("name")
        return name if isinstance(name, str) else None

    @property
    def dependencies(self) -> dict[str, Any] | None:
        dependencies = self.data.get("dependencies")
        return dependencies if isinstance(dependencies, dict) else None

    @property
    def scripts(self) -> dict[str, Any] | None:
        scripts = self.data.get("scripts")
        return scripts if isinstance(scripts, dict) else None

    def missing_dependencies(self) -> list[str]:
        """Return the required specifiers whose package is not declared.

        A missing ``dependencies`` mapping is treated as empty, so every
        required package is reported exactly once.
        """
        declared = self.dependencies or {}
        return [spec for spec in REQUIRED_DEPENDENCIES if not declared.get(dependency_name(spec))]

    def has_catalog_scripts(self) -> bool:
        scripts = self.scripts or {}
        return bool(scripts.get(START_SCRIPT)) and bool(scripts.get(BUILD_SCRIPT))

    def with_catalog_scripts(self, catalog_dir: str) -> ManifestState:
        """Return a copy with both convenience scripts set, other scripts kept."""
        data = dict(self.data)
        scripts = dict(self.scripts or {})
        scripts.update(catalog_scripts(catalog_dir))
        data["scripts"] = scripts
        return ManifestState(data=data)


def read_manifest(path: Path) -> ManifestState:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestReadError(path, str(exc)) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(path, f"expected a JSON object, got {type(data).__name__}")
    return ManifestState(data=data)


def write_manifest(path: Path, state: ManifestState) -> None:
    content = json.dumps(state.data, indent=2, ensure_ascii=False) + "\n"
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ManifestWriteError(path, str(exc)) from exc
    logger.debug("Wrote %s", path)


def render_fresh_manifest(app_name: str, catalog_dir: str = DEFAULT_CATALOG_DIR) -> str:
    """Render the package.json written into projects that have none."""
    scripts = catalog_scripts(catalog_dir)
    template = _env.get_template("package.json.jinja")
    return template.render(
        app_name=app_name,
        start_script=scripts[START_SCRIPT],
        build_script=scripts[BUILD_SCRIPT],
    )


def create_manifest(path: Path, app_name: str, catalog_dir: str = DEFAULT_CATALOG_DIR) -> None:
    try:
        content = render_fresh_manifest(app_name, catalog_dir)
    except TemplateError as exc:
        raise ManifestWriteError(path, f"template rendering failed: {exc}") from exc
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ManifestWriteError(path, str(exc)) from exc
    logger.debug("Created %s for %s", path, app_name)


__all__ = [
    "ManifestState",
    "catalog_scripts",
    "create_manifest",
    "dependency_name",
    "read_manifest",
    "render_fresh_manifest",
    "write_manifest",
]
