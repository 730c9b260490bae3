from pathlib import Path

from create_catalog.layout import TargetLayout


def test_resolve_relative_to_cwd(tmp_path: Path):
    layout = TargetLayout.resolve("my-app", "docs", cwd=tmp_path)

    assert layout.app_dir == tmp_path / "my-app"
    assert layout.catalog_dir == tmp_path / "my-app" / "docs"
    assert layout.display_catalog_dir == str(Path("my-app") / "docs")
    assert layout.app_name == "my-app"
    assert layout.app_dir_is_cwd is False


def test_dot_is_cwd(tmp_path: Path):
    layout = TargetLayout.resolve(".", "catalog", cwd=tmp_path)

    assert layout.app_dir == tmp_path
    assert layout.app_dir_is_cwd is True
    assert layout.app_name == tmp_path.name


def test_derived_paths(tmp_path: Path):
    layout = TargetLayout.resolve(tmp_path / "site", "catalog")

    assert layout.manifest_path == layout.app_dir / "package.json"
    assert layout.dependency_cache_dir == layout.app_dir / "node_modules"
    assert layout.template_dir == layout.app_dir / "node_modules" / "catalog" / "dist" / "setup-template"


def test_symlinked_app_dir_keeps_its_own_name(tmp_path: Path):
    (tmp_path / "real-dir").mkdir()
    (tmp_path / "my-app").symlink_to(tmp_path / "real-dir", target_is_directory=True)

    layout = TargetLayout.resolve("my-app", "catalog", cwd=tmp_path)

    assert layout.app_dir == tmp_path / "my-app"
    assert layout.app_name == "my-app"
    assert layout.catalog_dir == tmp_path / "my-app" / "catalog"


def test_parent_segments_are_normalised(tmp_path: Path):
    layout = TargetLayout.resolve("nested/../site", "catalog", cwd=tmp_path)

    assert layout.app_dir == tmp_path / "site"
    assert layout.app_name == "site"
