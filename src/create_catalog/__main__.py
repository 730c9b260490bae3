"""Allow ``python -m create_catalog``."""

from create_catalog.cli import app

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    app()
