"""Load configuration from TOML file and merge environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]


_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.toml"
_DEFAULT_DB_PATH = "data/easystock.db"


def _load_toml(path: Path) -> dict:
    # A missing settings file means "all defaults".
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


class Config:
    """Application configuration.  Reads settings.toml then overlays env vars."""

    def __init__(self, config_path: Path | None = None) -> None:
        path = config_path or Path(os.environ.get("EASYSTOCK_CONFIG", str(_DEFAULT_CONFIG_PATH)))
        raw = _load_toml(path)

        # ── Database ──────────────────────────────────────────────────────────
        db = raw.get("database", {})
        self.db_path: str = os.environ.get("DB_PATH", db.get("path", _DEFAULT_DB_PATH))

        # ── Logging ───────────────────────────────────────────────────────────
        log = raw.get("logging", {})
        self.log_level: str = os.environ.get("LOG_LEVEL", log.get("level", "INFO")).upper()
        self.log_format: str = os.environ.get("LOG_FORMAT", log.get("format", "json")).lower()


_instance: Config | None = None


def get_config(config_path: Path | None = None) -> Config:
    """Return the singleton Config, creating it on first call."""
    global _instance
    if _instance is None:
        _instance = Config(config_path)
    return _instance


def reset_config() -> None:
    """Reset the singleton (useful in tests)."""
    global _instance
    _instance = None
