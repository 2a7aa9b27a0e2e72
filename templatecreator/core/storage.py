"""Snapshot persistence and JSON config import/export."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import ConfigImportError
from .models import SiteConfig

logger = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "state.json"
CONFIG_FILENAME = "template-config.json"


def save_snapshot(path: str | Path, config: SiteConfig) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), ensure_ascii=False), encoding="utf-8")


def load_snapshot(path: str | Path) -> SiteConfig:
    """Restore the last session; defaults on a missing or unreadable snapshot."""
    path = Path(path)
    if not path.exists():
        return SiteConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return SiteConfig.from_dict(data)
    except (OSError, ValueError, TypeError, OverflowError) as exc:
        logger.warning("Failed to load saved state from %s: %s", path, exc)
        return SiteConfig()


def dumps_config(config: SiteConfig) -> str:
    return json.dumps(config.to_dict(include_state=False), indent=2, ensure_ascii=False)


def loads_config(config: SiteConfig, text: str) -> None:
    """Merge a JSON config document into ``config``.

    Raises ``ConfigImportError`` and leaves ``config`` untouched if the text
    is not a JSON object.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ConfigImportError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigImportError("Configuration must be a JSON object")
    payload = {key: data[key] for key in ("project", "pages", "menu", "colors") if key in data}
    try:
        config.load_from(payload)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigImportError(str(exc)) from exc


def export_config(path: str | Path, config: SiteConfig) -> None:
    path = Path(path)
    path.write_text(dumps_config(config), encoding="utf-8")


def import_config(path: str | Path, config: SiteConfig) -> None:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigImportError(f"Cannot read {path.name}: {exc}") from exc
    loads_config(config, text)
