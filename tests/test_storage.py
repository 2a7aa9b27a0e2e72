from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from templatecreator.core import storage
from templatecreator.core.errors import ConfigImportError
from templatecreator.core.models import SiteConfig


def _customized() -> SiteConfig:
    config = SiteConfig()
    config.project.site_name = "Studio Portfolio"
    config.project.font = "Inter"
    config.add_page("Work", "work")
    config.update_page(2, title="About the studio", meta_desc="Who we are", image_name="team.png")
    config.delete_page(3)
    config.menu.style = "underline"
    config.menu.auto_hide = False
    config.menu.font_size = 15
    config.colors.secondary = "#abcdef"
    return config


def test_export_then_import_round_trips_sections(tmp_path: Path) -> None:
    original = _customized()
    path = tmp_path / storage.CONFIG_FILENAME
    storage.export_config(path, original)

    restored = SiteConfig()
    storage.import_config(path, restored)
    assert restored.to_dict(include_state=False) == original.to_dict(include_state=False)


def test_export_format_is_pretty_and_has_no_selection_state() -> None:
    config = _customized()
    config.select_page(1)
    text = storage.dumps_config(config)
    assert text.startswith('{\n  "project": {')
    assert set(json.loads(text)) == {"project", "pages", "menu", "colors"}


def test_import_ignores_selection_state() -> None:
    config = SiteConfig()
    storage.loads_config(config, json.dumps({"currentPageId": 2, "currentFile": "x.css"}))
    assert config.current_page_id is None
    assert config.current_file == "index.php"


@pytest.mark.parametrize("text", ["{not json", "[1, 2, 3]", '"just a string"'])
def test_import_malformed_raises_and_keeps_model(text: str) -> None:
    config = _customized()
    before = config.to_dict()
    with pytest.raises(ConfigImportError):
        storage.loads_config(config, text)
    assert config.to_dict() == before


def test_import_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigImportError):
        storage.import_config(tmp_path / "missing.json", SiteConfig())


def test_import_partial_config_merges_present_sections() -> None:
    config = _customized()
    storage.loads_config(config, json.dumps({"colors": {"primary": "#000000"}}))
    assert config.colors.primary == "#000000"
    assert config.colors.secondary == "#0dac76"
    assert config.project.site_name == "Studio Portfolio"


def test_snapshot_round_trip_includes_selection(tmp_path: Path) -> None:
    config = _customized()
    config.select_page(2)
    config.current_file = "style.css"
    path = tmp_path / "nested" / storage.SNAPSHOT_FILENAME
    storage.save_snapshot(path, config)

    restored = storage.load_snapshot(path)
    assert restored.to_dict() == config.to_dict()
    assert restored.next_page_id == config.next_page_id


def test_load_snapshot_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = storage.load_snapshot(tmp_path / "absent.json")
    assert config.to_dict() == SiteConfig().to_dict()
    assert not (tmp_path / "absent.json").exists()


def test_load_snapshot_malformed_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / storage.SNAPSHOT_FILENAME
    path.write_text("{broken", encoding="utf-8")
    with caplog.at_level("WARNING"):
        config = storage.load_snapshot(path)
    assert config.to_dict() == SiteConfig().to_dict()
    assert "Failed to load saved state" in caplog.text
    assert path.read_text(encoding="utf-8") == "{broken"


def test_load_snapshot_with_infinite_font_size_uses_default(tmp_path: Path) -> None:
    path = tmp_path / storage.SNAPSHOT_FILENAME
    path.write_text('{"menu": {"fontSize": Infinity, "style": "buttons"}}', encoding="utf-8")
    config = storage.load_snapshot(path)
    assert config.menu.font_size == SiteConfig().menu.font_size
    assert config.menu.style == "buttons"


def test_import_overflowing_page_id_gets_fresh_id() -> None:
    config = SiteConfig()
    storage.loads_config(config, '{"pages": [{"id": 1e999, "name": "Home", "slug": "index"}]}')
    assert [(p.id, p.slug) for p in config.pages] == [(1, "index")]
