import json
import logging
from pathlib import Path

import pytest

from form_autofill.config.manager import ConfigManager


def _write_config(tmp_path, payload) -> Path:
    (tmp_path / "autofill_config.json").write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path


def test_bundled_config_defaults():
    manager = ConfigManager()
    assert manager.get_classifier_config() == {"min_score": 3, "input_type_boost": 3}
    fill = manager.get_fill_config()
    assert fill["trace"] is True
    assert "hidden" in fill["skip_input_types"]
    store = manager.get_profile_store_config()
    assert store["storage_key"] == "autofill_data"
    assert store["path"].name == "autofill_data.json"


def test_classifier_config_is_clamped(tmp_path):
    manager = ConfigManager(_write_config(tmp_path, {"classifier": {"min_score": 0, "input_type_boost": "x"}}))
    assert manager.get_classifier_config() == {"min_score": 1, "input_type_boost": 3}


def test_fill_config_overrides(tmp_path):
    manager = ConfigManager(_write_config(tmp_path, {"fill": {"trace": 0, "skip_input_types": ["HIDDEN"]}}))
    fill = manager.get_fill_config()
    assert fill["trace"] is False
    assert fill["skip_input_types"] == ["hidden"]
    assert fill["element_selector"] == "input, textarea, select"


def test_missing_config_falls_back_to_defaults(tmp_path, caplog):
    manager = ConfigManager(tmp_path)
    with caplog.at_level(logging.WARNING):
        assert manager.get_classifier_config()["min_score"] == 3
    assert "using defaults" in caplog.text


def test_invalid_json_falls_back_to_defaults(tmp_path):
    (tmp_path / "autofill_config.json").write_text("{oops", encoding="utf-8")
    assert ConfigManager(tmp_path).get_fill_config()["trace"] is True


def test_profile_path_env_override(tmp_path, monkeypatch):
    target = tmp_path / "profiles.json"
    monkeypatch.setenv("FORM_AUTOFILL_PROFILE_PATH", str(target))
    assert ConfigManager().get_profile_store_config()["path"] == target


def test_load_config_errors(tmp_path):
    manager = ConfigManager(tmp_path)
    with pytest.raises(FileNotFoundError):
        manager._load_config("missing.json")

    (tmp_path / "broken.json").write_text("{", encoding="utf-8")
    with pytest.raises(ValueError):
        manager._load_config("broken.json")
