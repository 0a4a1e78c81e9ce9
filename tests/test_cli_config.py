import json
from pathlib import Path

from cardduel.presentation.cli.config import (
    DEFAULT_HAND_SIZE,
    MAX_HAND_SIZE,
    load_config,
    resolve_log_level,
    save_config,
)


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.json")

    assert config == {"hand_size": DEFAULT_HAND_SIZE, "log_level": "WARNING"}


def test_load_config_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert load_config(path)["hand_size"] == DEFAULT_HAND_SIZE


def test_load_config_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")

    assert load_config(path)["log_level"] == "WARNING"


def test_save_then_load_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    save_config({"hand_size": 50, "log_level": "debug"}, path)

    assert load_config(path) == {"hand_size": MAX_HAND_SIZE, "log_level": "DEBUG"}


def test_unknown_values_fall_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"hand_size": "five", "log_level": "LOUD"}), encoding="utf-8")

    assert load_config(path) == {"hand_size": DEFAULT_HAND_SIZE, "log_level": "WARNING"}


def test_debug_env_forces_debug_level(monkeypatch) -> None:
    monkeypatch.setenv("CARDDUEL_DEBUG", "1")
    assert resolve_log_level({"log_level": "ERROR"}) == "DEBUG"

    monkeypatch.delenv("CARDDUEL_DEBUG")
    assert resolve_log_level({"log_level": "ERROR"}) == "ERROR"
