"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

DEFAULT_HAND_SIZE = 3
MIN_HAND_SIZE = 1
MAX_HAND_SIZE = 10
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

Config = Dict[str, object]


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "CardDuel"
        return Path.home() / "CardDuel"
    return Path.home() / ".config" / "cardduel"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Config:
    return {"hand_size": DEFAULT_HAND_SIZE, "log_level": DEFAULT_LOG_LEVEL}


def _normalize_hand_size(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_HAND_SIZE
    return max(MIN_HAND_SIZE, min(MAX_HAND_SIZE, value))


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in VALID_LOG_LEVELS:
        return value.upper()
    return DEFAULT_LOG_LEVEL


def normalize_config(raw: Dict[str, object]) -> Config:
    return {
        "hand_size": _normalize_hand_size(raw.get("hand_size")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def load_config(path: Path | None = None) -> Config:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return normalize_config(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def resolve_log_level(config: Config) -> str:
    """CARDDUEL_DEBUG=1 forces DEBUG regardless of the saved level."""
    if os.getenv("CARDDUEL_DEBUG") == "1":
        return "DEBUG"
    return _normalize_log_level(config.get("log_level"))
