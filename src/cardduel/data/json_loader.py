"""Reads definition files as JSON objects."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_json_object(path: Path) -> dict[str, object]:
    """Return the top-level JSON object stored at ``path``."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DataLoadError(path, "Definition file not found") from exc
    except OSError as exc:
        raise DataLoadError(path, "Unable to read definition file") from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, f"Invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected top-level object in {path}")
    return raw
