"""Lightweight loader for indexer configuration."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "config" / "indexer.json"
_CONFIG_DATA: Dict[str, Any] = {}
_LOADED_FROM: Optional[Path] = None


def config_path() -> Path:
    override = os.environ.get("WORLDINDEX_CONFIG")
    return Path(override) if override else _DEFAULT_PATH


def load(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read a config file; a missing file reads as an empty mapping."""
    path = Path(path) if path is not None else config_path()
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"config file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"config file '{path}' must contain a JSON object")
    return data


def reload(path: Optional[Path] = None) -> Dict[str, Any]:
    global _CONFIG_DATA, _LOADED_FROM
    _LOADED_FROM = Path(path) if path is not None else config_path()
    _CONFIG_DATA = load(_LOADED_FROM)
    return _CONFIG_DATA


def _ensure_loaded() -> None:
    if _LOADED_FROM is None:
        reload()


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    _ensure_loaded()
    if not path:
        return _CONFIG_DATA

    current: Any = _CONFIG_DATA
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current
