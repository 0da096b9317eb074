from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

DEFAULT_APP_ID = "com.beatgames.beatsaber"
APP_ID_ENV_VAR = "MODPATHS_APP_ID"

_REPO_ROOT = Path(__file__).resolve().parents[2]
_CONFIG_FILE = _REPO_ROOT / "config.json"


def load_config(config_path: Path | str | None = None) -> Dict[str, Any]:
    """Load ``config.json`` if present and return it as a dictionary."""

    path = Path(config_path) if config_path is not None else _CONFIG_FILE
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def get_default_app_id(config_path: Path | str | None = None) -> str:
    """Resolve the application identifier to bind the path registry to.

    ``MODPATHS_APP_ID`` wins over the ``app_id`` key of the configuration
    file; without either the Beat Saber package identifier is used.
    """

    from_env = os.environ.get(APP_ID_ENV_VAR)
    if from_env:
        return from_env
    cfg = load_config(config_path)
    value = cfg.get("app_id")
    if isinstance(value, str) and value:
        return value
    return DEFAULT_APP_ID


__all__ = [
    "APP_ID_ENV_VAR",
    "DEFAULT_APP_ID",
    "get_default_app_id",
    "load_config",
]
