from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from .schema import Settings

CONFIG_PATH_ENV_VAR = "TERMINAL_QUIZ_CONFIG"
OVERRIDES_ENV_VAR = "TERMINAL_QUIZ_CONFIG_OVERRIDES"


def read_yaml(path: Path) -> Dict[str, Any]:
    """Parse a YAML mapping from `path`; a blank file yields an empty mapping."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise FileNotFoundError(f"Config file not found: {path}") from err
    payload = yaml.safe_load(text)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return payload


def merge_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Return `base` updated with `override`, descending into sections both sides define."""
    merged = {key: value for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        both_sections = isinstance(current, Mapping) and isinstance(value, Mapping)
        merged[key] = merge_dicts(current, value) if both_sections else value
    return merged


def _env_overrides() -> Dict[str, Any]:
    raw = os.getenv(OVERRIDES_ENV_VAR)
    if not raw:
        return {}
    try:
        overrides = json.loads(raw)
    except json.JSONDecodeError as err:
        raise ValueError(f"Failed to parse {OVERRIDES_ENV_VAR} env var as JSON.") from err
    if not isinstance(overrides, dict):
        raise ValueError(f"{OVERRIDES_ENV_VAR} must contain a JSON object.")
    return overrides


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Build validated Settings from built-in defaults, an optional YAML file and the environment.

    The YAML file is `config_path` when given, otherwise the path named by
    `TERMINAL_QUIZ_CONFIG`; with neither, no file is read. JSON overrides from
    `TERMINAL_QUIZ_CONFIG_OVERRIDES` are merged on top.
    """
    source = config_path or os.getenv(CONFIG_PATH_ENV_VAR)
    data = read_yaml(Path(source)) if source else {}
    data = merge_dicts(data, _env_overrides())

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
