"""Configuration bootstrapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV = "WSCTL_CONFIG"
STATE_FILE_ENV = "WSCTL_STATE_FILE"
DEFAULT_USER_CONFIG = Path("~/.config/wsctl/config.yaml")
DEFAULT_STATE_FILE = "~/.cache/wsctl/state.json"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def user_config_path(explicit: Path | None = None) -> Path:
    if explicit is not None:
        return explicit.expanduser()
    env_value = os.environ.get(CONFIG_ENV)
    if env_value:
        return Path(env_value).expanduser()
    return DEFAULT_USER_CONFIG.expanduser()


def load_effective_config(root: Path, user_config: Path | None = None) -> dict[str, Any]:
    """Load the bundled defaults and overlay the user's config file."""
    default_cfg = load_yaml(root / "config" / "default.yaml")
    return merge_dicts(default_cfg, load_yaml(user_config_path(user_config)))


def resolve_state_path(config: dict[str, Any], explicit: Path | None = None) -> Path:
    """Pick the state file: explicit path, then environment, then config."""
    if explicit is not None:
        return explicit.expanduser()
    env_value = os.environ.get(STATE_FILE_ENV)
    if env_value:
        return Path(env_value).expanduser()
    paths_cfg = config.get("paths", {})
    return Path(paths_cfg.get("state_file", DEFAULT_STATE_FILE)).expanduser()
