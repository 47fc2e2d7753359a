"""Serialization utilities for comparison settings (load and save)."""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from seqdiff.types.config import DiffConfig


def _convert_values(value: Any) -> Any:
    """
    Recursively convert dataclasses/dicts/lists into plain containers.
    """
    if is_dataclass(value):
        return _convert_values(asdict(value))
    if isinstance(value, dict):
        return {key: _convert_values(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert_values(item) for item in value]
    return value


def config_to_dict(config: DiffConfig) -> Dict[str, Any]:
    """
    Convert a DiffConfig dataclass into a plain dictionary suitable for YAML.
    """
    return _convert_values(config)


def config_from_dict(payload: Dict[str, Any]) -> DiffConfig:
    """Build a DiffConfig from a mapping, nested under ``config`` or not."""
    config_dict = payload.get("config", payload) or {}
    known = {f.name for f in fields(DiffConfig)}
    unexpected = [key for key in config_dict if key not in known]
    if unexpected:
        raise ValueError(f"config has unexpected keys: {unexpected}")
    return DiffConfig(**config_dict)


def load_config(yaml_path: Path) -> DiffConfig:
    """Load comparison settings from a YAML file."""
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    return config_from_dict(payload)


def save_config(config: DiffConfig, yaml_path: Path) -> None:
    """Write comparison settings to a YAML file."""
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"config": config_to_dict(config)}, handle, sort_keys=False)


__all__ = ["config_to_dict", "config_from_dict", "load_config", "save_config"]
