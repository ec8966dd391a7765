"""YAML config loader with runtime get/set."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.schema import DashboardConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    With no path, returns the built-in defaults.
    """
    if path is None:
        return DashboardConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.debug("Loaded config from %s (sections: %s)", path, sorted(raw))
    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'default_location.name'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: DashboardConfig, dotted_key: str, value: Any) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")

    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
    target[parts[-1]] = value
    return DashboardConfig(**data)
