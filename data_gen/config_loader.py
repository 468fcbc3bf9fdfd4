"""
Config loader for the data generators.

Precedence: ENV (LOG_LEVEL) > config/config.local.yaml > config/config.yaml

Only the `logging` section is read; the generated data itself is not configurable.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILES = ("config.yaml", "config.local.yaml")
DEFAULT_LOG_LEVEL = "WARNING"


def _find_config_dir(start: Optional[Path] = None) -> Optional[Path]:
    """Nearest config/ holding config.yaml, searching from `start` (cwd) upwards."""
    start = start or Path.cwd()
    for d in (start, *start.parents):
        if (d / "config" / CONFIG_FILES[0]).is_file():
            return d / "config"
    return None


def _read_sections(path: Path) -> Dict[str, Dict]:
    """Top-level mapping sections of a YAML file; anything else is dropped."""
    if not path.is_file():
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if isinstance(v, dict)}


def _merge_sections(base: Dict[str, Dict], override: Dict[str, Dict]) -> Dict[str, Dict]:
    """Key-by-key merge inside each section; neither input is modified."""
    result = {name: dict(section) for name, section in base.items()}
    for name, section in override.items():
        result.setdefault(name, {}).update(section)
    return result


_config: Optional[Dict] = None


def load_config() -> Dict[str, Any]:
    """Merged settings, read once per process."""
    global _config
    if _config is not None:
        return _config

    merged: Dict[str, Dict] = {}
    config_dir = _find_config_dir()
    if config_dir:
        for filename in CONFIG_FILES:
            merged = _merge_sections(merged, _read_sections(config_dir / filename))

    section = merged.setdefault("logging", {})
    section["level"] = os.environ.get("LOG_LEVEL") or section.get("level")
    _config = merged
    return _config


def get_config() -> Dict[str, Any]:
    return _config if _config is not None else load_config()


def get_log_level() -> int:
    """Resolve logging.level to a logging module constant (WARNING if unset or unknown)."""
    name = get_config()["logging"]["level"] or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING
