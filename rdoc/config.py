from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigLoadError

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "rdoc.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "extensions": [".rs"],
    "exclude": [
        "target/",
        ".git/",
    ],
}

_yaml = YAML(typ="safe")


@dataclass
class RDocConfig:
    extensions: List[str] = field(default_factory=lambda: list(_DEFAULT_CFG["extensions"]))
    exclude: List[str] = field(default_factory=lambda: list(_DEFAULT_CFG["exclude"]))


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values override the defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


def _str_list(raw: Dict[str, Any], key: str, path: Path) -> List[str]:
    value = raw.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigLoadError(f"{path}: '{key}' must be a list of strings")
    return list(value)


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def find_config(start: Path) -> Path:
    """Path of rdoc.yaml for a directory (or for the directory of a file)."""
    base = start if start.is_dir() else start.parent
    return base / DEFAULT_CFG_FILE


def load_config(path: Path) -> RDocConfig:
    """
    Load rdoc.yaml.

    • Missing file: defaults.
    • Missing schema_version: the current version is assumed.
    • Extensions are normalized to lowercase with a leading dot.
    """
    if not path.exists():
        return RDocConfig()

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path}: top level must be a mapping")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise ConfigLoadError(
            f"{path}: unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    merged = _merge_defaults(raw)
    extensions = [
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in _str_list(merged, "extensions", path)
    ]
    return RDocConfig(extensions=extensions, exclude=_str_list(merged, "exclude", path))


__all__ = ["RDocConfig", "SCHEMA_VERSION", "DEFAULT_CFG_FILE", "find_config", "load_config"]
