"""Load MewConfig from mew.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from mew._errors import ConfigError
from mew.config import MewConfig

_CONFIG_KEYS: frozenset[str] = frozenset(f.name for f in fields(MewConfig))


def load_config(root: Path, **overrides: object) -> MewConfig:
    """Load MewConfig from root, optionally merging mew.yaml.

    Looks for mew.yaml, mew.yml, or mew.toml in root. If found, loads
    and merges with overrides. Overrides set to None are ignored so that
    unset CLI flags do not mask file values.

    Raises:
        ConfigError: On unreadable files, unknown keys, or invalid values.

    """
    file_config = _read_mew_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}

    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown mew config keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    try:
        return MewConfig(**merged)  # type: ignore[arg-type]
    except (TypeError, AttributeError) as exc:
        msg = f"Invalid mew config in {root}: {exc}"
        raise ConfigError(msg) from exc


def _read_mew_config(root: Path) -> dict[str, object]:
    """Read mew config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("mew.yaml", "mew.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "mew.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Malformed YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_mew_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Malformed TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_mew_section(data, path)


def _flatten_mew_section(data: object, path: Path) -> dict[str, object]:
    """Extract mew.* keys into top-level config."""
    if not isinstance(data, dict):
        msg = f"Expected a mapping in {path}, got {type(data).__name__}"
        raise ConfigError(msg)

    result: dict[str, object] = {}
    section = data.get("mew")
    if section is not None:
        if not isinstance(section, dict):
            msg = f"The 'mew' section in {path} must be a mapping"
            raise ConfigError(msg)
        result.update(section)
    for k, v in data.items():
        if k != "mew":
            result[k] = v
    return result
