"""YAML configuration parser for tailwindkit.

This module provides parsing and validation for tailwind.yaml configuration files.
Values are handed to the tasks verbatim; only their shape is checked here.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tailwindkit.core.acquire import DEFAULT_RELEASE_URL, validate_version
from tailwindkit.core.exceptions import ConfigInvalidError

CONFIG_FILENAME = "tailwind.yaml"


@dataclass
class InitOptions:
    """Flags passed to `tailwindcss init`."""

    full: bool = False  # --full
    postcss: bool = False  # --postcss
    esm: bool = False  # --esm
    ts: bool = False  # --ts


@dataclass
class TailwindConfig:
    """Complete tailwindkit configuration."""

    version: Optional[str] = None
    cache_dir: Optional[str] = None
    release_url: str = DEFAULT_RELEASE_URL
    config_path: Optional[str] = None  # directory holding tailwind.config.*
    input: Optional[str] = None
    output: Optional[str] = None
    minify: bool = False
    init: InitOptions = field(default_factory=InitOptions)

    def with_overrides(self, **overrides: Any) -> "TailwindConfig":
        """
        Return a copy with every non-None override applied.

        Init flags are accepted by name (full, postcss, esm, ts).
        """
        init_fields = {"full", "postcss", "esm", "ts"}
        init_values = {
            k: v for k, v in overrides.items() if k in init_fields and v is not None
        }
        top_values = {
            k: v for k, v in overrides.items() if k not in init_fields and v is not None
        }

        updated = replace(self, **top_values)
        if init_values:
            updated = replace(updated, init=replace(self.init, **init_values))
        return updated


def parse_config(config_path: Path) -> TailwindConfig:
    """
    Parse tailwind.yaml configuration file.

    Args:
        config_path: Path to tailwind.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigInvalidError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigInvalidError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid YAML syntax in {config_path}: {e}")

    if data is None:
        return TailwindConfig()

    return parse_config_dict(data)


def load_config(project_root: Path, config_file: Optional[Path] = None) -> TailwindConfig:
    """
    Load configuration for a project.

    An explicit `config_file` must exist; the default tailwind.yaml in the
    project root is optional and yields an empty configuration when absent.
    """
    if config_file is not None:
        return parse_config(Path(config_file))

    default = project_root / CONFIG_FILENAME
    if not default.exists():
        return TailwindConfig()
    return parse_config(default)


def parse_config_dict(data: Any) -> TailwindConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigInvalidError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    version = data.get("version")
    if version is not None:
        # YAML reads 4.1 as a float; stringify so the validator reports it
        validate_version(str(version))
        version = str(version)

    for key in ("cache_dir", "release_url", "config_path", "input", "output"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigInvalidError(f"'{key}' must be a string")

    minify = data.get("minify", False)
    if not isinstance(minify, bool):
        raise ConfigInvalidError("'minify' must be true or false")

    return TailwindConfig(
        version=version,
        cache_dir=data.get("cache_dir"),
        release_url=data.get("release_url") or DEFAULT_RELEASE_URL,
        config_path=data.get("config_path"),
        input=data.get("input"),
        output=data.get("output"),
        minify=minify,
        init=_parse_init_options(data.get("init", {})),
    )


def _parse_init_options(data: Optional[Dict[str, Any]]) -> InitOptions:
    """Parse the init section."""
    if data is None:
        return InitOptions()

    if not isinstance(data, dict):
        raise ConfigInvalidError("'init' must be a mapping")

    unknown = set(data) - {"full", "postcss", "esm", "ts"}
    if unknown:
        raise ConfigInvalidError(
            f"Unknown init option(s): {', '.join(sorted(unknown))} "
            "(expected full, postcss, esm, ts)"
        )

    for key, value in data.items():
        if not isinstance(value, bool):
            raise ConfigInvalidError(f"init.{key} must be true or false")

    return InitOptions(**data)
