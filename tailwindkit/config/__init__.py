"""Configuration module for tailwindkit.

This module provides YAML configuration parsing and validation for tailwind.yaml.
"""

from tailwindkit.config.parser import (
    CONFIG_FILENAME,
    InitOptions,
    TailwindConfig,
    load_config,
    parse_config,
    parse_config_dict,
)

__all__ = [
    "CONFIG_FILENAME",
    "InitOptions",
    "TailwindConfig",
    "load_config",
    "parse_config",
    "parse_config_dict",
]
