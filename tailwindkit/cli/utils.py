"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
from pathlib import Path
from typing import Optional

from tailwindkit.config.parser import TailwindConfig, load_config
from tailwindkit.plugin import TailwindPlugin

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()


def load_effective_config(args) -> TailwindConfig:
    """
    Load tailwind.yaml and apply command-line overrides.

    Only options the user actually passed override file values.

    Args:
        args: Parsed command-line arguments

    Returns:
        Effective configuration
    """
    project_root = resolve_project_root(getattr(args, "project_root", None))
    config = load_config(project_root, getattr(args, "config", None))

    overrides = {
        "version": getattr(args, "tailwind_version", None),
        "config_path": getattr(args, "config_path", None),
        "input": getattr(args, "input", None),
        "output": getattr(args, "output", None),
        "minify": getattr(args, "minify", None),
        "full": getattr(args, "full", None),
        "postcss": getattr(args, "postcss", None),
        "esm": getattr(args, "esm", None),
        "ts": getattr(args, "ts", None),
    }
    return config.with_overrides(**overrides)


def create_plugin(args) -> TailwindPlugin:
    """
    Build a TailwindPlugin from parsed arguments.

    Raises:
        ConfigInvalidError: If tailwind.yaml is invalid
        CacheUnwritableError: If the cache directory can't be written
    """
    project_root = resolve_project_root(getattr(args, "project_root", None))
    config = load_effective_config(args)
    return TailwindPlugin(project_root, config, cache_dir=getattr(args, "cache_dir", None))
