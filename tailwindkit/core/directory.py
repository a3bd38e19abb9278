"""
Directory management for tailwindkit.

Resolves the per-user cache directory where downloaded Tailwind binaries are
stored, and checks that a directory can be written to.

Directory Structure:
    Cache root (~/.tailwindkit/cache/ or %USERPROFILE%\\.tailwindkit\\cache\\):
        - <version>/tailwindcss-<os>-<arch>[.exe]
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from tailwindkit.core.exceptions import CacheUnwritableError

logger = logging.getLogger(__name__)

CACHE_DIR_ENV = "TAILWINDKIT_CACHE_DIR"


def get_default_cache_dir() -> Path:
    """
    Get the platform-specific default cache directory path.

    Returns:
        Path: The default cache directory path.
            - Windows: %USERPROFILE%\\.tailwindkit\\cache
            - Linux/macOS: ~/.tailwindkit/cache

    Raises:
        CacheUnwritableError: If USERPROFILE is unset on Windows
    """
    if os.name == "nt":  # Windows
        user_profile = os.environ.get("USERPROFILE")
        if not user_profile:
            raise CacheUnwritableError(
                Path(".tailwindkit"),
                "USERPROFILE environment variable is not set",
            )
        return Path(user_profile) / ".tailwindkit" / "cache"
    else:  # Linux/macOS
        return Path.home() / ".tailwindkit" / "cache"


def resolve_cache_dir(
    override: Optional[Union[str, Path]] = None,
    project_root: Optional[Path] = None,
    configured: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve the cache root.

    Precedence: explicit override, then the TAILWINDKIT_CACHE_DIR environment
    variable, then the configuration file value, then the per-user default.
    Relative paths are resolved against `project_root` (or the current
    directory).

    Args:
        override: Cache directory from the command line or the host
        project_root: Base for relative paths
        configured: `cache_dir` from tailwind.yaml

    Returns:
        Absolute cache root path
    """
    value = override or os.environ.get(CACHE_DIR_ENV) or configured
    if not value:
        return get_default_cache_dir()

    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (project_root or Path.cwd()) / path
    logger.debug(f"Using cache directory: {path}")
    return path


def verify_directory_writable(path: Path) -> bool:
    """
    Verify that a directory exists and is writable.

    Args:
        path: Directory path to verify.

    Returns:
        bool: True if directory exists and is writable, False otherwise.
    """
    if not path.exists():
        return False

    if not path.is_dir():
        return False

    # Unique test file name; concurrent processes may check the same directory
    try:
        with tempfile.NamedTemporaryFile(dir=path, prefix=".write_test."):
            pass
        return True
    except OSError:
        return False


__all__ = [
    "CACHE_DIR_ENV",
    "get_default_cache_dir",
    "resolve_cache_dir",
    "verify_directory_writable",
]
