"""
Cross-platform file system utilities for tailwindkit.

This module provides:
- Atomic writes (temp file + rename) so readers never see partial files
- Executable-bit management for POSIX hosts
- Project-root containment checks for user-supplied paths
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from tailwindkit.core.exceptions import PathTraversalError

IS_WINDOWS = os.name == "nt"
EXECUTABLE_MODE = 0o755


# ============================================================================
# Path Utilities
# ============================================================================


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to (under) parent directory.

    Example:
        >>> is_relative_to(Path("/home/user/project/file.txt"), Path("/home/user"))
        True
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def resolve_within(
    root: Union[str, Path], relative: Union[str, Path], label: str = "Path"
) -> Path:
    """
    Resolve a user-supplied path against a project root.

    The canonical result must remain the root itself or one of its
    descendants. Nothing is created or modified.

    Args:
        root: Project root directory
        relative: Path from configuration (relative or absolute)
        label: Description used in the error message

    Returns:
        Canonical absolute path

    Raises:
        PathTraversalError: If the resolved path leaves the project root

    Example:
        >>> resolve_within(Path("/work/app"), "src/input.css")
        PosixPath('/work/app/src/input.css')
    """
    canonical_root = Path(root).resolve()
    candidate = (canonical_root / Path(relative)).resolve()

    if not is_relative_to(candidate, canonical_root):
        raise PathTraversalError(label, candidate, canonical_root)

    return candidate


# ============================================================================
# Safe File Operations
# ============================================================================


def temporary_sibling(file_path: Union[str, Path], suffix: str = ".tmp") -> Path:
    """
    Create an empty, uniquely named temp file next to `file_path`.

    The temp file lives in the same directory (and so on the same filesystem)
    so it can later be renamed over `file_path` atomically.

    Returns:
        Path of the created temp file
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=suffix
    )
    os.close(temp_fd)
    return Path(temp_path_str)


def atomic_write(file_path: Union[str, Path], content: bytes, executable: bool = False):
    """
    Write bytes atomically using temp file + rename.

    Args:
        file_path: Path to write to
        content: Bytes to write
        executable: Set the executable bit before the rename (ignored on Windows)

    Example:
        >>> atomic_write('cache/4.1.0/tailwindcss-linux-x64', payload, executable=True)
    """
    file_path = Path(file_path)
    temp_path = temporary_sibling(file_path)

    try:
        temp_path.write_bytes(content)
        atomic_replace(temp_path, file_path, executable=executable)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise


def atomic_replace(source: Path, destination: Path, executable: bool = False):
    """
    Move `source` over `destination` in a single rename.

    Args:
        source: Fully written file on the same filesystem as destination
        destination: Final location
        executable: Make the file world-readable and executable before the rename
    """
    if executable:
        make_executable(source)
    os.replace(source, destination)


def make_executable(file_path: Union[str, Path]):
    """
    Set mode 0o755 (no-op on Windows).

    Temp files from mkstemp start out as 0o600; the result must be readable
    by every user of a shared cache.

    Args:
        file_path: File to mark executable
    """
    if IS_WINDOWS:
        return

    Path(file_path).chmod(EXECUTABLE_MODE)


def is_executable(file_path: Union[str, Path]) -> bool:
    """Check whether a file carries the user execute bit."""
    return bool(Path(file_path).stat().st_mode & stat.S_IXUSR)


__all__ = [
    "IS_WINDOWS",
    "is_relative_to",
    "resolve_within",
    "temporary_sibling",
    "atomic_write",
    "atomic_replace",
    "EXECUTABLE_MODE",
    "make_executable",
    "is_executable",
]
