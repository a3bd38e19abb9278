"""
Content-addressed cache for downloaded Tailwind binaries.

Artifacts live at `root/<version>/<filename>`. A file at that location is
only ever produced by renaming a fully verified temp file into place, so
existence is the cache's only durability signal: if the path exists, its
contents previously passed checksum verification.
"""

import logging
from pathlib import Path
from typing import Union

from tailwindkit.core.directory import verify_directory_writable
from tailwindkit.core.exceptions import CacheUnwritableError
from tailwindkit.core.filesystem import (
    IS_WINDOWS,
    atomic_replace,
    atomic_write,
    temporary_sibling,
)

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"


class BinaryCache:
    """
    Map (version, filename) to a verified binary on disk.

    Attributes:
        root: Cache root directory

    Example:
        >>> cache = BinaryCache(Path("~/.tailwindkit/cache").expanduser())
        >>> cache.ensure_writable()
        >>> if not cache.is_present("4.1.0", "tailwindcss-linux-x64"):
        ...     cache.commit("4.1.0", "tailwindcss-linux-x64", payload)
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def locate(self, version: str, filename: str) -> Path:
        """Path where the artifact for (version, filename) lives. No I/O."""
        return self.root / version / filename

    def is_present(self, version: str, filename: str) -> bool:
        """True if a verified artifact exists for (version, filename)."""
        return self.locate(version, filename).is_file()

    def temporary_path(self, version: str, filename: str) -> Path:
        """
        Create a unique temp file next to the artifact location.

        Temp names start with a dot and end in '.part', so they never collide
        with the artifact name itself.
        """
        return temporary_sibling(self.locate(version, filename), suffix=PARTIAL_SUFFIX)

    def commit(self, version: str, filename: str, data: bytes) -> Path:
        """
        Store verified bytes atomically.

        Args:
            version: Tool version
            filename: Platform asset filename
            data: Bytes that already passed checksum verification

        Returns:
            Path of the committed artifact
        """
        target = self.locate(version, filename)
        atomic_write(target, data, executable=not IS_WINDOWS)
        logger.info(f"Cached {filename} {version} at {target}")
        return target

    def commit_file(self, version: str, filename: str, source: Path) -> Path:
        """
        Move an already verified temp file into place.

        Args:
            version: Tool version
            filename: Platform asset filename
            source: Verified file, created by temporary_path()

        Returns:
            Path of the committed artifact
        """
        target = self.locate(version, filename)
        target.parent.mkdir(parents=True, exist_ok=True)
        atomic_replace(Path(source), target, executable=not IS_WINDOWS)
        logger.info(f"Cached {filename} {version} at {target}")
        return target

    def ensure_writable(self):
        """
        Create the cache root if needed and check that it is writable.

        Raises:
            CacheUnwritableError: If the directory cannot be created or written
        """
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheUnwritableError(self.root, str(e)) from e

        if not verify_directory_writable(self.root):
            raise CacheUnwritableError(self.root)

        logger.debug(f"Cache directory is writable: {self.root}")


__all__ = ["BinaryCache", "PARTIAL_SUFFIX"]
