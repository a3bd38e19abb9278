"""Download task: make sure the Tailwind binary is cached and verified."""

import logging
from pathlib import Path

from tailwindkit.tasks.base import BaseTailwindTask

logger = logging.getLogger(__name__)


class DownloadTask(BaseTailwindTask):
    """Downloads and caches a given Tailwind CSS binary."""

    description = "Downloads and caches a given TailwindCSS binary."
    operation = "download"

    def is_up_to_date(self) -> bool:
        """True when the binary for the configured version is already cached."""
        version = self.validate_version()
        return self.acquirer.cache.is_present(version, self.acquirer.filename)

    def run(self) -> Path:
        """
        Acquire the binary.

        Returns:
            Path to the verified binary
        """
        version = self.validate_version()
        binary = self.acquirer.acquire(version)
        logger.debug(f"Tailwind CSS {version} binary: {binary}")
        return binary
