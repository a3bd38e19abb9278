"""
Core interfaces for tailwindkit.

The task layer runs the Tailwind binary through the Invoker interface, so the
core never spawns processes directly and tests can inject a fake.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence


class Invoker(ABC):
    """Abstract interface for running an executable to completion."""

    @abstractmethod
    def run(self, executable: Path, args: Sequence[str], cwd: Path) -> int:
        """
        Run an executable and wait for it to finish.

        Args:
            executable: Path to the binary
            args: Arguments passed verbatim
            cwd: Working directory

        Returns:
            Process exit code (0 on success)

        Raises:
            SubprocessFailedError: If the process cannot be spawned or fails
        """
        pass


__all__ = ["Invoker"]
