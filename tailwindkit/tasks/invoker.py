"""
Subprocess-backed Invoker.

Runs the Tailwind binary with inherited stdout/stderr so compiler output
reaches the user's terminal or build log unchanged.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from tailwindkit.core.exceptions import SubprocessFailedError
from tailwindkit.core.interfaces import Invoker

logger = logging.getLogger(__name__)


class SubprocessInvoker(Invoker):
    """
    Run executables with subprocess.run.

    Attributes:
        operation: Name used in error messages ("initialization", "compilation")
        timeout: Optional timeout in seconds (None waits indefinitely)
    """

    def __init__(self, operation: str = "command", timeout: Optional[float] = None):
        self.operation = operation
        self.timeout = timeout

    def run(self, executable: Path, args: Sequence[str], cwd: Path) -> int:
        command = [str(executable), *args]
        logger.debug(f"Running {' '.join(command)} in {cwd}")

        try:
            result = subprocess.run(command, cwd=str(cwd), timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise SubprocessFailedError(
                self.operation, command, cwd, reason=f"timed out after {e.timeout}s"
            ) from e
        except OSError as e:
            raise SubprocessFailedError(self.operation, command, cwd, reason=str(e)) from e

        if result.returncode != 0:
            raise SubprocessFailedError(
                self.operation, command, cwd, returncode=result.returncode
            )

        return result.returncode


__all__ = ["SubprocessInvoker"]
