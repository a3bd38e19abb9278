"""
Shared behaviour for Tailwind tasks.

Every task works against the same (version, cache root) pair and resolves the
binary through an Acquirer, so init/compile always see exactly the artifact
the download task produced.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from tailwindkit.core.acquire import Acquirer, validate_version
from tailwindkit.core.exceptions import ConfigInvalidError, SubprocessFailedError
from tailwindkit.core.interfaces import Invoker
from tailwindkit.core.filesystem import resolve_within

logger = logging.getLogger(__name__)


class BaseTailwindTask:
    """
    Base class for tasks that need the Tailwind binary.

    Attributes:
        project_root: Project directory all user paths must stay inside
        version: Tailwind version
        acquirer: Acquirer bound to the cache root
        invoker: Invoker used to run the binary
    """

    description = ""
    operation = "command"

    def __init__(
        self,
        project_root: Path,
        version: Optional[str],
        acquirer: Acquirer,
        invoker: Optional[Invoker] = None,
    ):
        self.project_root = Path(project_root).resolve()
        self.version = version
        self.acquirer = acquirer
        self.invoker = invoker

    def validate_version(self) -> str:
        """Check the configured version; raises ConfigInvalidError."""
        return validate_version(self.version)

    def get_binary(self) -> Path:
        """Absolute path of the cached binary for the configured version."""
        return self.acquirer.binary_path(self.validate_version()).absolute()

    def resolve_path(self, value: str, label: str) -> Path:
        """Resolve a configured path inside the project root."""
        return resolve_within(self.project_root, value, label=label)

    def exec_binary(self, args: Sequence[str], cwd: Path) -> int:
        """
        Run the cached binary through the invoker.

        Raises:
            SubprocessFailedError: On spawn failure or a non-zero exit
        """
        if self.invoker is None:
            raise ConfigInvalidError(f"No invoker configured for {self.operation}")

        binary = self.get_binary()
        command: List[str] = [str(binary), *args]
        logger.info(f"Running: {' '.join(command)}")

        try:
            returncode = self.invoker.run(binary, list(args), cwd)
        except SubprocessFailedError:
            raise
        except OSError as e:
            raise SubprocessFailedError(self.operation, command, cwd, reason=str(e)) from e

        if returncode != 0:
            raise SubprocessFailedError(
                self.operation, command, cwd, returncode=returncode
            )
        return returncode
