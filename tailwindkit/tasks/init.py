"""Init task: run `tailwindcss init` inside the configured config directory."""

import logging
from pathlib import Path
from typing import List, Optional

from tailwindkit.config.parser import InitOptions
from tailwindkit.core.acquire import Acquirer
from tailwindkit.core.exceptions import ConfigInvalidError
from tailwindkit.core.interfaces import Invoker
from tailwindkit.tasks.base import BaseTailwindTask

logger = logging.getLogger(__name__)


class InitTask(BaseTailwindTask):
    """Initialises a Tailwind configuration file."""

    description = "Initialises a Tailwind configuration file."
    operation = "initialization"

    def __init__(
        self,
        project_root: Path,
        version: Optional[str],
        acquirer: Acquirer,
        invoker: Optional[Invoker] = None,
        config_path: Optional[str] = None,
        options: Optional[InitOptions] = None,
    ):
        super().__init__(project_root, version, acquirer, invoker)
        self.config_path = config_path
        self.options = options or InitOptions()

    def build_args(self) -> List[str]:
        args = ["init"]
        if self.options.full:
            args.append("--full")
        if self.options.postcss:
            args.append("--postcss")
        if self.options.esm:
            args.append("--esm")
        if self.options.ts:
            args.append("--ts")
        return args

    def validate(self) -> Path:
        """
        Check version and config directory without touching the filesystem.

        Returns:
            Resolved config directory

        Raises:
            ConfigInvalidError: If config_path is unset, missing or not a directory
            PathTraversalError: If config_path escapes the project
        """
        self.validate_version()

        if not self.config_path:
            raise ConfigInvalidError(
                "Config path is not configured. Please set 'config_path' in tailwind.yaml"
            )

        directory = self.resolve_path(self.config_path, "Config path")

        if not directory.exists():
            raise ConfigInvalidError(
                f"The config path does not exist: {directory}\n"
                "Please create the directory before running init."
            )

        if not directory.is_dir():
            raise ConfigInvalidError(
                f"The config path is a file, not a directory: {directory}\n"
                "Please specify a directory path for 'config_path'."
            )

        return directory

    def run(self) -> int:
        """
        Run `tailwindcss init` in the config directory.

        Returns:
            Exit code of the binary (always 0; failures raise)

        Raises:
            SubprocessFailedError: If the binary fails
        """
        directory = self.validate()
        return self.exec_binary(self.build_args(), cwd=directory)
