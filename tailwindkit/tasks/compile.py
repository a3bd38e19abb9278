"""Compile task: build a CSS file from Tailwind sources."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from tailwindkit.core.acquire import Acquirer
from tailwindkit.core.exceptions import ConfigInvalidError
from tailwindkit.core.interfaces import Invoker
from tailwindkit.tasks.base import BaseTailwindTask

logger = logging.getLogger(__name__)

# Probed in order; Tailwind v4 may have none (CSS-based configuration)
CONFIG_EXTENSIONS = ("js", "cjs", "mjs", "ts")


class CompileTask(BaseTailwindTask):
    """Compiles Tailwind sources to a CSS file."""

    description = "Compiles Tailwind sources to a CSS file"
    operation = "compilation"

    def __init__(
        self,
        project_root: Path,
        version: Optional[str],
        acquirer: Acquirer,
        invoker: Optional[Invoker] = None,
        input: Optional[str] = None,
        output: Optional[str] = None,
        config_path: Optional[str] = None,
        minify: bool = False,
    ):
        super().__init__(project_root, version, acquirer, invoker)
        self.input = input
        self.output = output
        self.config_path = config_path
        self.minify = minify

    def find_config_file(self) -> Optional[Path]:
        """
        Locate tailwind.config.{js,cjs,mjs,ts} in the config directory.

        Returns:
            First existing config file, or None
        """
        if not self.config_path:
            logger.info("No config path specified - using CSS-based configuration")
            return None

        directory = self.resolve_path(self.config_path, "Config path")
        for ext in CONFIG_EXTENSIONS:
            candidate = directory / f"tailwind.config.{ext}"
            if candidate.exists():
                logger.info(f"Using Tailwind config file: {candidate}")
                return candidate

        logger.info(
            "No tailwind.config.{js,cjs,mjs,ts} found - using CSS-based configuration"
        )
        return None

    def validate(self) -> Tuple[Path, Path]:
        """
        Check version, input and output without touching the filesystem.

        Returns:
            Resolved (input, output) paths

        Raises:
            ConfigInvalidError: If input/output are unset or input is missing
            PathTraversalError: If a path escapes the project
        """
        self.validate_version()

        if not self.input:
            raise ConfigInvalidError(
                "Input file is not configured. Please set 'input' in tailwind.yaml"
            )
        if not self.output:
            raise ConfigInvalidError(
                "Output file is not configured. Please set 'output' in tailwind.yaml"
            )

        input_file = self.resolve_path(self.input, "Input file path")
        output_file = self.resolve_path(self.output, "Output file path")
        if self.config_path:
            self.resolve_path(self.config_path, "Config path")

        if not input_file.exists():
            raise ConfigInvalidError(f"The input file {input_file} does not exist.")

        return input_file, output_file

    def run(self) -> int:
        """
        Compile the input file to the output file.

        Returns:
            Exit code of the binary (always 0; failures raise)

        Raises:
            SubprocessFailedError: If the binary fails
        """
        input_file, output_file = self.validate()
        config_file = self.find_config_file()

        if not output_file.parent.exists():
            output_file.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created output directory: {output_file.parent}")

        args: List[str] = ["-i", str(input_file), "-o", str(output_file)]
        if config_file is not None:
            args += ["-c", str(config_file)]
        if self.minify:
            args.append("--minify")

        return self.exec_binary(args, cwd=self.project_root)
