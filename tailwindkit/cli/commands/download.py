"""
Download command implementation.

Downloads, verifies and caches the Tailwind binary for this platform.
"""

import logging

from tailwindkit.cli.utils import create_plugin

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the download command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    plugin = create_plugin(args)
    binary = plugin.download()

    print(binary)
    return 0
