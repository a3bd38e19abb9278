"""
Init command implementation.

Creates a Tailwind configuration file with `tailwindcss init`.
"""

import logging

from tailwindkit.cli.utils import create_plugin

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the init command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    plugin = create_plugin(args)
    return plugin.init()
