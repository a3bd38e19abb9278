"""
Compile command implementation.

Compiles the configured input stylesheet to CSS.
"""

import logging

from tailwindkit.cli.utils import create_plugin

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the compile command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    plugin = create_plugin(args)
    result = plugin.compile()

    logger.info(f"Compiled {plugin.config.input} -> {plugin.config.output}")
    return result
