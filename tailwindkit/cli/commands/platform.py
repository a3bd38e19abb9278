"""
Platform command implementation.

Shows the detected platform and the release asset it maps to.
"""

import logging

from tailwindkit.core.platform import detect_platform, format_filename

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the platform command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    signature = detect_platform()

    print(f"Platform: {signature}")
    print(f"Binary:   {format_filename(signature)}")
    return 0
