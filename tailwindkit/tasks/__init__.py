"""
Tailwind tasks.

Each task wraps one operation of the standalone binary: download, init and
compile. The binary is always run through an Invoker.
"""

from tailwindkit.tasks.base import BaseTailwindTask
from tailwindkit.tasks.compile import CompileTask
from tailwindkit.tasks.download import DownloadTask
from tailwindkit.tasks.init import InitTask
from tailwindkit.tasks.invoker import SubprocessInvoker

__all__ = [
    "BaseTailwindTask",
    "CompileTask",
    "DownloadTask",
    "InitTask",
    "SubprocessInvoker",
]
