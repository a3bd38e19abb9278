"""
Host-facing entry point.

TailwindPlugin is what a build host attaches to a project. Attaching checks
the cache directory up front; afterwards the host calls download(), init()
or compile(). init() and compile() always ensure the binary is acquired
first, which is the only ordering the host needs to honour.

Usage:
    from tailwindkit.plugin import TailwindPlugin
    from tailwindkit.config import load_config

    plugin = TailwindPlugin(project_root, load_config(project_root))
    plugin.compile()
"""

import logging
from pathlib import Path
from typing import Optional, Union

from tailwindkit.config.parser import TailwindConfig
from tailwindkit.core.acquire import Acquirer
from tailwindkit.core.cache import BinaryCache
from tailwindkit.core.directory import resolve_cache_dir
from tailwindkit.core.download import RetryingFetcher
from tailwindkit.core.interfaces import Invoker
from tailwindkit.core.platform import PlatformSignature
from tailwindkit.tasks import CompileTask, DownloadTask, InitTask, SubprocessInvoker

logger = logging.getLogger(__name__)

PLUGIN_GROUP = "Tailwind"


class TailwindPlugin:
    """
    Wire configuration, cache, acquirer and tasks for one project.

    Attributes:
        project_root: Project directory
        config: Effective configuration
        cache: Binary cache (checked writable at construction)
        acquirer: Shared acquirer used by every task
    """

    def __init__(
        self,
        project_root: Union[str, Path],
        config: TailwindConfig,
        cache_dir: Optional[Union[str, Path]] = None,
        invoker: Optional[Invoker] = None,
        fetcher: Optional[RetryingFetcher] = None,
        platform: Optional[PlatformSignature] = None,
    ):
        """
        Attach to a project.

        Args:
            project_root: Project directory
            config: Parsed configuration
            cache_dir: Overrides TAILWINDKIT_CACHE_DIR and config.cache_dir
            invoker: Invoker for init/compile (default: SubprocessInvoker)
            fetcher: HTTP fetcher (default: RetryingFetcher())
            platform: Platform override (default: detected)

        Raises:
            CacheUnwritableError: If the cache directory can't be written
        """
        self.project_root = Path(project_root).resolve()
        self.config = config

        cache_root = resolve_cache_dir(
            cache_dir, self.project_root, configured=config.cache_dir
        )
        self.cache = BinaryCache(cache_root)
        self.cache.ensure_writable()

        self.acquirer = Acquirer(
            self.cache,
            fetcher=fetcher,
            release_url=config.release_url,
            platform=platform,
        )

        self.download_task = DownloadTask(self.project_root, config.version, self.acquirer)
        self.init_task = InitTask(
            self.project_root,
            config.version,
            self.acquirer,
            invoker=invoker or SubprocessInvoker("initialization"),
            config_path=config.config_path,
            options=config.init,
        )
        self.compile_task = CompileTask(
            self.project_root,
            config.version,
            self.acquirer,
            invoker=invoker or SubprocessInvoker("compilation"),
            input=config.input,
            output=config.output,
            config_path=config.config_path,
            minify=config.minify,
        )

        logger.debug(f"{PLUGIN_GROUP} plugin attached to {self.project_root}")

    def download(self) -> Path:
        """Ensure the binary is cached; returns its path."""
        return self.download_task.run()

    def init(self) -> int:
        """Acquire the binary, then run `tailwindcss init`."""
        self.init_task.validate()
        self.download()
        return self.init_task.run()

    def compile(self) -> int:
        """Acquire the binary, then compile the configured input."""
        self.compile_task.validate()
        self.download()
        return self.compile_task.run()


__all__ = ["TailwindPlugin", "PLUGIN_GROUP"]
