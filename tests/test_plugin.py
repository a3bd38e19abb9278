"""
Tests for TailwindPlugin wiring.
"""

import pytest
import responses

from conftest import BINARY_BODY, BINARY_NAME, LINUX_X64, RELEASE_URL, VERSION
from tailwindkit.config.parser import TailwindConfig
from tailwindkit.core.download import RetryingFetcher
from tailwindkit.core.exceptions import (
    CacheUnwritableError,
    ConfigInvalidError,
    PathTraversalError,
)
from tailwindkit.plugin import TailwindPlugin

MANIFEST_URL = f"{RELEASE_URL}/v{VERSION}/sha256sums.txt"
BINARY_URL = f"{RELEASE_URL}/v{VERSION}/{BINARY_NAME}"


def make_plugin(project_root, cache_root, invoker, **config):
    settings = {
        "version": VERSION,
        "release_url": RELEASE_URL,
        "input": "src/input.css",
        "output": "dist/output.css",
        "config_path": "config",
    }
    settings.update(config)
    return TailwindPlugin(
        project_root,
        TailwindConfig(**settings),
        cache_dir=cache_root,
        invoker=invoker,
        fetcher=RetryingFetcher(sleep=lambda seconds: None),
        platform=LINUX_X64,
    )


class TestAttach:
    def test_creates_cache_dir(self, project_root, cache_root, invoker):
        make_plugin(project_root, cache_root, invoker)
        assert cache_root.is_dir()

    def test_unwritable_cache_fails_at_attach(self, project_root, tmp_path, invoker):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(CacheUnwritableError):
            make_plugin(project_root, blocker / "cache", invoker)

    def test_cache_dir_from_config(self, project_root, invoker):
        plugin = TailwindPlugin(
            project_root, TailwindConfig(version=VERSION, cache_dir=".tw-cache"), invoker=invoker
        )
        assert plugin.cache.root == project_root.resolve() / ".tw-cache"

    def test_environment_cache_dir(self, project_root, tmp_path, invoker, monkeypatch):
        monkeypatch.setenv("TAILWINDKIT_CACHE_DIR", str(tmp_path / "env-cache"))
        plugin = TailwindPlugin(project_root, TailwindConfig(version=VERSION), invoker=invoker)
        assert plugin.cache.root == tmp_path / "env-cache"

    def test_environment_beats_config_file(self, project_root, tmp_path, invoker, monkeypatch):
        monkeypatch.setenv("TAILWINDKIT_CACHE_DIR", str(tmp_path / "env-cache"))
        plugin = TailwindPlugin(
            project_root, TailwindConfig(version=VERSION, cache_dir=".tw-cache"), invoker=invoker
        )
        assert plugin.cache.root == tmp_path / "env-cache"

    def test_tasks_share_acquirer(self, project_root, cache_root, invoker):
        plugin = make_plugin(project_root, cache_root, invoker)
        assert plugin.download_task.acquirer is plugin.acquirer
        assert plugin.init_task.acquirer is plugin.acquirer
        assert plugin.compile_task.acquirer is plugin.acquirer


class TestOperations:
    """Init and compile always acquire the binary first."""

    @responses.activate
    def test_compile_downloads_then_runs(self, project_root, cache_root, invoker, manifest):
        responses.add(responses.GET, MANIFEST_URL, body=manifest, status=200)
        responses.add(responses.GET, BINARY_URL, body=BINARY_BODY, status=200)
        plugin = make_plugin(project_root, cache_root, invoker)

        assert plugin.compile() == 0

        binary = cache_root / VERSION / BINARY_NAME
        assert binary.read_bytes() == BINARY_BODY
        assert invoker.calls[0][0] == binary.absolute()

    @responses.activate
    def test_init_downloads_then_runs(self, project_root, cache_root, invoker, manifest):
        responses.add(responses.GET, MANIFEST_URL, body=manifest, status=200)
        responses.add(responses.GET, BINARY_URL, body=BINARY_BODY, status=200)
        plugin = make_plugin(project_root, cache_root, invoker)

        plugin.init()

        assert invoker.calls[0][1] == ["init"]

    @responses.activate
    def test_traversal_rejected_before_download(self, project_root, cache_root, invoker):
        plugin = make_plugin(project_root, cache_root, invoker, output="../../outside.css")

        with pytest.raises(PathTraversalError):
            plugin.compile()

        assert len(responses.calls) == 0
        assert invoker.calls == []

    def test_missing_version(self, project_root, cache_root, invoker):
        plugin = make_plugin(project_root, cache_root, invoker, version=None)

        with pytest.raises(ConfigInvalidError, match="not configured"):
            plugin.download()
