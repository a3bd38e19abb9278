"""
Tests for cache directory resolution.
"""

import os

import pytest

from tailwindkit.core.directory import (
    CACHE_DIR_ENV,
    get_default_cache_dir,
    resolve_cache_dir,
    verify_directory_writable,
)
from tailwindkit.core.exceptions import CacheUnwritableError


class TestDefaultCacheDir:
    @pytest.mark.skipif(os.name == "nt", reason="POSIX home layout")
    def test_posix_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_default_cache_dir() == tmp_path / ".tailwindkit" / "cache"


class TestResolveCacheDir:
    """Test precedence: override, environment, default."""

    def test_override_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CACHE_DIR_ENV, str(tmp_path / "env"))
        assert resolve_cache_dir(tmp_path / "cli") == tmp_path / "cli"

    def test_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CACHE_DIR_ENV, str(tmp_path / "env"))
        assert resolve_cache_dir() == tmp_path / "env"

    def test_default(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "tailwindkit.core.directory.get_default_cache_dir",
            lambda: tmp_path / "default",
        )
        assert resolve_cache_dir() == tmp_path / "default"

    def test_environment_beats_configured(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CACHE_DIR_ENV, str(tmp_path / "env"))
        assert resolve_cache_dir(configured=str(tmp_path / "file")) == tmp_path / "env"

    def test_configured(self, tmp_path):
        assert resolve_cache_dir(configured="cache", project_root=tmp_path) == tmp_path / "cache"

    def test_relative_to_project(self, tmp_path):
        assert resolve_cache_dir(".cache/tw", project_root=tmp_path) == tmp_path / ".cache" / "tw"


class TestVerifyDirectoryWritable:
    def test_writable(self, tmp_path):
        assert verify_directory_writable(tmp_path) is True

    def test_missing(self, tmp_path):
        assert verify_directory_writable(tmp_path / "missing") is False

    def test_file(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("x")
        assert verify_directory_writable(path) is False

    def test_leaves_no_test_file(self, tmp_path):
        verify_directory_writable(tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_other_test_file_is_untouched(self, tmp_path):
        """A test file left by another process must survive our own check."""
        other = tmp_path / ".write_test"
        other.write_text("")

        assert verify_directory_writable(tmp_path) is True
        assert other.exists()
