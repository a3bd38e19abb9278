"""
Pytest configuration and shared fixtures for tailwindkit tests.
"""

import hashlib
from pathlib import Path
from typing import List, Sequence, Tuple

import pytest

from tailwindkit.core.interfaces import Invoker
from tailwindkit.core.platform import (
    PlatformSignature,
    TailwindArch,
    TailwindOS,
    clear_platform_cache,
)

RELEASE_URL = "https://releases.example.com/tailwindcss"
VERSION = "4.1.0"
LINUX_X64 = PlatformSignature(TailwindOS.LINUX, TailwindArch.X86_64)
BINARY_NAME = "tailwindcss-linux-x64"
BINARY_BODY = b"#!/bin/sh\necho tailwind\n"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def fresh_platform_cache():
    """Platform detection is memoized per process; reset it around each test."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture(autouse=True)
def no_cache_env(monkeypatch):
    """Keep a developer's TAILWINDKIT_CACHE_DIR out of the tests."""
    monkeypatch.delenv("TAILWINDKIT_CACHE_DIR", raising=False)


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Cache root inside the test's temp directory."""
    return tmp_path / "cache"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project with an input stylesheet and a config directory."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "input.css").write_text('@import "tailwindcss";\n')
    (root / "config").mkdir()
    return root


@pytest.fixture
def manifest() -> str:
    """Checksum manifest listing the test binary among other assets."""
    digest = hashlib.sha256(BINARY_BODY).hexdigest()
    return (
        "f391d5c6cb61f39bf7a20ef8d0e0bb5dc4c8fb8c4a4dd39c1ea4e18e52b2d073  "
        "./tailwindcss-linux-arm64\n"
        f"{digest}  ./{BINARY_NAME}\n"
        "0000000000000000000000000000000000000000000000000000000000000000  "
        "./tailwindcss-linux-x64-musl\n"
    )


class RecordingInvoker(Invoker):
    """Invoker that records calls instead of spawning processes."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.calls: List[Tuple[Path, List[str], Path]] = []

    def run(self, executable: Path, args: Sequence[str], cwd: Path) -> int:
        self.calls.append((executable, list(args), cwd))
        return self.returncode


@pytest.fixture
def invoker() -> RecordingInvoker:
    return RecordingInvoker()
