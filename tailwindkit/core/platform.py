"""
Platform detection for tailwindkit.

Maps the running OS and CPU to the canonical (OS, architecture) pair used by
the Tailwind CSS release assets, and to the asset filename.

Usage:
    from tailwindkit.core.platform import detect_platform, format_filename

    signature = detect_platform()
    print(format_filename(signature))   # e.g. 'tailwindcss-linux-x64'
"""

import functools
import platform
from dataclasses import dataclass
from enum import Enum

from tailwindkit.core.exceptions import UnsupportedPlatformError


class TailwindOS(Enum):
    """Operating systems with a published standalone binary."""

    MAC = "macos"
    LINUX = "linux"
    WINDOWS = "windows"

    @property
    def binary_os(self) -> str:
        return self.value


class TailwindArch(Enum):
    """CPU architectures with a published standalone binary."""

    X86_64 = "x64"
    AARCH32 = "armv7"
    AARCH64 = "arm64"

    @property
    def binary_arch(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlatformSignature:
    """
    Immutable (OS, architecture) pair.

    Attributes:
        os: Detected operating system
        arch: Detected CPU architecture
    """

    os: TailwindOS
    arch: TailwindArch

    @property
    def is_windows(self) -> bool:
        return self.os is TailwindOS.WINDOWS

    def __str__(self) -> str:
        return f"{self.os.binary_os}-{self.arch.binary_arch}"


_ARCH_ALIASES = {
    "x86_64": TailwindArch.X86_64,
    "amd64": TailwindArch.X86_64,
    "x64": TailwindArch.X86_64,
    "aarch32": TailwindArch.AARCH32,
    "arm": TailwindArch.AARCH32,
    "armv7": TailwindArch.AARCH32,
    "armv7l": TailwindArch.AARCH32,
    "aarch64": TailwindArch.AARCH64,
    "arm64": TailwindArch.AARCH64,
}


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformSignature:
    """
    Detect the current platform signature.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformSignature for the running host

    Raises:
        UnsupportedPlatformError: If the OS or architecture is not recognized

    Example:
        >>> sig = detect_platform()
        >>> str(sig)
        'linux-x64'
    """
    return PlatformSignature(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> TailwindOS:
    """
    Detect operating system.

    Raises:
        UnsupportedPlatformError: If OS is not macOS, Linux or Windows
    """
    system = (platform.system() or "").lower()

    if "darwin" in system or "mac" in system:
        return TailwindOS.MAC
    elif "linux" in system:
        return TailwindOS.LINUX
    elif "windows" in system:
        return TailwindOS.WINDOWS
    else:
        raise UnsupportedPlatformError(
            "operating system",
            system or "<unknown>",
            [os_.binary_os for os_ in TailwindOS],
        )


def _detect_architecture() -> TailwindArch:
    """
    Detect CPU architecture.

    Raises:
        UnsupportedPlatformError: If architecture has no published binary
    """
    machine = (platform.machine() or "").lower()

    arch = _ARCH_ALIASES.get(machine)
    if arch is None:
        raise UnsupportedPlatformError(
            "architecture",
            machine or "<unknown>",
            ["x86_64", "ARM32", "ARM64"],
        )
    return arch


def format_filename(signature: PlatformSignature) -> str:
    """
    Get the release asset filename for a platform.

    Args:
        signature: Platform to format

    Returns:
        'tailwindcss-<os>-<arch>', with '.exe' appended on Windows

    Example:
        >>> format_filename(PlatformSignature(TailwindOS.WINDOWS, TailwindArch.X86_64))
        'tailwindcss-windows-x64.exe'
    """
    name = f"tailwindcss-{signature.os.binary_os}-{signature.arch.binary_arch}"
    return f"{name}.exe" if signature.is_windows else name


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    Useful for testing.
    """
    detect_platform.cache_clear()


__all__ = [
    "TailwindOS",
    "TailwindArch",
    "PlatformSignature",
    "detect_platform",
    "format_filename",
    "clear_platform_cache",
]
