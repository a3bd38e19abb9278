"""
Centralized exception hierarchy for tailwindkit.

Every failure raised by the download-verify-cache pipeline and the task
layer derives from TailwindKitError, so hosts can catch one type while still
getting structured attributes for diagnostics.
"""

from pathlib import Path
from typing import Optional, Sequence


# ============================================================================
# Base Exceptions
# ============================================================================


class TailwindKitError(Exception):
    """Base exception for all tailwindkit errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigInvalidError(TailwindKitError):
    """Raised for bad version syntax or a missing/invalid configuration field."""

    pass


class UnsupportedPlatformError(TailwindKitError):
    """Raised when the host OS or CPU has no published Tailwind binary."""

    def __init__(self, kind: str, value: str, supported: Sequence[str]):
        self.kind = kind
        self.value = value
        self.supported = list(supported)
        super().__init__(
            f"Unsupported {kind}: {value}\n"
            f"The Tailwind CSS standalone binary is only available for: "
            f"{', '.join(self.supported)}."
        )


class CacheUnwritableError(TailwindKitError):
    """Raised at setup when the binary cache directory cannot be written."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"Cache directory is not writable: {self.path}"
        if reason:
            msg += f" ({reason})"
        msg += (
            "\nCheck the directory permissions or choose another location with "
            "'cache_dir' in tailwind.yaml or the TAILWINDKIT_CACHE_DIR variable."
        )
        super().__init__(msg)


# ============================================================================
# Network Exceptions
# ============================================================================


class FetchFailedError(TailwindKitError):
    """Raised when an HTTP GET still fails after every retry attempt."""

    def __init__(self, url: str, attempts: int, last_error: Optional[BaseException]):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Failed to fetch {url} after {attempts} attempts.\n"
            f"Last error: {last_error}\n"
            "Please check your internet connection and try again."
        )


class AcquisitionFailedError(TailwindKitError):
    """Raised when the manifest or binary could not be downloaded."""

    def __init__(self, resource: str, version: str, cause: FetchFailedError):
        self.resource = resource
        self.version = version
        self.cause = cause
        super().__init__(
            f"Could not download the {resource} for Tailwind CSS {version}: {cause}"
        )


# ============================================================================
# Integrity Exceptions
# ============================================================================


class ChecksumError(TailwindKitError):
    """Base exception for checksum verification failures."""

    pass


class ChecksumManifestError(ChecksumError):
    """Raised when the checksum manifest cannot be read as text."""

    def __init__(self, manifest_url: str, reason: str):
        self.manifest_url = manifest_url
        self.reason = reason
        super().__init__(
            f"Checksum manifest {manifest_url} is not valid UTF-8 text: {reason}\n"
            "The download cannot be verified and will not be used."
        )


class ChecksumMissingError(ChecksumError):
    """Raised when the manifest has no entry for the platform binary."""

    def __init__(self, filename: str, manifest_url: str):
        self.filename = filename
        self.manifest_url = manifest_url
        super().__init__(
            f"Checksum not found for {filename} in {manifest_url}. "
            "The download cannot be verified and will not be used."
        )


class ChecksumMismatchError(ChecksumError):
    """Raised when a downloaded binary does not match its published digest."""

    def __init__(self, filename: str, expected: str, actual: str):
        self.filename = filename
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checksum verification failed for {filename}!\n"
            f"Expected: {expected}\n"
            f"Actual:   {actual}\n"
            "The downloaded file may be corrupted or tampered with."
        )


# ============================================================================
# Task Exceptions
# ============================================================================


class PathTraversalError(TailwindKitError):
    """Raised when a configured path escapes the project directory."""

    def __init__(self, label: str, path: Path, root: Path):
        self.label = label
        self.path = Path(path)
        self.root = Path(root)
        super().__init__(
            f"{label} escapes project directory.\n"
            f"Path: {self.path}\n"
            f"Project: {self.root}\n"
            "Path traversal is not allowed for security reasons."
        )


class SubprocessFailedError(TailwindKitError):
    """Raised when the Tailwind binary cannot be spawned or exits non-zero."""

    def __init__(
        self,
        operation: str,
        command: Sequence[str],
        cwd: Path,
        returncode: Optional[int] = None,
        reason: str = "",
    ):
        self.operation = operation
        self.command = list(command)
        self.cwd = Path(cwd)
        self.returncode = returncode
        self.reason = reason

        msg = (
            f"Tailwind CSS {operation} failed.\n"
            f"Command: {' '.join(self.command)}\n"
            f"Working directory: {self.cwd}"
        )
        if returncode is not None:
            msg += f"\nExit code: {returncode}"
        if reason:
            msg += f"\nError: {reason}"
        super().__init__(msg)
