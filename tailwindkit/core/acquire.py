"""
Acquisition of a verified Tailwind CSS binary.

The Acquirer composes platform detection, the retrying fetcher, checksum
verification and the binary cache into one operation:

    NOT_STARTED -> CHECK_CACHE -> FETCH_MANIFEST -> RESOLVE_EXPECTED_DIGEST
                -> FETCH_BINARY -> VERIFY_BINARY -> COMMIT -> DONE

CHECK_CACHE jumps straight to DONE when the artifact is already cached, so
repeated builds never touch the network. Every failure is terminal for the
request; a later call starts again from CHECK_CACHE.

Cancellation is not supported: a running acquisition can only be stopped by
the host process' own timeout/kill mechanism.
"""

import logging
import re
import threading
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from tailwindkit.core.cache import BinaryCache
from tailwindkit.core.download import RetryingFetcher
from tailwindkit.core.exceptions import (
    AcquisitionFailedError,
    ChecksumManifestError,
    ChecksumMismatchError,
    ChecksumMissingError,
    ConfigInvalidError,
    FetchFailedError,
)
from tailwindkit.core.platform import PlatformSignature, detect_platform, format_filename
from tailwindkit.core.verification import compute_digest, parse_checksum, verify_digest

logger = logging.getLogger(__name__)

DEFAULT_RELEASE_URL = "https://github.com/tailwindlabs/tailwindcss/releases/download"
CHECKSUM_FILENAME = "sha256sums.txt"

# MAJOR.MINOR.PATCH with an optional pre-release and/or SNAPSHOT suffix,
# e.g. 4.1.0, 4.1.0-beta.1, 4.1.0-SNAPSHOT, 4.1.0-alpha.1-SNAPSHOT
VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+(-[a-zA-Z0-9.]+-?SNAPSHOT|-[a-zA-Z0-9.]+)?")


class AcquisitionState(Enum):
    """Stages of a single acquisition request."""

    NOT_STARTED = "not-started"
    CHECK_CACHE = "check-cache"
    FETCH_MANIFEST = "fetch-manifest"
    RESOLVE_EXPECTED_DIGEST = "resolve-expected-digest"
    FETCH_BINARY = "fetch-binary"
    VERIFY_BINARY = "verify-binary"
    COMMIT = "commit"
    DONE = "done"


def validate_version(version: Optional[str]) -> str:
    """
    Validate a Tailwind version string.

    Args:
        version: Version from configuration

    Returns:
        The version, unchanged

    Raises:
        ConfigInvalidError: If the version is missing, blank or malformed
    """
    if version is None:
        raise ConfigInvalidError(
            "Tailwind version is not configured. Please set 'version' in tailwind.yaml"
        )

    if not isinstance(version, str) or not version.strip():
        raise ConfigInvalidError("Tailwind version cannot be empty")

    if not VERSION_PATTERN.fullmatch(version):
        raise ConfigInvalidError(
            f"Invalid Tailwind version format: '{version}'\n"
            "Version must be in format: MAJOR.MINOR.PATCH "
            "(e.g., '4.1.0', '4.1.0-beta.1', or '4.1.0-SNAPSHOT')"
        )

    return version


class Acquirer:
    """
    Produce a verified, executable, cached Tailwind binary.

    Attributes:
        cache: Binary cache the artifact is committed to
        fetcher: Retrying HTTP fetcher
        release_url: Base URL of the release host
        state: State reached by the calling thread's most recent acquisition

    Example:
        >>> acquirer = Acquirer(BinaryCache(cache_dir))
        >>> binary = acquirer.acquire("4.1.0")
    """

    def __init__(
        self,
        cache: BinaryCache,
        fetcher: Optional[RetryingFetcher] = None,
        release_url: str = DEFAULT_RELEASE_URL,
        platform: Optional[PlatformSignature] = None,
    ):
        self.cache = cache
        self.fetcher = fetcher or RetryingFetcher()
        self.release_url = release_url.rstrip("/")
        self._platform = platform
        self._local = threading.local()

        self._locks: Dict[Tuple[str, str], threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def state(self) -> AcquisitionState:
        """State of the calling thread's current or last acquisition."""
        return getattr(self._local, "state", AcquisitionState.NOT_STARTED)

    @property
    def platform(self) -> PlatformSignature:
        if self._platform is None:
            self._platform = detect_platform()
        return self._platform

    @property
    def filename(self) -> str:
        """Release asset filename for the target platform."""
        return format_filename(self.platform)

    def checksum_url(self, version: str) -> str:
        return f"{self.release_url}/v{version}/{CHECKSUM_FILENAME}"

    def binary_url(self, version: str) -> str:
        return f"{self.release_url}/v{version}/{self.filename}"

    def binary_path(self, version: str) -> Path:
        """Where the binary for `version` is (or will be) cached."""
        return self.cache.locate(version, self.filename)

    def acquire(self, version: str) -> Path:
        """
        Ensure the binary for `version` is cached and return its path.

        Concurrent callers in this process asking for the same artifact are
        serialized; the second one finds it already cached.

        Args:
            version: Tailwind version, e.g. "4.1.0"

        Returns:
            Path to the verified binary

        Raises:
            ConfigInvalidError: If the version is invalid
            AcquisitionFailedError: If the manifest or binary can't be fetched
            ChecksumManifestError: If the manifest is not valid UTF-8
            ChecksumMissingError: If the manifest has no entry for the binary
            ChecksumMismatchError: If the binary digest doesn't match
        """
        self._set_state(AcquisitionState.NOT_STARTED)
        validate_version(version)

        filename = self.filename
        with self._lock_for(version, filename):
            return self._acquire_locked(version, filename)

    def _acquire_locked(self, version: str, filename: str) -> Path:
        self._set_state(AcquisitionState.CHECK_CACHE)
        if self.cache.is_present(version, filename):
            path = self.cache.locate(version, filename)
            logger.info(f"Tailwind CSS {version} already cached at {path}")
            self._set_state(AcquisitionState.DONE)
            return path

        self._set_state(AcquisitionState.FETCH_MANIFEST)
        manifest_url = self.checksum_url(version)
        try:
            manifest = self.fetcher.fetch_text(manifest_url)
        except FetchFailedError as e:
            raise AcquisitionFailedError("checksums file", version, e) from e
        except UnicodeDecodeError as e:
            raise ChecksumManifestError(manifest_url, str(e)) from e

        self._set_state(AcquisitionState.RESOLVE_EXPECTED_DIGEST)
        expected = parse_checksum(manifest, filename)
        if expected is None:
            raise ChecksumMissingError(filename, manifest_url)

        self._set_state(AcquisitionState.FETCH_BINARY)
        temp_path = self.cache.temporary_path(version, filename)
        try:
            try:
                self.fetcher.fetch_to_file(self.binary_url(version), temp_path)
            except FetchFailedError as e:
                raise AcquisitionFailedError("Tailwind binary", version, e) from e

            self._set_state(AcquisitionState.VERIFY_BINARY)
            actual = compute_digest(temp_path)
            if not verify_digest(expected, actual):
                raise ChecksumMismatchError(filename, expected, actual)
            logger.info(f"Checksum verification passed for {filename}")

            self._set_state(AcquisitionState.COMMIT)
            path = self.cache.commit_file(version, filename, temp_path)
        finally:
            # no-op after a successful commit, which renamed temp_path away
            temp_path.unlink(missing_ok=True)

        self._set_state(AcquisitionState.DONE)
        return path

    def _lock_for(self, version: str, filename: str) -> threading.Lock:
        key = (version, filename)
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def _set_state(self, state: AcquisitionState):
        self._local.state = state
        logger.debug(f"Acquisition state: {state.value}")


__all__ = [
    "Acquirer",
    "AcquisitionState",
    "validate_version",
    "DEFAULT_RELEASE_URL",
    "CHECKSUM_FILENAME",
    "VERSION_PATTERN",
]
