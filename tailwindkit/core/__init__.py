"""
Core functionality for tailwindkit.

This package contains the download-verify-cache pipeline that the task layer
depends on.
"""

from .acquire import (
    Acquirer,
    AcquisitionState,
    validate_version,
    DEFAULT_RELEASE_URL,
)

from .cache import BinaryCache

from .directory import (
    get_default_cache_dir,
    resolve_cache_dir,
    verify_directory_writable,
)

from .download import RetryingFetcher

from .interfaces import Invoker

from .platform import (
    TailwindOS,
    TailwindArch,
    PlatformSignature,
    detect_platform,
    format_filename,
    clear_platform_cache,
)

from .verification import (
    parse_checksum,
    compute_digest,
    verify_digest,
)

from .exceptions import (
    TailwindKitError,
    ConfigInvalidError,
    UnsupportedPlatformError,
    CacheUnwritableError,
    FetchFailedError,
    AcquisitionFailedError,
    ChecksumError,
    ChecksumManifestError,
    ChecksumMissingError,
    ChecksumMismatchError,
    PathTraversalError,
    SubprocessFailedError,
)

__all__ = [
    "Acquirer",
    "AcquisitionState",
    "validate_version",
    "DEFAULT_RELEASE_URL",
    "BinaryCache",
    "get_default_cache_dir",
    "resolve_cache_dir",
    "verify_directory_writable",
    "RetryingFetcher",
    "Invoker",
    "TailwindOS",
    "TailwindArch",
    "PlatformSignature",
    "detect_platform",
    "format_filename",
    "clear_platform_cache",
    "parse_checksum",
    "compute_digest",
    "verify_digest",
    "TailwindKitError",
    "ConfigInvalidError",
    "UnsupportedPlatformError",
    "CacheUnwritableError",
    "FetchFailedError",
    "AcquisitionFailedError",
    "ChecksumError",
    "ChecksumManifestError",
    "ChecksumMissingError",
    "ChecksumMismatchError",
    "PathTraversalError",
    "SubprocessFailedError",
]
