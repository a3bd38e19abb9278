"""
Checksum manifest parsing and SHA-256 verification.

Tailwind CSS publishes a `sha256sums.txt` manifest next to every release.
Each line has the form::

    <64-hex-digest>  ./tailwindcss-linux-x64

where the filename may also be prefixed with `*` (binary mode) or nothing.
Lookup is by exact filename, so `tailwindcss-linux-x64` never picks up the
digest of `tailwindcss-linux-x64-musl`.
"""

import hashlib
import logging
import re
import secrets
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class StreamingHasher:
    """Compute a SHA-256 digest incrementally."""

    def __init__(self):
        self.hasher = hashlib.sha256()

    def update(self, data: bytes):
        """Add data to hash computation."""
        self.hasher.update(data)

    def finalize(self) -> str:
        """Get final hash value as lowercase hex string."""
        return self.hasher.hexdigest()


def parse_checksum(manifest: str, filename: str) -> Optional[str]:
    """
    Find the expected digest for a file in a checksum manifest.

    A line matches when, after stripping, it ends with ``"  ./<filename>"``,
    ``"  <filename>"`` or ``" *<filename>"``, or matches
    ``^[hex]+\\s+\\*?\\.?/?<filename>$``.

    Args:
        manifest: Manifest text
        filename: Exact asset filename to look up

    Returns:
        Leading hex token of the first matching line, or None if not found

    Example:
        >>> parse_checksum("abc123  ./tailwindcss-linux-x64", "tailwindcss-linux-x64")
        'abc123'
    """
    pattern = re.compile(r"^[a-fA-F0-9]+\s+\*?\.?/?" + re.escape(filename) + r"$")

    for line in manifest.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        if (
            stripped.endswith(f"  ./{filename}")
            or stripped.endswith(f"  {filename}")
            or stripped.endswith(f" *{filename}")
            or pattern.match(stripped)
        ):
            return stripped.split()[0]

    logger.debug(f"No checksum entry for {filename}")
    return None


def compute_digest(source: Union[bytes, bytearray, str, Path]) -> str:
    """
    Compute the SHA-256 digest of bytes or of a file's contents.

    Files are read in fixed-size chunks so large binaries never need to fit
    in memory.

    Args:
        source: Raw bytes, or a path to a file

    Returns:
        Lowercase hex digest

    Raises:
        FileNotFoundError: If a path is given and the file doesn't exist

    Example:
        >>> compute_digest(b"")
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    """
    hasher = StreamingHasher()

    if isinstance(source, (bytes, bytearray)):
        hasher.update(bytes(source))
        return hasher.finalize()

    file_path = Path(source)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "rb") as f:
        while chunk := f.read(CHUNK_SIZE):
            hasher.update(chunk)

    return hasher.finalize()


def verify_digest(expected: str, actual: str) -> bool:
    """
    Compare two hex digests, ignoring case and surrounding whitespace.

    Uses constant-time comparison.

    Args:
        expected: Digest from the manifest
        actual: Digest computed locally

    Returns:
        True if the digests are equal
    """
    a = expected.strip().lower().encode("utf-8")
    b = actual.strip().lower().encode("utf-8")
    return secrets.compare_digest(a, b)


__all__ = [
    "StreamingHasher",
    "parse_checksum",
    "compute_digest",
    "verify_digest",
]
