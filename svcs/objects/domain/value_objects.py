"""Value objects for the object storage domain."""

import hashlib
import re

_DIGEST_PATTERN = re.compile(r"[0-9a-f]{64}")


def compute_digest(content: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``content``."""
    return hashlib.sha256(content).hexdigest()


def is_digest(value: str) -> bool:
    """Check whether ``value`` is a well-formed digest string."""
    return bool(_DIGEST_PATTERN.fullmatch(value))
