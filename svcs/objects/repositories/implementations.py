"""Filesystem implementation of the content store."""

import logging
from pathlib import Path

from svcs.objects.domain.value_objects import compute_digest, is_digest
from svcs.objects.repositories.interfaces import ContentStoreRepository
from svcs.shared.atomic_write import write_atomic
from svcs.shared.errors import ObjectNotFoundError, RepositoryIOError

logger = logging.getLogger(__name__)


class FileSystemContentStore(ContentStoreRepository):
    """Content store keeping one file per blob under ``objects/<xx>/<rest>``."""

    FANOUT_WIDTH = 2

    def __init__(self, objects_dir: Path) -> None:
        """
        Initialize the store.

        Args:
            objects_dir: Directory holding the object files; created if absent
        """
        self._objects_dir = objects_dir
        self._objects_dir.mkdir(parents=True, exist_ok=True)

    def put(self, content: bytes) -> str:
        """
        Store content under its digest.

        Args:
            content: Bytes to store

        Returns:
            Lowercase hex digest of the content
        """
        digest = compute_digest(content)
        object_path = self._object_path(digest)
        if object_path.is_file():
            return digest

        try:
            object_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RepositoryIOError(f"Failed to create {object_path.parent}: {e}") from e
        write_atomic(object_path, content)
        logger.debug("Stored object %s (%d bytes)", digest, len(content))
        return digest

    def get(self, digest: str) -> bytes:
        """
        Fetch stored content.

        Args:
            digest: Digest returned by a previous put

        Returns:
            The stored bytes

        Raises:
            ObjectNotFoundError: If no object is stored under the digest
            RepositoryIOError: If the object exists but cannot be read
        """
        if not self.contains(digest):
            raise ObjectNotFoundError(digest)
        try:
            return self._object_path(digest).read_bytes()
        except OSError as e:
            raise RepositoryIOError(f"Failed to read object {digest}: {e}") from e

    def contains(self, digest: str) -> bool:
        """
        Check whether an object is stored.

        Args:
            digest: Digest to look up

        Returns:
            True if an object exists under the digest
        """
        if not is_digest(digest):
            return False
        return self._object_path(digest).is_file()

    def _object_path(self, digest: str) -> Path:
        return self._objects_dir / digest[: self.FANOUT_WIDTH] / digest[self.FANOUT_WIDTH :]
