"""Repository interfaces for content-addressed object storage."""

from abc import ABC, abstractmethod


class ContentStoreRepository(ABC):
    """Interface for an append-only content-addressed blob store."""

    @abstractmethod
    def put(self, content: bytes) -> str:
        """
        Store content under its digest.

        Writing content that is already stored is a no-op.

        Args:
            content: Bytes to store

        Returns:
            Lowercase hex digest of the content
        """
        ...

    @abstractmethod
    def get(self, digest: str) -> bytes:
        """
        Fetch stored content.

        Args:
            digest: Digest returned by a previous put

        Returns:
            The stored bytes

        Raises:
            ObjectNotFoundError: If no object is stored under the digest
        """
        ...

    @abstractmethod
    def contains(self, digest: str) -> bool:
        """
        Check whether an object is stored.

        Args:
            digest: Digest to look up

        Returns:
            True if an object exists under the digest
        """
        ...
