"""Repository interfaces for commit history."""

from abc import ABC, abstractmethod

from svcs.history.domain.entities import Commit


class CommitLogRepository(ABC):
    """Interface for the append-only commit log."""

    @abstractmethod
    def list_commits(self) -> tuple[Commit, ...]:
        """
        Read the whole history.

        Returns:
            Tuple of commits ordered from oldest to newest

        Raises:
            CorruptRepositoryError: If a stored record is malformed
        """
        ...

    @abstractmethod
    def append(self, commit: Commit) -> None:
        """
        Persist a new commit after the current head.

        Args:
            commit: Commit whose parent is the current head
        """
        ...
