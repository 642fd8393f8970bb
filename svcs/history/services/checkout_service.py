"""Checkout service restoring the working tree from a commit."""

import logging

from svcs.history.domain.entities import Commit
from svcs.history.services.commit_service import CommitService
from svcs.objects.repositories.interfaces import ContentStoreRepository
from svcs.shared.errors import CorruptRepositoryError, ObjectNotFoundError, RepositoryIOError
from svcs.staging.services.index_service import IndexService

logger = logging.getLogger(__name__)


class CheckoutService:
    """Service for materializing a commit's snapshot into the working tree."""

    def __init__(
        self,
        commit_service: CommitService,
        content_store: ContentStoreRepository,
        index_service: IndexService,
    ) -> None:
        """
        Initialize CheckoutService.

        Args:
            commit_service: Service resolving commit ids
            content_store: Store holding the snapshot contents
            index_service: Service mapping tracked paths to working-tree files
        """
        self._commit_service = commit_service
        self._content_store = content_store
        self._index_service = index_service

    def checkout(self, commit_id: str) -> Commit:
        """
        Overwrite every file recorded by a commit with its recorded content.

        Files outside the commit's snapshot are left untouched. There is no
        rollback: if writing one file fails, files already written stay changed.

        Args:
            commit_id: Exact id of the commit to restore

        Returns:
            The restored commit

        Raises:
            CommitNotFoundError: If the id matches no commit
            CorruptRepositoryError: If the commit references a missing object
            RepositoryIOError: If a working-tree file cannot be written
        """
        commit = self._commit_service.resolve(commit_id)

        for entry in commit.entries:
            if not self._content_store.contains(entry.digest):
                raise CorruptRepositoryError(
                    f"Commit {commit.id} references missing object {entry.digest}"
                )

        for entry in commit.entries:
            try:
                content = self._content_store.get(entry.digest)
            except ObjectNotFoundError as e:
                raise CorruptRepositoryError(
                    f"Commit {commit.id} references missing object {entry.digest}"
                ) from e

            target = self._index_service.absolute_path(entry.path)
            try:
                if target.is_file() or target.is_symlink():
                    target.unlink()
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(content)
            except OSError as e:
                raise RepositoryIOError(f"Failed to restore '{entry.path}': {e}") from e
            logger.debug("Restored %s from %s", entry.path, entry.digest)

        logger.info("Checked out commit %s", commit.id)
        return commit
