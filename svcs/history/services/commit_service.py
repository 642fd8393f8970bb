"""Commit service for recording and reading history."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from svcs.history.domain.entities import Commit
from svcs.history.domain.value_objects import ChangeReport, FileEntry
from svcs.history.repositories.interfaces import CommitLogRepository
from svcs.history.services.change_detector import ChangeDetector
from svcs.objects.domain.value_objects import compute_digest
from svcs.objects.repositories.interfaces import ContentStoreRepository
from svcs.shared.errors import (
    CommitNotFoundError,
    CorruptRepositoryError,
    EmptyMessageError,
    MissingIdentityError,
    NothingToCommitError,
)
from svcs.staging.services.index_service import IndexService

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommitService:
    """Service for creating commits and querying the commit graph."""

    def __init__(
        self,
        content_store: ContentStoreRepository,
        commit_log: CommitLogRepository,
        index_service: IndexService,
        change_detector: ChangeDetector,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initialize CommitService.

        Args:
            content_store: Store receiving the staged file contents
            commit_log: Repository persisting commit records
            index_service: Service providing the staged paths
            change_detector: Detector deciding whether a commit is needed
            clock: Source of commit timestamps
        """
        self._content_store = content_store
        self._commit_log = commit_log
        self._index_service = index_service
        self._change_detector = change_detector
        self._clock = clock

    def commit(self, author: str, message: str) -> Commit:
        """
        Snapshot every staged file into a new commit.

        When any staged path differs from head, all staged paths are recorded,
        not only the changed ones: a commit is a full snapshot. The first
        commit is always created, even when nothing is staged.

        Args:
            author: Configured username
            message: Commit message

        Returns:
            The new head commit

        Raises:
            EmptyMessageError: If the message is blank
            MissingIdentityError: If the author is blank
            NothingToCommitError: If a head exists and no staged path differs from it
            MissingFileError: If a staged path is no longer a regular file
        """
        if not message or not message.strip():
            raise EmptyMessageError()
        if not author or not author.strip():
            raise MissingIdentityError()

        head = self.head()
        if head is not None and not self._change_detector.detect(head).is_dirty:
            raise NothingToCommitError()

        entries = tuple(
            FileEntry(
                path=path,
                digest=self._content_store.put(self._index_service.read_staged(path)),
            )
            for path in self._index_service.list()
        )
        commit = Commit.create(
            parent_id=head.id if head is not None else None,
            author=author,
            message=message,
            timestamp=self._clock(),
            entries=entries,
        )
        self._commit_log.append(commit)
        logger.info("Created commit %s with %d file(s)", commit.id, len(entries))
        return commit

    def status(self) -> ChangeReport:
        """Report which staged paths differ from head."""
        return self._change_detector.detect(self.head())

    def head(self) -> Commit | None:
        """Return the most recent commit, or None if history is empty."""
        commits = self._commit_log.list_commits()
        return commits[-1] if commits else None

    def log(self) -> tuple[Commit, ...]:
        """Return every commit, newest first."""
        return tuple(reversed(self._commit_log.list_commits()))

    def resolve(self, commit_id: str) -> Commit:
        """
        Look up a commit by its full id.

        Args:
            commit_id: Exact commit id

        Returns:
            The matching commit

        Raises:
            CommitNotFoundError: If no commit has this id
        """
        for commit in self._commit_log.list_commits():
            if commit.id == commit_id:
                return commit
        raise CommitNotFoundError(commit_id)

    def verify(self) -> int:
        """
        Check every commit and every object it references.

        Commit ids and the parent chain are checked while the log is replayed;
        each referenced blob must exist and hash back to its digest.

        Returns:
            Number of commits checked

        Raises:
            CorruptRepositoryError: On the first inconsistency found
        """
        commits = self._commit_log.list_commits()
        checked: set[str] = set()
        for commit in commits:
            for entry in commit.entries:
                if entry.digest in checked:
                    continue
                if not self._content_store.contains(entry.digest):
                    raise CorruptRepositoryError(
                        f"Commit {commit.id} references missing object {entry.digest} "
                        f"for '{entry.path}'"
                    )
                if compute_digest(self._content_store.get(entry.digest)) != entry.digest:
                    raise CorruptRepositoryError(
                        f"Object {entry.digest} does not match its digest"
                    )
                checked.add(entry.digest)
        return len(commits)
