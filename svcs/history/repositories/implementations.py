"""JSON Lines implementation of the commit log."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from svcs.history.domain.entities import Commit
from svcs.history.domain.value_objects import FileEntry
from svcs.history.repositories.interfaces import CommitLogRepository
from svcs.objects.domain.value_objects import is_digest
from svcs.shared.atomic_write import write_text_atomic
from svcs.shared.errors import CorruptRepositoryError, RepositoryIOError
from svcs.staging.domain.value_objects import is_work_tree_path

logger = logging.getLogger(__name__)


class JsonLinesCommitLogRepository(CommitLogRepository):
    """Commit log stored as one JSON object per line, oldest first.

    JSON string escaping keeps every record on a single line whatever the
    commit message contains, so records can never bleed into each other.
    """

    RECORD_KEYS = frozenset({"id", "parent", "author", "message", "timestamp", "entries"})

    def __init__(self, log_file: Path) -> None:
        """
        Initialize the commit log repository.

        Args:
            log_file: File holding the JSON Lines records
        """
        self._log_file = log_file
        self._commits: tuple[Commit, ...] | None = None

    def list_commits(self) -> tuple[Commit, ...]:
        """
        Read the whole history.

        Returns:
            Tuple of commits ordered from oldest to newest

        Raises:
            CorruptRepositoryError: If a record is truncated, malformed, carries
                an id that does not match its content, or breaks the parent chain
        """
        if self._commits is None:
            self._commits = self._replay()
        return self._commits

    def append(self, commit: Commit) -> None:
        """
        Persist a new commit after the current head.

        The whole log is rewritten through an atomic replace.

        Args:
            commit: Commit whose parent is the current head

        Raises:
            CorruptRepositoryError: If the commit's parent is not the current head
        """
        commits = self.list_commits()
        head_id = commits[-1].id if commits else None
        if commit.parent_id != head_id:
            raise CorruptRepositoryError(
                f"Commit {commit.id} has parent {commit.parent_id}, expected {head_id}"
            )

        lines = [self._serialize(existing) for existing in commits]
        lines.append(self._serialize(commit))
        write_text_atomic(self._log_file, "".join(line + "\n" for line in lines))
        self._commits = commits + (commit,)
        logger.debug("Appended commit %s to %s", commit.id, self._log_file)

    def _replay(self) -> tuple[Commit, ...]:
        if not self._log_file.exists():
            return ()
        try:
            raw = self._log_file.read_text(encoding="utf-8")
        except OSError as e:
            raise RepositoryIOError(f"Failed to read commit log {self._log_file}: {e}") from e
        except UnicodeDecodeError as e:
            raise CorruptRepositoryError(f"Commit log is not valid UTF-8: {e}") from e

        if raw and not raw.endswith("\n"):
            raise CorruptRepositoryError("Commit log ends with a truncated record")

        commits: list[Commit] = []
        for line_number, line in enumerate(raw.split("\n"), start=1):
            if not line.strip():
                continue
            commit = self._parse(line, line_number)
            expected_parent = commits[-1].id if commits else None
            if commit.parent_id != expected_parent:
                raise CorruptRepositoryError(
                    f"Commit log line {line_number}: parent {commit.parent_id} "
                    f"does not match previous commit {expected_parent}"
                )
            commits.append(commit)
        return tuple(commits)

    def _parse(self, line: str, line_number: int) -> Commit:
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise CorruptRepositoryError(
                f"Commit log line {line_number} is not valid JSON: {e}"
            ) from e

        if not isinstance(record, dict) or set(record) != self.RECORD_KEYS:
            raise CorruptRepositoryError(f"Commit log line {line_number} has unexpected fields")

        try:
            commit = Commit(
                id=self._require_digest(record["id"]),
                parent_id=(
                    None if record["parent"] is None else self._require_digest(record["parent"])
                ),
                author=self._require_str(record["author"]),
                message=self._require_str(record["message"]),
                timestamp=datetime.fromisoformat(self._require_str(record["timestamp"])),
                entries=self._parse_entries(record["entries"]),
            )
        except (TypeError, ValueError) as e:
            raise CorruptRepositoryError(f"Commit log line {line_number} is malformed: {e}") from e

        if not commit.has_valid_id():
            raise CorruptRepositoryError(
                f"Commit log line {line_number}: id {commit.id} does not match its content"
            )
        return commit

    def _parse_entries(self, raw_entries: Any) -> tuple[FileEntry, ...]:
        if not isinstance(raw_entries, list):
            raise TypeError("entries must be a list")
        entries: list[FileEntry] = []
        for raw_entry in raw_entries:
            if not isinstance(raw_entry, list) or len(raw_entry) != 2:
                raise TypeError("each entry must be a [path, digest] pair")
            path, digest = raw_entry
            if not is_work_tree_path(self._require_str(path)):
                raise ValueError(f"entry path '{path}' escapes the working tree")
            entries.append(
                FileEntry(path=self._require_str(path), digest=self._require_digest(digest))
            )
        return tuple(entries)

    @staticmethod
    def _require_str(value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return value

    @classmethod
    def _require_digest(cls, value: Any) -> str:
        if not is_digest(cls._require_str(value)):
            raise ValueError(f"'{value}' is not a digest")
        return value

    @staticmethod
    def _serialize(commit: Commit) -> str:
        return json.dumps(
            {
                "id": commit.id,
                "parent": commit.parent_id,
                "author": commit.author,
                "message": commit.message,
                "timestamp": commit.timestamp.isoformat(),
                "entries": [[entry.path, entry.digest] for entry in commit.entries],
            },
        )
