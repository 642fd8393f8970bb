"""History domain entities."""

import hashlib
import json
from dataclasses import dataclass
from datetime import datetime

from svcs.history.domain.value_objects import FileEntry


@dataclass(frozen=True)
class Commit:
    """Commit entity referencing a snapshot of file digests."""

    id: str
    parent_id: str | None
    author: str
    message: str
    timestamp: datetime
    entries: tuple[FileEntry, ...]

    @staticmethod
    def derive_id(
        parent_id: str | None,
        author: str,
        message: str,
        timestamp: datetime,
        entries: tuple[FileEntry, ...],
    ) -> str:
        """
        Derive a commit id from everything the commit records.

        The fields are serialized as canonical JSON and hashed with SHA-256,
        so the id of each commit covers its parent's id.

        Returns:
            Lowercase hex digest
        """
        payload = json.dumps(
            {
                "parent": parent_id,
                "author": author,
                "message": message,
                "timestamp": timestamp.isoformat(),
                "entries": [[entry.path, entry.digest] for entry in entries],
            },
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    @classmethod
    def create(
        cls,
        parent_id: str | None,
        author: str,
        message: str,
        timestamp: datetime,
        entries: tuple[FileEntry, ...],
    ) -> "Commit":
        """Build a commit whose id is derived from its content."""
        commit_id = cls.derive_id(parent_id, author, message, timestamp, entries)
        return cls(
            id=commit_id,
            parent_id=parent_id,
            author=author,
            message=message,
            timestamp=timestamp,
            entries=entries,
        )

    def has_valid_id(self) -> bool:
        """Check that the stored id matches the recorded fields."""
        return self.id == self.derive_id(
            self.parent_id, self.author, self.message, self.timestamp, self.entries
        )

    def digest_for(self, path: str) -> str | None:
        """Return the digest recorded for ``path``, or None if it is not in the snapshot."""
        for entry in self.entries:
            if entry.path == path:
                return entry.digest
        return None
