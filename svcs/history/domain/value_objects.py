"""Value objects for the history domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """A tracked path paired with the digest of its content at commit time."""

    path: str
    digest: str


@dataclass(frozen=True)
class ChangeReport:
    """Outcome of comparing the staged files against head."""

    changed_paths: tuple[str, ...]

    @property
    def is_dirty(self) -> bool:
        """Whether any staged path differs from head."""
        return bool(self.changed_paths)
