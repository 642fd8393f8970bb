"""Change detection between the staged files and head."""

from svcs.history.domain.entities import Commit
from svcs.history.domain.value_objects import ChangeReport
from svcs.objects.domain.value_objects import compute_digest
from svcs.staging.services.index_service import IndexService


class ChangeDetector:
    """Decides whether the staged files would produce a new snapshot.

    Paths are hashed without being written to the content store. A staged
    path absent from head counts as changed; paths that head records but the
    index no longer stages are ignored, since untracking is not recorded.
    """

    def __init__(self, index_service: IndexService) -> None:
        self._index_service = index_service

    def detect(self, head: Commit | None) -> ChangeReport:
        """
        Compare every staged path against head.

        Args:
            head: Most recent commit, or None before the first commit

        Returns:
            ChangeReport listing changed paths in lexicographic order

        Raises:
            MissingFileError: If a staged path is no longer a regular file
        """
        changed: list[str] = []
        for path in self._index_service.list():
            digest = compute_digest(self._index_service.read_staged(path))
            recorded = head.digest_for(path) if head is not None else None
            if digest != recorded:
                changed.append(path)
        return ChangeReport(changed_paths=tuple(changed))
