"""JSON file implementation of the staging index."""

import json
from pathlib import Path

from svcs.shared.atomic_write import write_text_atomic
from svcs.shared.errors import CorruptRepositoryError, RepositoryIOError
from svcs.staging.domain.value_objects import is_work_tree_path
from svcs.staging.repositories.interfaces import IndexRepository


class JsonIndexRepository(IndexRepository):
    """Index persisted as a sorted JSON array of paths."""

    def __init__(self, index_file: Path) -> None:
        """
        Initialize the index repository.

        Args:
            index_file: File holding the JSON array
        """
        self._index_file = index_file

    def load(self) -> frozenset[str]:
        """
        Read the staged paths.

        Returns:
            Set of working-tree relative paths, empty if the index file is missing

        Raises:
            CorruptRepositoryError: If the file is not a UTF-8 JSON array of
                working-tree relative paths
        """
        if not self._index_file.exists():
            return frozenset()
        try:
            raw = self._index_file.read_text(encoding="utf-8")
        except OSError as e:
            raise RepositoryIOError(f"Failed to read index {self._index_file}: {e}") from e
        except UnicodeDecodeError as e:
            raise CorruptRepositoryError(f"Index file is not valid UTF-8: {e}") from e
        if not raw.strip():
            return frozenset()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptRepositoryError(f"Index file is not valid JSON: {e}") from e
        if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
            raise CorruptRepositoryError("Index file must hold a list of paths")
        for path in data:
            if not is_work_tree_path(path):
                raise CorruptRepositoryError(f"Index file holds unsafe path '{path}'")
        return frozenset(data)

    def save(self, paths: frozenset[str]) -> None:
        """
        Replace the persisted set of staged paths.

        Args:
            paths: Full set of working-tree relative paths
        """
        write_text_atomic(self._index_file, json.dumps(sorted(paths), indent=2) + "\n")
