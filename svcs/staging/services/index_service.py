"""Index service for staging files."""

import logging
from pathlib import Path

from svcs.shared.errors import MissingFileError, PathOutsideWorkTreeError, RepositoryIOError
from svcs.staging.domain.value_objects import is_work_tree_path
from svcs.staging.repositories.interfaces import IndexRepository

logger = logging.getLogger(__name__)


class IndexService:
    """Service for staging working-tree files for the next commit."""

    def __init__(self, index_repository: IndexRepository, work_dir: Path, repo_dir: Path) -> None:
        """
        Initialize IndexService.

        Args:
            index_repository: Repository persisting the staged paths
            work_dir: Root of the working tree
            repo_dir: Repository metadata directory, which can never be staged
        """
        self._index_repository = index_repository
        self._work_dir = work_dir.resolve()
        self._repo_dir = repo_dir.resolve()

    def add(self, path: str) -> str:
        """
        Stage a file.

        Args:
            path: Path to a regular file, absolute or relative to the working tree

        Returns:
            The normalized working-tree relative path that was staged

        Raises:
            MissingFileError: If the path is not an existing regular file
            PathOutsideWorkTreeError: If the path escapes the working tree
        """
        relative = self.normalize(path)
        if not self.absolute_path(relative).is_file():
            raise MissingFileError(path)

        staged = self._index_repository.load()
        if relative in staged:
            return relative
        self._index_repository.save(staged | {relative})
        logger.info("Staged %s", relative)
        return relative

    def list(self) -> list[str]:
        """Return staged paths in lexicographic order."""
        return sorted(self._index_repository.load())

    def normalize(self, path: str) -> str:
        """
        Convert a user supplied path to a working-tree relative POSIX path.

        Args:
            path: Path as typed by the user

        Returns:
            Relative POSIX path

        Raises:
            MissingFileError: If the path is blank
            PathOutsideWorkTreeError: If the path escapes the working tree
                or points into the repository directory
        """
        stripped = path.strip()
        if not stripped:
            raise MissingFileError(path)

        candidate = Path(stripped)
        if not candidate.is_absolute():
            candidate = self._work_dir / candidate
        resolved = candidate.resolve()

        if not resolved.is_relative_to(self._work_dir) or resolved == self._work_dir:
            raise PathOutsideWorkTreeError(path)
        if resolved.is_relative_to(self._repo_dir):
            raise PathOutsideWorkTreeError(path)
        relative = resolved.relative_to(self._work_dir).as_posix()
        if not is_work_tree_path(relative):
            raise PathOutsideWorkTreeError(path)
        return relative

    def absolute_path(self, relative: str) -> Path:
        """Return the working-tree location of a staged relative path."""
        return self._work_dir / relative

    def read_staged(self, relative: str) -> bytes:
        """
        Read the current content of a staged file.

        Args:
            relative: Working-tree relative path from the index

        Returns:
            File bytes

        Raises:
            MissingFileError: If the path is no longer a regular file
            RepositoryIOError: If the file exists but cannot be read
        """
        path = self.absolute_path(relative)
        if not path.is_file():
            raise MissingFileError(relative)
        try:
            return path.read_bytes()
        except OSError as e:
            raise RepositoryIOError(f"Failed to read {relative}: {e}") from e
