"""Repository interfaces for the staging index."""

from abc import ABC, abstractmethod


class IndexRepository(ABC):
    """Interface for the durable set of staged paths."""

    @abstractmethod
    def load(self) -> frozenset[str]:
        """
        Read the staged paths.

        Returns:
            Set of working-tree relative paths, empty if nothing is staged
        """
        ...

    @abstractmethod
    def save(self, paths: frozenset[str]) -> None:
        """
        Replace the persisted set of staged paths.

        Args:
            paths: Full set of working-tree relative paths
        """
        ...
