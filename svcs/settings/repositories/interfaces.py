"""Repository interfaces for user configuration."""

from abc import ABC, abstractmethod


class ConfigRepository(ABC):
    """Interface for the persisted username."""

    @abstractmethod
    def read_username(self) -> str | None:
        """
        Read the configured username.

        Returns:
            The username, or None if it was never set
        """
        ...

    @abstractmethod
    def write_username(self, username: str) -> None:
        """
        Persist the username.

        Args:
            username: Non-blank username
        """
        ...
