"""Configuration service for the repository user."""

import logging

from svcs.settings.repositories.interfaces import ConfigRepository
from svcs.shared.errors import EmptyUsernameError

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for reading and changing the configured username."""

    def __init__(self, config_repository: ConfigRepository) -> None:
        self._config_repository = config_repository

    def get_username(self) -> str | None:
        """Return the configured username, or None if unset."""
        return self._config_repository.read_username()

    def set_username(self, username: str) -> str:
        """
        Persist a new username.

        Args:
            username: Name to record; surrounding whitespace is dropped

        Returns:
            The stored username

        Raises:
            EmptyUsernameError: If the name is blank
        """
        cleaned = username.strip()
        if not cleaned:
            raise EmptyUsernameError()
        self._config_repository.write_username(cleaned)
        logger.info("Username set to %s", cleaned)
        return cleaned
