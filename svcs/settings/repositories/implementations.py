"""Plain-text implementation of the configuration repository."""

from pathlib import Path

from svcs.settings.repositories.interfaces import ConfigRepository
from svcs.shared.atomic_write import write_text_atomic
from svcs.shared.errors import CorruptRepositoryError, RepositoryIOError


class TextConfigRepository(ConfigRepository):
    """Username stored as the whole content of a UTF-8 text file."""

    def __init__(self, config_file: Path) -> None:
        self._config_file = config_file

    def read_username(self) -> str | None:
        if not self._config_file.exists():
            return None
        try:
            username = self._config_file.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise RepositoryIOError(f"Failed to read {self._config_file}: {e}") from e
        except UnicodeDecodeError as e:
            raise CorruptRepositoryError(f"Config file is not valid UTF-8: {e}") from e
        return username or None

    def write_username(self, username: str) -> None:
        write_text_atomic(self._config_file, username)
