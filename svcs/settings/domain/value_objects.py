"""Value objects for repository configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from svcs.shared.errors import InvalidSettingsError

DEFAULT_REPO_DIR_NAME = "vcs"


def _load_env_file(work_dir: Path) -> None:
    """Load environment variables from a .env file."""
    env_file = work_dir / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


@dataclass(frozen=True)
class RepositorySettings:
    """Location of the working tree and of the repository metadata inside it.

    Attributes:
        work_dir: Root of the working tree
        repo_dir_name: Name of the metadata directory under ``work_dir``
    """

    work_dir: Path
    repo_dir_name: str = DEFAULT_REPO_DIR_NAME

    def __post_init__(self) -> None:
        """Validate the metadata directory name."""
        name = self.repo_dir_name
        if name in {"", ".", ".."} or Path(name).name != name:
            raise InvalidSettingsError(
                f"Invalid repository directory name '{self.repo_dir_name}'. "
                "It must be a single path component"
            )

    @property
    def repo_dir(self) -> Path:
        return self.work_dir / self.repo_dir_name

    @property
    def objects_dir(self) -> Path:
        return self.repo_dir / "objects"

    @property
    def index_file(self) -> Path:
        return self.repo_dir / "index.json"

    @property
    def log_file(self) -> Path:
        return self.repo_dir / "log.jsonl"

    @property
    def config_file(self) -> Path:
        return self.repo_dir / "config.txt"

    @classmethod
    def from_env(cls, work_dir: Path | None = None) -> "RepositorySettings":
        """
        Build settings from the environment.

        ``SVCS_WORK_DIR`` and ``SVCS_DIR`` override the working tree and the
        metadata directory name; both may be set in a .env file.

        Args:
            work_dir: Explicit working tree, takes precedence over SVCS_WORK_DIR

        Returns:
            RepositorySettings
        """
        base = work_dir if work_dir is not None else Path.cwd()
        _load_env_file(base)

        if work_dir is None and os.getenv("SVCS_WORK_DIR"):
            base = Path(os.environ["SVCS_WORK_DIR"])
        repo_dir_name = os.getenv("SVCS_DIR", DEFAULT_REPO_DIR_NAME)
        return cls(work_dir=base.resolve(), repo_dir_name=repo_dir_name)
