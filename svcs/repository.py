"""Repository handle wiring storage and services for one working tree."""

import logging
from dataclasses import dataclass

from svcs.history.repositories.implementations import JsonLinesCommitLogRepository
from svcs.history.services.change_detector import ChangeDetector
from svcs.history.services.checkout_service import CheckoutService
from svcs.history.services.commit_service import CommitService
from svcs.objects.repositories.implementations import FileSystemContentStore
from svcs.objects.repositories.interfaces import ContentStoreRepository
from svcs.settings.domain.value_objects import RepositorySettings
from svcs.settings.repositories.implementations import TextConfigRepository
from svcs.settings.services.config_service import ConfigService
from svcs.shared.errors import RepositoryIOError
from svcs.staging.repositories.implementations import JsonIndexRepository
from svcs.staging.services.index_service import IndexService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository:
    """Explicit handle on one repository, passed to every operation."""

    settings: RepositorySettings
    content_store: ContentStoreRepository
    index_service: IndexService
    commit_service: CommitService
    checkout_service: CheckoutService
    config_service: ConfigService

    @classmethod
    def prepare(cls, settings: RepositorySettings) -> "Repository":
        """
        Create the repository layout if needed and wire the services.

        Preparing an existing repository leaves its content untouched.

        Args:
            settings: Locations of the working tree and metadata directory

        Returns:
            Repository handle

        Raises:
            RepositoryIOError: If the metadata directory cannot be created
        """
        try:
            settings.objects_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RepositoryIOError(f"Failed to prepare {settings.repo_dir}: {e}") from e
        logger.debug("Using repository at %s", settings.repo_dir)

        content_store = FileSystemContentStore(settings.objects_dir)
        index_service = IndexService(
            JsonIndexRepository(settings.index_file), settings.work_dir, settings.repo_dir
        )
        commit_service = CommitService(
            content_store=content_store,
            commit_log=JsonLinesCommitLogRepository(settings.log_file),
            index_service=index_service,
            change_detector=ChangeDetector(index_service),
        )
        return cls(
            settings=settings,
            content_store=content_store,
            index_service=index_service,
            commit_service=commit_service,
            checkout_service=CheckoutService(commit_service, content_store, index_service),
            config_service=ConfigService(TextConfigRepository(settings.config_file)),
        )
