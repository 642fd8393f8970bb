"""
Tests for repository settings and the username configuration.
"""

import pytest

from svcs.repository import Repository
from svcs.settings.domain.value_objects import RepositorySettings
from svcs.shared.errors import (
    CorruptRepositoryError,
    EmptyUsernameError,
    InvalidSettingsError,
)


class TestRepositorySettings:
    """Test suite for settings resolution."""

    def test_defaults_to_vcs_dir(self, tmp_path):
        settings = RepositorySettings.from_env(tmp_path)

        assert settings.repo_dir == tmp_path.resolve() / "vcs"
        assert settings.log_file.name == "log.jsonl"

    def test_env_overrides_repo_dir_name(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SVCS_DIR", ".svcs")

        assert RepositorySettings.from_env(tmp_path).repo_dir_name == ".svcs"

    def test_dotenv_file_is_loaded(self, tmp_path):
        (tmp_path / ".env").write_text("SVCS_DIR=from_dotenv\n")

        assert RepositorySettings.from_env(tmp_path).repo_dir_name == "from_dotenv"

    def test_work_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SVCS_WORK_DIR", str(tmp_path))

        assert RepositorySettings.from_env().work_dir == tmp_path.resolve()

    @pytest.mark.parametrize("name", ["", "a/b", ".."])
    def test_invalid_repo_dir_name_raises(self, tmp_path, name):
        with pytest.raises(InvalidSettingsError):
            RepositorySettings(work_dir=tmp_path, repo_dir_name=name)

    def test_prepare_is_idempotent(self, tmp_path):
        settings = RepositorySettings(work_dir=tmp_path)
        Repository.prepare(settings).config_service.set_username("alice")

        reopened = Repository.prepare(settings)

        assert settings.objects_dir.is_dir()
        assert reopened.config_service.get_username() == "alice"


class TestConfigService:
    """Test suite for the username."""

    def test_username_unset_by_default(self, repository):
        assert repository.config_service.get_username() is None

    def test_set_username_strips_and_persists(self, repository):
        assert repository.config_service.set_username("  alice \n") == "alice"
        assert repository.settings.config_file.read_text() == "alice"
        assert repository.config_service.get_username() == "alice"

    def test_blank_username_raises(self, repository):
        with pytest.raises(EmptyUsernameError):
            repository.config_service.set_username("   ")

    def test_non_utf8_config_raises_corrupt(self, repository):
        repository.settings.config_file.write_bytes(b"\xff\xfealice")

        with pytest.raises(CorruptRepositoryError, match="UTF-8"):
            repository.config_service.get_username()
