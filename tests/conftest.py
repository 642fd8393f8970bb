"""Shared fixtures for svcs tests."""

from pathlib import Path

import pytest

from svcs.repository import Repository
from svcs.settings.domain.value_objects import RepositorySettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep SVCS_* variables from the developer's shell or .env out of tests."""
    for name in ("SVCS_DIR", "SVCS_WORK_DIR"):
        # setenv first so the variable is removed again on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def work_dir(tmp_path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def repository(work_dir) -> Repository:
    return Repository.prepare(RepositorySettings(work_dir=work_dir))


@pytest.fixture
def write_file(work_dir):
    """Create or overwrite a working-tree file."""

    def _write(relative: str, content: str) -> Path:
        path = work_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
