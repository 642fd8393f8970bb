"""
Tests for the svcs command-line interface.
"""

import pytest

from svcs.cli import EXIT_ERROR, EXIT_OK, run


@pytest.fixture
def svcs(work_dir):
    """Run the CLI against the test working tree."""

    def _run(*args: str) -> int:
        return run(["--work-dir", str(work_dir), *args])

    return _run


class TestHelp:
    """Test suite for the command table."""

    @pytest.mark.parametrize("argv", [[], ["--help"]])
    def test_prints_command_table(self, capsys, argv):
        assert run(argv) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith("These are SVCS commands:\n")
        assert "config    Get and set a username.\n" in out
        assert "checkout  Restore a file.\n" in out

    def test_unknown_command(self, capsys, svcs):
        assert svcs("push") == EXIT_ERROR

        assert "'push' is not a SVCS command." in capsys.readouterr().err


class TestConfigCommand:
    """Test suite for config."""

    def test_unset_username_prompts(self, capsys, svcs):
        assert svcs("config") == EXIT_OK

        assert capsys.readouterr().out == "Please, tell me who you are.\n"

    def test_set_then_show_username(self, capsys, svcs):
        svcs("config", "alice")
        svcs("config")

        assert capsys.readouterr().out == "The username is alice.\nThe username is alice.\n"


class TestAddCommand:
    """Test suite for add."""

    def test_add_without_tracked_files_prints_description(self, capsys, svcs):
        assert svcs("add") == EXIT_OK

        assert capsys.readouterr().out == "Add a file to the index.\n"

    def test_add_then_list(self, capsys, svcs, write_file):
        write_file("a.txt", "hello")

        svcs("add", "a.txt")
        svcs("add")

        assert capsys.readouterr().out == (
            "The file 'a.txt' is tracked.\nTracked files:\na.txt\n"
        )

    def test_add_missing_file(self, capsys, svcs):
        assert svcs("add", "missing.txt") == EXIT_ERROR

        assert "Can't find 'missing.txt'." in capsys.readouterr().err


class TestCommitWorkflow:
    """Test suite for commit, log, status and checkout."""

    def test_empty_log(self, capsys, svcs):
        assert svcs("log") == EXIT_OK

        assert capsys.readouterr().out == "No commits yet.\n"

    def test_commit_without_message(self, capsys, svcs):
        assert svcs("commit") == EXIT_ERROR

        assert "Message was not passed." in capsys.readouterr().err

    def test_commit_without_username(self, capsys, svcs, write_file):
        write_file("a.txt", "hello")
        svcs("add", "a.txt")

        assert svcs("commit", "first") == EXIT_ERROR

        assert "Please, tell me who you are." in capsys.readouterr().err

    def test_full_workflow(self, capsys, svcs, work_dir, write_file):
        write_file("a.txt", "hello")
        svcs("config", "alice")
        svcs("add", "a.txt")
        assert svcs("commit", "first") == EXIT_OK
        assert svcs("commit", "again") == EXIT_OK
        write_file("a.txt", "world")
        assert svcs("status") == EXIT_OK
        assert svcs("commit", "second") == EXIT_OK
        capsys.readouterr()

        svcs("log")
        blocks = capsys.readouterr().out.split("\n\n")
        assert blocks[-1] == ""
        second_block, first_block = blocks[:2]
        assert second_block.splitlines()[1:] == ["Author: alice", "second"]
        assert first_block.splitlines()[1:] == ["Author: alice", "first"]

        first_id = first_block.splitlines()[0].removeprefix("commit ")
        assert svcs("checkout", first_id) == EXIT_OK
        assert capsys.readouterr().out == f"Switched to commit {first_id}.\n"
        assert (work_dir / "a.txt").read_text() == "hello"

    def test_commit_outputs(self, capsys, svcs, write_file):
        write_file("a.txt", "hello")
        svcs("config", "alice")
        svcs("add", "a.txt")
        capsys.readouterr()

        svcs("commit", "first")
        svcs("commit", "again")

        assert capsys.readouterr().out == "Changes are committed.\nNothing to commit.\n"

    def test_status_lists_changed_paths(self, capsys, svcs, write_file):
        write_file("a.txt", "hello")
        svcs("add", "a.txt")
        capsys.readouterr()

        svcs("status")

        assert capsys.readouterr().out == "Changes to be committed:\na.txt\n"

    def test_checkout_without_id(self, capsys, svcs):
        assert svcs("checkout") == EXIT_ERROR

        assert "Commit id was not passed." in capsys.readouterr().err

    def test_checkout_unknown_commit(self, capsys, svcs):
        assert svcs("checkout", "deadbeef") == EXIT_ERROR

        assert "Commit does not exist." in capsys.readouterr().err

    def test_verify(self, capsys, svcs, write_file):
        write_file("a.txt", "hello")
        svcs("config", "alice")
        svcs("add", "a.txt")
        svcs("commit", "first")
        capsys.readouterr()

        assert svcs("verify") == EXIT_OK

        assert capsys.readouterr().out == "Verified 1 commit(s).\n"


class TestErrorReporting:
    """Test suite for errors surfacing as messages instead of tracebacks."""

    @pytest.mark.parametrize("repo_dir_name", ["a/b", ".."])
    def test_invalid_repo_dir_setting(self, capsys, svcs, monkeypatch, repo_dir_name):
        monkeypatch.setenv("SVCS_DIR", repo_dir_name)

        assert svcs("log") == EXIT_ERROR

        assert "Invalid repository directory name" in capsys.readouterr().err

    def test_corrupt_index_reported(self, capsys, svcs, work_dir):
        svcs("log")
        (work_dir / "vcs" / "index.json").write_bytes(b"\xff\xfe[")
        capsys.readouterr()

        assert svcs("add") == EXIT_ERROR

        assert "Index file is not valid UTF-8" in capsys.readouterr().err

    def test_add_symlink_reports_staged_target(self, capsys, svcs, work_dir, write_file):
        write_file("real.txt", "hello")
        (work_dir / "link.txt").symlink_to(work_dir / "real.txt")

        assert svcs("add", "link.txt") == EXIT_OK

        assert capsys.readouterr().out == "The file 'real.txt' is tracked.\n"
