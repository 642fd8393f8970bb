#!/usr/bin/env python3
"""
Command-line interface for svcs:
- config [username]: show or set the username
- add [path]: list tracked files or stage a file
- log: show the commit history, newest first
- commit <message>: snapshot the staged files
- checkout <commit-id>: restore the files recorded by a commit
- status: show staged files that differ from the last commit
- verify: check commit ids and stored objects
"""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from svcs.repository import Repository
from svcs.settings.domain.value_objects import RepositorySettings
from svcs.shared.errors import (
    CommitNotFoundError,
    NothingToCommitError,
    RepositoryIOError,
    SvcsError,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_IO_FAILURE = 2

COMMAND_WIDTH = 9

Handler = Callable[[Repository, str | None], int]


def config_command(repository: Repository, username: str | None) -> int:
    """Print the configured username, or set it when one is given."""
    if username is None:
        current = repository.config_service.get_username()
        if current is None:
            print("Please, tell me who you are.")
        else:
            print(f"The username is {current}.")
        return EXIT_OK

    stored = repository.config_service.set_username(username)
    print(f"The username is {stored}.")
    return EXIT_OK


def add_command(repository: Repository, path: str | None) -> int:
    """List the tracked files, or stage a file when a path is given."""
    if path is None:
        tracked = repository.index_service.list()
        if not tracked:
            print(COMMANDS["add"][0])
        else:
            print("Tracked files:")
            for tracked_path in tracked:
                print(tracked_path)
        return EXIT_OK

    staged = repository.index_service.add(path)
    print(f"The file '{staged}' is tracked.")
    return EXIT_OK


def log_command(repository: Repository, _: str | None) -> int:
    """Print the commit history, newest first."""
    commits = repository.commit_service.log()
    if not commits:
        print("No commits yet.")
        return EXIT_OK

    for commit in commits:
        print(f"commit {commit.id}\nAuthor: {commit.author}\n{commit.message}")
        print()
    return EXIT_OK


def commit_command(repository: Repository, message: str | None) -> int:
    """Commit the staged files with the given message."""
    if message is None:
        print("Message was not passed.", file=sys.stderr)
        return EXIT_ERROR

    author = repository.config_service.get_username() or ""
    try:
        repository.commit_service.commit(author, message)
    except NothingToCommitError:
        print("Nothing to commit.")
        return EXIT_OK
    print("Changes are committed.")
    return EXIT_OK


def checkout_command(repository: Repository, commit_id: str | None) -> int:
    """Restore the files recorded by a commit."""
    if commit_id is None:
        print("Commit id was not passed.", file=sys.stderr)
        return EXIT_ERROR

    try:
        commit = repository.checkout_service.checkout(commit_id)
    except CommitNotFoundError:
        print("Commit does not exist.", file=sys.stderr)
        return EXIT_ERROR
    print(f"Switched to commit {commit.id}.")
    return EXIT_OK


def status_command(repository: Repository, _: str | None) -> int:
    """Print the staged files that differ from the last commit."""
    report = repository.commit_service.status()
    if not report.is_dirty:
        print("Nothing to commit.")
        return EXIT_OK

    print("Changes to be committed:")
    for path in report.changed_paths:
        print(path)
    return EXIT_OK


def verify_command(repository: Repository, _: str | None) -> int:
    """Check every commit and every stored object it references."""
    checked = repository.commit_service.verify()
    print(f"Verified {checked} commit(s).")
    return EXIT_OK


COMMANDS: dict[str, tuple[str, Handler]] = {
    "config": ("Get and set a username.", config_command),
    "add": ("Add a file to the index.", add_command),
    "log": ("Show commit logs.", log_command),
    "commit": ("Save changes.", commit_command),
    "checkout": ("Restore a file.", checkout_command),
    "status": ("Show changed files.", status_command),
    "verify": ("Check repository integrity.", verify_command),
}


def print_help() -> None:
    """Print the command table."""
    print("These are SVCS commands:")
    for name, (description, _) in COMMANDS.items():
        print(f"{name:<{COMMAND_WIDTH}} {description}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="svcs",
        description="Minimal content-addressed version control",
        add_help=False,
    )
    parser.add_argument(
        "command",
        type=str,
        nargs="?",
        default=None,
        help="Command to run",
    )
    parser.add_argument(
        "argument",
        type=str,
        nargs="?",
        default=None,
        help="Optional command argument (username, path, message or commit id)",
    )
    parser.add_argument(
        "--help",
        "-h",
        action="store_true",
        help="Show the command table",
    )
    parser.add_argument(
        "--work-dir",
        type=Path,
        default=None,
        help="Working tree root (default: SVCS_WORK_DIR or the current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log repository operations to stderr",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """
    Parse arguments and run one command.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None or args.help:
        print_help()
        return EXIT_OK

    if args.command not in COMMANDS:
        print(f"'{args.command}' is not a SVCS command.", file=sys.stderr)
        return EXIT_ERROR

    _, handler = COMMANDS[args.command]
    try:
        repository = Repository.prepare(RepositorySettings.from_env(args.work_dir))
        return handler(repository, args.argument)
    except RepositoryIOError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_IO_FAILURE
    except SvcsError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_ERROR


def main() -> None:
    """Entry point for the svcs console script."""
    sys.exit(run())


if __name__ == "__main__":
    main()
