"""Error hierarchy for svcs operations."""


class SvcsError(Exception):
    """Base class for every error raised by svcs."""


class UserInputError(SvcsError, ValueError):
    """Raised when a caller passes an unusable argument."""


class MissingFileError(UserInputError):
    """Raised when a path does not reference an existing regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Can't find '{path}'.")
        self.path = path


class PathOutsideWorkTreeError(UserInputError):
    """Raised when a path resolves outside the working tree or inside the repository dir."""

    def __init__(self, path: str) -> None:
        super().__init__(f"'{path}' is outside the working tree.")
        self.path = path


class EmptyMessageError(UserInputError):
    """Raised when a commit message is blank."""

    def __init__(self) -> None:
        super().__init__("Message was not passed.")


class InvalidSettingsError(UserInputError):
    """Raised when repository settings from the environment are unusable."""


class EmptyUsernameError(UserInputError):
    """Raised when a blank username is configured."""

    def __init__(self) -> None:
        super().__init__("Username cannot be empty.")


class MissingIdentityError(UserInputError):
    """Raised when a commit is attempted without a configured username."""

    def __init__(self) -> None:
        super().__init__("Please, tell me who you are.")


class NothingToCommitError(SvcsError):
    """Raised when the staged snapshot does not differ from head."""

    def __init__(self) -> None:
        super().__init__("Nothing to commit.")


class ObjectNotFoundError(SvcsError):
    """Raised when a digest has no stored object."""

    def __init__(self, digest: str) -> None:
        super().__init__(f"Object {digest} not found.")
        self.digest = digest


class CommitNotFoundError(SvcsError):
    """Raised when a commit id matches no stored commit."""

    def __init__(self, commit_id: str) -> None:
        super().__init__("Commit does not exist.")
        self.commit_id = commit_id


class CorruptRepositoryError(SvcsError):
    """Raised when persisted state violates a repository invariant."""


class RepositoryIOError(SvcsError):
    """Raised when the filesystem fails underneath an operation."""
