"""Value objects for the staging domain."""

from pathlib import PurePosixPath, PureWindowsPath


def is_work_tree_path(path: str) -> bool:
    """
    Check whether a stored path stays inside the working tree.

    Stored paths are relative POSIX paths in normal form, without ``.`` or
    ``..`` components and without drive letters.

    Args:
        path: Path as recorded in the index or the commit log

    Returns:
        True if the path can be joined to the working tree safely
    """
    if not path or "\\" in path or "\x00" in path:
        return False
    posix = PurePosixPath(path)
    if not posix.parts or posix.is_absolute() or PureWindowsPath(path).drive:
        return False
    if any(part in {".", ".."} for part in posix.parts):
        return False
    return posix.as_posix() == path
