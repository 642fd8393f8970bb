"""Atomic replace-on-write for persisted repository files."""

import logging
import os
import tempfile
from pathlib import Path

from svcs.shared.errors import RepositoryIOError

logger = logging.getLogger(__name__)


def write_atomic(target: Path, data: bytes) -> None:
    """
    Replace ``target`` with ``data`` so readers never observe a partial file.

    The bytes are written to a temporary file in the destination directory,
    flushed to disk, then renamed over the target.

    Args:
        target: File to create or replace
        data: Full new content

    Raises:
        RepositoryIOError: If the write or the rename fails
    """
    tmp_fd, tmp_path = tempfile.mkstemp(
        dir=str(target.parent), prefix=f".{target.name}_", suffix=".tmp"
    )
    try:
        with os.fdopen(tmp_fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, str(target))
        logger.debug("Wrote %d bytes to %s", len(data), target)
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise RepositoryIOError(f"Failed to write {target}: {e}") from e


def write_text_atomic(target: Path, text: str) -> None:
    """Encode ``text`` as UTF-8 and write it with :func:`write_atomic`."""
    write_atomic(target, text.encode("utf-8"))
