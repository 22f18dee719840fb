"""File and directory helpers built on the operating system's file API."""

from __future__ import annotations

import logging
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)


def chdir(path: PathLike) -> bool:
    """Change the working directory to ``path``.

    Returns False, with a logged message, when ``path`` already is the
    working directory or the change fails.
    """
    target = os.fspath(path)
    current = get_cwd()
    if current == target:
        logger.warning("Attempting to change to the same directory at path '%s'", current)
        return False
    try:
        os.chdir(target)
    except OSError:
        logger.error("Failed to change directory to path '%s'", target)
        return False
    return True


def get_cwd() -> str | None:
    """Return the current working directory, or None if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return None


def print_cwd() -> None:
    """Log the current working directory."""
    cwd = get_cwd()
    if cwd is None:
        logger.error("Not able to get current working directory!")
    else:
        logger.info("Current working directory: %s", cwd)


def get_file_size(path: PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return os.stat(path).st_size


def read_file_contents(path: PathLike) -> bytes:
    """Return the raw bytes of the file at ``path``."""
    with open(path, "rb") as stream:
        return stream.read()


def read_file_contents_without_raw(path: PathLike) -> str:
    """Return the file at ``path`` as text with CRLF line endings turned into LF."""
    with open(path, "rb") as stream:
        data = stream.read()
    return data.decode("utf-8", errors="replace").replace("\r\n", "\n")


def write_to_file(path: PathLike, contents: str) -> None:
    """Write ``contents`` followed by a newline to ``path``, replacing the file."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(f"{contents}\n")


def does_file_exist(path: PathLike) -> bool:
    """Return True if ``path`` names an existing regular file."""
    return os.path.isfile(path)


def does_dir_exist(path: PathLike) -> bool:
    """Return True if ``path`` names an existing directory."""
    return os.path.isdir(path)