"""Filesystem path helpers."""

import fnmatch
import os
from typing import Iterator


def must_get_file_path(path: str) -> str:
    """Return the absolute form of ``path``, creating the directory if it is missing."""
    abs_path = os.path.abspath(path)
    if not os.path.exists(abs_path):
        os.makedirs(abs_path)
    return abs_path


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything under it in lexical pre-order, not following links."""
    yield path
    if os.path.islink(path) or not os.path.isdir(path):
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return
    for name in names:
        yield from _walk(os.path.join(path, name))


def find_file_paths(root: str, pattern: str) -> list[str]:
    """Return the paths under ``root`` whose base name matches the glob ``pattern``.

    If ``root`` is a regular file it is returned alone. The root itself
    takes part in matching. Raises ``OSError`` if ``root`` cannot be read.
    """
    info = os.stat(root)
    if os.path.isfile(root) and not os.path.isdir(root) and info.st_mode:
        return [root]
    return [
        found
        for found in _walk(root)
        if fnmatch.fnmatchcase(os.path.basename(os.path.normpath(found)), pattern)
    ]


def get_root_path(realpath: str) -> str:
    """Return the part of the working directory before ``realpath``.

    If ``realpath`` does not occur in the working directory the working
    directory is returned; if it occurs at the very start, ``"/"``.
    """
    current = os.getcwd()
    start = current.find(realpath)
    if start == -1:
        return current
    if start == 0:
        return "/"
    return current[: start - 1]