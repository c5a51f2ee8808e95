"""Recursive glob evaluation that surfaces filesystem errors.

The standard library's ``glob`` silently skips directories it cannot read. A partial
result would be worse than a visible failure here, so enumeration errors are raised as
``GlobError``. Entries are visited depth first in name order; ``**`` matches zero or more
directories and does not descend through symlinked directories.
"""

import os
from collections.abc import Iterator
from fnmatch import fnmatchcase
from pathlib import Path

from loguru import logger

from ..common.errors import GlobError
from .pattern import RECURSIVE, SearchPattern


def iglob(pattern: SearchPattern) -> Iterator[Path]:
    """Lazily yield every path matching the pattern."""
    logger.debug("globbing {!r}", pattern.text)
    return _select(pattern.base, pattern.segments, pattern.dir_only)


def _scan(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as err:
        raise GlobError(directory, err) from err


def _is_dir(entry: os.DirEntry[str], follow_symlinks: bool = True) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError as err:
        raise GlobError(Path(entry.path), err) from err


def _select(directory: Path, segments: tuple[str, ...], dir_only: bool) -> Iterator[Path]:
    if not segments:
        yield directory
        return

    head, rest = segments[0], segments[1:]
    if head == RECURSIVE:
        yield from _select(directory, rest, dir_only)
        for entry in _scan(directory):
            if _is_dir(entry, follow_symlinks=False):
                yield from _select(Path(entry.path), segments, dir_only)
        return

    for entry in _scan(directory):
        if not fnmatchcase(entry.name, head):
            continue
        if (rest or dir_only) and not _is_dir(entry):
            continue
        yield from _select(Path(entry.path), rest, dir_only)
