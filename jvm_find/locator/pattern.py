"""Escaped glob patterns rooted at a literal base directory."""

import glob
import os
from pathlib import Path

from ..common.errors import InvalidSearchName, PathNotUTF8
from ..common.pydantic import FrozenBaseModel

RECURSIVE = "**"
WILDCARD = "*"


def escape_path(path: Path) -> str:
    """Escape a base path so glob metacharacters in it are matched literally."""
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as err:
        raise PathNotUTF8(path) from err
    return glob.escape(text)


def escape_literal(name: str) -> tuple[str, ...]:
    """Escape a relative name into literal pattern segments, one per path component."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as err:
        raise PathNotUTF8(name) from err
    parts = [part for part in name.replace(os.sep, "/").split("/") if part]
    if not parts:
        raise InvalidSearchName(name)
    return tuple(glob.escape(part) for part in parts)


class SearchPattern(FrozenBaseModel):
    """A glob search below a literal base directory.

    Only the segments are pattern syntax. A trailing ``/`` in ``text`` (``dir_only``)
    restricts matches to directories.
    """

    base: Path
    escaped_base: str
    segments: tuple[str, ...]
    dir_only: bool = False

    @classmethod
    def build(cls, base: Path, *segments: str, dir_only: bool = False) -> "SearchPattern":
        """Build a pattern, failing before any filesystem access if ``base`` is not representable."""
        return cls(base=base, escaped_base=escape_path(base), segments=tuple(segments), dir_only=dir_only)

    @property
    def text(self) -> str:
        """The full escaped glob expression, for display only.

        The engine walks from the literal ``base`` and only matches ``segments``; this string is
        never evaluated.
        """
        text = "/".join((self.escaped_base.rstrip("/\\"), *self.segments))
        return text + "/" if self.dir_only else text
