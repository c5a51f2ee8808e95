"""Searches for well-known files and folders inside a Java home."""

import stat
from pathlib import Path

from loguru import logger
from more_itertools import first

from ..common.errors import BadJavaHomePath, JavaHomeIOError, NoNativeLibrary
from ..common.natives import NATIVE_LIBRARY_FILENAME
from ..common.pydantic import JavaHome
from .engine import iglob
from .pattern import RECURSIVE, WILDCARD, SearchPattern, escape_literal


def _home_subdirectory(home: JavaHome, name: str) -> Path | None:
    """Return ``home/name`` if it is a directory, None if it does not exist."""
    path = home.path / name
    logger.debug("looking for $JAVA_HOME/{} at {}", name, path)
    try:
        meta = path.stat()
    except FileNotFoundError:
        return None
    except OSError as err:
        raise JavaHomeIOError(path, err) from err
    if not stat.S_ISDIR(meta.st_mode):
        raise BadJavaHomePath(home.path)
    return path


def include_directories(home: JavaHome) -> list[Path] | None:
    """If the JDK is installed, return every include folder needed to load the JNI headers.

    The list starts with ``include`` itself, followed by the platform dependent folders
    below it. Returns None for homes without headers, such as plain JRE installs.
    """
    base = _home_subdirectory(home, "include")
    if base is None:
        return None
    pattern = SearchPattern.build(base, RECURSIVE, WILDCARD, dir_only=True)
    return [base, *iglob(pattern)]


def bin_directory(home: JavaHome) -> Path | None:
    """Return the folder holding the java executables, or None if the home has none."""
    return _home_subdirectory(home, "bin")


def native_library(home: JavaHome, filename: str = NATIVE_LIBRARY_FILENAME) -> Path:
    """Return the JVM's platform-specific native library, suitable for linking with."""
    pattern = SearchPattern.build(home.path, RECURSIVE, *escape_literal(filename))
    # On linux, LD_LIBRARY_PATH may need to include the parent folder for the loader to find it.
    path = first(iglob(pattern), default=None)
    if path is None:
        raise NoNativeLibrary(filename)
    return path


def find_file(home: JavaHome, file: str) -> Path | None:
    """Search for a specific file within the home directory, matching the name literally."""
    pattern = SearchPattern.build(home.path, RECURSIVE, *escape_literal(file))
    return first(iglob(pattern), default=None)


def find_folder(home: JavaHome, folder: str) -> Path | None:
    """Search for a specific folder within the home directory, matching the name literally."""
    pattern = SearchPattern.build(home.path, RECURSIVE, *escape_literal(folder), dir_only=True)
    return first(iglob(pattern), default=None)
