"""Errors raised while locating a Java installation."""

from pathlib import Path


class JavaFindError(Exception):
    """Base class for all jvm-find errors."""


class JavaExecutionError(JavaFindError):
    """The java executable could not be started."""

    def __init__(self, executable: str, error: OSError):
        """Store the executable and the launch failure."""
        super().__init__(f"Error running Java executable {executable!r} on system path: {error}")
        self.executable = executable
        self.error = error


class JavaHomeIOError(JavaFindError):
    """A home path could not be inspected for a reason other than it not existing."""

    def __init__(self, path: Path, error: OSError):
        """Store the inaccessible path and the underlying error."""
        super().__init__(f"Error accessing JavaHome path {path}: {error}")
        self.path = path
        self.error = error


class BadJavaHomePath(JavaFindError):
    """The home path points to something other than a usable directory layout."""

    def __init__(self, path: Path):
        """Store the offending home path."""
        super().__init__(
            "The JavaHome path (possibly obtained from JAVA_HOME environment variable) contained bad data. "
            f"It could have been outdated, or pointing to something other than a directory. (bad path: {path})"
        )
        self.path = path


class NoJavaHomeProperty(JavaFindError):
    """The java executable ran but did not report a java.home property."""

    def __init__(self) -> None:
        """Set the error message."""
        super().__init__("The installed java executable did not report a `java.home` property")


class PathNotUTF8(JavaFindError):
    """A path cannot be represented as text for a glob pattern."""

    def __init__(self, path: Path | str):
        """Store the unrepresentable path."""
        super().__init__(f"Attempted to search with a path that is not valid UTF-8: {path!r}")
        self.path = path


class GlobError(JavaFindError):
    """The filesystem search failed while enumerating a directory."""

    def __init__(self, path: Path, error: OSError):
        """Store the directory being read and the underlying error."""
        super().__init__(f"Error while globbing JAVA_HOME at {path}: {error}")
        self.path = path
        self.error = error


class NoNativeLibrary(JavaFindError):
    """No native library file exists anywhere under the home directory."""

    def __init__(self, filename: str):
        """Store the filename that was searched for."""
        super().__init__(f"Unable to find native library file {filename!r} within JAVA_HOME")
        self.filename = filename


class InvalidSearchName(JavaFindError, ValueError):
    """A searched name has no path component to match."""

    def __init__(self, name: str):
        """Store the rejected name."""
        super().__init__(f"Cannot search for an empty name: {name!r}")
        self.name = name
