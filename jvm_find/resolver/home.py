"""Java home resolution.

The home is resolved in tiers of increasing cost:

- ``find_home`` trusts a non-empty JAVA_HOME without looking at the filesystem.
- ``find_valid_home`` only accepts JAVA_HOME if it names an existing directory.
- ``find_active_home`` asks the first ``java`` on the executable search path for its
  ``java.home`` property.

Each tier falls back to ``find_active_home``. Nothing is cached: every call reads the
environment, the filesystem and the java process again.
"""

import os
import stat
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from ..common.config import FinderConfig
from ..common.errors import JavaHomeIOError, NoJavaHomeProperty
from ..common.pydantic import JavaHome
from .probe import JavaProbe, SubprocessJavaProbe


def parse_java_home(stdout: str, stderr: str, property_name: str = "java.home") -> Path | None:
    """Extract the home directory from ``java -XshowSettings:properties`` output.

    The first line of stdout, then stderr, mentioning the property wins. Its value is
    whatever follows the first ``=``, stripped. Returns None if no such line exists or
    the line carries no ``=``.
    """
    lines = [*stdout.splitlines(), *stderr.splitlines()]
    line = next((line for line in lines if property_name in line), None)
    if line is None:
        logger.debug("\tnot found")
        return None
    logger.debug("\tfound: {}", line)

    _, sep, value = line.partition("=")
    if not sep:
        return None
    return Path(value.strip())


class HomeResolver:
    """Resolves the Java home from the environment or the active java executable."""

    def __init__(
        self,
        config: FinderConfig | None = None,
        environ: Mapping[str, str] | None = None,
        probe: JavaProbe | None = None,
    ):
        """Initialize the resolver with its environment and process collaborators."""
        self.config = config or FinderConfig()
        self.environ = os.environ if environ is None else environ
        self.probe = probe or SubprocessJavaProbe()

    def env_home(self) -> Path | None:
        """The configured environment variable as a path, or None if unset or empty."""
        value = self.environ.get(self.config.env_var)
        if not value:
            return None
        return Path(value)

    def find_home(self) -> JavaHome:
        """Return the existing JAVA_HOME if it is non-empty, or query the active Java installation."""
        path = self.env_home()
        if path is not None:
            return JavaHome(path=path)
        return self.find_active_home()

    def find_valid_home(self) -> JavaHome:
        """Return JAVA_HOME if it points to a directory, or fall back to the active Java installation.

        Raises ``JavaHomeIOError`` if JAVA_HOME cannot be inspected for any reason other than
        it not existing (permissions, broken filesystem, ...).
        """
        path = self.env_home()
        if path is not None:
            try:
                meta = path.stat()
            except FileNotFoundError:
                logger.debug("{}={} does not exist", self.config.env_var, path)
            except OSError as err:
                raise JavaHomeIOError(path, err) from err
            else:
                if stat.S_ISDIR(meta.st_mode):
                    return JavaHome(path=path)
                logger.debug("{}={} is not a directory", self.config.env_var, path)
        return self.find_active_home()

    def find_active_home(self) -> JavaHome:
        """Query the first ``java`` executable on the system path for its home directory.

        Raises ``JavaExecutionError`` if the executable cannot be run, and
        ``NoJavaHomeProperty`` if it runs but does not report a home.
        """
        # TODO: query the JavaSoft registry keys on Windows before falling back to the executable.
        command = self.config.command
        logger.debug("finding currently active JAVA_HOME location by running {}", " ".join(command))

        output = self.probe.run(command)
        path = parse_java_home(output.stdout, output.stderr, self.config.property_name)
        if path is None:
            raise NoJavaHomeProperty()
        return JavaHome(path=path)


def find_home() -> JavaHome:
    """Return the existing JAVA_HOME if it is non-empty, or query the active Java installation."""
    return HomeResolver().find_home()


def find_valid_home() -> JavaHome:
    """Return JAVA_HOME if it points to a directory, or fall back to the active Java installation."""
    return HomeResolver().find_valid_home()


def find_active_home() -> JavaHome:
    """Query the first ``java`` executable on the system path for its home directory."""
    return HomeResolver().find_active_home()
