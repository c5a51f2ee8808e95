"""Java executable probe interface for dependency injection."""

import subprocess
from abc import ABC, abstractmethod

from ..common.errors import JavaExecutionError
from ..common.pydantic import FrozenBaseModel


class ProbeOutput(FrozenBaseModel):
    """Text captured from a finished java process."""

    stdout: str
    stderr: str


class JavaProbe(ABC):
    """Runs a java command and captures what it prints."""

    @abstractmethod
    def run(self, command: list[str]) -> ProbeOutput:
        """Run the command to completion and return its output.

        Raises ``JavaExecutionError`` if the executable cannot be launched.
        """


class SubprocessJavaProbe(JavaProbe):
    """Probe implementation using subprocess.run."""

    def run(self, command: list[str]) -> ProbeOutput:
        """Run the command and decode its output, replacing invalid bytes."""
        try:
            result = subprocess.run(command, capture_output=True, check=False)
        except OSError as err:
            raise JavaExecutionError(command[0], err) from err
        return ProbeOutput(
            stdout=result.stdout.decode("utf-8", errors="replace"),
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )
