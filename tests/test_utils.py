"""Test utilities and fake implementations."""

from jvm_find.common.errors import JavaExecutionError
from jvm_find.resolver.probe import JavaProbe, ProbeOutput

JDK17_SETTINGS = """\
Property settings:
    file.encoding = UTF-8
    java.class.path =
    java.class.version = 61.0
    java.home = /opt/jdk17
    java.io.tmpdir = /tmp
    java.vendor = Eclipse Adoptium
    os.name = Linux

openjdk version "17.0.1" 2021-10-19
OpenJDK Runtime Environment Temurin-17.0.1+12 (build 17.0.1+12)
OpenJDK 64-Bit Server VM Temurin-17.0.1+12 (build 17.0.1+12, mixed mode, sharing)
"""


class FakeJavaProbe(JavaProbe):
    """Fake probe returning canned output and recording the commands it was given."""

    def __init__(self, stdout: str = "", stderr: str = JDK17_SETTINGS):
        """Store the output every run will report."""
        self.output = ProbeOutput(stdout=stdout, stderr=stderr)
        self.commands: list[list[str]] = []

    @property
    def calls(self) -> int:
        """Number of times the probe was run."""
        return len(self.commands)

    def run(self, command: list[str]) -> ProbeOutput:
        """Record the command and return the canned output."""
        self.commands.append(command)
        return self.output


class FailingJavaProbe(JavaProbe):
    """Fake probe behaving as if no java executable is installed."""

    def run(self, command: list[str]) -> ProbeOutput:
        """Fail to launch the command."""
        raise JavaExecutionError(command[0], FileNotFoundError(2, "No such file or directory", command[0]))
