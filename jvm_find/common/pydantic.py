"""Pydantic base model."""

import os
from functools import total_ordering
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


@total_ordering
class JavaHome(FrozenBaseModel):
    """A located Java home directory.

    The wrapped path is not guaranteed to be a valid installation (a stale JAVA_HOME,
    a hand-built value, ...). Every consumer has to verify it before trusting it.
    """

    ENV_VAR: ClassVar[str] = "JAVA_HOME"

    path: Path

    def __fspath__(self) -> str:
        """Return the home directory as a filesystem path string."""
        return os.fspath(self.path)

    def __lt__(self, other: object) -> bool:
        """Order homes by their path."""
        if not isinstance(other, JavaHome):
            return NotImplemented
        return self.path < other.path

    def __str__(self) -> str:
        """Display the home directory path."""
        return str(self.path)
