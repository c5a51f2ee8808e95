"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from jvm_find.common.pydantic import JavaHome


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def jdk_home(temp_workspace: Path) -> JavaHome:
    """Build a fake JDK layout with headers, executables and native libraries."""
    root = temp_workspace / "jdk-17.0.1"
    for folder in ("bin", "include/linux", "include/win32", "lib/server", "bin/server"):
        (root / folder).mkdir(parents=True)
    (root / "bin" / "java").write_text("")
    (root / "include" / "jni.h").write_text("")
    (root / "include" / "linux" / "jni_md.h").write_text("")
    (root / "include" / "win32" / "jni_md.h").write_text("")
    (root / "lib" / "server" / "libjvm.so").write_text("")
    (root / "bin" / "server" / "jvm.dll").write_text("")
    return JavaHome(path=root)


@pytest.fixture
def jre_home(temp_workspace: Path) -> JavaHome:
    """Build a fake JRE layout without headers."""
    root = temp_workspace / "jre1.8.0_291"
    (root / "lib" / "amd64" / "server").mkdir(parents=True)
    (root / "lib" / "amd64" / "server" / "libjvm.so").write_text("")
    return JavaHome(path=root)
