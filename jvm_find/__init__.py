"""Locate a Java installation and the JNI headers and native library inside it."""

from loguru import logger

from .common.errors import (
    BadJavaHomePath,
    GlobError,
    InvalidSearchName,
    JavaExecutionError,
    JavaFindError,
    JavaHomeIOError,
    NoJavaHomeProperty,
    NoNativeLibrary,
    PathNotUTF8,
)
from .common.natives import (
    NATIVE_LIBRARY_FILENAME,
    NATIVE_LIBRARY_FILENAME_LIN,
    NATIVE_LIBRARY_FILENAME_MAC,
    NATIVE_LIBRARY_FILENAME_WIN,
)
from .common.pydantic import JavaHome
from .locator.locator import bin_directory, find_file, find_folder, include_directories, native_library
from .resolver.home import HomeResolver, find_active_home, find_home, find_valid_home

__version__ = "0.1.1"

# Library code stays silent until an application opts in with logger.enable("jvm_find").
logger.disable("jvm_find")

__all__ = [
    "NATIVE_LIBRARY_FILENAME",
    "NATIVE_LIBRARY_FILENAME_LIN",
    "NATIVE_LIBRARY_FILENAME_MAC",
    "NATIVE_LIBRARY_FILENAME_WIN",
    "BadJavaHomePath",
    "GlobError",
    "HomeResolver",
    "InvalidSearchName",
    "JavaExecutionError",
    "JavaFindError",
    "JavaHome",
    "JavaHomeIOError",
    "NoJavaHomeProperty",
    "NoNativeLibrary",
    "PathNotUTF8",
    "bin_directory",
    "find_active_home",
    "find_file",
    "find_folder",
    "find_home",
    "find_valid_home",
    "include_directories",
    "native_library",
]
