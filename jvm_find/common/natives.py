"""Native library filenames per platform."""

import sys

NATIVE_LIBRARY_FILENAME_WIN = "jvm.dll"
NATIVE_LIBRARY_FILENAME_LIN = "libjvm.so"
# MacOS consumers link libjli instead of libjvm due to a bug with the distribution.
NATIVE_LIBRARY_FILENAME_MAC = "libjli.dylib"


def native_library_filename(platform: str = sys.platform) -> str:
    """Return the JVM native library filename for a ``sys.platform`` value."""
    if platform.startswith(("win32", "cygwin")):
        return NATIVE_LIBRARY_FILENAME_WIN
    if platform == "darwin":
        return NATIVE_LIBRARY_FILENAME_MAC
    return NATIVE_LIBRARY_FILENAME_LIN


NATIVE_LIBRARY_FILENAME = native_library_filename()
