"""Command line entry point."""

import argparse
import sys
from pathlib import Path

from loguru import logger

from .common.config import load_config
from .common.errors import JavaFindError
from .common.natives import NATIVE_LIBRARY_FILENAME
from .locator.locator import find_file, find_folder, include_directories, native_library
from .resolver.home import HomeResolver


def report(
    resolver: HomeResolver, files: list[str], folders: list[str], native_filename: str = NATIVE_LIBRARY_FILENAME
) -> None:
    """Print every resolution tier and the lookups inside the resolved home."""
    print(f"find_home(): {resolver.find_home()}")
    print(f"find_active_home(): {resolver.find_active_home()}")
    print(f"find_valid_home(): {resolver.find_valid_home()}")

    home = resolver.find_home()

    includes = include_directories(home)
    if includes is None:
        print("include: <JDK not installed?>")
    else:
        print("include:")
        for include in includes:
            print(f"\t{include}")
    print(f"native library: {native_library(home, native_filename)}")

    for name in files:
        print(f"file {name}: {find_file(home, name) or '<not found>'}")
    for name in folders:
        print(f"folder {name}: {find_folder(home, name) or '<not found>'}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="jvm-find - Locate the Java home, JNI headers and JVM library")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--file", action="append", default=[], help="Also search the home for this file name")
    parser.add_argument("--folder", action="append", default=[], help="Also search the home for this folder name")
    parser.add_argument(
        "--native-library", default=NATIVE_LIBRARY_FILENAME, help="Native library file name to look for"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug traces to stderr")

    args = parser.parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("jvm_find")

    try:
        resolver = HomeResolver(config=load_config(args.config))
        report(resolver, args.file, args.folder, args.native_library)
    except JavaFindError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
