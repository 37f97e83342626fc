"""Print the structure of a directory tree."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional

INDENT = "  "


def show_files(base_path: str, prefix: str, show_all: bool) -> None:
    """Print every entry below ``base_path``, indenting by depth.

    Names starting with a dot are skipped unless ``show_all`` is true.
    Directories are printed with a trailing slash. OSError propagates.
    """
    with os.scandir(base_path) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        name = entry.name
        if name.startswith(".") and not show_all:
            continue
        if entry.is_dir():
            print(f"{prefix}{name}/")
            show_files(os.path.join(base_path, name), INDENT + prefix, show_all)
        else:
            print(f"{prefix}{name}")


def main(argv: Optional[List[str]] = None) -> int:
    """Show the directory given by -p, or the current one."""
    parser = argparse.ArgumentParser(description="Show the specified directory structure.")
    parser.add_argument("-p", dest="path", default="",
                        help="The path of target directory.")
    args = parser.parse_args(argv)
    root_path = args.path
    if not root_path:
        try:
            root_path = os.getcwd()
        except OSError as err:
            print("GetwdError:", err)
            return 1
    print(f"{root_path}:")
    try:
        show_files(root_path, INDENT, False)
    except OSError as err:
        print("showFilesError:", err)
        return 1
    return 0