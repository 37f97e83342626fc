"""Print the dependency structure of a Go package."""

from __future__ import annotations

import argparse
import itertools
import os
import traceback
from typing import List, Optional

from .pkgtool import PkgNode, get_src_dirs, new_pkg_node

ARROWS = "->"

_serial = itertools.count(1)


def show_dep_struct(pnode: PkgNode, depth: int, prefix: str) -> None:
    """Print every import chain from ``pnode`` down to a leaf, numbered."""
    chain = prefix + pnode.import_path
    deps = pnode.imported_nodes()
    if not deps:
        print(f"{next(_serial)}[{depth}]: {chain}")
        return
    chain += ARROWS
    for dep in deps:
        show_dep_struct(dep, depth + 1, chain)


def get_pkg_import_path(flag_value: str) -> str:
    """Return the given import path, or derive one from the current directory.

    Raises ValueError when the current directory is under no source directory.
    """
    if flag_value:
        return flag_value
    print("The flag p is invalid, use current dir as package import path.")
    current_dir = os.getcwd()
    import_path = ""
    for src_dir in get_src_dirs(False):
        if current_dir.startswith(src_dir):
            import_path = current_dir[len(src_dir) + 1:]
            break
    if not import_path.strip():
        raise ValueError("Couldn't parse the import path!")
    return import_path


def main(argv: Optional[List[str]] = None) -> int:
    """Show the dependency structure of the package given by -p."""
    parser = argparse.ArgumentParser(
        description="Show the dependency structure of specified package.")
    parser.add_argument("-p", dest="path", default="",
                        help="The path of target package.")
    args = parser.parse_args(argv)
    try:
        import_path = get_pkg_import_path(args.path)
        node = new_pkg_node(import_path)
        print(f"The package node of '{import_path}': {node!r}")
        try:
            node.grow()
        except OSError as err:
            print(f"GROW ERROR: {err}")
        print(f"The dependency structure of package '{import_path}':")
        show_dep_struct(node, 0, "")
    except Exception as err:  # report any failure like a fatal error
        print(f"FATAL ERROR: {err}")
        traceback.print_exc()
        return 1
    return 0