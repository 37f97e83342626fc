"""Locate Go source packages and build their import dependency graph."""

from __future__ import annotations

import os
import shutil
from typing import Dict, Iterable, List, Optional

_src_dirs_cache: List[str] = []
_pkg_nodes_cache: Dict[str, "PkgNode"] = {}


def get_goroot() -> str:
    """Return the Go root directory.

    Taken from the GOROOT environment variable, or derived from the location
    of a ``go`` executable on the PATH; empty when neither is available.
    """
    goroot = os.environ.get("GOROOT", "").strip()
    if goroot:
        return goroot
    go_binary = shutil.which("go")
    if go_binary:
        return os.path.dirname(os.path.dirname(os.path.realpath(go_binary)))
    return ""


def get_all_gopath() -> List[str]:
    """Return every non-blank entry of the GOPATH environment variable."""
    sep = ";" if os.name == "nt" else ":"
    gopath = os.environ.get("GOPATH", "")
    return [entry for entry in gopath.split(sep) if entry.strip()]


def get_src_dirs(fresh: bool = False) -> List[str]:
    """Return the source directories of GOROOT and of every GOPATH entry.

    The result is cached; pass ``fresh=True`` to recompute it.
    """
    if _src_dirs_cache and not fresh:
        return list(_src_dirs_cache)
    src_dirs = [os.path.join(get_goroot(), "src")]
    src_dirs.extend(os.path.join(path, "src") for path in get_all_gopath())
    _src_dirs_cache[:] = src_dirs
    return src_dirs


def append_if_absent(items: Optional[Iterable[str]], *args: str) -> List[str]:
    """Return ``items`` extended by those of ``args`` not already present."""
    result = list(items or ())
    seen = set(result)
    for item in args:
        if item in seen:
            continue
        result.append(item)
        seen.add(item)
    return result


def _import_dir(import_path: str) -> str:
    return import_path.replace("/", os.sep)


def _get_abs_path_of_package(import_path: str) -> str:
    for src_dir in get_src_dirs(False):
        abs_path = os.path.join(src_dir, _import_dir(import_path))
        if os.path.exists(abs_path):
            return abs_path
    return ""


def _get_go_source_file_abs_paths(package_abs_path: str,
                                  contains_test_file: bool) -> List[str]:
    with os.scandir(package_abs_path) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if not entry.is_dir() and entry.name.endswith(".go")
        )
    return [
        os.path.join(package_abs_path, name)
        for name in names
        if contains_test_file or not name.endswith("_test.go")
    ]


def get_imports_from_go_source(file_path: str) -> List[str]:
    """Return the import paths declared in a Go source file.

    A file marked ``// +build ignore`` yields only what was found before the
    mark. Aliased or otherwise irregular imports are skipped.
    """
    import_paths: List[str] = []
    is_multi_import = False
    with open(file_path, encoding="utf-8", errors="replace") as source:
        for raw_line in source:
            line = raw_line.strip()
            if line == "// +build ignore":
                return import_paths
            if line.startswith("import"):
                if "(" in line:
                    is_multi_import = True
                else:
                    import_path = line[line.find('"') + 1:line.rfind('"')]
                    import_paths = append_if_absent(import_paths, import_path)
                    break
            elif is_multi_import:
                if line.startswith(")"):
                    break
                if not (line.startswith('"') and line.endswith('"')):
                    continue
                import_paths = append_if_absent(import_paths, line.replace('"', "", 2))
    return sorted(import_paths)


def get_imports_from_package(import_path: str,
                             contains_test_file: bool = False) -> List[str]:
    """Return all import paths used by the package; empty if it is not found."""
    package_abs_path = _get_abs_path_of_package(import_path)
    if not package_abs_path:
        return []
    import_paths: List[str] = []
    for file_path in _get_go_source_file_abs_paths(package_abs_path, contains_test_file):
        import_paths = append_if_absent(import_paths, *get_imports_from_go_source(file_path))
    return import_paths


class PkgNode:
    """A package in the import graph, linked to its importers and imports."""

    def __init__(self, import_path: str, src_dir: str = "") -> None:
        self.import_path = import_path
        self.src_dir = src_dir
        self._importers: List[PkgNode] = []
        self._imported_nodes: List[PkgNode] = []
        self._grown = False

    def __repr__(self) -> str:
        return (
            f"PkgNode(import_path={self.import_path!r}, src_dir={self.src_dir!r}, "
            f"importers={len(self._importers)}, "
            f"imported_nodes={len(self._imported_nodes)}, grown={self._grown})"
        )

    def add_importer(self, pn: "PkgNode") -> None:
        """Record a package that imports this one."""
        self._importers.append(pn)

    def add_imported_node(self, pn: "PkgNode") -> None:
        """Record a package that this one imports."""
        self._imported_nodes.append(pn)

    def importers(self) -> List["PkgNode"]:
        """Return a copy of the list of importing packages."""
        return list(self._importers)

    def imported_nodes(self) -> List["PkgNode"]:
        """Return a copy of the list of imported packages."""
        return list(self._imported_nodes)

    def is_leaf(self) -> bool:
        """Tell whether this package imports nothing."""
        return not self._imported_nodes

    def grow(self) -> None:
        """Follow the imports of this package downwards, recursively."""
        if self._grown:
            return
        import_paths = get_imports_from_package(self.import_path, False)
        sub_nodes: List[PkgNode] = []
        for import_path in import_paths:
            if import_path == self.import_path:
                continue
            node = _pkg_nodes_cache.get(import_path)
            if node is None:
                node = new_pkg_node(import_path)
                _pkg_nodes_cache[import_path] = node
            sub_nodes.append(node)
        for node in sub_nodes:
            node.add_importer(self)
            self.add_imported_node(node)
            node.grow()
        self._grown = True


def new_pkg_node(import_path: str) -> PkgNode:
    """Create a node for an import path, locating its source directory."""
    package_abs_path = _get_abs_path_of_package(import_path)
    import_dir = _import_dir(import_path)
    src_dir = ""
    if package_abs_path.endswith(import_dir):
        src_dir = package_abs_path[:package_abs_path.rfind(import_dir)]
    return PkgNode(import_path, src_dir)


get_src_dirs(True)