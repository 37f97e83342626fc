import re

import pytest

from crawltools import pkgtool, showpds

LINE_RE = re.compile(r"^(\d+)\[(\d+)\]: (.*)$")


def parse(out):
    result = []
    for line in out.splitlines():
        match = LINE_RE.match(line)
        if match:
            result.append((int(match.group(1)), int(match.group(2)), match.group(3)))
    return result


@pytest.fixture
def goenv(tmp_path, monkeypatch):
    base = tmp_path.resolve()
    goroot = base / "goroot"
    gopath = base / "gopath"
    (goroot / "src").mkdir(parents=True)
    (gopath / "src").mkdir(parents=True)
    monkeypatch.setenv("GOROOT", str(goroot))
    monkeypatch.setenv("GOPATH", str(gopath))
    pkgtool.get_src_dirs(True)
    return gopath


def write_go(gopath, import_path, imports):
    pkg_dir = gopath / "src" / import_path
    pkg_dir.mkdir(parents=True, exist_ok=True)
    lines = "".join(f'\t"{imp}"\n' for imp in imports)
    (pkg_dir / "x.go").write_text(f"package x\n\nimport (\n{lines})\n")
    return pkg_dir


def test_show_dep_struct(capsys):
    root = pkgtool.PkgNode("r")
    x = pkgtool.PkgNode("x")
    y = pkgtool.PkgNode("y")
    z = pkgtool.PkgNode("z")
    root.add_imported_node(x)
    root.add_imported_node(y)
    y.add_imported_node(z)
    showpds.show_dep_struct(root, 0, "")
    rows = parse(capsys.readouterr().out)
    assert [(d, p) for _, d, p in rows] == [(1, "r->x"), (2, "r->y->z")]
    assert rows[1][0] == rows[0][0] + 1


def test_show_dep_struct_leaf(capsys):
    showpds.show_dep_struct(pkgtool.PkgNode("solo"), 3, "pre->")
    rows = parse(capsys.readouterr().out)
    assert [(d, p) for _, d, p in rows] == [(3, "pre->solo")]


def test_get_pkg_import_path_flag():
    assert showpds.get_pkg_import_path("some/pkg") == "some/pkg"


def test_get_pkg_import_path_from_cwd(goenv, tmp_path, monkeypatch):
    pkg_dir = write_go(goenv, "here/pkg", [])
    monkeypatch.chdir(pkg_dir)
    result = showpds.get_pkg_import_path("")
    assert result.replace("\\", "/") == "here/pkg"


def test_get_pkg_import_path_outside(goenv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError, match="Couldn't parse the import path!"):
        showpds.get_pkg_import_path("")


def test_main(goenv, tmp_path, capsys):
    uniq = tmp_path.name + "_main"
    write_go(goenv, f"{uniq}/a", [f"{uniq}/b"])
    write_go(goenv, f"{uniq}/b", [])
    assert showpds.main(["-p", f"{uniq}/a"]) == 0
    out = capsys.readouterr().out
    assert f"The dependency structure of package '{uniq}/a':" in out
    rows = parse(out)
    assert [(d, p) for _, d, p in rows] == [(1, f"{uniq}/a->{uniq}/b")]


def test_main_fatal(goenv, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert showpds.main([]) == 1
    assert "FATAL ERROR: Couldn't parse the import path!" in capsys.readouterr().out