import os
import shutil
import pytest
from pathlib import Path

from core.rules import RULE_SETS, LiteralPattern, SuffixPattern
from core.scanner import walk_directories, is_project_root, find_project_roots
from conftest import POLYGLOT_TREE

def rel(paths, root):
    return [str(Path(p).relative_to(root)) for p in paths]

def test_walk_includes_root_and_skips_files(make_tree):
    root = make_tree("a/b/file.txt", "c/", "top.txt")
    assert rel(walk_directories(root), root) == [".", "a", "a/b", "c"]

def test_walk_visits_hidden_directories(make_tree):
    root = make_tree(".hidden/deeper/")
    assert ".hidden/deeper" in rel(walk_directories(root), root)

def test_walk_does_not_follow_symlinks(make_tree):
    root = make_tree("real/inner/")
    os.symlink(root / "real", root / "link", target_is_directory=True)
    visited = rel(walk_directories(root), root)
    assert "real/inner" in visited
    assert "link" not in visited
    assert "link/inner" not in visited

def failing_scandir(monkeypatch, *blocked: Path):
    """Make listing any of ``blocked`` raise, the way an unreadable directory does."""
    real_scandir = os.scandir
    blocked_paths = {os.fspath(p) for p in blocked}

    def _scandir(path="."):
        if isinstance(path, (str, os.PathLike)) and os.fspath(path) in blocked_paths:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)

def test_walk_continues_past_unlistable_directories(make_tree, monkeypatch):
    root = make_tree("locked/secret/", "open/inner/", "zeta/")
    failing_scandir(monkeypatch, root / "locked")

    visited = rel(walk_directories(root), root)

    assert visited == [".", "locked", "open", "open/inner", "zeta"]

def test_walk_yields_unlistable_root(make_tree, monkeypatch):
    root = make_tree("child/")
    failing_scandir(monkeypatch, root)

    assert list(walk_directories(root)) == [root]

def test_walk_skips_directories_deleted_mid_walk(make_tree):
    root = make_tree("a/gone/deeper/", "b/kept/")
    visited = []
    for directory in walk_directories(root):
        visited.append(str(directory.relative_to(root)))
        if directory == root / "a":
            shutil.rmtree(root / "a" / "gone")

    assert visited == [".", "a", "b", "b/kept"]

def test_unlistable_directory_is_still_classified(make_tree, monkeypatch):
    root = make_tree("locked/Cargo.toml", "locked/target/", "open/Cargo.toml")
    failing_scandir(monkeypatch, root / "locked")

    roots = rel(find_project_roots(root, RULE_SETS["rust"]), root)

    assert roots == ["locked", "open"]

def test_is_project_root_short_circuits(make_tree):
    root = make_tree("proj/pom.xml")

    class Exploding:
        def matches(self, directory):
            raise AssertionError("should not be evaluated")

    assert is_project_root(root / "proj", [LiteralPattern("pom.xml"), Exploding()])
    assert not is_project_root(root / "proj", [LiteralPattern("build.gradle"), SuffixPattern(".kts")])

def test_root_directory_itself_can_match(make_tree):
    root = make_tree("Cargo.toml", "target/debug/foo")
    assert list(find_project_roots(root, RULE_SETS["rust"])) == [root]

def test_nested_projects_are_found_independently(make_tree):
    root = make_tree("mono/package.json", "mono/packages/a/package.json", "mono/packages/b/src/")
    roots = rel(find_project_roots(root, RULE_SETS["js"]), root)
    assert roots == ["mono", "mono/packages/a"]

def test_grandchildren_never_classify(make_tree):
    root = make_tree("outer/inner/go.mod")
    roots = rel(find_project_roots(root, RULE_SETS["go"]), root)
    assert roots == ["outer/inner"]

def test_find_project_roots_is_lazy(make_tree):
    root = make_tree("Cargo.toml")
    roots = find_project_roots(root, RULE_SETS["rust"])
    assert next(roots) == root
    with pytest.raises(StopIteration):
        next(roots)

def test_polyglot_classification():
    expected = {
        "rust": ["deep/nested", "rust-app"],
        "python": ["py-app"],
        "js": ["mono", "mono/packages/a"],
        "java": ["java-app"],
        "go": ["go-app"],
        "dotnet": ["dotnet-app"],
    }
    for command, roots in expected.items():
        found = rel(find_project_roots(POLYGLOT_TREE, RULE_SETS[command]), POLYGLOT_TREE)
        assert found == roots, command
