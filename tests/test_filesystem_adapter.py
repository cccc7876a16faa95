"""Tests for FileSystemTreeDef.

Builds a small directory tree in a temp dir and walks/queries it.
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treedeflib import FileSystemTreeDef, breadth_first, depth_first, query


def create_test_tree(base_dir: Path) -> None:
    """Create a test directory structure.

    Structure:
    base_dir/
    ├── .hidden
    ├── b.txt
    ├── dir1/
    │   ├── a.txt
    │   └── subdir/
    │       └── deep.txt
    └── dir2/
    """
    (base_dir / "dir1" / "subdir").mkdir(parents=True)
    (base_dir / "dir2").mkdir()
    (base_dir / ".hidden").write_text("hidden")
    (base_dir / "b.txt").write_text("b")
    (base_dir / "dir1" / "a.txt").write_text("a")
    (base_dir / "dir1" / "subdir" / "deep.txt").write_text("deep")


class TestFileSystemTreeDef(unittest.TestCase):
    """Test filesystem children and parents."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        create_test_tree(self.base)
        self.fs = FileSystemTreeDef(root=self.base)

    def tearDown(self):
        self._tmp.cleanup()

    def names(self, paths):
        return [p.name for p in paths]

    def test_children_sorted(self):
        self.assertEqual(self.names(self.fs.children_of(self.base)),
                         [".hidden", "b.txt", "dir1", "dir2"])

    def test_files_have_no_children(self):
        self.assertEqual(self.fs.children_of(self.base / "b.txt"), [])

    def test_exclude_hidden(self):
        fs = FileSystemTreeDef(root=self.base, include_hidden=False)
        self.assertEqual(self.names(fs.children_of(self.base)), ["b.txt", "dir1", "dir2"])

    def test_parent_stops_at_root(self):
        self.assertEqual(self.fs.parent_of(self.base / "dir1"), self.base)
        self.assertIsNone(self.fs.parent_of(self.base))

    def test_parent_without_root_reaches_filesystem_root(self):
        fs = FileSystemTreeDef()
        chain = query.to_root(fs, self.base)
        self.assertEqual(chain[0], self.base)
        self.assertEqual(chain[-1], Path(self.base.anchor))

    def test_breadth_first(self):
        fs = FileSystemTreeDef(root=self.base, include_hidden=False)
        self.assertEqual(self.names(breadth_first(fs, self.base))[1:],
                         ["b.txt", "dir1", "dir2", "a.txt", "subdir", "deep.txt"])

    def test_depth_first(self):
        fs = FileSystemTreeDef(root=self.base, include_hidden=False)
        self.assertEqual(self.names(depth_first(fs, self.base))[1:],
                         ["b.txt", "dir1", "a.txt", "subdir", "deep.txt", "dir2"])

    def test_path_and_lca(self):
        deep = self.base / "dir1" / "subdir" / "deep.txt"
        a = self.base / "dir1" / "a.txt"

        self.assertEqual(query.path(self.fs, deep, lambda p: p.name),
                         f"{self.base.name}/dir1/subdir/deep.txt")
        self.assertEqual(query.lowest_common_ancestor(self.fs, deep, a), self.base / "dir1")

    def test_render(self):
        fs = FileSystemTreeDef(root=self.base, include_hidden=False)
        rendered = query.to_string(fs, self.base / "dir1", lambda p: p.name)
        self.assertEqual(rendered, "dir1\n a.txt\n subdir\n  deep.txt\n")


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="permission checks need a non-root POSIX user")
def test_unreadable_directory_is_leaf(tmp_path, caplog):
    """An unreadable directory has no children and logs a warning."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("x")
    locked.chmod(0o000)
    try:
        fs = FileSystemTreeDef(root=tmp_path)
        with caplog.at_level("WARNING", logger="treedeflib.adapters.filesystem"):
            children = fs.children_of(locked)
        assert children == []
        assert "Permission denied" in caplog.text
    finally:
        locked.chmod(0o755)


def test_permission_error_is_logged(tmp_path, monkeypatch, caplog):
    """A directory that can't be listed is a leaf, with a warning logged."""
    create_test_tree(tmp_path)

    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", deny)
    fs = FileSystemTreeDef(root=tmp_path)
    with caplog.at_level("WARNING", logger="treedeflib.adapters.filesystem"):
        children = fs.children_of(tmp_path / "dir1")

    assert children == []
    assert "Permission denied listing" in caplog.text
    assert str(tmp_path / "dir1") in caplog.text


@pytest.fixture
def linked_dir(tmp_path):
    """A real directory plus a symlink pointing at it."""
    target = tmp_path / "target"
    target.mkdir()
    (target / "f.txt").write_text("f")
    link = tmp_path / "link"
    try:
        link.symlink_to(target, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")
    return link


def test_symlinked_start_node_is_leaf(tmp_path, linked_dir):
    fs = FileSystemTreeDef(root=tmp_path)
    assert fs.children_of(linked_dir) == []
    assert [p.name for p in fs.children_of(tmp_path)] == ["target"]


def test_symlinked_start_node_followed_when_enabled(tmp_path, linked_dir):
    fs = FileSystemTreeDef(root=tmp_path, follow_symlinks=True)
    assert [p.name for p in fs.children_of(linked_dir)] == ["f.txt"]
    assert [p.name for p in fs.children_of(tmp_path)] == ["link", "target"]
