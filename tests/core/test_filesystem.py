"""
Tests for filesystem utilities.
"""

import os

import pytest

from tailwindkit.core.exceptions import PathTraversalError
from tailwindkit.core.filesystem import (
    atomic_write,
    is_executable,
    is_relative_to,
    make_executable,
    resolve_within,
    temporary_sibling,
)


class TestResolveWithin:
    """Test project-root containment."""

    def test_relative_path_inside(self, tmp_path):
        assert resolve_within(tmp_path, "src/input.css") == (tmp_path / "src" / "input.css").resolve()

    def test_root_itself(self, tmp_path):
        assert resolve_within(tmp_path, ".") == tmp_path.resolve()

    def test_dotdot_that_stays_inside(self, tmp_path):
        assert resolve_within(tmp_path, "src/../dist/out.css") == (tmp_path / "dist" / "out.css").resolve()

    def test_escape_raises(self, tmp_path):
        root = tmp_path / "project"
        root.mkdir()

        with pytest.raises(PathTraversalError) as exc_info:
            resolve_within(root, "../../etc", label="Config path")

        assert "Config path escapes project directory" in str(exc_info.value)
        assert exc_info.value.root == root.resolve()

    def test_absolute_path_outside(self, tmp_path):
        root = tmp_path / "project"
        root.mkdir()

        with pytest.raises(PathTraversalError):
            resolve_within(root, str(tmp_path / "elsewhere"))

    def test_sibling_with_common_prefix(self, tmp_path):
        """Test '/x/project-evil' is not inside '/x/project'."""
        root = tmp_path / "project"
        root.mkdir()

        with pytest.raises(PathTraversalError):
            resolve_within(root, "../project-evil/input.css")

    def test_no_mutation(self, tmp_path):
        resolve_within(tmp_path, "new/dir/file.css")
        assert not (tmp_path / "new").exists()


class TestAtomicWrite:
    def test_writes_content(self, tmp_path):
        target = tmp_path / "sub" / "file.bin"
        atomic_write(target, b"payload")
        assert target.read_bytes() == b"payload"

    def test_no_temp_left_on_failure(self, tmp_path, monkeypatch):
        def fail(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", fail)
        target = tmp_path / "file.bin"

        with pytest.raises(OSError, match="disk full"):
            atomic_write(target, b"payload")

        assert list(tmp_path.iterdir()) == []

    def test_temporary_sibling(self, tmp_path):
        target = tmp_path / "dir" / "file"
        temp = temporary_sibling(target, suffix=".part")

        assert temp.exists()
        assert temp.parent == target.parent
        assert temp.name.startswith(".file.")
        assert temp.name.endswith(".part")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
class TestExecutable:
    def test_make_executable(self, tmp_path):
        path = tmp_path / "tool"
        path.write_bytes(b"")
        path.chmod(0o644)

        make_executable(path)

        assert is_executable(path)
        assert path.stat().st_mode & 0o777 == 0o755

    def test_make_executable_from_private_temp(self, tmp_path):
        temp = temporary_sibling(tmp_path / "tool")
        make_executable(temp)
        assert temp.stat().st_mode & 0o777 == 0o755


def test_is_relative_to(tmp_path):
    assert is_relative_to(tmp_path / "a" / "b", tmp_path)
    assert not is_relative_to(tmp_path, tmp_path / "a")
