"""
Tests for persistence — whole-file shell reads and writes.
"""

from pathlib import Path

import pytest

from zshdeck.core.models.paths import ShellPaths
from zshdeck.core.models.records import Scope
from zshdeck.core.persistence.shell_file import (
    ShellFileError,
    ensure_parent_dir,
    path_exists,
    read_text,
    write_lines,
    write_text,
)
from zshdeck.core.services import alias_ops, function_ops


class TestShellFile:
    """Tests for the shell file helpers."""

    def test_read_missing(self, tmp_path: Path):
        assert read_text(tmp_path / "nope.zsh") is None

    def test_write_and_read(self, tmp_path: Path):
        path = tmp_path / "a.zsh"
        write_text(path, "alias a=b\n")
        assert path_exists(path)
        assert read_text(path) == "alias a=b\n"

    def test_write_lines(self, tmp_path: Path):
        path = tmp_path / "a.zsh"
        write_lines(path, ["one", "", "two"])
        assert path.read_text() == "one\n\ntwo\n"
        write_lines(path, [])
        assert path.read_text() == ""

    def test_read_directory_fails(self, tmp_path: Path):
        with pytest.raises(ShellFileError) as exc:
            read_text(tmp_path)
        assert exc.value.action == "read"
        assert str(tmp_path) in str(exc.value)

    def test_path_exists_is_false_for_directory(self, tmp_path: Path):
        assert path_exists(tmp_path) is False

    def test_ensure_parent_dir(self, tmp_path: Path):
        path = tmp_path / "a" / "b" / "c.zsh"
        ensure_parent_dir(path)
        assert path.parent.is_dir()

    def test_ensure_parent_dir_blocked_by_file(self, tmp_path: Path):
        (tmp_path / "file").write_text("")
        with pytest.raises(ShellFileError):
            ensure_parent_dir(tmp_path / "file" / "x.zsh")


class TestIoFailureResults:
    """Services report filesystem errors as io_failure results."""

    def test_add_alias_parent_is_file(self, home: Path):
        (home / "blocker").write_text("")
        paths = ShellPaths.from_home(home, shared_aliases=home / "blocker" / "aliases.zsh")
        result = alias_ops.add_alias(paths, "a", "b", Scope.SHARED)
        assert result["kind"] == "io_failure"
        assert "blocker" in result["error"]

    def test_list_functions_on_directory(self, shell_paths: ShellPaths):
        shell_paths.shared_functions.mkdir(parents=True)
        result = function_ops.list_functions(shell_paths, Scope.SHARED)
        assert result["kind"] == "io_failure"
