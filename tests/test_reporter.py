"""Tests for usage reporting."""

import pytest

from rdu.errors import PathNotFoundError
from rdu.reporter import log_disk_usage


class TestLogDiskUsage:
    def test_two_files_sorted(self, tmp_path, capsys):
        (tmp_path / "a").write_bytes(b"x" * 10)
        (tmp_path / "b").write_bytes(b"x" * 1024)

        log_disk_usage(tmp_path, max_depth=1, sort=True)

        assert capsys.readouterr().out.splitlines() == [
            f"  10  {tmp_path / 'a'}",
            f"1024  {tmp_path / 'b'}",
            f"1034  {tmp_path}",
        ]

    def test_unsorted_ends_with_root(self, sample_tree, capsys):
        log_disk_usage(sample_tree, max_depth=1)

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[-1] == f"1139  {sample_tree}"

    def test_human_readable(self, sample_tree, capsys):
        log_disk_usage(sample_tree, max_depth=1, human_readable=True, sort=True)

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"10B   {sample_tree / 'a'}",
            f"105B  {sample_tree / 'sub'}",
            f"1.0K  {sample_tree / 'b'}",
            f"1.1K  {sample_tree}",
        ]

    def test_single_file(self, tmp_path, capsys):
        test_file = tmp_path / "file"
        test_file.write_bytes(b"x" * 2048)

        log_disk_usage(test_file, max_depth=3, human_readable=True)

        assert capsys.readouterr().out == f"2.0K  {test_file}\n"

    def test_missing_path(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            log_disk_usage(tmp_path / "missing")
