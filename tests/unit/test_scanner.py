"""Tests for the license file directory scanner."""

import os
from pathlib import Path

import pytest

from license_detector.candidates import DEFAULT_LICENSE_FILES
from license_detector.scanner import search_dir


def _case_sensitive_fs(directory: Path) -> bool:
    probe = directory / "CaseProbe"
    probe.touch()
    try:
        return not (directory / "caseprobe").exists()
    finally:
        probe.unlink()


class TestSearchDir:
    """Test suite for search_dir."""

    def test_filters_names_through_is_candidate(self, project_dir: Path, mocker):
        """Test that only names accepted by is_candidate are considered."""
        (project_dir / "LICENSE").touch()
        (project_dir / "README").touch()
        is_candidate = mocker.patch(
            "license_detector.scanner.is_candidate", return_value=False
        )

        assert search_dir(project_dir) == []
        checked = sorted(call.args[0] for call in is_candidate.call_args_list)
        assert checked == ["LICENSE", "README"]

    def test_finds_all_candidates_in_order(self, project_dir: Path):
        """Test that every candidate is found, in candidate order."""
        # Create in reverse so listing order differs from candidate order
        for name in reversed(DEFAULT_LICENSE_FILES):
            (project_dir / name).write_bytes(b"")
        (project_dir / "nope").write_bytes(b"")
        (project_dir / "dir").mkdir()

        result = search_dir(project_dir)

        assert result == [project_dir / name for name in DEFAULT_LICENSE_FILES]

    def test_skips_directories(self, project_dir: Path):
        """Test that a directory named like a license file is ignored."""
        (project_dir / "LICENSE").mkdir()
        (project_dir / "COPYING").write_text("text")

        assert search_dir(project_dir) == [project_dir / "COPYING"]

    def test_does_not_recurse(self, project_dir: Path):
        """Test that license files in subdirectories are not reported."""
        sub = project_dir / "vendor"
        sub.mkdir()
        (sub / "LICENSE").write_text("text")

        assert search_dir(project_dir) == []

    def test_matches_case_insensitively(self, project_dir: Path):
        """Test that names are matched regardless of case."""
        (project_dir / "copying.RST").write_text("text")

        assert search_dir(project_dir) == [project_dir / "copying.RST"]

    def test_keeps_on_disk_name(self, project_dir: Path):
        """Test that returned paths use the name found on disk."""
        (project_dir / "License.md").write_text("text")

        result = search_dir(project_dir)

        assert [p.name for p in result] == ["License.md"]

    def test_multiple_spellings_sorted(self, project_dir: Path):
        """Test that several spellings of one candidate are all returned."""
        if not _case_sensitive_fs(project_dir):
            pytest.skip("file system is not case-sensitive")
        (project_dir / "license").write_text("a")
        (project_dir / "LICENSE").write_text("b")

        result = search_dir(project_dir)

        assert result == [project_dir / "LICENSE", project_dir / "license"]

    def test_accepts_string_path(self, project_dir: Path):
        """Test that a plain string path is accepted."""
        (project_dir / "LICENSE").write_text("text")

        assert search_dir(str(project_dir)) == [project_dir / "LICENSE"]

    def test_empty_directory(self, project_dir: Path):
        """Test that an empty directory yields no results."""
        assert search_dir(project_dir) == []

    def test_missing_directory(self, tmp_path: Path):
        """Test that a missing directory raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            search_dir(tmp_path / "nonexistent")

    def test_file_instead_of_directory(self, tmp_path: Path):
        """Test that a file path raises NotADirectoryError."""
        path = tmp_path / "LICENSE"
        path.write_text("text")

        with pytest.raises(NotADirectoryError):
            search_dir(path)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="requires POSIX permissions and a non-root user",
    )
    def test_unreadable_directory(self, project_dir: Path):
        """Test that a directory that cannot be listed raises PermissionError."""
        project_dir.chmod(0o000)
        try:
            with pytest.raises(PermissionError):
                search_dir(project_dir)
        finally:
            project_dir.chmod(0o700)
