import os
from datetime import datetime

import pytest

from tsv_processor.output import commit_output, output_filename


def test_output_filename_is_minute_timestamp():
    assert output_filename(datetime(2026, 10, 18, 9, 5, 42)) == "202610180905processed.tsv"


def test_commit_writes_file_and_leaves_no_temp(tmp_path):
    target = tmp_path / "out.tsv"
    commit_output(target, "a\tb\n")
    assert target.read_bytes() == b"a\tb\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.tsv"]


def test_commit_replaces_existing_file(tmp_path):
    target = tmp_path / "out.tsv"
    target.write_text("old\n")
    commit_output(target, "new\n")
    assert target.read_text() == "new\n"


def test_commit_into_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        commit_output(tmp_path / "missing" / "out.tsv", "a\n")
    assert list(tmp_path.iterdir()) == []


def test_failed_write_removes_temp_file(tmp_path):
    target = tmp_path / "out.tsv"
    with pytest.raises(UnicodeEncodeError):
        commit_output(target, "k\tあ\n")
    assert list(tmp_path.iterdir()) == []


def test_original_error_survives_missing_temp_file(tmp_path, monkeypatch):
    def fail_replace(src, dst):
        os.unlink(src)
        raise PermissionError("replace denied")

    monkeypatch.setattr(os, "replace", fail_replace)
    with pytest.raises(PermissionError, match="replace denied"):
        commit_output(tmp_path / "out.tsv", "a\n")
    assert list(tmp_path.iterdir()) == []
