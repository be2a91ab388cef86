import pytest

from tsv_processor.cli import main


def _processed(tmp_path):
    return sorted(tmp_path.glob("*processed.tsv"))


def test_normalize_writes_timestamped_file(tmp_path, capsys):
    inp = tmp_path / "input.tsv"
    inp.write_bytes(b"apple\tfruit:sale\n")

    assert main(["normalize", str(inp), "--output-dir", str(tmp_path)]) == 0

    [out] = _processed(tmp_path)
    assert out.read_text() == "apple\tfruit\napple\tsale\n"
    assert capsys.readouterr().out.strip() == str(out)


def test_group_to_explicit_output(tmp_path):
    inp = tmp_path / "input.tsv"
    inp.write_bytes(b"k\tv1\nk\tv2\n")
    out = tmp_path / "grouped.tsv"

    assert main(["group", str(inp), "--output", str(out)]) == 0
    assert out.read_text() == "k\tv1:v2\n"


def test_transform_error_leaves_no_output(tmp_path, capsys):
    inp = tmp_path / "input.tsv"
    inp.write_bytes(b"a\tb\nc\n")

    assert main(["normalize", str(inp), "--output-dir", str(tmp_path)]) == 1

    assert _processed(tmp_path) == []
    assert "ColumnCountMismatch" in capsys.readouterr().err


def test_charset_error_leaves_no_output(tmp_path, capsys):
    inp = tmp_path / "input.tsv"
    inp.write_bytes("k\tv\nk\tあいうえお\n".encode("utf-8"))
    out = tmp_path / "out.tsv"

    assert main(["group", str(inp), "--output", str(out)]) == 1
    assert not out.exists()
    assert "CharsetViolation" in capsys.readouterr().err


def test_missing_input_is_io_error(tmp_path, capsys):
    assert main(["group", str(tmp_path / "nope.tsv"), "--output-dir", str(tmp_path)]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_unknown_mode_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["explode", str(tmp_path / "input.tsv")])
    assert exc.value.code == 2
