from tsv_processor.errors import ErrorKind
from tsv_processor.validate import find_charset_violation, is_permitted


def test_printable_bounds_and_tab_are_permitted():
    assert is_permitted(" ")
    assert is_permitted("~")
    assert is_permitted("\t")
    assert not is_permitted("\x1f")
    assert not is_permitted("\x7f")


def test_clean_input_has_no_violation():
    assert find_charset_violation(["a\tb:c", "", "~!@#"]) is None


def test_first_violation_reports_line_and_code_point():
    err = find_charset_violation(["ok", "", "bad \u3042 and \u00e9"])
    assert err.kind == ErrorKind.CHARSET_VIOLATION.value
    assert err.line == 3
    assert err.char == "\u3042"
    assert err.code_point == "U+3042"
    assert "U+3042" in err.message


def test_control_character_is_rejected():
    err = find_charset_violation(["a\x00b"])
    assert err.line == 1
    assert err.code_point == "U+0000"
