"""Tests for extracting script code from HTML."""

from __future__ import annotations

import pytest

from hintrunner.extract import extract

PAGE = (
    "<html>\n"
    "<head>\n"
    "<script>\n"
    "var a;\n"
    "</script>\n"
    "</head>\n"
    "<body>\n"
    '<script type="text/javascript">var b;</script>\n'
    "</body>\n"
    "</html>\n"
)


def test_auto_extracts_single_script() -> None:
    assert extract("<html><script>var x=1;</script></html>", "auto") == "var x=1;"


def test_auto_leaves_plain_code() -> None:
    assert extract("var x=1;", "auto") == "var x=1;"


def test_auto_detects_markup_after_whitespace() -> None:
    assert extract("  \n<script>go();</script>", "auto") == "\ngo();"


def test_auto_detects_markup_after_bom() -> None:
    assert extract("\ufeff<script>go();</script>", "auto") == "go();"


def test_never_returns_markup_unchanged() -> None:
    assert extract(PAGE, "never") == PAGE


def test_always_extracts_from_plain_code() -> None:
    assert extract("var x=1;", "always") == ""


def test_line_numbers_preserved() -> None:
    code = extract(PAGE, "auto")
    assert code == "\n\n" + "\nvar a;\n" + "\n\n\n" + "var b;"

    lines = code.split("\n")
    assert lines[3] == "var a;"
    assert lines[7] == "var b;"
    assert PAGE.split("\n")[3] == "var a;"
    assert "var b;" in PAGE.split("\n")[7]


def test_skips_non_javascript_types() -> None:
    page = (
        '<script type="text/template"><b>{{ name }}</b></script>\n'
        '<script type="TEXT/JAVASCRIPT">ok();</script>'
    )
    assert extract(page, "auto") == "\nok();"


def test_windows_line_breaks_kept() -> None:
    page = "<html>\r\n<script>run();</script>"
    assert extract(page, "auto") == "\r\nrun();"


def test_multiline_opening_tag() -> None:
    page = '<div></div>\n<script\n  src="x.js"\n>init();</script>'
    assert extract(page, "auto") == "\n\n\ninit();"


def test_uppercase_script_tags() -> None:
    assert extract("<SCRIPT>up();</SCRIPT>", "auto") == "up();"


def test_empty_script() -> None:
    assert extract("<html>\n<script></script>\n<script>b();</script>", "auto") == "\n\nb();"


def test_unknown_mode() -> None:
    with pytest.raises(ValueError, match="Unknown extract mode"):
        extract("var x;", "sometimes")
