"""Tests for ignore-file loading and matching."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hintrunner.file_resolver import is_ignored, load_ignores
from hintrunner.file_resolver.ignore import (
    _read_ignore_file,  # pyright: ignore[reportPrivateUsage]
)


def test_load_ignores_empty_without_file_or_exclude(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(tmp_path)
    assert load_ignores() == []


def test_load_ignores_resolves_against_ignore_file_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    (tmp_path / ".jshintignore").write_text("node_modules\n\n   \nbuild/*.js\n!keep.js\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    monkeypatch.chdir(sub)

    assert load_ignores() == [
        str(tmp_path / "node_modules"),
        str(tmp_path / "build" / "*.js"),
        "!" + str(tmp_path / "keep.js"),
    ]


def test_load_ignores_exclude_comes_first(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".jshintignore").write_text("dist\n")
    monkeypatch.chdir(tmp_path)
    assert load_ignores(exclude="vendor") == [str(tmp_path / "vendor"), str(tmp_path / "dist")]


def test_load_ignores_exclude_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert load_ignores(exclude="vendor") == [str(tmp_path / "vendor")]


def test_load_ignores_custom_exclude_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".jshintignore").write_text("not-used\n")
    custom = tmp_path / "conf" / "lint.ignore"
    custom.parent.mkdir()
    custom.write_text("generated\n")
    monkeypatch.chdir(tmp_path)

    assert load_ignores(exclude_path=str(custom)) == [str(tmp_path / "conf" / "generated")]


def test_load_ignores_tool_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".eslintignore").write_text("lib\n")
    monkeypatch.chdir(tmp_path)
    assert load_ignores(tool_name="eslint") == [str(tmp_path / "lib")]


def test_read_ignore_file_missing(tmp_path: Path):
    assert _read_ignore_file(tmp_path / "nonexistent") is None


def test_read_ignore_file_non_utf8(tmp_path: Path):
    ignore_file = tmp_path / ".jshintignore"
    ignore_file.write_bytes(b"\x80\x81\x82\xff\xfe")
    assert _read_ignore_file(ignore_file) is None


def test_is_ignored_exact_path(tmp_path: Path):
    target = tmp_path / "a.js"
    assert is_ignored(target, [str(target)])
    assert not is_ignored(tmp_path / "b.js", [str(target)])


def test_is_ignored_glob(tmp_path: Path):
    patterns = [str(tmp_path / "*.min.js")]
    assert is_ignored(tmp_path / "app.min.js", patterns)
    assert not is_ignored(tmp_path / "app.js", patterns)
    # A single star doesn't cross directories.
    assert not is_ignored(tmp_path / "sub" / "app.min.js", patterns)


def test_is_ignored_double_star(tmp_path: Path):
    patterns = [str(tmp_path / "**" / "*.min.js")]
    assert is_ignored(tmp_path / "sub" / "deeper" / "app.min.js", patterns)


def test_is_ignored_case_insensitive(tmp_path: Path):
    patterns = [str(tmp_path / "Vendor")]
    assert is_ignored(tmp_path / "vendor", patterns)
    assert is_ignored(tmp_path / "VENDOR" / "lib.js", patterns)


def test_is_ignored_directory_pattern_covers_children(tmp_path: Path):
    patterns = [str(tmp_path / "node_modules")]
    assert is_ignored(tmp_path / "node_modules" / "pkg" / "index.js", patterns)


def test_negated_pattern_never_matches(tmp_path: Path):
    target = tmp_path / "keep.js"
    target.write_text("")
    assert not is_ignored(target, ["!" + str(target)])


def test_negated_pattern_does_not_exempt(tmp_path: Path):
    target = tmp_path / "keep.js"
    target.write_text("")
    assert is_ignored(target, [str(tmp_path / "*.js"), "!" + str(target)])


def test_bare_prefix_requires_existing_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "a.js").write_text("")
    monkeypatch.chdir(tmp_path)

    assert is_ignored(os.path.join("lib", "a.js"), ["li"])
    assert not is_ignored(os.path.join("lib", "missing.js"), ["li"])


def test_slash_free_pattern_is_anchored_at_root(tmp_path):
    target = tmp_path / "li" / "a.js"
    target.parent.mkdir()
    target.write_text("")
    assert not is_ignored(target, ["li"])


def test_star_skips_dot_names(tmp_path):
    hidden = tmp_path / ".eslintrc.js"
    hidden.write_text("")
    assert not is_ignored(hidden, [str(tmp_path / "*")])
    assert is_ignored(hidden, [str(tmp_path / ".*")])
    assert is_ignored(tmp_path / "visible.js", [str(tmp_path / "*")])


def test_double_star_skips_dot_directories(tmp_path):
    patterns = [str(tmp_path / "**" / "*.js")]
    assert is_ignored(tmp_path / "src" / "app.js", patterns)
    assert not is_ignored(tmp_path / ".cache" / "app.js", patterns)
    assert is_ignored(tmp_path / ".cache" / "app.js", [str(tmp_path / ".cache" / "*.js")])
