"""Ignore-file loading and path exclusion checks using pathspec."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

import pathspec

from hintrunner.file_resolver.defaults import DEFAULT_TOOL_NAME, ignore_filename
from hintrunner.file_resolver.finder import UpwardFileFinder

log = logging.getLogger(__name__)

# A bare name or prefix: no slash, except possibly a single trailing one.
_BARE_PREFIX = re.compile(r"^[^/]*/?$")


def _read_ignore_file(path: Path) -> list[str] | None:
    """
    Read an ignore file's lines, or return `None` if it can't be read
    (missing, unreadable, or not valid UTF-8).
    """
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Can't read ignore file %s: %s", path, e)
        return None


def _resolve_pattern(base_dir: str, line: str) -> str:
    if line.startswith("!"):
        return "!" + os.path.normpath(os.path.join(base_dir, line[1:].strip()))
    return os.path.normpath(os.path.join(base_dir, line.strip()))


def load_ignores(
    exclude: str | None = None,
    exclude_path: str | None = None,
    finder: UpwardFileFinder | None = None,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> list[str]:
    """
    Load ignore patterns, resolved to absolute paths.

    The ignore file is `exclude_path` if given, otherwise the nearest
    `.{tool_name}ignore` above the current directory. `exclude` is a single
    extra pattern placed ahead of the file's lines. Relative patterns resolve
    against the ignore file's directory (the current directory when there is
    no file). A leading `!` is kept in front of the resolved path.
    """
    finder = finder if finder is not None else UpwardFileFinder()
    file = finder.find(exclude_path or ignore_filename(tool_name))

    if not file and not exclude:
        return []

    lines: list[str] = []
    if file:
        lines = _read_ignore_file(Path(file)) or []
    lines.insert(0, exclude or "")

    base_dir = os.path.dirname(os.path.abspath(file)) if file else os.getcwd()
    patterns = [_resolve_pattern(base_dir, line) for line in lines if line.strip()]
    log.debug("Loaded %d ignore patterns from %s", len(patterns), file or "<exclude>")
    return patterns


@lru_cache(maxsize=1024)
def _compile_segment(segment: str) -> pathspec.PathSpec:
    # Anchored, so the segment only ever matches a single whole name.
    return pathspec.PathSpec.from_lines("gitignore", ["/" + segment])


def _segment_matches(segment: str, name: str) -> bool:
    # Wildcards don't match names starting with a dot; only a literal dot does.
    if name.startswith(".") and not segment.startswith("."):
        return False
    return _compile_segment(segment).match_file(name)


def _match_parts(pattern_parts: list[str], parts: list[str]) -> bool:
    """
    Match path segments against pattern segments. `**` spans any number of
    segments not starting with a dot. Once the pattern is used up, whatever is
    left of the path lies inside the matched directory, which also counts.
    """
    if not pattern_parts:
        return True
    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        for i in range(len(parts) + 1):
            if _match_parts(rest, parts[i:]):
                return True
            if i < len(parts) and parts[i].startswith("."):
                return False
        return False
    if not parts:
        return False
    return _segment_matches(head, parts[0]) and _match_parts(rest, parts[1:])


def _glob_matches(path: str, pattern: str) -> bool:
    """Glob-match an absolute path against a pattern anchored at the root."""
    parts = [p for p in Path(path).as_posix().lower().split("/") if p]
    pattern_parts = [p for p in pattern.lower().split("/") if p]
    if not parts or not pattern_parts:
        return False
    return _match_parts(pattern_parts, parts)


def is_ignored(path: str | os.PathLike[str], patterns: Iterable[str]) -> bool:
    """
    Check whether `path` is excluded by any of `patterns`.

    A pattern matches when it glob-matches the absolute path (case-insensitive),
    equals it exactly, or is a bare prefix that an existing path starts with.
    Patterns starting with `!` are compared as written, so they never exempt
    a path.
    """
    raw = os.fspath(path)
    absolute = os.path.abspath(raw)

    for pattern in patterns:
        if _glob_matches(absolute, pattern):
            return True
        if absolute == pattern:
            return True
        if os.path.exists(raw) and _BARE_PREFIX.match(pattern) and raw.startswith(pattern):
            return True
    return False
