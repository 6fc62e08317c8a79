"""
Extraction of script code embedded in HTML.

Only the bodies of executable `<script>` elements are kept. The line breaks
between one script and the next are kept too, so line numbers reported for
the extracted code match the original document.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

EXTRACT_MODES = ("never", "always", "auto")

# A JS file won't start with a less-than character, whereas an HTML file should.
_LOOKS_LIKE_MARKUP = re.compile(r"^[\s\ufeff]*<")

_LINE_BREAK = re.compile(r"\n\r|\n|\r")

_SCRIPT_CLOSE = re.compile(r"</script", re.IGNORECASE)

_JS_TYPE = re.compile(r"text/javascript")


def _is_executable(script: Tag) -> bool:
    script_type = script.get("type")
    if isinstance(script_type, list):
        script_type = " ".join(script_type)
    return not script_type or bool(_JS_TYPE.search(script_type.lower()))


def _line_offsets(code: str) -> list[int]:
    """Offsets of the first character of each line, counting `\\n` only."""
    return [0] + [m.end() for m in re.finditer("\n", code)]


def extract(code: str, mode: str = "never") -> str:
    """
    Return the script code to lint from `code`.

    `never` returns `code` unchanged, `always` extracts unconditionally and
    `auto` extracts only when `code` starts with `<` (after whitespace).
    """
    if mode not in EXTRACT_MODES:
        raise ValueError(f"Unknown extract mode: {mode!r} (expected one of {EXTRACT_MODES})")
    if mode == "never" or (mode == "auto" and not _LOOKS_LIKE_MARKUP.match(code)):
        return code

    soup = BeautifulSoup(code, "html.parser")
    offsets = _line_offsets(code)
    chunks: list[str] = []
    index = 0

    for script in soup.find_all("script"):
        if not isinstance(script, Tag) or not _is_executable(script):
            continue
        if script.sourceline is None or script.sourcepos is None:
            continue

        start = offsets[script.sourceline - 1] + script.sourcepos
        close = _SCRIPT_CLOSE.search(code, start)
        close_start = close.start() if close else len(code)
        body = script.get_text()
        # The body runs right up to the closing tag.
        open_end = close_start - len(body)

        chunks.extend(_LINE_BREAK.findall(code, index, open_end))
        chunks.append(body)
        index = close_start

    return "".join(chunks)
