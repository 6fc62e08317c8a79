"""
Default names and extensions used during file discovery.

File names are derived from the tool name, so a tool called `jshint` reads
`.jshintrc`, `.jshintignore` and the `jshintConfig` field of `package.json`.
"""

from __future__ import annotations

DEFAULT_TOOL_NAME = "jshint"

# Files with these extensions are always linted when found by walking a directory.
DEFAULT_EXTENSIONS: list[str] = ["js"]

MANIFEST_FILENAME = "package.json"


def config_filename(tool_name: str) -> str:
    return f".{tool_name}rc"


def ignore_filename(tool_name: str) -> str:
    return f".{tool_name}ignore"


def manifest_field(tool_name: str) -> str:
    return f"{tool_name}Config"
