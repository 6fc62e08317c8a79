"""Configuration types for file collection."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from hintrunner.file_resolver.defaults import DEFAULT_EXTENSIONS


def extension_pattern(extensions: str | Sequence[str] | None = None) -> re.Pattern[str]:
    """
    Build the regex that file names found by walking must match.

    `extensions` adds to `DEFAULT_EXTENSIONS` and may be a comma-separated
    string (`"ts, .jsx"`) or a sequence. Dots and spaces are stripped.
    """
    if extensions is None:
        extra: list[str] = []
    elif isinstance(extensions, str):
        extra = extensions.split(",")
    else:
        extra = list(extensions)

    names = list(DEFAULT_EXTENSIONS)
    for ext in extra:
        cleaned = ext.replace(".", "").replace(" ", "")
        if cleaned:
            names.append(re.escape(cleaned))
    return re.compile(r"\.(" + "|".join(names) + r")$")


@dataclass
class CollectorConfig:
    """
    Configuration for file collection.

    `ignores` holds patterns already resolved to absolute form (see
    `load_ignores`). `extensions` lists extra extensions on top of `.js`.
    """

    ignores: list[str] = field(default_factory=list)
    extensions: str | list[str] | None = None

    @property
    def extension_regex(self) -> re.Pattern[str]:
        return extension_pattern(self.extensions)
