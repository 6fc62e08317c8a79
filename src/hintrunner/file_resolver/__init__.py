"""
File discovery for lint runs: upward file search, ignore patterns, and
recursive collection of the files to lint.

No imports from `hintrunner` outside this package.

Usage::

    from hintrunner.file_resolver import CollectorConfig, FileCollector, load_ignores

    config = CollectorConfig(ignores=load_ignores(), extensions="ts,jsx")
    files = FileCollector(config).collect(["src", "lib/extra.js"])
"""

from hintrunner.file_resolver.collector import FileCollector
from hintrunner.file_resolver.defaults import DEFAULT_EXTENSIONS, DEFAULT_TOOL_NAME
from hintrunner.file_resolver.finder import PathCache, UpwardFileFinder
from hintrunner.file_resolver.ignore import is_ignored, load_ignores
from hintrunner.file_resolver.types import CollectorConfig, extension_pattern

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_TOOL_NAME",
    "CollectorConfig",
    "FileCollector",
    "PathCache",
    "UpwardFileFinder",
    "extension_pattern",
    "is_ignored",
    "load_ignores",
]
