"""
FileCollector: expands input paths into the ordered list of files to lint.

Directories are walked depth-first with a synchronous recursive walk, so the
returned list is complete once `collect()` returns.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from hintrunner.file_resolver.ignore import is_ignored
from hintrunner.file_resolver.types import CollectorConfig

log = logging.getLogger(__name__)


class FileCollector:
    """
    Collects files from a mix of files and directories, pruning anything that
    matches an ignore pattern and keeping only walked files whose name matches
    the extension pattern.
    """

    def __init__(self, config: CollectorConfig) -> None:
        self._config: CollectorConfig = config
        self._extension_regex = config.extension_regex

    def collect(self, roots: Sequence[str | os.PathLike[str]]) -> list[str]:
        """
        Collect files for every root, in discovery order.

        An explicitly named file is kept regardless of its extension. Roots
        that don't exist are logged and skipped.
        """
        files: list[str] = []
        for root in roots:
            files.extend(self._collect_path(os.fspath(root), explicit=True))
        return files

    def _collect_path(self, path: str, explicit: bool) -> Iterable[str]:
        if self._config.ignores and is_ignored(path, self._config.ignores):
            log.debug("Ignoring %s", path)
            return

        if not os.path.exists(path):
            log.warning("Can't open %s", path)
            return

        if os.path.isdir(path):
            # Like `os.walk()`, don't follow symlinked directories found while walking.
            if not explicit and os.path.islink(path):
                log.debug("Not following symlinked directory %s", path)
                return
            yield from self._walk_directory(path)
            return

        if explicit or self._extension_regex.search(os.path.basename(path)):
            yield path

    def _walk_directory(self, directory: str) -> Iterable[str]:
        """Recurse into each entry of `directory` in sorted name order."""
        try:
            entries = sorted(os.listdir(directory))
        except OSError as e:
            log.warning("Can't read directory %s: %s", directory, e)
            return

        for entry in entries:
            yield from self._collect_path(os.path.join(directory, entry), explicit=False)
