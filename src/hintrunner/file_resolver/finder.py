"""Upward file search with a per-run memoization cache."""

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)


class PathCache:
    """
    Append-only mapping from a normalized query path to the file found for it
    (or `None` when the search reached the root without a match).

    One cache is meant to live for a single run. Entries are never invalidated,
    so config and ignore files are assumed not to change while it is in use.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str | None] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> str | None:
        return self._entries[key]

    def set(self, key: str, value: str | None) -> None:
        self._entries.setdefault(key, value)


class UpwardFileFinder:
    """
    Looks for a file by name in a directory and each of its ancestors,
    stopping at the filesystem root.
    """

    def __init__(self, cache: PathCache | None = None) -> None:
        self.cache: PathCache = cache if cache is not None else PathCache()

    def find(self, name: str, start_dir: str | os.PathLike[str] | None = None) -> str | None:
        """
        Return the normalized path of the nearest `name`, or `None`.

        The existence check joins the candidate onto the parent of the current
        directory. For an absolute `start_dir` that join yields the candidate
        itself; only relative start directories see the parent-relative check.
        """
        directory = os.fspath(start_dir) if start_dir is not None else os.getcwd()
        visited: list[str] = []
        result: str | None = None

        while True:
            candidate = os.path.normpath(os.path.join(directory, name))
            if candidate in self.cache:
                self.cache.hits += 1
                result = self.cache.get(candidate)
                break

            self.cache.misses += 1
            visited.append(candidate)
            parent = os.path.abspath(os.path.join(directory, os.pardir))

            if os.path.exists(os.path.join(parent, candidate)):
                result = candidate
                break
            if os.path.abspath(directory) == parent:
                break
            directory = parent

        # Every level visited on the way up shares the same answer.
        for key in visited:
            self.cache.set(key, result)

        log.debug("find %s from %s -> %s", name, start_dir, result)
        return result
