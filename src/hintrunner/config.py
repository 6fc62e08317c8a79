"""
Lint configuration discovery and loading.

The effective configuration for a file comes from the first source that
applies: an explicit configuration supplied by the caller, the `{tool}Config`
field of the nearest `package.json`, or the nearest `.{tool}rc` walking up from
the file (falling back to `~/.{tool}rc`). Config files are JSON with comments
and may name a parent document with `extends`; the parent fills in only the
keys the child does not set.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import json5

from hintrunner.file_resolver.defaults import (
    DEFAULT_TOOL_NAME,
    MANIFEST_FILENAME,
    config_filename,
    manifest_field,
)
from hintrunner.file_resolver.finder import UpwardFileFinder

log = logging.getLogger(__name__)


class ConfigError(Exception):
    """A configuration file could not be used. Ends the run."""


class ConfigNotFoundError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class ConfigCycleError(ConfigError):
    """An `extends` chain leads back to a file already being loaded."""


@dataclass
class ConfigDocument:
    """
    A flattened configuration mapping and the file it was loaded from.

    `source` is `None` for documents supplied directly by the caller. Reserved
    option keys are `extends`, `globals` and `prereq`; all others are passed
    through to the analyzer untouched.
    """

    options: dict[str, Any] = field(default_factory=dict)
    source: Path | None = None

    @property
    def dirname(self) -> Path | None:
        return self.source.parent if self.source is not None else None


def _home_dir() -> str:
    for var in ("HOME", "HOMEPATH", "USERPROFILE"):
        value = os.environ.get(var)
        if value:
            return value
    return str(Path.home())


def find_config(
    file_path: str | os.PathLike[str],
    finder: UpwardFileFinder | None = None,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> str | None:
    """
    Find the config file for `file_path`: the nearest `.{tool_name}rc` from the
    file's directory up, else the one in the home directory, else `None`.
    """
    finder = finder if finder is not None else UpwardFileFinder()
    name = config_filename(tool_name)
    directory = os.path.dirname(os.path.abspath(file_path))

    project = finder.find(name, directory)
    if project:
        return project

    home = os.path.normpath(os.path.join(_home_dir(), name))
    if os.path.exists(home):
        return home
    return None


def _parse_config_file(path: Path) -> dict[str, Any]:
    try:
        data = json5.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ConfigParseError(f"Can't parse config file: {path}") from e
    if not isinstance(data, dict):
        raise ConfigParseError(f"Can't parse config file: {path} (expected an object)")
    return cast(dict[str, Any], data)


def load_config(
    config_path: str | os.PathLike[str] | None,
    _loading: tuple[Path, ...] = (),
) -> ConfigDocument:
    """
    Load a config file and flatten its `extends` chain.

    `None` yields an empty document. A path that doesn't exist raises
    `ConfigNotFoundError`, invalid content raises `ConfigParseError`, and an
    `extends` chain that revisits a file raises `ConfigCycleError`.
    """
    if config_path is None:
        return ConfigDocument()

    path = Path(os.path.abspath(config_path))
    if not path.exists():
        raise ConfigNotFoundError(f"Can't find config file: {path}")
    if path in _loading:
        chain = " -> ".join(str(p) for p in (*_loading, path))
        raise ConfigCycleError(f"Circular extends in config file: {path} ({chain})")

    options = _parse_config_file(path)
    document = ConfigDocument(options=options, source=path)

    parent_ref = options.pop("extends", None)
    if parent_ref:
        parent = load_config(path.parent / str(parent_ref), (*_loading, path))
        for key, value in parent.options.items():
            options.setdefault(key, value)
        log.debug("Config %s extends %s", path, parent.source)

    return document


def load_manifest_config(
    file_path: str | os.PathLike[str],
    finder: UpwardFileFinder | None = None,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> ConfigDocument | None:
    """
    Read the `{tool_name}Config` field from the nearest `package.json` above
    `file_path`. Returns `None` when there is no manifest, it can't be read,
    or it has no such mapping.
    """
    finder = finder if finder is not None else UpwardFileFinder()
    directory = os.path.dirname(os.path.abspath(file_path))
    manifest = finder.find(MANIFEST_FILENAME, directory)
    if not manifest:
        return None

    path = Path(os.path.abspath(manifest))
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        log.debug("Skipping unreadable manifest %s", path)
        return None

    embedded = data.get(manifest_field(tool_name)) if isinstance(data, dict) else None
    if not isinstance(embedded, Mapping):
        return None
    return ConfigDocument(options=dict(cast(Mapping[str, Any], embedded)), source=path)


class ConfigResolver:
    """
    Resolves the effective configuration for each file of a run.

    Precedence: explicit config > package manifest > discovered config file.
    An explicit config is returned as-is; discovered ones are loaded fresh on
    every call.
    """

    def __init__(
        self,
        explicit: ConfigDocument | Mapping[str, Any] | None = None,
        finder: UpwardFileFinder | None = None,
        tool_name: str = DEFAULT_TOOL_NAME,
    ) -> None:
        if explicit is not None and not isinstance(explicit, ConfigDocument):
            explicit = ConfigDocument(options=dict(explicit))
        self.explicit: ConfigDocument | None = explicit
        self.finder: UpwardFileFinder = finder if finder is not None else UpwardFileFinder()
        self.tool_name: str = tool_name

    def resolve_config(self, file_path: str | os.PathLike[str]) -> ConfigDocument:
        if self.explicit is not None:
            return self.explicit

        manifest = load_manifest_config(file_path, self.finder, self.tool_name)
        if manifest is not None:
            return manifest

        return load_config(find_config(file_path, self.finder, self.tool_name))
