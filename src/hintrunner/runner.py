"""
Lint runs: gather the files to lint, resolve each file's configuration, and
hand the code to an analyzer.

The analyzer is any object following the `Analyzer` protocol. Reporting is
left to the `reporter` callable in `Options`.
"""

from __future__ import annotations

import copy
import logging
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from hintrunner.config import ConfigDocument, ConfigResolver
from hintrunner.extract import extract
from hintrunner.file_resolver import (
    DEFAULT_TOOL_NAME,
    CollectorConfig,
    FileCollector,
    PathCache,
    UpwardFileFinder,
    load_ignores,
)

log = logging.getLogger(__name__)

STDIN_NAME = "stdin"


class Analyzer(Protocol):
    """The lint engine that checks a piece of source code."""

    errors: Sequence[Any]

    def check(
        self, source: str, options: dict[str, Any], predefined: Mapping[str, Any] | None
    ) -> bool:
        """Lint `source`, returning `True` when no problems were found."""
        ...

    def data(self) -> Mapping[str, Any] | None:
        """Metadata about the last checked source, if any."""
        ...


@dataclass(frozen=True)
class DiagnosticResult:
    file: str
    error: Any


@dataclass
class LintReport:
    """Diagnostics and per-file metadata accumulated over a run."""

    results: list[DiagnosticResult] = field(default_factory=list)
    data: list[dict[str, Any]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.results


Reporter = Callable[..., Any]


@dataclass
class Options:
    """Options for a lint run, as produced by the command-line layer."""

    args: list[str] = field(default_factory=list)
    config: ConfigDocument | Mapping[str, Any] | None = None
    reporter: Reporter | None = None
    ignores: list[str] | None = None
    exclude: str | None = None
    exclude_path: str | None = None
    extensions: str | list[str] | None = None
    extract: str = "never"
    verbose: bool = False
    use_stdin: bool = False
    filename: str | None = None
    tool_name: str = DEFAULT_TOOL_NAME


class LintOrchestrator:
    """
    Prepares code and configuration for the analyzer and records what it
    reports. Results accumulate in `report` across calls.
    """

    def __init__(self, analyzer: Analyzer, extract_mode: str = "never") -> None:
        self.analyzer: Analyzer = analyzer
        self.extract_mode: str = extract_mode
        self.report: LintReport = LintReport()

    def lint(
        self, code: str, config: ConfigDocument | None = None, file: str | None = None
    ) -> LintReport:
        """
        Lint `code` with `config` and record diagnostics and metadata under
        `file` (or `"stdin"`). Returns a report for this call only.

        `prereq` files are read relative to the config's directory and placed
        ahead of `code`; `globals` are passed to the analyzer as predefined
        names rather than as an option. The caller's config is not modified.
        """
        config = config if config is not None else ConfigDocument()
        options: dict[str, Any] = copy.deepcopy(config.options)
        name = file or STDIN_NAME
        base_dir = config.dirname if config.dirname is not None else Path.cwd()

        buffer: list[str] = []
        for prereq in options.pop("prereq", None) or []:
            prereq_path = base_dir / prereq
            if not prereq_path.is_file():
                continue
            try:
                buffer.append(prereq_path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as e:
                log.warning("Can't open prereq %s: %s", prereq_path, e)

        predefined = options.pop("globals", None)
        options.pop("extends", None)

        buffer.append(code)
        source = "\n".join(buffer)
        source = source.removeprefix("\ufeff")  # Remove potential Unicode BOM.

        report = LintReport()
        if not self.analyzer.check(source, options, predefined):
            for error in self.analyzer.errors:
                if error:
                    report.results.append(DiagnosticResult(file=name, error=error))

        lint_data = self.analyzer.data()
        if lint_data is not None:
            report.data.append({**lint_data, "file": name})

        self.report.results.extend(report.results)
        self.report.data.extend(report.data)
        return report

    def analyze_file(self, path: str, config: ConfigDocument | None = None) -> LintReport | None:
        """Read and lint one file. Returns `None` if the file can't be read."""
        try:
            code = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Can't open %s: %s", path, e)
            return None
        return self.lint(extract(code, self.extract_mode), config, path)


def gather(options: Options, finder: UpwardFileFinder | None = None) -> list[str]:
    """
    Gather all files that need to be linted, excluding those matched by
    `options.ignores` or, when that is unset, by the ignore file.
    """
    if options.ignores is None:
        ignores = load_ignores(
            options.exclude, options.exclude_path, finder=finder, tool_name=options.tool_name
        )
    else:
        ignores = [os.path.abspath(target) for target in options.ignores]

    collector = FileCollector(CollectorConfig(ignores=ignores, extensions=options.extensions))
    return collector.collect(options.args)


def run(
    options: Options,
    analyzer: Analyzer,
    callback: Callable[[bool], Any] | None = None,
) -> bool:
    """
    Gather, lint and report. Returns `True` if no file produced a diagnostic.

    Config errors (`ConfigError`) propagate and end the run. When
    `options.use_stdin` is set, standard input is linted instead of the
    gathered files, with configuration resolved for `options.filename`.
    """
    finder = UpwardFileFinder(PathCache())
    resolver = ConfigResolver(options.config, finder=finder, tool_name=options.tool_name)
    orchestrator = LintOrchestrator(analyzer, options.extract)

    if options.use_stdin:
        code = sys.stdin.read()
        target = options.filename or os.path.join(os.getcwd(), STDIN_NAME)
        config = resolver.resolve_config(target)
        orchestrator.lint(extract(code, options.extract), config, options.filename)
    else:
        files = gather(options, finder)
        log.debug("Gathered %d files", len(files))
        for file in files:
            orchestrator.analyze_file(file, resolver.resolve_config(file))

    report = orchestrator.report
    if options.reporter is not None:
        options.reporter(report.results, report.data, verbose=options.verbose)
    if callback is not None:
        callback(report.passed)
    return report.passed
