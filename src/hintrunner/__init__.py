"""
hintrunner: file discovery and configuration resolution for lint runs.
"""

from hintrunner.config import (
    ConfigCycleError,
    ConfigDocument,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigResolver,
    find_config,
    load_config,
    load_manifest_config,
)
from hintrunner.extract import extract
from hintrunner.runner import (
    Analyzer,
    DiagnosticResult,
    LintOrchestrator,
    LintReport,
    Options,
    gather,
    run,
)

__all__ = [
    "Analyzer",
    "ConfigCycleError",
    "ConfigDocument",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigResolver",
    "DiagnosticResult",
    "LintOrchestrator",
    "LintReport",
    "Options",
    "extract",
    "find_config",
    "gather",
    "load_config",
    "load_manifest_config",
    "run",
]
