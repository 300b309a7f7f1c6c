"""Checker service for coordinating file analysis.

This module provides the CheckerService for discovering source files,
tokenizing them, running the configured checks and applying fixes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hintsniff.adapters import PhpTokenizer, Tokenizer
from hintsniff.analysis.functions import describe_functions
from hintsniff.checks import Check, apply_fixes, get_default_checks, run_checks
from hintsniff.core.config import HintsniffConfig, get_config
from hintsniff.core.models import Diagnostic, FunctionDescriptor

logger = logging.getLogger(__name__)

# Fixes may be skipped when they overlap; later passes pick them up.
_MAX_FIX_PASSES = 5


@dataclass
class FileReport:
    """Result of checking a single file."""

    path: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixes_applied: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class CheckResult:
    """Result of a check run over one or more paths."""

    files: list[FileReport] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def files_checked(self) -> int:
        return len(self.files)

    @property
    def diagnostics_count(self) -> int:
        return sum(len(report.diagnostics) for report in self.files)

    @property
    def fixes_applied(self) -> int:
        return sum(report.fixes_applied for report in self.files)

    @property
    def success(self) -> bool:
        """No diagnostics and no errors."""
        return self.diagnostics_count == 0 and not self.errors


class CheckerService:
    """Service for running checks over source files.

    Tokenizes each file once per pass, runs every enabled check over the
    resulting buffer and, in fix mode, writes fixed sources back to disk.
    """

    def __init__(
        self,
        config: HintsniffConfig | None = None,
        tokenizer: Tokenizer | None = None,
        checks: list[Check] | None = None,
    ) -> None:
        """Initialize checker service.

        Args:
            config: Configuration, defaults to the global configuration.
            tokenizer: Tokenizer to use, defaults to the PHP tokenizer.
            checks: Checks to run, defaults to the checks enabled in config.
        """
        self._config = config or get_config()
        self._tokenizer = tokenizer or PhpTokenizer()
        self._checks = checks if checks is not None else get_default_checks(self._config)

    def discover(self, path: Path) -> list[Path]:
        """List files to check under ``path`` (or ``path`` itself if it is a file)."""
        if path.is_file():
            return [path]
        extensions = {ext.lower() for ext in self._config.file_extensions}
        return sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in extensions)

    def check_source(self, source: str) -> tuple[list[Diagnostic], list[str]]:
        buffer = self._tokenizer.tokenize(source)
        return run_checks(buffer, self._checks)

    def check_file(self, path: Path, fix: bool = False) -> FileReport:
        """Check one file, optionally fixing it in place.

        Raises:
            OSError: If the file cannot be read or written.
            MalformedBufferError: If the file cannot be tokenized consistently.
        """
        report = FileReport(path=path)
        source = path.read_text(encoding="utf-8")
        diagnostics, errors = self.check_source(source)

        if fix:
            fixed = source
            for _ in range(_MAX_FIX_PASSES):
                fixed, applied = apply_fixes(fixed, diagnostics)
                if applied == 0:
                    break
                report.fixes_applied += applied
                diagnostics, errors = self.check_source(fixed)
            if fixed != source:
                path.write_text(fixed, encoding="utf-8")
                logger.info(f"Fixed {report.fixes_applied} problem(s) in {path}")

        report.diagnostics = diagnostics
        report.errors = errors
        return report

    def check_path(self, path: Path, fix: bool = False) -> CheckResult:
        """Check every matching file under ``path``."""
        result = CheckResult()

        if not path.exists():
            result.errors.append(f"Path does not exist: {path}")
            return result

        for file_path in self.discover(path):
            try:
                report = self.check_file(file_path, fix=fix)
            except Exception as exc:
                logger.warning(
                    f"Failed to check {file_path}: {exc}",
                    exc_info=logger.isEnabledFor(logging.DEBUG),
                )
                result.errors.append(f"{file_path}: {exc}")
                continue
            result.files.append(report)
            result.errors.extend(f"{file_path}: {error}" for error in report.errors)

        return result

    def describe_file(self, path: Path) -> list[FunctionDescriptor]:
        """Descriptors of every function, method and closure in a file."""
        return describe_functions(self._tokenizer.tokenize_file(path))
