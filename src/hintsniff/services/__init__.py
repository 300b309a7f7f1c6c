"""Service layer for hintsniff.

This module provides the service that drives tokenization, checks and
fixing over files and directories.
"""

from hintsniff.services.checker_service import CheckerService, CheckResult, FileReport

__all__ = [
    "CheckResult",
    "CheckerService",
    "FileReport",
]
