"""Application of diagnostic fixes to source text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hintsniff.core.models import Diagnostic

logger = logging.getLogger(__name__)


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> tuple[str, int]:
    """Apply the fixes carried by ``diagnostics`` to ``source``.

    Fixes are applied back to front. A fix overlapping one that was already
    applied is skipped; running the checks again picks it up.

    Returns:
        The fixed source and the number of applied fixes.
    """
    fixes = sorted(
        {d.fix for d in diagnostics if d.fix is not None},
        key=lambda f: (f.offset, f.length),
        reverse=True,
    )

    applied = 0
    boundary = len(source) + 1
    for fix in fixes:
        end = fix.offset + fix.length
        if end > boundary:
            logger.debug(f"Skipping overlapping fix at offset {fix.offset}")
            continue
        source = source[: fix.offset] + fix.replacement + source[end:]
        boundary = fix.offset
        applied += 1
    return source, applied
