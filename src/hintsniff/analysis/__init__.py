"""Signature extraction over token buffers.

All helpers are pure functions of a buffer and a token pointer; they hold no
state between calls and can run concurrently over a shared buffer.
"""

from hintsniff.analysis.control_flow import ReturnSummary, scan_returns
from hintsniff.analysis.functions import (
    describe_function,
    describe_functions,
    find_return_type_hint,
    get_fully_qualified_name,
    get_function_pointers,
    get_name,
    has_return_type_hint,
    is_abstract,
    is_method,
)

__all__ = [
    "ReturnSummary",
    "describe_function",
    "describe_functions",
    "find_return_type_hint",
    "get_fully_qualified_name",
    "get_function_pointers",
    "get_name",
    "has_return_type_hint",
    "is_abstract",
    "is_method",
    "scan_returns",
]
