"""Diagnostics."""

from ropscript.diagnostics.codes import (
    ANCHOR_EMPTY_NAME,
    ANCHOR_UNTERMINATED,
    CONSTANT_MALFORMED,
    CONSTANT_UNTERMINATED,
    GADGET_INVALID_ADDRESS,
    GADGET_UNDEFINED,
    GADGET_UNTERMINATED,
    SCAN_UNKNOWN_TOKEN,
    VALUE_DANGLING_OPERATOR,
    VALUE_INVALID_LITERAL,
    VALUE_MISSING_OPERATOR,
    VALUE_UNDEFINED_SYMBOL,
    VALUE_UNTERMINATED,
    DiagnosticSpec,
    Severity,
)
from ropscript.diagnostics.diagnostic import Diagnostic
from ropscript.diagnostics.report import (
    count_errors,
    diagnostic_from_spec,
    has_errors,
)

__all__ = [
    "ANCHOR_EMPTY_NAME",
    "ANCHOR_UNTERMINATED",
    "CONSTANT_MALFORMED",
    "CONSTANT_UNTERMINATED",
    "GADGET_INVALID_ADDRESS",
    "GADGET_UNDEFINED",
    "GADGET_UNTERMINATED",
    "SCAN_UNKNOWN_TOKEN",
    "VALUE_DANGLING_OPERATOR",
    "VALUE_INVALID_LITERAL",
    "VALUE_MISSING_OPERATOR",
    "VALUE_UNDEFINED_SYMBOL",
    "VALUE_UNTERMINATED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "count_errors",
    "diagnostic_from_spec",
    "has_errors",
]
