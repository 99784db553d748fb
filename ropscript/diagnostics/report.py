"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from ropscript.diagnostics.codes import DiagnosticSpec
from ropscript.diagnostics.diagnostic import Diagnostic
from ropscript.text import TextRange


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    range: TextRange,
    line: int,
    *,
    detail: str | None = None,
) -> Diagnostic:
    message = spec.message if detail is None else f"{spec.message} {detail}"
    return Diagnostic(
        code=spec.code,
        message=message,
        range=range,
        line=line,
        severity=spec.severity,
        hint=spec.hint,
    )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


def count_errors(diagnostics: Iterable[Diagnostic]) -> int:
    return sum(1 for d in diagnostics if d.is_error)
