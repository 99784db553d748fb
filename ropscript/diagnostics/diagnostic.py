"""Assembler diagnostics."""

from dataclasses import dataclass

from ropscript.diagnostics.codes import Severity
from ropscript.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A problem attached to one script token.

    `range` covers the whole token in script offsets and `line` is the
    zero-based line it sits on, for gutter markers. Only errors count
    toward a compile's error total; warnings flag unfinished constructs
    the user is probably still typing.
    """

    code: str
    message: str
    range: TextRange
    line: int
    severity: Severity = "error"
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"
