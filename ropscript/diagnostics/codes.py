"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"


# -------------------------
# Unclosed tokens (warnings, not counted)
# -------------------------
CONSTANT_UNTERMINATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONSTANT_UNTERMINATED",
    message="Constant definition is missing its closing `;`.",
    hint="Finish the definition like `$name = 1A;`.",
    severity="warning",
)

GADGET_UNTERMINATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GADGET_UNTERMINATED",
    message="Gadget reference is missing its closing `;`.",
    hint="Write gadget references as `#name;` or `#-name;`.",
    severity="warning",
)

VALUE_UNTERMINATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNTERMINATED",
    message="Value block is missing its closing `]`.",
    severity="warning",
)

ANCHOR_UNTERMINATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ANCHOR_UNTERMINATED",
    message="Anchor is missing its closing `>`.",
    hint="Write anchors as `<name>` or `<-name>`.",
    severity="warning",
)

# -------------------------
# Unknown input
# -------------------------
SCAN_UNKNOWN_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNKNOWN_TOKEN",
    message="Unrecognised input; it emits no bytes.",
    severity="error",
)

# -------------------------
# Resolution
# -------------------------
CONSTANT_MALFORMED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONSTANT_MALFORMED",
    message="Malformed constant definition. Expected `$name = <hex>;`.",
    severity="error",
)

GADGET_UNDEFINED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GADGET_UNDEFINED",
    message="Unknown gadget.",
    hint="Add the gadget to the project's gadget library or fix the name.",
    severity="error",
)

GADGET_INVALID_ADDRESS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GADGET_INVALID_ADDRESS",
    message="Gadget address must be exactly five hex digits.",
    severity="error",
)

ANCHOR_EMPTY_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ANCHOR_EMPTY_NAME",
    message="Anchor has no name.",
    severity="error",
)

# -------------------------
# Value block evaluation
# -------------------------
VALUE_UNDEFINED_SYMBOL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNDEFINED_SYMBOL",
    message="Value block references an undefined constant or anchor.",
    hint="Symbols must be defined before the line that uses them.",
    severity="error",
)

VALUE_INVALID_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_INVALID_LITERAL",
    message="Value block term is not a hex literal.",
    severity="error",
)

VALUE_MISSING_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_MISSING_OPERATOR",
    message="Two values in a row; expected `+` or `-` between them.",
    severity="error",
)

VALUE_DANGLING_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_DANGLING_OPERATOR",
    message="Value block ends with an operator.",
    severity="error",
)
