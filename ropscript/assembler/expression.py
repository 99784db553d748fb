"""Value block (`[...]`) evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ropscript.assembler.symbols import WORD_MASK, SymbolTable
from ropscript.diagnostics import (
    VALUE_DANGLING_OPERATOR,
    VALUE_INVALID_LITERAL,
    VALUE_MISSING_OPERATOR,
    VALUE_UNDEFINED_SYMBOL,
    DiagnosticSpec,
)
from ropscript.lexer import is_hex_digit

OPERATORS = ("+", "-")


@dataclass(frozen=True, slots=True)
class ExpressionResult:
    """Outcome of evaluating one value block: a 16-bit value or the failing term."""

    value: int = 0
    error: DiagnosticSpec | None = None
    term: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_hex(text: str) -> int | None:
    """Parse a hex literal with an optional `0x` prefix; None when it is not one."""
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    if not digits or not all(is_hex_digit(ch) for ch in digits):
        return None
    return int(digits, 16)


def split_terms(text: str) -> list[str]:
    return text.split()


def encode_le16(value: int) -> bytes:
    return (value & WORD_MASK).to_bytes(2, "little")


def evaluate_terms(terms: Sequence[str], symbols: SymbolTable) -> ExpressionResult:
    """Left-to-right `+`/`-` accumulation over hex literals and symbols.

    An empty term list evaluates to 0. The latest operator wins when two are
    written in a row, and a leading operator combines with the initial 0.
    """
    accumulator = 0
    has_value = False
    pending: str | None = None

    for term in terms:
        if term in OPERATORS:
            pending = term
            continue

        if term.startswith("$"):
            operand = symbols.resolve(term[1:])
            if operand is None:
                return ExpressionResult(0, VALUE_UNDEFINED_SYMBOL, term)
        else:
            operand = parse_hex(term)
            if operand is None:
                # Bare anchor/constant names are accepted when they are not hex.
                operand = symbols.resolve(term)
            if operand is None:
                return ExpressionResult(0, VALUE_INVALID_LITERAL, term)

        if pending == "+":
            accumulator += operand
        elif pending == "-":
            accumulator -= operand
        elif has_value:
            return ExpressionResult(0, VALUE_MISSING_OPERATOR, term)
        else:
            accumulator = operand
        has_value = True
        pending = None

    if pending is not None:
        return ExpressionResult(0, VALUE_DANGLING_OPERATOR, pending)

    return ExpressionResult(accumulator & WORD_MASK)


def evaluate_value_block(inner_text: str, symbols: SymbolTable) -> ExpressionResult:
    return evaluate_terms(split_terms(inner_text), symbols)
