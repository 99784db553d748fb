"""Chain assembler: turns scanned tokens into bytes, symbols and a position map."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ropscript.assembler.expression import encode_le16, evaluate_value_block, parse_hex
from ropscript.assembler.options import AssemblerOptions
from ropscript.assembler.symbols import SymbolTable
from ropscript.diagnostics import (
    ANCHOR_EMPTY_NAME,
    ANCHOR_UNTERMINATED,
    CONSTANT_MALFORMED,
    CONSTANT_UNTERMINATED,
    GADGET_INVALID_ADDRESS,
    GADGET_UNDEFINED,
    GADGET_UNTERMINATED,
    SCAN_UNKNOWN_TOKEN,
    VALUE_UNTERMINATED,
    Diagnostic,
    DiagnosticSpec,
    count_errors,
    diagnostic_from_spec,
)
from ropscript.gadgets import Gadget, GadgetTable, InvalidGadgetAddress, encode_gadget_hex
from ropscript.lexer import Lexer, Token, TokenFlags, TokenKind, is_hex_digit, token_text

_UNTERMINATED: dict[TokenKind, DiagnosticSpec] = {
    TokenKind.CONSTANT_DEF: CONSTANT_UNTERMINATED,
    TokenKind.GADGET_REF: GADGET_UNTERMINATED,
    TokenKind.VALUE_BLOCK: VALUE_UNTERMINATED,
    TokenKind.ANCHOR: ANCHOR_UNTERMINATED,
}


@dataclass(frozen=True, slots=True)
class AssembledChain:
    """Result of one assembler pass.

    `position_map` has one script offset per hex character of `hex_chars`.
    Bytes produced by a multi-character token map to `(first, last)` offsets
    of that token; raw hex digits map to their own offsets.
    """

    source_text: str
    hex_chars: str
    position_map: tuple[int, ...]
    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...]
    symbols: Mapping[str, int]

    @property
    def output_bytes(self) -> bytes:
        return bytes.fromhex(self.hex_chars)

    @property
    def error_count(self) -> int:
        return count_errors(self.diagnostics)

    @property
    def is_empty(self) -> bool:
        return not self.hex_chars


class _ChainBuilder:
    """Accumulates hex characters with their source offsets."""

    def __init__(self) -> None:
        self._hex: list[str] = []
        self._positions: list[int] = []

    @property
    def byte_length(self) -> int:
        return (len(self._hex) + 1) // 2

    def append_nibble(self, digit: str, offset: int) -> None:
        self._hex.append(digit.upper())
        self._positions.append(offset)

    def align(self) -> None:
        # A pad nibble maps to the same place as the nibble it completes.
        if len(self._hex) % 2:
            self._hex.append("0")
            self._positions.append(self._positions[-1])

    def append_block(self, hex_text: str, first: int, last: int) -> None:
        self.align()
        self._hex.extend(hex_text.upper())
        for _ in range(len(hex_text) // 2):
            self._positions.append(first)
            self._positions.append(last)

    def finish(self) -> tuple[str, tuple[int, ...]]:
        self.align()
        return "".join(self._hex), tuple(self._positions)


class Assembler:
    """Drives one compile pass over a script.

    Holds only per-pass state; create a new instance (or call `assemble`) for
    every compile.
    """

    def __init__(
        self,
        source: str,
        gadgets: Iterable[Gadget] | GadgetTable = (),
        options: AssemblerOptions | None = None,
    ) -> None:
        self._source = source
        self._gadgets = GadgetTable.of(gadgets)
        self._options = options or AssemblerOptions()
        self._symbols = SymbolTable()
        self._chain = _ChainBuilder()
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []

    def assemble(self) -> AssembledChain:
        for token in Lexer(self._source).lex():
            self._tokens.append(self._assemble_token(token))

        hex_chars, position_map = self._chain.finish()
        return AssembledChain(
            source_text=self._source,
            hex_chars=hex_chars,
            position_map=position_map,
            tokens=tuple(self._tokens),
            diagnostics=tuple(self._diagnostics),
            symbols=self._symbols.as_dict(),
        )

    def _assemble_token(self, token: Token) -> Token:
        if token.is_incomplete:
            self._report(_UNTERMINATED[token.kind], token)
            return token

        match token.kind:
            case TokenKind.COMMENT:
                return token
            case TokenKind.CONSTANT_DEF:
                return self._define_constant(token)
            case TokenKind.GADGET_REF:
                return self._emit_gadget(token)
            case TokenKind.VALUE_BLOCK:
                return self._emit_value(token)
            case TokenKind.ANCHOR:
                return self._define_anchor(token)
            case TokenKind.HEX_LITERAL:
                self._emit_hex_literal(token)
                return token
            case _:
                return self._invalid(SCAN_UNKNOWN_TOKEN, token)

    def _define_constant(self, token: Token) -> Token:
        # Whitespace is insignificant anywhere inside a definition: `$a b = 1;` binds `ab`.
        parts = "".join(self._inner_text(token).split()).split("=")
        if len(parts) != 2:
            return self._invalid(CONSTANT_MALFORMED, token)
        name, value = parts[0], parse_hex(parts[1])
        if not name or value is None:
            return self._invalid(CONSTANT_MALFORMED, token)
        self._symbols.define(name, value)
        return token

    def _emit_gadget(self, token: Token) -> Token:
        name = self._inner_text(token)
        allow00 = not token.is_inverted
        if not allow00:
            name = name[1:]

        gadget = self._gadgets.get(name)
        if gadget is None:
            return self._invalid(GADGET_UNDEFINED, token, detail=f"`{name}` is not in the gadget library.")
        try:
            encoded = encode_gadget_hex(gadget.addr, allow00)
        except InvalidGadgetAddress:
            return self._invalid(GADGET_INVALID_ADDRESS, token, detail=f"`{name}` has address {gadget.addr!r}.")

        self._emit_block(encoded, token)
        return token

    def _emit_value(self, token: Token) -> Token:
        result = evaluate_value_block(self._inner_text(token), self._symbols)
        if result.error is not None:
            return self._invalid(result.error, token, detail=f"Term: `{result.term}`.")
        self._emit_block(encode_le16(result.value).hex(), token)
        return token

    def _define_anchor(self, token: Token) -> Token:
        name = self._inner_text(token)
        if token.is_inverted:
            name = name[1:]
            base = self._options.left_base
        else:
            base = self._options.right_base
        if not name:
            return self._invalid(ANCHOR_EMPTY_NAME, token)
        self._symbols.define(name, base + self._chain.byte_length)
        return token

    def _emit_hex_literal(self, token: Token) -> None:
        start = token.range.start.value
        for offset, ch in enumerate(token_text(self._source, token), start=start):
            if is_hex_digit(ch):
                self._chain.append_nibble(ch, offset)

    def _emit_block(self, hex_text: str, token: Token) -> None:
        self._chain.append_block(hex_text, token.range.start.value, token.range.end.value - 1)

    def _inner_text(self, token: Token) -> str:
        # Drop the leading sigil and the terminator.
        return token_text(self._source, token)[1:-1]

    def _invalid(self, spec: DiagnosticSpec, token: Token, *, detail: str | None = None) -> Token:
        self._report(spec, token, detail=detail)
        return token.with_flags(TokenFlags.INVALID)

    def _report(self, spec: DiagnosticSpec, token: Token, *, detail: str | None = None) -> None:
        self._diagnostics.append(diagnostic_from_spec(spec, token.range, token.line, detail=detail))


def assemble(
    source: str,
    gadgets: Iterable[Gadget] | GadgetTable = (),
    options: AssemblerOptions | None = None,
) -> AssembledChain:
    return Assembler(source, gadgets, options).assemble()
