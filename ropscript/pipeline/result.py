"""Compile result carrier with lazily built views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ropscript.assembler import AssembledChain, AssemblerOptions
from ropscript.diagnostics import has_errors
from ropscript.hexview import HexDump, ensure_non_empty, format_hex_dump

if TYPE_CHECKING:
    from ropscript.diagnostics import Diagnostic
    from ropscript.lexer import Token


@dataclass(slots=True)
class CompileResult:
    """One compile pass: bytes, position map, token spans and diagnostics.

    An empty chain is reported as the single placeholder byte `00` mapped to
    offset 0, so hosts always have something to display.
    """

    chain: AssembledChain
    options: AssemblerOptions
    _hex_dump: HexDump | None = field(default=None, init=False, repr=False)

    @property
    def source_text(self) -> str:
        return self.chain.source_text

    @property
    def hex_chars(self) -> str:
        return ensure_non_empty(self.chain.hex_chars, self.chain.position_map)[0]

    @property
    def position_map(self) -> tuple[int, ...]:
        return ensure_non_empty(self.chain.hex_chars, self.chain.position_map)[1]

    @property
    def output_bytes(self) -> bytes:
        return bytes.fromhex(self.hex_chars)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.chain.tokens

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self.chain.diagnostics)

    @property
    def error_count(self) -> int:
        return self.chain.error_count

    @property
    def has_errors(self) -> bool:
        return has_errors(self.chain.diagnostics)

    @property
    def symbols(self) -> Mapping[str, int]:
        return self.chain.symbols

    def hex_dump(self) -> HexDump:
        if self._hex_dump is None:
            self._hex_dump = format_hex_dump(
                self.chain.hex_chars,
                self.chain.position_map,
                left_base=self.options.left_base,
                right_base=self.options.right_base,
                row_width=self.options.row_width,
            )
        return self._hex_dump
