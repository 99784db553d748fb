"""Lexer tokens."""

from dataclasses import dataclass, replace
from enum import IntEnum, IntFlag

from ropscript.text import TextRange


class TokenKind(IntEnum):
    COMMENT = 1  # //...
    CONSTANT_DEF = 2  # $name = value;
    GADGET_REF = 3  # #name; or #-name;
    VALUE_BLOCK = 4  # [...]
    ANCHOR = 5  # <name> or <-name>
    HEX_LITERAL = 6  # raw hex digits and whitespace
    OTHER = 7  # anything else

    @property
    def terminator(self) -> str | None:
        """Closing character of a delimited construct."""
        match self:
            case TokenKind.CONSTANT_DEF | TokenKind.GADGET_REF:
                return ";"
            case TokenKind.VALUE_BLOCK:
                return "]"
            case TokenKind.ANCHOR:
                return ">"
            case _:
                return None


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    INCOMPLETE = 1 << 0  # terminator missing
    INVERTED = 1 << 1  # `-` polarity marker (allow00 = false / left base)
    INVALID = 1 << 2  # set by the assembler when resolution fails


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned span of the script.

    `range` is absolute in the script; `line` is the zero-based line index.
    """

    kind: TokenKind
    range: TextRange
    line: int
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_incomplete(self) -> bool:
        return bool(self.flags & TokenFlags.INCOMPLETE)

    @property
    def is_inverted(self) -> bool:
        return bool(self.flags & TokenFlags.INVERTED)

    @property
    def is_valid(self) -> bool:
        return not self.flags & (TokenFlags.INVALID | TokenFlags.INCOMPLETE)

    def with_flags(self, flags: TokenFlags) -> "Token":
        return replace(self, flags=self.flags | flags)
