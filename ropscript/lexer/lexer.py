"""Line scanner for chain scripts."""

from typing import Final

from ropscript.diagnostics import Diagnostic
from ropscript.lexer.tokens import Token, TokenFlags, TokenKind
from ropscript.text import TextRange, slice_text_range

HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")


def is_hex_digit(ch: str) -> bool:
    return ch in HEX_DIGITS


class Lexer:
    """Single-pass scanner that classifies each run of a line by its leading character.

    The lexer only recognises spans. Resolving names and emitting bytes is the
    assembler's job, so every token here is either complete or INCOMPLETE.
    """

    def __init__(self, source: str) -> None:
        self._source = source

    @property
    def source(self) -> str:
        """Original script text."""
        return self._source

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        line_start = 0
        for line_index, line in enumerate(self._source.split("\n")):
            tokens.extend(self.lex_line(line, line_start=line_start, line_index=line_index))
            line_start += len(line) + 1
        return tokens

    def lex_line(self, line: str, *, line_start: int = 0, line_index: int = 0) -> list[Token]:
        tokens: list[Token] = []
        position = 0
        while position < len(line):
            ch = line[position]

            if ch.isspace():
                position += 1
                continue

            if ch == "/" and _peek(line, position + 1) == "/":
                tokens.append(self._token(TokenKind.COMMENT, position, len(line), line_start, line_index))
                break

            if ch == "$":
                end, flags = _scan_delimited(line, position, ";", stop_at_space=False)
                tokens.append(self._token(TokenKind.CONSTANT_DEF, position, end, line_start, line_index, flags))
            elif ch == "#":
                end, flags = _scan_delimited(line, position, ";", stop_at_space=True)
                if _peek(line, position + 1) == "-":
                    flags |= TokenFlags.INVERTED
                tokens.append(self._token(TokenKind.GADGET_REF, position, end, line_start, line_index, flags))
            elif ch == "[":
                end, flags = _scan_delimited(line, position, "]", stop_at_space=False)
                tokens.append(self._token(TokenKind.VALUE_BLOCK, position, end, line_start, line_index, flags))
            elif ch == "<":
                end, flags = _scan_delimited(line, position, ">", stop_at_space=True)
                if _peek(line, position + 1) == "-":
                    flags |= TokenFlags.INVERTED
                tokens.append(self._token(TokenKind.ANCHOR, position, end, line_start, line_index, flags))
            elif is_hex_digit(ch):
                end, last_digit = _scan_hex_run(line, position)
                tokens.append(self._token(TokenKind.HEX_LITERAL, position, last_digit + 1, line_start, line_index))
            else:
                end = _scan_other_run(line, position)
                tokens.append(self._token(TokenKind.OTHER, position, end, line_start, line_index))

            position = end
        return tokens

    @staticmethod
    def _token(
        kind: TokenKind,
        start: int,
        end: int,
        line_start: int,
        line_index: int,
        flags: TokenFlags = TokenFlags.NONE,
    ) -> Token:
        return Token(kind, TextRange.from_offsets(start, end).shift(line_start), line_index, flags)


def _peek(line: str, index: int) -> str:
    if index >= len(line):
        return "\0"
    return line[index]


def _scan_delimited(line: str, start: int, terminator: str, *, stop_at_space: bool) -> tuple[int, TokenFlags]:
    # Returns the exclusive end (past the terminator when present).
    position = start + 1
    while position < len(line):
        ch = line[position]
        if ch == terminator:
            return position + 1, TokenFlags.NONE
        if stop_at_space and ch == " ":
            break
        position += 1
    return position, TokenFlags.INCOMPLETE


def _scan_hex_run(line: str, start: int) -> tuple[int, int]:
    # Returns (run end, index of the last hex digit in the run).
    position = start
    last_digit = start
    while position < len(line):
        ch = line[position]
        if is_hex_digit(ch):
            last_digit = position
        elif not ch.isspace():
            break
        position += 1
    return position, last_digit


def _scan_other_run(line: str, start: int) -> int:
    position = start + 1
    while position < len(line):
        ch = line[position]
        if is_hex_digit(ch) or ch.isspace():
            break
        position += 1
    return position


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(
            f"{i:03d} L{tok.line + 1:<4} {tok.kind.name:<13} range={tok.range.as_tuple()} "
            f"flags={tok.flags!r} text={text!r}"
        )

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} L{d.line + 1} range={d.range.as_tuple()} message={d.message}")
