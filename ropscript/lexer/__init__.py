"""Lexer."""

from ropscript.lexer.lexer import HEX_DIGITS, Lexer, dump_tokens, is_hex_digit, token_text
from ropscript.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "HEX_DIGITS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "is_hex_digit",
    "token_text",
]
