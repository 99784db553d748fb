"""Chain assembler: symbols, value blocks and the compile pass."""

from ropscript.assembler.assembler import AssembledChain, Assembler, assemble
from ropscript.assembler.expression import (
    ExpressionResult,
    encode_le16,
    evaluate_terms,
    evaluate_value_block,
    parse_hex,
    split_terms,
)
from ropscript.assembler.options import (
    DEFAULT_LEFT_BASE_ADDRESS,
    DEFAULT_RIGHT_BASE_ADDRESS,
    DEFAULT_ROW_WIDTH,
    AssemblerOptions,
    parse_base_address,
)
from ropscript.assembler.symbols import WORD_MASK, SymbolTable

__all__ = [
    "DEFAULT_LEFT_BASE_ADDRESS",
    "DEFAULT_RIGHT_BASE_ADDRESS",
    "DEFAULT_ROW_WIDTH",
    "WORD_MASK",
    "AssembledChain",
    "Assembler",
    "AssemblerOptions",
    "ExpressionResult",
    "SymbolTable",
    "assemble",
    "encode_le16",
    "evaluate_terms",
    "evaluate_value_block",
    "parse_base_address",
    "parse_hex",
    "split_terms",
]
