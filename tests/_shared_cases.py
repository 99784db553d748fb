"""Gadget libraries and chain scripts shared across assembler/pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from ropscript.gadgets import Gadget, GadgetTag, TagType


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


GADGETS: tuple[Gadget, ...] = (
    Gadget(name="pop", addr="1ABCD", desc="pop er0\npop pc", tags=(GadgetTag("er0"),)),
    Gadget(name="ret", addr="2FF00", desc="rt"),
    Gadget(
        name="setlr",
        addr="0A0A0",
        desc="mov lr, er2",
        tags=(GadgetTag("lr"), GadgetTag("clobbers r4", TagType.WARN)),
    ),
)


@dataclass(frozen=True, slots=True)
class ChainCase:
    name: str
    source: str
    error_count: int = 0


CHAIN_CASES: tuple[ChainCase, ...] = (
    ChainCase(name="empty", source=""),
    ChainCase(name="comment_only", source="// nothing here\n"),
    ChainCase(name="raw_hex", source="30 31 32 33\n"),
    ChainCase(name="odd_raw_hex", source="ABC"),
    ChainCase(name="gadgets", source="#pop;\n#-ret; #setlr;\n"),
    ChainCase(name="odd_hex_before_gadget", source="A #pop; B"),
    ChainCase(
        name="constants_and_values",
        source=_dedent(
            """
            $a = 5;
            $b = 0x10;
            [$a + $b] [$a - 6] [FFFF + 2]
            """
        ),
    ),
    ChainCase(
        name="anchors",
        source=_dedent(
            """
            #pop; 1234
            <loop>
            <-data>
            [loop] [$data + 2]
            """
        ),
    ),
    ChainCase(
        name="mixed_errors",
        source=_dedent(
            """
            #missing; [5 +] xyz
            [$later]
            $later = 1;
            #pop
            """
        ),
        error_count=4,
    ),
    ChainCase(name="crlf_lines", source="#pop;\r\nAB\r\n"),
)
