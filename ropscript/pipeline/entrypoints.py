"""Compile entrypoint called by the editor on every change."""

from __future__ import annotations

from collections.abc import Iterable

from ropscript.assembler import AssemblerOptions, assemble
from ropscript.gadgets import Gadget, GadgetTable
from ropscript.pipeline.result import CompileResult


def compile_script(
    script: str,
    gadgets: Iterable[Gadget] | GadgetTable = (),
    left_base_address: str | None = None,
    right_base_address: str | None = None,
    *,
    options: AssemblerOptions | None = None,
) -> CompileResult:
    """Compile a chain script in one pass.

    Pure: no I/O and no state kept between calls, so hosts can call it on
    every keystroke and compare results.
    """
    resolved_options = _resolve_options(left_base_address, right_base_address, options=options)
    chain = assemble(script, GadgetTable.of(gadgets), resolved_options)
    return CompileResult(chain=chain, options=resolved_options)


def _resolve_options(
    left_base_address: str | None,
    right_base_address: str | None,
    *,
    options: AssemblerOptions | None,
) -> AssemblerOptions:
    if options is not None:
        if left_base_address is not None or right_base_address is not None:
            raise ValueError("Pass either options or base addresses, not both")
        return options
    return AssemblerOptions.from_addresses(left_base_address, right_base_address)
