#!/usr/bin/env python
"""Dump scanner tokens, diagnostics and the hex view of a chain script."""

import argparse
from dataclasses import replace
import logging
from pathlib import Path

from ropscript.gadgets import load_gadget_library
from ropscript.lexer import dump_tokens
from ropscript.pipeline import compile_script
from ropscript.project import ProjectFile, load_project


def _load(path: Path, gadgets_path: Path | None) -> ProjectFile:
    if path.suffix == ".rop":
        project = load_project(path)
    else:
        project = ProjectFile(input=path.read_text(encoding="utf-8"))
    if gadgets_path is not None:
        project = replace(project, gadgets=load_gadget_library(gadgets_path))
    return project


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="A .rop project file or a plain script")
    parser.add_argument("--gadgets", type=Path, default=None, help="JSON gadget library to use instead")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    project = _load(args.path, args.gadgets)
    result = compile_script(project.input, project.gadgets, options=project.assembler_options())

    dump_tokens(list(result.tokens), result.source_text, result.diagnostics)

    print("\nSymbols:")
    for name, value in result.symbols.items():
        print(f"- {name} = {value:04X}")

    dump = result.hex_dump()
    print(f"\nHex ({dump.byte_count()} bytes, {result.error_count} errors):")
    for row in dump.rows:
        print(f"{row.left_label}  {row.to_text()}  {row.right_label}")


if __name__ == "__main__":
    main()
