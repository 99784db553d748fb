"""Compile entrypoint and result carrier."""

from ropscript.pipeline.entrypoints import compile_script
from ropscript.pipeline.result import CompileResult

__all__ = [
    "CompileResult",
    "compile_script",
]
