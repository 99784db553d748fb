"""Project envelope: the compiler inputs stored in a `.rop` file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ropscript.assembler import DEFAULT_LEFT_BASE_ADDRESS, DEFAULT_RIGHT_BASE_ADDRESS, AssemblerOptions
from ropscript.gadgets import Gadget, gadgets_from_data

FORMAT_VERSION = 10


class ProjectFormatError(ValueError):
    """Raised when a project envelope cannot be decoded."""


@dataclass(frozen=True, slots=True)
class ProjectFile:
    input: str = ""
    left_start_address: str = DEFAULT_LEFT_BASE_ADDRESS
    right_start_address: str = DEFAULT_RIGHT_BASE_ADDRESS
    gadgets: tuple[Gadget, ...] = ()
    format_version: int = FORMAT_VERSION

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ProjectFile":
        # Empty or missing fields fall back to the defaults.
        gadgets = data.get("gadgets")
        if gadgets is None:
            gadgets = []
        if not isinstance(gadgets, list):
            raise ProjectFormatError("`gadgets` must be a list")
        version = data.get("formatVersion", data.get("ideVersion", FORMAT_VERSION))
        if not isinstance(version, int):
            raise ProjectFormatError("`formatVersion` must be an integer")
        return ProjectFile(
            input=str(data.get("input") or ""),
            left_start_address=str(data.get("leftStartAddress") or DEFAULT_LEFT_BASE_ADDRESS),
            right_start_address=str(data.get("rightStartAddress") or DEFAULT_RIGHT_BASE_ADDRESS),
            gadgets=gadgets_from_data(gadgets),
            format_version=version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "input": self.input,
            "leftStartAddress": self.left_start_address,
            "rightStartAddress": self.right_start_address,
            "gadgets": [gadget.to_dict() for gadget in self.gadgets],
            "formatVersion": self.format_version,
        }

    def assembler_options(self) -> AssemblerOptions:
        return AssemblerOptions(
            left_base_address=self.left_start_address,
            right_base_address=self.right_start_address,
        )
