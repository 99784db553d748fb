"""Symbol table for constants and anchors."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

WORD_MASK = 0xFFFF


class SymbolTable:
    """Name -> 16-bit value, filled strictly in source order.

    Redefining a name silently replaces the earlier value (last wins).
    """

    def __init__(self) -> None:
        self._values: dict[str, int] = {}

    def define(self, name: str, value: int) -> int:
        masked = value & WORD_MASK
        self._values[name] = masked
        return masked

    def resolve(self, name: str) -> int | None:
        return self._values.get(name)

    def as_dict(self) -> Mapping[str, int]:
        return MappingProxyType(dict(self._values))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
