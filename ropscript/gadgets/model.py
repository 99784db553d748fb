"""Gadget library models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class TagType(StrEnum):
    """Display category of a gadget tag."""

    INFO = "info"
    WARN = "warn"

    @staticmethod
    def parse(value: object) -> "TagType":
        """Unknown or missing tag types display as info."""
        try:
            return TagType(value)
        except ValueError:
            return TagType.INFO


@dataclass(frozen=True, slots=True)
class GadgetTag:
    name: str
    type: TagType = TagType.INFO


@dataclass(frozen=True, slots=True)
class Gadget:
    """A named code fragment whose 5-hex-digit address can be chained."""

    name: str
    addr: str
    desc: str = ""
    tags: tuple[GadgetTag, ...] = ()

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Gadget":
        tags = tuple(
            GadgetTag(name=str(tag.get("name", "")), type=TagType.parse(tag.get("type")))
            for tag in data.get("tags") or ()
        )
        return Gadget(
            name=str(data.get("name", "")),
            addr=str(data.get("addr", "")),
            desc=str(data.get("desc", "")),
            tags=tags,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "addr": self.addr,
            "desc": self.desc,
            "tags": [{"name": tag.name, "type": str(tag.type)} for tag in self.tags],
        }


@dataclass(frozen=True, slots=True)
class GadgetTable:
    """Ordered, read-only gadget collection indexed by exact name.

    On duplicate names the first gadget wins, matching a linear find.
    """

    gadgets: tuple[Gadget, ...] = ()
    _by_name: Mapping[str, Gadget] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: dict[str, Gadget] = {}
        for gadget in self.gadgets:
            by_name.setdefault(gadget.name, gadget)
        object.__setattr__(self, "_by_name", MappingProxyType(by_name))

    @staticmethod
    def of(gadgets: "Iterable[Gadget] | GadgetTable") -> "GadgetTable":
        if isinstance(gadgets, GadgetTable):
            return gadgets
        return GadgetTable(tuple(gadgets))

    def get(self, name: str) -> Gadget | None:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Gadget]:
        return iter(self.gadgets)

    def __len__(self) -> int:
        return len(self.gadgets)
