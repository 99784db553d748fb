"""Gadget library loading and name suggestions."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ropscript.gadgets.model import Gadget

LOGGER = logging.getLogger("ropscript.gadgets")

_QUERY_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-")


class GadgetLibraryError(ValueError):
    """Raised when a gadget library file cannot be decoded."""


def gadgets_from_data(data: Iterable[Mapping[str, Any]]) -> tuple[Gadget, ...]:
    return tuple(Gadget.from_dict(entry) for entry in data)


def load_gadget_library(path: str | Path) -> tuple[Gadget, ...]:
    """Load a JSON list of gadgets (`[{name, addr, desc, tags}, ...]`)."""
    library_path = Path(path)
    try:
        data = json.loads(library_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise GadgetLibraryError(f"{library_path}: invalid JSON ({exc.msg})") from exc
    if not isinstance(data, list):
        raise GadgetLibraryError(f"{library_path}: expected a JSON list of gadgets")

    gadgets = gadgets_from_data(data)
    LOGGER.debug("loaded %d gadgets from %s", len(gadgets), library_path)
    return gadgets


def gadget_query_at_cursor(text_before_cursor: str) -> str | None:
    """Return the partial gadget name being typed (`#que|`), or None."""
    line = text_before_cursor.rsplit("\n", 1)[-1]
    comment_start = line.find("//")
    if comment_start != -1:
        return None

    position = len(line)
    while position > 0 and line[position - 1] in _QUERY_CHARS:
        position -= 1
    if position == 0 or line[position - 1] != "#":
        return None
    return line[position:]


def suggest_gadgets(text_before_cursor: str, gadgets: Iterable[Gadget]) -> list[Gadget]:
    """Gadgets matching the `#query` before the cursor.

    A `-` prefixed query offers the zero-avoiding form, so candidates are
    compared (and returned) with a `-` prefixed name.
    """
    query = gadget_query_at_cursor(text_before_cursor)
    if query is None:
        return []

    inverted = query.startswith("-")
    needle = query.lower()
    suggestions: list[Gadget] = []
    for gadget in gadgets:
        candidate = Gadget(f"-{gadget.name}", gadget.addr, gadget.desc, gadget.tags) if inverted else gadget
        if needle in candidate.name.lower():
            suggestions.append(candidate)
    return suggestions
