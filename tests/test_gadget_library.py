import json
from pathlib import Path

import pytest

from ropscript.gadgets import (
    Gadget,
    GadgetLibraryError,
    GadgetTable,
    gadget_query_at_cursor,
    load_gadget_library,
    suggest_gadgets,
)
from tests._shared_cases import GADGETS


def test_load_gadget_library(tmp_path: Path) -> None:
    path = tmp_path / "gadgets.json"
    path.write_text(json.dumps([gadget.to_dict() for gadget in GADGETS]), encoding="utf-8")

    assert load_gadget_library(path) == GADGETS


def test_load_gadget_library_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "gadgets.json"
    path.write_text('{"name": "pop"}', encoding="utf-8")

    with pytest.raises(GadgetLibraryError):
        load_gadget_library(path)


def test_load_gadget_library_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "gadgets.json"
    path.write_text("[", encoding="utf-8")

    with pytest.raises(GadgetLibraryError):
        load_gadget_library(path)


def test_gadget_table_first_duplicate_wins() -> None:
    table = GadgetTable.of([Gadget("pop", "11111"), Gadget("pop", "22222")])

    assert table.get("pop") == Gadget("pop", "11111")
    assert "pop" in table
    assert len(table) == 2
    assert GadgetTable.of(table) is table


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#po", "po"),
        ("AB #-se", "-se"),
        ("#", ""),
        ("#pop; 12", None),
        ("// #po", None),
        ("#pop;\n#r", "r"),
        ("no hash", None),
    ],
)
def test_gadget_query_at_cursor(text: str, expected: str | None) -> None:
    assert gadget_query_at_cursor(text) == expected


def test_suggestions_match_substring_case_insensitively() -> None:
    assert [g.name for g in suggest_gadgets("#PO", GADGETS)] == ["pop"]
    assert [g.name for g in suggest_gadgets("#e", GADGETS)] == ["ret", "setlr"]


def test_inverted_query_suggests_prefixed_names() -> None:
    suggestions = suggest_gadgets("12 #-s", GADGETS)

    assert [g.name for g in suggestions] == ["-setlr"]
    assert suggestions[0].addr == "0A0A0"


def test_bare_hash_suggests_everything() -> None:
    assert len(suggest_gadgets("#", GADGETS)) == len(GADGETS)


def test_no_suggestions_outside_gadget_reference() -> None:
    assert suggest_gadgets("AB CD", GADGETS) == []


def test_gadget_table_index_is_not_part_of_identity() -> None:
    first = GadgetTable((Gadget("pop", "1ABCD"),))
    second = GadgetTable((Gadget("pop", "1ABCD"),))

    assert first == second
    assert "_by_name" not in repr(first)
    assert first.get("pop") == Gadget("pop", "1ABCD")
