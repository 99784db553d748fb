import pytest

from ropscript.hexview import ByteMapping, ensure_non_empty, format_hex_dump
from ropscript.pipeline import compile_script
from tests._shared_cases import GADGETS


def test_empty_stream_shows_single_placeholder_byte() -> None:
    dump = format_hex_dump("", ())

    assert len(dump.rows) == 1
    assert dump.rows[0].bytes == ("00",) * 16
    assert dump.rows[0].mappings[0] == ByteMapping(0, 0)
    assert dump.rows[0].mappings[1] == ByteMapping(None, None)


def test_ensure_non_empty_keeps_real_streams() -> None:
    assert ensure_non_empty("AB", [3, 4]) == ("AB", (3, 4))
    assert ensure_non_empty("", []) == ("00", (0, 0))


def test_rows_are_sixteen_bytes_and_final_row_is_padded() -> None:
    hex_chars = "11" * 17
    positions = tuple(range(34))

    dump = format_hex_dump(hex_chars, positions, left_base=0xE9E0, right_base=0xD710)

    assert len(dump.rows) == 2
    assert dump.rows[1].bytes == ("11",) + ("00",) * 15
    assert dump.rows[1].mappings[0] == ByteMapping(32, 33)
    assert dump.rows[1].mappings[1] == ByteMapping(None, None)
    assert dump.rows[1].left_label == "E9F0"
    assert dump.rows[1].right_label == "D720"


def test_address_labels_wrap_to_four_digits() -> None:
    dump = format_hex_dump("11" * 17, tuple(range(34)), left_base=0xFFF8)

    assert dump.rows[1].left_label == "0008"


def test_custom_row_width() -> None:
    dump = format_hex_dump("AABBCC", (0, 1, 2, 3, 4, 5), row_width=2)

    assert [row.bytes for row in dump.rows] == [("AA", "BB"), ("CC", "00")]


def test_position_map_length_must_match() -> None:
    with pytest.raises(ValueError):
        format_hex_dump("AB", (0,))


@pytest.mark.parametrize(
    ("mapping", "expected"),
    [
        (ByteMapping(0, 4), (0, 5)),
        (ByteMapping(7, 7), (7, 8)),
        (ByteMapping(3, None), (3, 4)),
        (ByteMapping(None, 9), (9, 10)),
        (ByteMapping(None, None), (0, 0)),
    ],
)
def test_byte_mapping_input_range(mapping: ByteMapping, expected: tuple[int, int]) -> None:
    assert mapping.input_range().as_tuple() == expected


def test_byte_click_selects_source_range() -> None:
    dump = compile_script("#pop; AB", GADGETS).hex_dump()

    assert dump.input_range_for(0, 0).as_tuple() == (0, 5)
    assert dump.input_range_for(0, 3).as_tuple() == (0, 5)
    assert dump.input_range_for(0, 4).as_tuple() == (6, 8)
    assert dump.input_range_for(0, 5).as_tuple() == (0, 0)
    assert dump.input_range_for(3, 0).as_tuple() == (0, 0)


def test_caret_locates_byte() -> None:
    dump = compile_script("#pop; AB", GADGETS).hex_dump()

    assert dump.find_byte(2) == (0, 0)
    assert dump.find_byte(7) == (0, 4)
    assert dump.find_byte(5) is None
    assert dump.find_byte(5, 7) == (0, 4)


def test_caret_on_second_row() -> None:
    source = "00 " * 16 + "\nAB"
    dump = compile_script(source).hex_dump()

    assert dump.find_byte(len(source) - 1) == (1, 0)


def test_byte_addresses() -> None:
    dump = compile_script("AB", (), "E9E0", "D710").hex_dump()

    assert dump.byte_addresses(1, 2) == ("E9F2", "D722")


def test_byte_count_ignores_trailing_zero_bytes() -> None:
    assert format_hex_dump("00AB00", (0, 1, 3, 4, 6, 7)).byte_count() == 2
    assert format_hex_dump("", ()).byte_count() == 0


def test_to_text_is_space_separated_rows() -> None:
    dump = format_hex_dump("AB" * 17, tuple(range(34)))

    lines = dump.to_text().split("\n")
    assert len(lines) == 2
    assert lines[0] == " ".join(["AB"] * 16)
    assert lines[1] == "AB" + " 00" * 15
