import pytest

from ropscript.gadgets import InvalidGadgetAddress, encode_gadget_address, encode_gadget_hex


def test_allow00_encoding() -> None:
    assert encode_gadget_address("1ABCD", allow00=True) == bytes([0xCD, 0xAB, 0x01, 0x00])


def test_zero_avoiding_encoding() -> None:
    assert encode_gadget_address("1ABCD", allow00=False) == bytes([0xCD, 0xAB, 0x31, 0x30])


def test_zero_low_byte_becomes_01_only_when_avoiding_zeros() -> None:
    assert encode_gadget_hex("1AB00", allow00=False) == "01AB3130"
    assert encode_gadget_hex("1AB00", allow00=True) == "00AB0100"


def test_output_is_uppercase() -> None:
    assert encode_gadget_hex("0a0a0") == "A0A00000"


@pytest.mark.parametrize("addr", ["", "1ABC", "1ABCDE", "1ABCG", "0x123"])
def test_rejects_addresses_that_are_not_five_hex_digits(addr: str) -> None:
    with pytest.raises(InvalidGadgetAddress):
        encode_gadget_hex(addr)


def test_invalid_address_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        encode_gadget_address("zzzzz", allow00=False)
