"""Gadget address encoding.

A gadget reference becomes four bytes: the low two address bytes, then the
top nibble tagged with the pointer region, then a fixed high byte. When zero
bytes must be avoided (payloads passed through NUL-terminated strings) the
region nibble and high byte switch to `3`/`30` and a `00` low byte becomes
`01`. This layout is fixed by the target and is not invertible.
"""

from ropscript.lexer import is_hex_digit

ADDRESS_DIGITS = 5


class InvalidGadgetAddress(ValueError):
    """Raised when a gadget address is not exactly five hex digits."""


def encode_gadget_hex(addr: str, allow00: bool = True) -> str:
    """Encode a gadget address as 8 uppercase hex characters."""
    if len(addr) != ADDRESS_DIGITS or not all(is_hex_digit(ch) for ch in addr):
        raise InvalidGadgetAddress(f"Invalid gadget address {addr!r}: expected {ADDRESS_DIGITS} hex digits")

    digits = addr.upper()
    low = digits[3:5]
    if low == "00" and not allow00:
        low = "01"
    mid = digits[1:3]
    region = ("0" if allow00 else "3") + digits[0]
    high = "00" if allow00 else "30"
    return low + mid + region + high


def encode_gadget_address(addr: str, allow00: bool = True) -> bytes:
    return bytes.fromhex(encode_gadget_hex(addr, allow00))
