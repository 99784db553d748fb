"""Assembler configuration options."""

from dataclasses import dataclass

from ropscript.assembler.expression import parse_hex

DEFAULT_LEFT_BASE_ADDRESS = "E9E0"
DEFAULT_RIGHT_BASE_ADDRESS = "D710"
DEFAULT_ROW_WIDTH = 16
MAX_ADDRESS_DIGITS = 4


def parse_base_address(text: str) -> int:
    """Base addresses are 0-4 hex digits; an empty string means 0."""
    if text == "":
        return 0
    value = parse_hex(text)
    if value is None or len(text) > MAX_ADDRESS_DIGITS:
        raise ValueError(f"Invalid base address {text!r}: expected up to {MAX_ADDRESS_DIGITS} hex digits")
    return value


@dataclass(frozen=True, slots=True)
class AssemblerOptions:
    """Base addresses the chain is laid out at, plus display row width.

    The left base is used by `<-name>` anchors, the right base by `<name>`.
    """

    left_base_address: str = DEFAULT_LEFT_BASE_ADDRESS
    right_base_address: str = DEFAULT_RIGHT_BASE_ADDRESS
    row_width: int = DEFAULT_ROW_WIDTH

    def __post_init__(self) -> None:
        parse_base_address(self.left_base_address)
        parse_base_address(self.right_base_address)
        if self.row_width <= 0:
            raise ValueError("row_width must be positive")

    @staticmethod
    def from_addresses(left: str | None, right: str | None) -> "AssemblerOptions":
        """Build options from host strings, falling back to the defaults for None."""
        return AssemblerOptions(
            left_base_address=DEFAULT_LEFT_BASE_ADDRESS if left is None else left,
            right_base_address=DEFAULT_RIGHT_BASE_ADDRESS if right is None else right,
        )

    @property
    def left_base(self) -> int:
        return parse_base_address(self.left_base_address)

    @property
    def right_base(self) -> int:
        return parse_base_address(self.right_base_address)
