"""Gadget library models, address encoding and suggestions."""

from ropscript.gadgets.encode import (
    ADDRESS_DIGITS,
    InvalidGadgetAddress,
    encode_gadget_address,
    encode_gadget_hex,
)
from ropscript.gadgets.library import (
    GadgetLibraryError,
    gadget_query_at_cursor,
    gadgets_from_data,
    load_gadget_library,
    suggest_gadgets,
)
from ropscript.gadgets.model import Gadget, GadgetTable, GadgetTag, TagType

__all__ = [
    "ADDRESS_DIGITS",
    "Gadget",
    "GadgetLibraryError",
    "GadgetTable",
    "GadgetTag",
    "InvalidGadgetAddress",
    "TagType",
    "encode_gadget_address",
    "encode_gadget_hex",
    "gadget_query_at_cursor",
    "gadgets_from_data",
    "load_gadget_library",
    "suggest_gadgets",
]
