"""
status_list_decoder
===================

Library for decoding Token Status Lists: compressed, bit-packed arrays of
fixed-width status values (e.g. valid/invalid/suspended flags of issued
credentials).

A reader is built once from a StatusList document and a decompression
capability, then queried for the status at any index.

Functions:
    - from_status_list: Build a ReadStatus from a StatusList and a Decompress capability
    - get_bits: Extract a little-endian bitfield at an arbitrary bit offset
    - platform_decompress / zlib_decompress: Default zlib decompression
    - status_list_from_json / status_list_from_cbor: Parse serialized documents
    - read_status_from_json / read_status_from_cbor: Parse and build a reader
    - load_status_types / describe_status: Status types registry
"""

from ._version import VERSION
from .decode import SUPPORTED_BITS, ReadStatus, from_status_list, get_bits
from .decompress import Decompress, platform_decompress, zlib_decompress
from .errors import (
    DecompressionFailed,
    IndexOutOfRange,
    InvalidBitWidth,
    MalformedStatusList,
    StatusListError,
)
from .parse import (
    b64url_decode,
    b64url_encode,
    read_status_from_cbor,
    read_status_from_json,
    status_list_from_cbor,
    status_list_from_json,
)
from .status_types import describe_status, load_status_types

__all__ = [
    "VERSION",
    "SUPPORTED_BITS",
    "ReadStatus",
    "from_status_list",
    "get_bits",
    "Decompress",
    "platform_decompress",
    "zlib_decompress",
    "StatusListError",
    "InvalidBitWidth",
    "DecompressionFailed",
    "IndexOutOfRange",
    "MalformedStatusList",
    "b64url_decode",
    "b64url_encode",
    "status_list_from_json",
    "status_list_from_cbor",
    "read_status_from_json",
    "read_status_from_cbor",
    "load_status_types",
    "describe_status",
]
