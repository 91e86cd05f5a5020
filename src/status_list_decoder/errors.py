"""
status_list_decoder.errors

Exceptions raised while building a status list reader or looking up statuses.

Classes:
    - StatusListError: Base class for every error raised by this package
    - InvalidBitWidth: The document's bit width is not one of 1, 2, 4, 8
    - DecompressionFailed: The payload could not be decompressed
    - IndexOutOfRange: A lookup would read beyond the decompressed buffer
    - MalformedStatusList: A JSON/CBOR document could not be parsed
"""

from typing import Optional


class StatusListError(Exception):
    """Base class for status list decoding errors."""


class InvalidBitWidth(StatusListError, ValueError):
    """Raised when a status list declares an unsupported number of bits per entry."""

    def __init__(self, bits):
        self.bits = bits
        super().__init__(f"Invalid bits value {bits!r}, must be one of: 1, 2, 4, 8")


class DecompressionFailed(StatusListError):
    """Raised when the compressed payload cannot be turned into the packed buffer."""


class IndexOutOfRange(StatusListError, IndexError):
    """Raised when a status index lies outside the decompressed list."""

    def __init__(self, index: int, max_index: int):
        self.index = index
        self.max_index = max_index
        super().__init__(f"Status index {index} out of range [0, {max_index}]")


class MalformedStatusList(StatusListError, ValueError):
    """Raised when a serialized status list document is missing fields or is ill-typed."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
