"""
common.models

Shared Pydantic models for use across status-list-decoder modules.

StatusList:
    The parsed status list document: bit width per entry, the compressed
    payload, and the optional aggregation URI. Produced by the JSON/CBOR
    parsers (or any external parser) and consumed by the reader.

StatusType:
    A registered status type value (e.g. 0x00 VALID, 0x01 INVALID) loaded from
    the status types registry.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusList(BaseModel):
    """
    StatusList

    Represents a status list document after transport decoding.

    `bits` is kept as a plain integer here; whether it is one of the
    supported widths is checked when a reader is built, so an unsupported width
    is reported as InvalidBitWidth rather than a model validation error.

    Attributes:
        bits (int): Number of bits per status entry.
        lst (bytes): zlib/deflate compressed, bit-packed status array.
        aggregation_uri (Optional[str]): URI listing all status lists of the issuer.
    """

    model_config = ConfigDict(frozen=True)

    bits: int = Field(strict=True)
    lst: bytes = Field(strict=True, min_length=1)
    aggregation_uri: Optional[str] = None


class StatusType(BaseModel):
    """
    StatusType

    Represents one entry of the status types registry.

    Attributes:
        value (int): Numeric status value (0-255).
        name (str): Registered name (e.g. 'VALID').
        description (Optional[str]): Human-readable description.
    """

    value: int = Field(ge=0, le=0xFF)
    name: str
    description: Optional[str] = None
