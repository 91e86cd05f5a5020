"""
status_list_decoder.parse

Parsing of serialized status list documents into StatusList models.

JSON form:  {"bits": 1, "lst": "<base64url, no padding>", "aggregation_uri": "..."}
CBOR form:  map {"bits": 1, "lst": h'<bytes>', "aggregation_uri": "..."}

Both forms carry the zlib-compressed payload; decompression is left to the reader.

Functions:
    - b64url_decode / b64url_encode: base64url without padding
    - status_list_from_json: Parse a JSON document (str, bytes or decoded mapping)
    - status_list_from_cbor: Parse a CBOR document
    - read_status_from_json / read_status_from_cbor: Parse and build a ReadStatus
"""

import base64
import binascii
import json
import logging
import re
from typing import Any, Mapping, Optional, Union

import cbor2
from pydantic import ValidationError

from common.models import StatusList
from status_list_decoder.decode import ReadStatus
from status_list_decoder.decompress import Decompress, platform_decompress
from status_list_decoder.errors import MalformedStatusList

logger = logging.getLogger(__name__)

_URLSAFE_TO_STANDARD = bytes.maketrans(b"-_", b"+/")
_B64URL_PATTERN = re.compile(rb"[A-Za-z0-9_-]*={0,2}")


def b64url_decode(value: Union[str, bytes]) -> bytes:
    """Return the decoded value of a base64url string, with or without padding."""
    if isinstance(value, str):
        value = value.encode("ascii")
    if not _B64URL_PATTERN.fullmatch(value):
        raise binascii.Error("Only base64url characters are allowed")
    padding_needed = -len(value) % 4
    value = value.translate(_URLSAFE_TO_STANDARD) + b"=" * padding_needed
    return base64.b64decode(value, validate=True)


def b64url_encode(value: bytes) -> str:
    """Return the base64url encoding of value, without padding."""
    return base64.urlsafe_b64encode(value).rstrip(b"=").decode("ascii")


def _required_fields(value: Mapping[str, Any], lst_type: type) -> tuple[int, Any]:
    if "bits" not in value:
        raise MalformedStatusList("bits missing from status list", field="bits")
    bits = value["bits"]
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise MalformedStatusList("bits must be int", field="bits")

    lst = value.get("lst")
    if not lst:
        raise MalformedStatusList("lst missing from status list", field="lst")
    if not isinstance(lst, lst_type):
        raise MalformedStatusList(f"lst must be {lst_type.__name__}", field="lst")
    return bits, lst


def _build_status_list(
    bits: int, lst: bytes, aggregation_uri: Any, source: str
) -> StatusList:
    try:
        return StatusList(bits=bits, lst=lst, aggregation_uri=aggregation_uri)
    except ValidationError as e:
        field = None
        errors = e.errors()
        if errors and errors[0].get("loc"):
            field = str(errors[0]["loc"][0])
        raise MalformedStatusList(f"Invalid {source} status list: {e}", field=field) from e


def status_list_from_json(value: Union[str, bytes, Mapping[str, Any]]) -> StatusList:
    """
    Parse a JSON status list.

    Args:
        value: JSON text, UTF-8 bytes, or an already decoded mapping.

    Returns:
        StatusList: The document with `lst` base64url-decoded (still compressed).

    Raises:
        MalformedStatusList: If the JSON is invalid, a field is missing or
            ill-typed, or lst is not base64url.
    """
    if isinstance(value, (str, bytes, bytearray)):
        try:
            value = json.loads(value)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedStatusList(f"Failed to parse status list JSON: {e}") from e

    if not isinstance(value, Mapping):
        raise MalformedStatusList(
            f"Status list JSON must be an object, got {type(value).__name__}"
        )

    bits, lst = _required_fields(value, str)
    try:
        payload = b64url_decode(lst)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedStatusList(f"lst is not valid base64url: {e}", field="lst") from e

    logger.debug(f"Parsed JSON status list: bits={bits}, lst={len(payload)} bytes")
    return _build_status_list(bits, payload, value.get("aggregation_uri"), "JSON")


def status_list_from_cbor(data: bytes) -> StatusList:
    """
    Parse a CBOR status list.

    Raises:
        MalformedStatusList: If the CBOR is invalid, not a map, or a field is
            missing or ill-typed.
    """
    try:
        value = cbor2.loads(data)
    except (cbor2.CBORDecodeError, ValueError, TypeError) as e:
        raise MalformedStatusList(f"Failed to parse status list CBOR: {e}") from e

    if not isinstance(value, Mapping):
        raise MalformedStatusList(f"Status list CBOR must be a map, got {type(value).__name__}")

    bits, lst = _required_fields(value, bytes)
    logger.debug(f"Parsed CBOR status list: bits={bits}, lst={len(lst)} bytes")
    return _build_status_list(bits, lst, value.get("aggregation_uri"), "CBOR")


async def read_status_from_json(
    value: Union[str, bytes, Mapping[str, Any]], decompress: Optional[Decompress] = None
) -> ReadStatus:
    """Parse a JSON status list and build a reader (zlib in an executor by default)."""
    status_list = status_list_from_json(value)
    return await ReadStatus.from_status_list(status_list, decompress or platform_decompress())


async def read_status_from_cbor(
    data: bytes, decompress: Optional[Decompress] = None
) -> ReadStatus:
    """Parse a CBOR status list and build a reader (zlib in an executor by default)."""
    status_list = status_list_from_cbor(data)
    return await ReadStatus.from_status_list(status_list, decompress or platform_decompress())
