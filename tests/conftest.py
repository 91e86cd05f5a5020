import zlib

import pytest

import status_list_decoder.config as config_module
from common.models import StatusList


def pack_statuses(values, bits):
    """Pack status values LSB-first into bytes, `bits` bits per entry."""
    per_byte = 8 // bits
    buffer = bytearray((len(values) + per_byte - 1) // per_byte)
    for index, value in enumerate(values):
        bit_offset = index * bits
        buffer[bit_offset // 8] |= value << (bit_offset % 8)
    return bytes(buffer)


@pytest.fixture()
def pack_statuses_fn():
    """Provide the pack_statuses helper without importing conftest."""
    return pack_statuses


@pytest.fixture()
def make_status_list():
    """Build a StatusList whose payload is the zlib-compressed packing of `values`."""

    def _make(values, bits, **kwargs):
        return StatusList(bits=bits, lst=zlib.compress(pack_statuses(values, bits), 9), **kwargs)

    return _make


@pytest.fixture()
def recording_decompress():
    """An async Decompress capability that records every payload it inflates."""
    calls = []

    async def decompress(data: bytes) -> bytes:
        calls.append(data)
        return zlib.decompress(data)

    return decompress, calls


@pytest.fixture(autouse=True)
def reset_config_globals():
    """Reset the cached status types path so each test resolves it from its own environment."""
    config_module.ACTUAL_STATUS_TYPES_PATH = None
    yield
    config_module.ACTUAL_STATUS_TYPES_PATH = None
