"""
status_list_decoder.decode

Core decoding logic for Token Status Lists.

A status list packs one fixed-width status per index into a byte buffer,
least-significant bit first within each byte, bytes in ascending order. Entry 0
occupies the lowest `bits` bits of byte 0.

Functions:
    - get_bits: Extracts a little-endian bitfield at an arbitrary bit offset
    - check_bits: Validates a status list bit width
    - from_status_list: Builds a ReadStatus from a StatusList and a Decompress capability

Classes:
    - ReadStatus: Holds a decompressed buffer and answers status lookups

Notes:
    - Decompression happens once, while the reader is built. Lookups are plain
      arithmetic over an immutable buffer and are safe to run concurrently.
"""

import logging
import time
from typing import Iterable, Iterator

from common.models import StatusList
from status_list_decoder.decompress import Decompress
from status_list_decoder.errors import DecompressionFailed, IndexOutOfRange, InvalidBitWidth
from status_list_decoder.metrics import (
    DECOMPRESSED_BYTES,
    DECOMPRESSION_FAILURES,
    DECOMPRESSION_LATENCY,
    INDEX_OUT_OF_RANGE,
    INVALID_BIT_WIDTHS,
    READERS_CREATED,
    STATUS_LOOKUPS,
)

logger = logging.getLogger(__name__)

SUPPORTED_BITS = (1, 2, 4, 8)


def get_bits(data_bytes: bytes, start_bit: int, length: int) -> int:
    """
    Extract a little‑endian bitfield of `length` bits starting at `start_bit`.

    Only the bytes covering [start_bit, start_bit + length) are read, so the
    window may cross byte boundaries and the field width is not limited to the
    widths a status list allows.

    Raises:
        ValueError: If start_bit is negative or length is not positive.
        IndexError: If the field extends beyond the end of data_bytes.
    """
    if start_bit < 0:
        raise ValueError(f"start_bit must be non-negative, got {start_bit}")
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")

    end_bit = start_bit + length
    if end_bit > len(data_bytes) * 8:
        raise IndexError(
            f"Bitfield [{start_bit}, {end_bit}) extends beyond {len(data_bytes)} bytes"
        )

    first_byte = start_bit // 8
    last_byte = (end_bit + 7) // 8
    window = int.from_bytes(data_bytes[first_byte:last_byte], byteorder="little")
    mask = (1 << length) - 1
    return (window >> (start_bit % 8)) & mask


def check_bits(bits) -> int:
    """Return `bits` unchanged if it is a supported width, else raise InvalidBitWidth."""
    if isinstance(bits, bool) or not isinstance(bits, int) or bits not in SUPPORTED_BITS:
        INVALID_BIT_WIDTHS.inc()
        logger.warning(f"Rejecting status list with unsupported bit width: {bits!r}")
        raise InvalidBitWidth(bits)
    return bits


class ReadStatus:
    """
    Reader over a decompressed status list.

    Attributes:
        bits (int): Bits per status entry.
        size (int): Number of addressable entries implied by the buffer length.
        max_index (int): Largest valid index (size - 1; -1 for an empty buffer).
    """

    def __init__(self, bits: int, buffer: bytes):
        self._bits = check_bits(bits)
        self._buffer = bytes(buffer)
        self._size = len(self._buffer) * 8 // self._bits
        self._lookups = STATUS_LOOKUPS.labels(bits=str(self._bits))

    @classmethod
    async def from_status_list(
        cls, status_list: StatusList, decompress: Decompress
    ) -> "ReadStatus":
        """
        Validate the bit width, decompress the payload once, and build a reader.

        Args:
            status_list: The parsed status list document.
            decompress: Async capability turning the compressed payload into the packed buffer.

        Returns:
            ReadStatus: A reader owning the decompressed buffer.

        Raises:
            InvalidBitWidth: If status_list.bits is not 1, 2, 4 or 8. The payload is
                not decompressed in that case.
            DecompressionFailed: If the capability fails or returns something other
                than bytes. Cancellation propagates unchanged.
        """
        bits = check_bits(status_list.bits)

        start_time = time.perf_counter()
        try:
            buffer = await decompress(status_list.lst)
        except DecompressionFailed as e:
            DECOMPRESSION_FAILURES.inc()
            logger.error(f"Failed to decompress status list ({len(status_list.lst)} bytes): {e}")
            raise
        except Exception as e:
            DECOMPRESSION_FAILURES.inc()
            logger.error(
                f"Decompression capability raised {type(e).__name__} "
                f"for status list ({len(status_list.lst)} bytes): {e}"
            )
            raise DecompressionFailed(f"Failed to decompress status list: {e}") from e
        finally:
            DECOMPRESSION_LATENCY.observe(time.perf_counter() - start_time)

        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            DECOMPRESSION_FAILURES.inc()
            raise DecompressionFailed(
                f"Decompression returned {type(buffer).__name__}, expected bytes"
            )

        reader = cls(bits, buffer)
        READERS_CREATED.inc()
        DECOMPRESSED_BYTES.observe(len(reader._buffer))
        logger.info(
            f"Loaded status list: bits={bits}, compressed={len(status_list.lst)} bytes, "
            f"decompressed={len(reader._buffer)} bytes, entries={reader.size}"
        )
        return reader

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def size(self) -> int:
        return self._size

    @property
    def max_index(self) -> int:
        return self._size - 1

    def status_at(self, index: int) -> int:
        """
        Return the status stored at `index`.

        Raises:
            TypeError: If index is not an integer.
            IndexOutOfRange: If the entry would read beyond the buffer. The reader
                stays usable for other indices.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Status index must be an int, got {type(index).__name__}")

        self._lookups.inc()
        if index < 0 or index > self.max_index:
            INDEX_OUT_OF_RANGE.inc()
            logger.debug(f"Status index {index} out of range (max_index={self.max_index})")
            raise IndexOutOfRange(index, self.max_index)

        return get_bits(self._buffer, index * self._bits, self._bits)

    def statuses(self, indices: Iterable[int]) -> list[int]:
        """Look up several indices at once; raises on the first out-of-range index."""
        return [self.status_at(index) for index in indices]

    def iter_statuses(self) -> Iterator[int]:
        """Yield every status in index order."""
        for index in range(self._size):
            yield get_bits(self._buffer, index * self._bits, self._bits)

    def __call__(self, index: int) -> int:
        return self.status_at(index)

    def __getitem__(self, index: int) -> int:
        return self.status_at(index)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ReadStatus(bits={self._bits}, size={self._size})"


async def from_status_list(status_list: StatusList, decompress: Decompress) -> ReadStatus:
    """Build a ReadStatus; see ReadStatus.from_status_list."""
    return await ReadStatus.from_status_list(status_list, decompress)
