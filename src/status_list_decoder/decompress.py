"""
status_list_decoder.decompress

Decompression capabilities for status list payloads.

A status list reader does not inflate the payload itself: it awaits a
`Decompress` capability supplied by the caller, so each environment can plug
in its own codec. This module provides the default zlib-backed one.

Functions:
    - zlib_decompress: Synchronously inflate a zlib payload with a size limit
    - platform_decompress: Build an async Decompress that inflates in an executor
"""

import asyncio
import functools
import logging
import zlib
from concurrent.futures import Executor
from typing import Awaitable, Callable, Optional

from status_list_decoder.config import get_decompression_config
from status_list_decoder.errors import DecompressionFailed

logger = logging.getLogger(__name__)

Decompress = Callable[[bytes], Awaitable[bytes]]


def zlib_decompress(data: bytes, max_length: Optional[int] = None) -> bytes:
    """
    Inflate a zlib (RFC 1950) compressed status list payload.

    Args:
        data: Compressed payload.
        max_length: Largest acceptable decompressed size in bytes. Defaults to
            the configured STATUS_LIST_MAX_DECOMPRESSED_BYTES.

    Returns:
        bytes: The packed status buffer.

    Raises:
        DecompressionFailed: If the payload is not valid zlib data, is truncated,
            inflates beyond max_length, or max_length is negative.
    """
    if max_length is None:
        max_length = get_decompression_config()["max_decompressed_bytes"]
    if max_length < 0:
        raise DecompressionFailed(f"max_length must be non-negative, got {max_length}")

    inflater = zlib.decompressobj()
    try:
        buffer = inflater.decompress(data, max_length + 1)
    except zlib.error as e:
        raise DecompressionFailed(f"Status list payload is not valid zlib data: {e}") from e

    if len(buffer) > max_length:
        raise DecompressionFailed(f"Decompressed status list exceeds {max_length} bytes")
    if not inflater.eof:
        raise DecompressionFailed("Status list payload is truncated")
    if inflater.unused_data:
        logger.warning(
            f"Ignoring {len(inflater.unused_data)} trailing bytes after the compressed status list"
        )
    return buffer


def platform_decompress(
    loop: Optional[asyncio.AbstractEventLoop] = None,
    executor: Optional[Executor] = None,
    max_length: Optional[int] = None,
) -> Decompress:
    """
    Build the default Decompress capability.

    The returned coroutine function runs zlib_decompress in `executor` (the
    loop's default executor when None) so large lists do not block the event loop.

    Args:
        loop: Event loop to schedule on. Defaults to the running loop at call time.
        executor: Executor running the inflate step.
        max_length: Passed through to zlib_decompress.

    Returns:
        Decompress: An async callable turning compressed bytes into the packed buffer.
    """

    async def decompress(data: bytes) -> bytes:
        target_loop = loop or asyncio.get_running_loop()
        return await target_loop.run_in_executor(
            executor, functools.partial(zlib_decompress, data, max_length)
        )

    return decompress
