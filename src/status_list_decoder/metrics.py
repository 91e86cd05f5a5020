"""
Defines Prometheus metrics for monitoring status list decoding.

This module centralizes the definition of all Counter and Histogram metrics used
to track reader construction, decompression and status lookups.
"""

from prometheus_client import Counter, Histogram

# Define Prometheus metrics
READERS_CREATED = Counter(
    "status_list_readers_created_total", "Total status list readers successfully built"
)
INVALID_BIT_WIDTHS = Counter(
    "status_list_invalid_bit_widths_total", "Total status lists rejected for their bit width"
)
DECOMPRESSION_FAILURES = Counter(
    "status_list_decompression_failures_total", "Total status list payloads that failed to decompress"
)
DECOMPRESSION_LATENCY = Histogram(
    "status_list_decompression_latency_seconds", "Time spent decompressing status list payloads"
)
DECOMPRESSED_BYTES = Histogram(
    "status_list_decompressed_bytes",
    "Size of decompressed status list buffers in bytes",
    buckets=(1024, 16384, 131072, 1048576, 8388608, 67108864),
)
STATUS_LOOKUPS = Counter("status_list_lookups_total", "Total status lookups", ["bits"])
INDEX_OUT_OF_RANGE = Counter(
    "status_list_index_out_of_range_total", "Total lookups rejected as out of range"
)
