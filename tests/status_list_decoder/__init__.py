"""
tests.status_list_decoder

Test suite for the status_list_decoder package.

This package contains unit tests for bitfield extraction, reader construction,
decompression, document parsing, configuration, metrics and the status types
registry, plus the reference status list vectors.
"""
