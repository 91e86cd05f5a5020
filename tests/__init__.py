"""
tests

Test suite for the status-list-decoder project.

Subpackages:
    - common: Tests for the shared Pydantic models
    - status_list_decoder: Tests for decoding, decompression, parsing,
      configuration, metrics and the status types registry
"""
