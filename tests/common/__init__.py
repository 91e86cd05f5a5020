"""
tests.common

Tests for the shared models in the common package.
"""
