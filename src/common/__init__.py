"""
common

This package contains shared models used across the status-list-decoder project.

Modules:
    - models: Defines shared Pydantic models used by multiple components
"""

from .models import StatusList, StatusType

__all__ = ["StatusList", "StatusType"]
