"""
status_list_decoder.status_types

Loading of the status types registry and naming of decoded statuses.

The decoder returns plain integers; this module only maps them to registered
names for display and logging.

Functions:
    - load_status_types: Load the registry YAML into StatusType models
    - describe_status: Return the registered name of a status, or UNKNOWN (n)
"""

import logging
import os
from importlib import resources

import yaml
from pydantic import ValidationError

from common.models import StatusType

logger = logging.getLogger(__name__)


def _default_status_types_path():
    """
    Determine the default path of the status types registry bundled as package data.
    """
    return str(resources.files(__package__) / "data" / "status_types.yml")


def load_status_types(path_override: str | None = None) -> dict[int, StatusType]:
    """
    Load the status types registry.

    Path selection:
      - If path_override is provided and readable, use it.
      - Else use config.get_status_types_path() (STATUS_LIST_STATUS_TYPES_PATH or
        the bundled registry).

    Args:
        path_override (str | None): Optional path to a registry YAML file.

    Returns:
        dict[int, StatusType]: Registered status types keyed by value.

    Raises:
        FileNotFoundError: If the selected registry file does not exist.
        ValueError: If the registry is not a list of valid status type entries,
            or a value is registered twice.
    """
    from status_list_decoder.config import get_status_types_path

    path = get_status_types_path()
    if path_override:
        if os.path.isfile(path_override) and os.access(path_override, os.R_OK):
            path = path_override
        else:
            logger.warning(
                f"Status types override path provided but not found/readable: "
                f"{path_override}. Using: {path}"
            )

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    entries = raw.get("status_types") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Status types registry {path} has no 'status_types' list")

    status_types: dict[int, StatusType] = {}
    for entry in entries:
        try:
            status_type = StatusType(**entry)
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid status type entry {entry!r} in {path}: {e}") from e
        if status_type.value in status_types:
            raise ValueError(f"Status value 0x{status_type.value:02X} registered twice in {path}")
        status_types[status_type.value] = status_type

    logger.info(f"Loaded {len(status_types)} status types from {path}")
    return status_types


def describe_status(status: int, status_types: dict[int, StatusType]) -> str:
    status_type = status_types.get(status)
    if status_type is None:
        return f"UNKNOWN ({status})"
    return status_type.name
