"""
Handles configuration for the status list decoder.

This module is responsible for:
- Configuring logging for applications embedding the decoder.
- Determining the path to the status types registry, considering an environment
  override and the bundled default.
- Providing decompression limits from environment variables.

The decoder itself never calls configure_logger(); host applications do.
"""

import logging
import os

import coloredlogs

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

DEFAULT_MAX_DECOMPRESSED_BYTES = 64 * 1024 * 1024

# Resolved path to the status types registry, populated by get_status_types_path().
ACTUAL_STATUS_TYPES_PATH: str | None = None


def configure_logger():
    """Install coloredlogs on the root logger for hosts that want the decoder's log output."""
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
        log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Handlers filter by their own level; the root logger passes everything through.
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── Status types registry path ─────────────────────────────────────────────
def get_status_types_path():
    """
    Determines and returns the path to the status types registry YAML file.

    STATUS_LIST_STATUS_TYPES_PATH overrides the bundled registry when it points to
    a readable file. Otherwise the registry shipped with the package is used.
    The result is stored in ACTUAL_STATUS_TYPES_PATH to avoid re-computation.

    Returns:
        str: Path to the status types registry.
    """
    global ACTUAL_STATUS_TYPES_PATH

    if ACTUAL_STATUS_TYPES_PATH is not None:
        return ACTUAL_STATUS_TYPES_PATH

    from status_list_decoder.status_types import _default_status_types_path

    default_path = _default_status_types_path()
    override_env = os.getenv("STATUS_LIST_STATUS_TYPES_PATH")

    actual_path = default_path
    if override_env:
        if os.path.isfile(override_env) and os.access(override_env, os.R_OK):
            actual_path = override_env
        else:
            module_logger.warning(
                f"Override status types path '{override_env}' is missing or unreadable. "
                f"Using bundled default: '{default_path}'"
            )

    ACTUAL_STATUS_TYPES_PATH = actual_path
    module_logger.info(f"Status types registry in use: {ACTUAL_STATUS_TYPES_PATH}")
    return ACTUAL_STATUS_TYPES_PATH


# ── Decompression Configuration ────────────────────────────────────────────
def get_decompression_config():
    """
    Retrieves decompression settings from environment variables.

    Returns:
        dict: A dictionary containing:
              - 'max_decompressed_bytes': Upper bound on the size of a decompressed
                status list buffer (STATUS_LIST_MAX_DECOMPRESSED_BYTES, default 64 MiB).
    """
    raw = os.getenv("STATUS_LIST_MAX_DECOMPRESSED_BYTES")
    max_bytes = DEFAULT_MAX_DECOMPRESSED_BYTES
    if raw:
        try:
            max_bytes = int(raw)
            if max_bytes <= 0:
                raise ValueError(raw)
        except ValueError:
            module_logger.warning(
                f"Invalid STATUS_LIST_MAX_DECOMPRESSED_BYTES '{raw}'. "
                f"Defaulting to {DEFAULT_MAX_DECOMPRESSED_BYTES}."
            )
            max_bytes = DEFAULT_MAX_DECOMPRESSED_BYTES
    return {"max_decompressed_bytes": max_bytes}
