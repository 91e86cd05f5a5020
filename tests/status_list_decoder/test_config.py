"""
Unit tests for the configuration module (status_list_decoder.config).

These tests cover:
- Logger configuration (`configure_logger`):
    - Default log level.
    - Log level overrides via LOG_LEVEL.
    - Handling of invalid log level settings.
    - Clearing of existing root handlers.
- Status types registry path (`get_status_types_path`):
    - Bundled default.
    - Override via STATUS_LIST_STATUS_TYPES_PATH and fallback when unreadable.
    - Caching of the resolved path.
- Decompression settings (`get_decompression_config`):
    - Default limit, overrides and invalid values.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

import status_list_decoder.config as config_module
from status_list_decoder.config import (
    DEFAULT_MAX_DECOMPRESSED_BYTES,
    configure_logger,
    get_decompression_config,
    get_status_types_path,
)
from status_list_decoder.config import module_logger as config_module_logger
from status_list_decoder.status_types import _default_status_types_path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Ensures no configuration environment variables leak into a test."""
    for name in ("LOG_LEVEL", "STATUS_LIST_STATUS_TYPES_PATH", "STATUS_LIST_MAX_DECOMPRESSED_BYTES"):
        monkeypatch.delenv(name, raising=False)


@patch("status_list_decoder.config.coloredlogs.install")
@patch("status_list_decoder.config.logging.getLogger")
def test_configure_logger_defaults(mock_get_logger, mock_coloredlogs_install):
    mock_root_logger = MagicMock(spec=logging.Logger)
    mock_root_logger.handlers = [MagicMock(), MagicMock()]
    mock_get_logger.return_value = mock_root_logger

    returned_logger = configure_logger()

    mock_get_logger.assert_called_once_with()
    mock_root_logger.setLevel.assert_called_once_with(logging.DEBUG)
    assert mock_root_logger.removeHandler.call_count == 2
    mock_coloredlogs_install.assert_called_once()
    _, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.INFO
    assert kwargs["logger"] == mock_root_logger
    assert kwargs["reconfigure"] is True
    assert "%(levelname)s" in kwargs["fmt"]
    assert returned_logger == mock_root_logger


@patch("status_list_decoder.config.coloredlogs.install")
@patch("status_list_decoder.config.logging.getLogger")
def test_configure_logger_with_env_var_debug(mock_get_logger, mock_coloredlogs_install, monkeypatch):
    mock_get_logger.return_value = MagicMock(spec=logging.Logger, handlers=[])
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logger()

    _, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.DEBUG


@patch("status_list_decoder.config.coloredlogs.install")
@patch("status_list_decoder.config.logging.getLogger")
@patch.object(config_module_logger, "warning")
def test_configure_logger_invalid_env_var(
    mock_config_logger_warning, mock_get_logger, mock_coloredlogs_install, monkeypatch
):
    mock_get_logger.return_value = MagicMock(spec=logging.Logger, handlers=[])
    monkeypatch.setenv("LOG_LEVEL", "INVALID_LEVEL")

    configure_logger()

    mock_config_logger_warning.assert_called_once_with(
        "Invalid LOG_LEVEL 'INVALID_LEVEL'. Defaulting to INFO."
    )
    _, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.INFO


def test_get_status_types_path_default():
    assert get_status_types_path() == _default_status_types_path()
    assert config_module.ACTUAL_STATUS_TYPES_PATH == _default_status_types_path()


def test_get_status_types_path_override(tmp_path, monkeypatch):
    registry = tmp_path / "types.yml"
    registry.write_text("status_types: []\n")
    monkeypatch.setenv("STATUS_LIST_STATUS_TYPES_PATH", str(registry))

    assert get_status_types_path() == str(registry)


@patch.object(config_module_logger, "warning")
def test_get_status_types_path_unreadable_override(mock_warning, tmp_path, monkeypatch):
    monkeypatch.setenv("STATUS_LIST_STATUS_TYPES_PATH", str(tmp_path / "missing.yml"))

    assert get_status_types_path() == _default_status_types_path()
    mock_warning.assert_called_once()
    assert "missing.yml" in mock_warning.call_args[0][0]


@patch.object(config_module_logger, "warning")
def test_get_status_types_path_directory_override(mock_warning, tmp_path, monkeypatch):
    monkeypatch.setenv("STATUS_LIST_STATUS_TYPES_PATH", str(tmp_path))

    assert get_status_types_path() == _default_status_types_path()
    mock_warning.assert_called_once()


def test_get_status_types_path_is_cached(tmp_path, monkeypatch):
    first = get_status_types_path()

    registry = tmp_path / "types.yml"
    registry.write_text("status_types: []\n")
    monkeypatch.setenv("STATUS_LIST_STATUS_TYPES_PATH", str(registry))

    assert get_status_types_path() == first


def test_get_decompression_config_default():
    assert get_decompression_config() == {"max_decompressed_bytes": DEFAULT_MAX_DECOMPRESSED_BYTES}


def test_get_decompression_config_override(monkeypatch):
    monkeypatch.setenv("STATUS_LIST_MAX_DECOMPRESSED_BYTES", "1048576")
    assert get_decompression_config() == {"max_decompressed_bytes": 1048576}


@pytest.mark.parametrize("value", ["lots", "0", "-5", "1.5"])
@patch.object(config_module_logger, "warning")
def test_get_decompression_config_invalid(mock_warning, value, monkeypatch):
    monkeypatch.setenv("STATUS_LIST_MAX_DECOMPRESSED_BYTES", value)

    assert get_decompression_config() == {"max_decompressed_bytes": DEFAULT_MAX_DECOMPRESSED_BYTES}
    mock_warning.assert_called_once()
