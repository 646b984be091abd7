"""
Tests for environment-driven configuration.
"""

import logging
from pathlib import Path
from unittest.mock import patch

from layerit.config import (
    DEFAULT_PRODUCTS_PATH,
    DEFAULT_STORAGE_PATH,
    CatalogConfig,
    LoggingConfig,
    StorageConfig,
    configure_logging,
)


class TestStorageConfig:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("LAYERIT_STORAGE_PATH", raising=False)
        assert StorageConfig.get_storage_path() == Path(DEFAULT_STORAGE_PATH)

    def test_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LAYERIT_STORAGE_PATH", str(tmp_path / "s.json"))
        assert StorageConfig.get_storage_path() == tmp_path / "s.json"


class TestCatalogConfig:
    def test_default_is_bundled_dataset(self, monkeypatch):
        monkeypatch.delenv("LAYERIT_PRODUCTS_PATH", raising=False)
        path = CatalogConfig.get_products_path()
        assert path == DEFAULT_PRODUCTS_PATH
        assert path.exists()

    def test_empty_override_ignored(self, monkeypatch):
        monkeypatch.setenv("LAYERIT_PRODUCTS_PATH", "")
        assert CatalogConfig.get_products_path() == DEFAULT_PRODUCTS_PATH


class TestLoggingConfig:
    """Test log level parsing."""

    def test_default_info(self, monkeypatch):
        monkeypatch.delenv("LAYERIT_LOG_LEVEL", raising=False)
        assert LoggingConfig.get_log_level() == logging.INFO

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv("LAYERIT_LOG_LEVEL", " debug ")
        assert LoggingConfig.get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("LAYERIT_LOG_LEVEL", "chatty")
        assert LoggingConfig.get_log_level() == logging.INFO

    def test_configure_logging(self, monkeypatch):
        monkeypatch.setenv("LAYERIT_LOG_LEVEL", "WARNING")
        with patch("logging.basicConfig") as basic_config:
            configure_logging()
        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == logging.WARNING
