"""
Configuration management for LayerIt.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by the Streamlit entry point
(streamlit_app/app.py) so .env is loaded before any other code reads the
environment.

When no .env exists, load_dotenv() is a no-op and the process environment is
used as-is.

Environment Variables:
- LAYERIT_STORAGE_PATH: Optional, JSON file backing the persisted key-value
  store (defaults to ".layerit/storage.json")
- LAYERIT_PRODUCTS_PATH: Optional, alternative product dataset (defaults to the
  bundled layerit/data/products.json)
- LAYERIT_LOG_LEVEL: Optional, logging level name (defaults to "INFO")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_STORAGE_PATH = ".layerit/storage.json"
DEFAULT_PRODUCTS_PATH = Path(__file__).resolve().parent / "data" / "products.json"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (layerit/config.py -> layerit/ -> project root).

    Safe to call multiple times. override=False means variables already set in
    the environment take precedence over the file.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class StorageConfig:
    """Configuration for the persisted key-value store."""

    @staticmethod
    def get_storage_path() -> Path:
        """
        Get the path of the JSON file backing the key-value store.

        Returns:
            Path from LAYERIT_STORAGE_PATH (default: .layerit/storage.json)
        """
        return Path(os.getenv("LAYERIT_STORAGE_PATH", DEFAULT_STORAGE_PATH))


class CatalogConfig:
    """Configuration for the static product dataset."""

    @staticmethod
    def get_products_path() -> Path:
        """
        Get the path of the product dataset.

        Returns:
            Path from LAYERIT_PRODUCTS_PATH, or the bundled dataset if unset
        """
        override = os.getenv("LAYERIT_PRODUCTS_PATH")
        if override:
            return Path(override)
        return DEFAULT_PRODUCTS_PATH


class LoggingConfig:
    """Configuration for application logging."""

    @staticmethod
    def get_log_level() -> int:
        """
        Get the numeric logging level.

        Returns:
            Level named by LAYERIT_LOG_LEVEL, or logging.INFO when unset or
            not a known level name
        """
        name = os.getenv("LAYERIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        return logging.INFO


def configure_logging() -> None:
    """
    Configure root logging once for the running app.

    logging.basicConfig is a no-op when the root logger already has handlers,
    so Streamlit reruns can call this freely.
    """
    logging.basicConfig(level=LoggingConfig.get_log_level(), format=LOG_FORMAT)
