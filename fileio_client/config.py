#!/usr/bin/env python3
"""
Configuration management for the file.io client.
Loads read-only settings using a singleton pattern; nothing is ever written back.
"""

import os
import json
from typing import Dict, Any, Optional


class Config:
    _instance: Optional["Config"] = None
    _initialized = False

    # Default configuration settings
    DEFAULT_CONFIG = {
        "base_url": "https://file.io",
        "max_file_size": 5000000000,  # 5GB
        "chunk_size": 8192,  # download chunk size in bytes
        "log_folder": None,  # no log file unless configured
        "log_basename": "fileio",
        "max_log_size_mb": 5,
        "max_log_backups": 10,
    }

    # Configuration file path, overridable through FILEIO_CONFIG
    CONFIG_FILE = os.path.join(
        os.path.expanduser("~"), ".config", "fileio-client", "config.json"
    )

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._load_config()
            self._initialized = True

    @classmethod
    def config_file(cls) -> str:
        return os.environ.get("FILEIO_CONFIG", cls.CONFIG_FILE)

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from the config file, falling back to defaults
        for missing keys or when the file is absent or unreadable.

        Returns:
            Dict: Configuration settings
        """
        config = self.DEFAULT_CONFIG.copy()
        config_file = self.config_file()

        if os.path.exists(config_file):
            try:
                with open(config_file, "r") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    config.update(
                        {k: v for k, v in loaded.items() if k in self.DEFAULT_CONFIG}
                    )
            except (json.JSONDecodeError, IOError):
                # If there's an error reading the config, use defaults
                pass

        config["base_url"] = str(config["base_url"]).rstrip("/")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default if not found
        """
        return self._config.get(key, default)


# Create a single instance of the Config class
config = Config()
