"""
ERDKIT Configuration Management

This module handles configuration for diagram collection.
Values come from a JSON file with built-in defaults as fallback.
"""

import os
import sys
import json
from typing import Dict, Any


class Config:
    """Configuration manager for ERDKIT."""

    def __init__(self, config_file: str = "config.json"):
        """Initialize configuration."""
        self.config_file = config_file
        self.config = self._load_config()
        self.environment = os.getenv("ERDKIT_ENV", "development")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r') as f:
                    loaded = json.load(f)
                return self._merge(self._get_default_config(), loaded)
            else:
                return self._get_default_config()
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return self._get_default_config()

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively overlay file values on the defaults."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "diagram": {
                "show_views": True
            },
            "logging": {
                "level": "INFO",
                "file": None
            },
            "runtime": {
                "max_workers": 1,
                "task_timeout": None
            }
        }

    def get_config(self) -> Dict[str, Any]:
        """Get the full configuration dictionary."""
        return self.config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def save(self) -> bool:
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
            return True
        except Exception as e:
            print(f"Error saving config: {e}", file=sys.stderr)
            return False
