"""
Configuration management for the Onboarding Analytics service.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class SinkConfig:
    """Analytics sink configuration settings."""
    kind: str
    endpoint: str
    timeout: float


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "analytics_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self._merge_config(json.load(f))
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "sink": {
                "kind": "logging",
                "endpoint": "",
                "timeout": 5.0
            },
            "app": {
                "host": "0.0.0.0",
                "port": 22582,
                "debug": False
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("ANALYTICS_SINK"):
            self._config["sink"]["kind"] = os.getenv("ANALYTICS_SINK")

        if os.getenv("ANALYTICS_ENDPOINT"):
            self._config["sink"]["endpoint"] = os.getenv("ANALYTICS_ENDPOINT")

        if os.getenv("ANALYTICS_TIMEOUT"):
            self._config["sink"]["timeout"] = float(os.getenv("ANALYTICS_TIMEOUT"))

        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

    def get_sink_config(self) -> SinkConfig:
        """Get analytics sink configuration."""
        sink_config = self._config["sink"]
        return SinkConfig(
            kind=sink_config["kind"],
            endpoint=sink_config["endpoint"],
            timeout=float(sink_config["timeout"])
        )

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_sink_config() -> SinkConfig:
    """Get analytics sink configuration."""
    return config_manager.get_sink_config()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
