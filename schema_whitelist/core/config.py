"""Generator configuration loaded from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv(override=True)

DEFAULT_SCHEMA_FILE_NAME = "db_schema.yaml"
DEFAULT_WHITELIST_FILE_NAME = "db_schema_whitelist.json"


@dataclass(frozen=True)
class Settings:
    """Generator settings."""
    base_dir: str

    # Installation files
    registry_path: str
    primary_schema_path: str
    deployment_config_path: str

    # Per-module file names (relative to <module>/etc)
    schema_file_name: str
    whitelist_file_name: str

    log_level: str


def get_settings() -> Settings:
    """Load settings from environment variables."""
    base_dir = os.path.abspath(os.getenv("WHITELIST_BASE_DIR", os.getcwd()))
    etc_dir = os.path.join(base_dir, "app", "etc")

    return Settings(
        base_dir=base_dir,
        registry_path=os.getenv("COMPONENT_REGISTRY_PATH", os.path.join(etc_dir, "modules.yaml")),
        primary_schema_path=os.getenv("PRIMARY_SCHEMA_PATH", os.path.join(etc_dir, "db_schema.yaml")),
        deployment_config_path=os.getenv("DEPLOYMENT_CONFIG_PATH", os.path.join(etc_dir, "env.yaml")),
        schema_file_name=os.getenv("DB_SCHEMA_FILE_NAME", DEFAULT_SCHEMA_FILE_NAME),
        whitelist_file_name=os.getenv("WHITELIST_FILE_NAME", DEFAULT_WHITELIST_FILE_NAME),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


# Singleton for caching settings
_settings_cache: Optional[Settings] = None


def get_cached_settings() -> Settings:
    """Get cached settings (loads once)."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = get_settings()
    return _settings_cache


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    global _settings_cache
    _settings_cache = None
