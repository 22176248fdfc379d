# MediaSync Configuration Module
# Sync catalog schema, built-in defaults, and YAML loading

from mediasync.config.defaults import DEFAULT_CONFIG, generate_default_config, get_default_config
from mediasync.config.loader import (
    get_config_path,
    load_config,
    save_default_config,
    validate_config_file,
)
from mediasync.config.schema import Catalog, SyncConfig, SyncSource

__all__ = [
    # Schema
    "Catalog",
    "SyncConfig",
    "SyncSource",
    # Loader
    "load_config",
    "save_default_config",
    "get_config_path",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    "generate_default_config",
]
