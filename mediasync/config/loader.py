# MediaSync Configuration Loader
# Load, save, and validate the YAML catalog

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from mediasync.config.defaults import generate_default_config, get_default_config
from mediasync.config.schema import Catalog


def get_config_dir() -> Path:
    """Get the MediaSync configuration directory."""
    return Path.home() / ".config" / "mediasync"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("MEDIASYNC_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Catalog:
    """
    Load the sync catalog.

    An explicit path (argument or MEDIASYNC_CONFIG) must exist. Without one,
    the user config file is used when present and the built-in catalog
    otherwise.

    Args:
        config_path: Optional path to a YAML catalog.

    Returns:
        Catalog: Validated, read-only catalog.

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the file root is not a mapping.
        ValidationError: If the file content is invalid.
    """
    explicit = config_path is not None or bool(os.environ.get("MEDIASYNC_CONFIG"))
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return Catalog.model_validate(get_default_config())

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    return Catalog.model_validate(_merge_with_defaults(data))


def save_default_config(config_path: Optional[Path] = None, *, force: bool = False) -> tuple[Path, bool]:
    """
    Write the built-in catalog as commented YAML.

    Args:
        config_path: Target path. Uses default if not provided.
        force: Overwrite an existing file.

    Returns:
        Tuple of (config_path, was_written).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists() and not force:
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without loading it into the system.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration root must be a mapping"]

    try:
        catalog = Catalog.model_validate(_merge_with_defaults(data))
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return False, errors

    if not catalog.configs:
        return False, ["No sync configs defined"]

    return True, []


def _merge_with_defaults(data: dict) -> dict:
    """Fill missing top-level keys from the built-in catalog; configs are replaced wholesale."""
    result = get_default_config()
    for key in ("sync_command", "volumes_root", "configs"):
        if key in data:
            result[key] = data[key]
    return result
