# MediaSync Operation Discovery
# Expand the catalog into the operations runnable right now

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mediasync.config.schema import Catalog, SyncConfig
from mediasync.sync.exceptions import DiscoveryError
from mediasync.utils.formatting import format_size
from mediasync.utils.volumes import get_free_space, get_volumes_root, list_volumes


@dataclass(frozen=True)
class SyncOperation:
    """
    One concrete, currently runnable sync target.

    For volume-driven configs source_root is the mounted volume the
    destinations are resolved against. For path-driven configs it is the
    probed source path and is not used while syncing.
    """

    display_name: str
    config: SyncConfig
    source_root: str

    @property
    def is_volume_driven(self) -> bool:
        return self.config.is_volume_driven


def resolve_volumes_root(catalog: Catalog, volumes_root: Optional[Path] = None) -> Path:
    """Pick the mount root: explicit argument, then catalog, then platform default."""
    if volumes_root is not None:
        return Path(volumes_root)
    if catalog.volumes_root:
        return Path(catalog.volumes_root)
    return get_volumes_root()


def discover_operations(catalog: Catalog, volumes_root: Optional[Path] = None) -> list[SyncOperation]:
    """
    Find the sync operations available right now.

    Operations come out in catalog order; operations of one volume-driven
    config follow the directory listing order of the mount root.

    Args:
        catalog: Sync catalog.
        volumes_root: Optional override of the removable-volumes mount root.

    Returns:
        List of operations, possibly empty.

    Raises:
        DiscoveryError: If the mount root cannot be listed or a matched
            volume cannot be probed for free space.
    """
    operations: list[SyncOperation] = []
    root = resolve_volumes_root(catalog, volumes_root)
    volumes: Optional[list[str]] = None

    for config in catalog.configs:
        if config.is_volume_driven:
            if volumes is None:
                volumes = _list_volumes(root)
            operations.extend(_discover_volume_operations(config, root, volumes))
            continue

        operation = _discover_path_operation(config)
        if operation is not None:
            operations.append(operation)

    return operations


def _list_volumes(root: Path) -> list[str]:
    try:
        return list_volumes(root)
    except OSError as e:
        raise DiscoveryError(f"Cannot list volumes in {root}: {e}") from e


def _discover_volume_operations(config: SyncConfig, root: Path, volumes: list[str]) -> list[SyncOperation]:
    """One operation per mounted volume matching the config's pattern."""
    operations = []
    for volume in volumes:
        if not config.matches_volume(volume):
            continue

        volume_path = root / volume
        try:
            free_space = get_free_space(volume_path)
        except OSError as e:
            raise DiscoveryError(f"Cannot read free space of {volume_path}: {e}") from e

        operations.append(
            SyncOperation(
                display_name=f"{volume} ({format_size(free_space)} free)",
                config=config,
                source_root=str(volume_path),
            )
        )
    return operations


def _discover_path_operation(config: SyncConfig) -> Optional[SyncOperation]:
    """Offer a path-driven config only while its first source exists."""
    first_path = config.sources[0].path
    if not os.path.exists(first_path):
        return None
    return SyncOperation(display_name=config.name, config=config, source_root=first_path)
