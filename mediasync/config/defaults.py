# MediaSync Default Configuration
# Built-in sync catalog as Python dict and YAML generator

import copy
from typing import Any

import yaml

PATHS = {
    "movies": "~/Movies",
    "footage": "~/Movies/Footage",
    "audio": "~/Movies/Audio",
    "photography": "~/Dropbox/photography",
}

SYNC_FLAGS = {
    # Append-only: new and changed files are copied, nothing is deleted
    "copy_new": ["-av", "--progress"],
    # Destination mirrors the source, extraneous files are removed
    "mirror": ["-av", "--delete", "--progress"],
}

BACKUP_SOURCES: list[dict[str, str]] = [
    {"path": f"{PATHS['movies']}/", "destination": "Video"},
    {"path": f"{PATHS['photography']}/2024/", "destination": "Photography/2024"},
    {"path": f"{PATHS['photography']}/2025/", "destination": "Photography/2025"},
    {"path": f"{PATHS['photography']}/Capture One/", "destination": "Photography/Capture One"},
]

DEFAULT_CONFIG: dict[str, Any] = {
    "sync_command": "rsync",
    "volumes_root": None,
    "configs": [
        {
            "name": "Hot Backup",
            "description": "Mirror backup of all media files",
            "volume_pattern": "^HOT_",
            "sources": [dict(source) for source in BACKUP_SOURCES],
            "sync_flags": list(SYNC_FLAGS["mirror"]),
        },
        {
            "name": "Archive Backup",
            "description": "Append-only backup of all media files",
            "volume_pattern": "^ARCHIVE_",
            "sources": [dict(source) for source in BACKUP_SOURCES],
            "sync_flags": list(SYNC_FLAGS["copy_new"]),
        },
        {
            "name": "Sony FX3",
            "description": "Import footage",
            "sources": [
                {"path": "/Volumes/Untitled/M4ROOT/CLIP/", "destination": PATHS["footage"]},
            ],
            "sync_flags": [
                *SYNC_FLAGS["copy_new"],
                "--include=*/",
                "--include=*.MP4",
                "--include=*.XML",
                "--exclude=*",
            ],
        },
        {
            "name": "DJI Osmo Pocket 3",
            "description": "Import footage",
            "sources": [
                {"path": "/Volumes/Untitled/DCIM/DJI_001/", "destination": PATHS["footage"]},
            ],
            "sync_flags": [
                *SYNC_FLAGS["copy_new"],
                "--include=*/",
                "--include=*.MP4",
                "--include=*.WAV",
                "--exclude=*",
            ],
        },
    ],
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the built-in catalog data."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# MediaSync Configuration
#
# Each entry in `configs` is one sync configuration shown in the menu.
#
# Discovery modes:
#   - volume_pattern set: one menu entry per mounted volume whose name
#     matches the regex; destinations are relative to that volume.
#   - no volume_pattern: offered only while the first source path exists;
#     destinations are used as-is.
#
# Source paths ending in "/" sync the directory contents, not the directory.
# sync_flags are passed to sync_command verbatim, in order.
#
# The camera imports (Sony FX3, DJI Osmo Pocket 3) read from /Volumes/Untitled,
# the macOS mount point for unnamed cards. On Linux, edit these source paths
# to where the card mounts (usually /media/<user>/...). --volumes-root only
# affects configs with a volume_pattern.

"""
    return header + yaml.dump(get_default_config(), default_flow_style=False, sort_keys=False, allow_unicode=True)
