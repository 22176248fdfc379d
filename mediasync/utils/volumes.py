# MediaSync Volume Utilities
# Platform-aware mount root lookup and filesystem probes

import getpass
import os
import platform
import shutil
from pathlib import Path

# Platform name mapping: system name -> MediaSync platform name
_PLATFORM_MAP: dict[str, str] = {
    "Darwin": "macos",
    "Linux": "linux",
    "Windows": "windows",
}


def get_current_platform() -> str:
    """
    Get the current platform identifier.

    Returns:
        Platform string: "macos", "linux", or "windows".
    """
    system = platform.system()
    return _PLATFORM_MAP.get(system, system.lower())


def get_volumes_root() -> Path:
    """
    Get the directory where removable volumes are mounted.

    MEDIASYNC_VOLUMES_ROOT overrides the platform default.

    Returns:
        /Volumes on macOS, /media/<user> on Linux, /mnt otherwise.
    """
    env_root = os.environ.get("MEDIASYNC_VOLUMES_ROOT")
    if env_root:
        return Path(env_root).expanduser()

    current = get_current_platform()
    if current == "macos":
        return Path("/Volumes")
    if current == "linux":
        return Path("/media") / getpass.getuser()
    return Path("/mnt")


def list_volumes(root: Path) -> list[str]:
    """
    List mounted volume names under the mount root.

    Args:
        root: Mount root directory.

    Returns:
        Entry names in directory-listing order.

    Raises:
        OSError: If the mount root cannot be listed.
    """
    return os.listdir(root)


def get_free_space(path: str | Path) -> int:
    """
    Get free space on the filesystem holding path.

    Args:
        path: Mount point or any path on the volume.

    Returns:
        Free bytes available to the current user.

    Raises:
        OSError: If the path is not reachable.
    """
    return shutil.disk_usage(path).free
