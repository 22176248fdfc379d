# MediaSync Utilities
# Size formatting and volume probes

from mediasync.utils.formatting import format_size
from mediasync.utils.volumes import get_current_platform, get_free_space, get_volumes_root, list_volumes

__all__ = [
    # Formatting
    "format_size",
    # Volumes
    "get_current_platform",
    "get_volumes_root",
    "list_volumes",
    "get_free_space",
]
