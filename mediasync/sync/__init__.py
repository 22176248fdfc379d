# MediaSync Sync Module
# Operation discovery and sequential execution

from mediasync.sync.discovery import SyncOperation, discover_operations
from mediasync.sync.exceptions import DiscoveryError, MediaSyncError, SelectionCancelled, SyncError
from mediasync.sync.executor import SourceResult, SyncExecutor, build_command

__all__ = [
    # Discovery
    "SyncOperation",
    "discover_operations",
    # Executor
    "SyncExecutor",
    "SourceResult",
    "build_command",
    # Exceptions
    "MediaSyncError",
    "DiscoveryError",
    "SelectionCancelled",
    "SyncError",
]
