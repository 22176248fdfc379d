# MediaSync Exceptions
# Error taxonomy for discovery, selection, and sync


class MediaSyncError(Exception):
    """Base exception for MediaSync errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DiscoveryError(MediaSyncError):
    """Volume listing or free-space probing failed; fatal to the run."""


class SelectionCancelled(MediaSyncError):
    """The user backed out of the operation menu."""

    def __init__(self, message: str = "Selection cancelled"):
        super().__init__(message)


class SyncError(MediaSyncError):
    """The sync tool failed for a single source."""

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
