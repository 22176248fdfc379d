"""MediaSync - pick and run predefined rsync backups and camera imports.

Discovers which sync operations are runnable right now (mounted backup
volumes, inserted camera cards), lets the user pick one, and runs rsync
once per configured source while streaming its progress.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Catalog",
    "SyncConfig",
    "SyncSource",
    "SyncOperation",
    "SyncExecutor",
    "discover_operations",
    "format_size",
    "load_config",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("Catalog", "SyncConfig", "SyncSource", "load_config"):
        from mediasync import config

        return getattr(config, name)
    if name in ("SyncOperation", "discover_operations"):
        from mediasync.sync import discovery

        return getattr(discovery, name)
    if name == "SyncExecutor":
        from mediasync.sync.executor import SyncExecutor

        return SyncExecutor
    if name == "format_size":
        from mediasync.utils.formatting import format_size

        return format_size
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
