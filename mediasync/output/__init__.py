# MediaSync Output Module
# Console output formatting

from mediasync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
