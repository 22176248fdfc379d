# MediaSync Formatting Utilities

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int | float) -> str:
    """
    Format a byte count as a human-readable size.

    Args:
        num_bytes: Non-negative byte count.

    Returns:
        Size string such as "512.00 B" or "1.50 GB". Sizes beyond the
        largest unit stay in TB.
    """
    size = float(num_bytes)
    unit_index = 0

    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.2f} {SIZE_UNITS[unit_index]}"
