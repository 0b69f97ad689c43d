"""Byte count rendering."""

_STEP = 1024

# Units after the initial "B"; anything past the last one stays in "T".
_UNITS: tuple[str, ...] = ("K", "M", "G", "T")


def format_bytes(value: int) -> str:
    """Render a byte count as ``<integer><unit>``.

    Each step divides by 1024 with truncation, so the result never has a
    fractional part. Values of 1024 TiB and beyond are still reported in T.

    Args:
        value: Non-negative byte count.

    Returns:
        Human-readable size such as ``"512B"``, ``"3K"`` or ``"1024T"``.

    Example:
        >>> format_bytes(1536)
        '1K'
    """
    if value < _STEP:
        return f"{value}B"

    unit = _UNITS[0]
    for unit in _UNITS:
        value //= _STEP
        if value < _STEP:
            break
    return f"{value}{unit}"
