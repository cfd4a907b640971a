"""
Human-readable formatting of byte counts.
"""

# Binary prefixes for 1024**1 .. 1024**6.
_UNIT_PREFIXES = "KMGTPE"
_UNIT = 1024


def format_bytes(num_bytes: int) -> str:
    """
    Convert a byte count into a human-readable string with a binary prefix.

    Counts below 1024 are shown as plain bytes ("512 B"). Larger counts are
    divided by the largest power of 1024 that keeps the integer quotient
    below 1024 and shown with two decimals ("1.50 KiB", "2.00 GiB").
    Exbibytes is the largest unit; anything bigger is still shown in EiB.

    Args:
        num_bytes: Non-negative number of bytes.

    Returns:
        The formatted string.

    Raises:
        ValueError: If num_bytes is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {num_bytes}")
    if num_bytes < _UNIT:
        return f"{num_bytes} B"

    divisor, exponent = _UNIT, 0
    quotient = num_bytes // _UNIT
    while quotient >= _UNIT and exponent < len(_UNIT_PREFIXES) - 1:
        quotient //= _UNIT
        divisor *= _UNIT
        exponent += 1

    return f"{num_bytes / divisor:.2f} {_UNIT_PREFIXES[exponent]}iB"
