"""Human-readable rendering helpers shared by the report encoders."""

import math
from datetime import datetime, timezone

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]


def format_file_size(size: float) -> str:
    """Format a byte count in base-1024 units with at most two decimals."""
    if not isinstance(size, (int, float)) or not math.isfinite(size) or size <= 0:
        return "0 Bytes"
    index = 0
    while size >= 1024 and index < len(_SIZE_UNITS) - 1:
        size /= 1024
        index += 1
    text = f"{size:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[index]}"


def format_timestamp(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
