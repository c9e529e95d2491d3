"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Compact local timestamp for naming log session directories.

    Returns:
        Timestamp formatted as YYYYMMDD_HHMMSS (e.g., "20251114_123456")
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_duration(seconds: float) -> str:
    """
    Format an elapsed time for log lines.

    Examples:
        format_duration(0.0042)  # "4ms"
        format_duration(3.2)     # "3.20s"
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"
