"""
Shared utilities for GLOSS.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log session directories
"""

from gloss.utils.timestamp import format_duration, now

__all__ = ["now", "format_duration"]
