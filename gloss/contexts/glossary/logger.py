"""
Glossary context logger.

Provides logging interface for the glossary context with automatic [glossary] prefix.
All glossary modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[glossary]"


def _log_info(message: str) -> None:
    """Log info message with [glossary] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [glossary] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [glossary] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_glossary_loaded(source_path: Path, term_count: int, variant_count: int) -> None:
    """Log a successful glossary load."""
    _log_info(f"Loaded {term_count} terms ({variant_count} variants)")
    _log_debug(f"Source: {source_path}")


def log_shared_variants(conflicts: dict) -> None:
    """Warn about variants claimed by more than one term."""
    for variant, slugs in conflicts.items():
        _log_warning(f"Variant '{variant}' shared by {', '.join(slugs)} (first term wins)")
