"""
Rendering context logger.

Provides logging interface for the rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from gloss.utils.logger import setup_logger as _setup_logger
from gloss.utils.timestamp import format_duration

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, content_dir: Path = None, verbose: bool = False) -> Path:
    """
    Setup logger for the rendering context.

    Args:
        log_dir: Directory for this build session
        content_dir: Content directory being built (for provenance)
        verbose: Show per-page DEBUG lines on the console

    Returns:
        Path to log file
    """
    extra = {"Content dir": content_dir} if content_dir else None
    return _setup_logger(
        context_name="render", log_dir=log_dir, extra_provenance=extra, verbose=verbose
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(content_dir: Path, output_dir: Path, page_count: int) -> None:
    """Log start of a build."""
    _log_info(f"Building {page_count} pages from {content_dir}")
    _log_debug(f"Output: {output_dir}")


def log_page_result(page) -> None:
    """
    Log one page's outcome.

    Args:
        page: PageBuildResult from build_pages()
    """
    if page.error:
        _log_error(f"{page.relative_path}: failed")
        _log_error(f"  Error: {page.error}")
        return

    annotation = page.annotation
    message = f"{page.relative_path}: {annotation.count} tooltips"
    if annotation.self_term_id:
        message += f" (self: {annotation.self_term_id})"
    if annotation.exhausted:
        message += " [cap reached]"
    _log_info(message)


def log_build_summary(result) -> None:
    """
    Log build totals.

    Args:
        result: BuildResult from build_pages()
    """
    duration = format_duration(result.elapsed_time)
    if result.success:
        _log_success(
            f"Built {len(result.pages)} pages, {result.tooltip_count} tooltips ({duration})"
        )
    else:
        _log_error(
            f"Built {len(result.pages) - len(result.failures)}/{len(result.pages)} pages "
            f"({len(result.failures)} failed, {duration})"
        )
    if result.output_dir:
        _log_info(f"  Output: {result.output_dir}")
