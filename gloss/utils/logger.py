"""
Session logging for GLOSS scripts.

One loguru session per script run: a DEBUG file sink in the session's log
directory and a console sink. Library modules never configure sinks; they log
through their context's logger.py and inherit whatever the script set up.
"""

import sys
from pathlib import Path

from loguru import logger

import gloss

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | {message}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    verbose: bool = False,
) -> Path:
    """
    Start a logging session for a context.

    Args:
        context_name: Context identifier, used as the log file name ("render")
        log_dir: Directory for this session (e.g., outs/logs/build_20251114_123456)
        extra_provenance: Additional key-value pairs for the provenance header
        verbose: Also show DEBUG lines (one per annotated page) on the console

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "INFO",
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Log which command produced this session, with which GLOSS version."""
    logger.info("=" * 80)
    logger.info(f"GLOSS {gloss.__version__} (Python {sys.version.split()[0]})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
