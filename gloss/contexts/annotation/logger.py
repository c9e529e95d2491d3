"""
Annotation context logger.

Provides logging interface for the annotation context with automatic [annotate] prefix.
All annotation modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[annotate]"


def _log_debug(message: str) -> None:
    """Log debug message with [annotate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_index_built(rule_count: int, term_count: int) -> None:
    """Log match index construction."""
    _log_debug(f"Match index built: {rule_count} rules from {term_count} terms")


def log_annotation_result(result) -> None:
    """
    Log one document's annotation outcome.

    Args:
        result: AnnotationResult from GlossaryAnnotator.annotate()
    """
    source = result.source_path or "<memory>"
    terms = ", ".join(result.matched_term_ids) if result.matched_term_ids else "none"
    parts = [f"{source}: {result.count} tooltips ({terms})"]
    if result.self_term_id:
        parts.append(f"self={result.self_term_id}")
    if result.preexisting:
        parts.append(f"preexisting={result.preexisting}")
    if result.exhausted:
        parts.append("cap reached")
    _log_debug(" | ".join(parts))
