"""
Default values for tooltip annotation.

Used by settings.py when a key is missing from data/annotation_settings.yaml,
and directly by callers that build an annotator without a settings file.
"""

from typing import Any, Dict

from gloss.contexts.glossary.term_dictionary import DEFAULT_SELF_PATH_PATTERN

# Hard cap on tooltips per document
MAX_ANNOTATIONS = 8

# Term pages are served at {url_prefix}/{slug}
URL_PREFIX = "/glossaire"


def get_default_settings() -> Dict[str, Any]:
    """
    Get the complete default settings structure.

    Returns:
        Dict with every key AnnotationSettings expects
    """
    return {
        "max_annotations": MAX_ANNOTATIONS,
        "url_prefix": URL_PREFIX,
        "self_path_pattern": DEFAULT_SELF_PATH_PATTERN,
    }
