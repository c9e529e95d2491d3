"""
Annotation Context

Responsibilities:
- Builds the match index (one word-bounded matcher per term variant, longest first)
- Walks document trees and splits text nodes into tooltips
- Enforces first-occurrence-only, the per-document cap and self-exclusion

Owns: Document node tree model, tooltip markup, per-document annotation state
Never: Parses or serializes markup, reads content files
"""

from gloss.contexts.annotation.annotation_state import AnnotationPhase, AnnotationState
from gloss.contexts.annotation.annotator import AnnotationResult, GlossaryAnnotator
from gloss.contexts.annotation.match_index import MatchRule, build_match_index
from gloss.contexts.annotation.node_data_structure import (
    Comment,
    Element,
    NodeKind,
    Raw,
    Root,
    Text,
    classify_node,
)
from gloss.contexts.annotation.settings import AnnotationSettings, load_annotation_settings
from gloss.contexts.annotation.span_splitter import create_tooltip_node, split_text_node
from gloss.contexts.annotation.tree_walker import walk_and_replace

__all__ = [
    # Orchestration
    "GlossaryAnnotator",
    "AnnotationResult",
    "AnnotationSettings",
    "load_annotation_settings",
    # Components
    "build_match_index",
    "MatchRule",
    "walk_and_replace",
    "split_text_node",
    "create_tooltip_node",
    "AnnotationState",
    "AnnotationPhase",
    # Node tree
    "Root",
    "Element",
    "Text",
    "Comment",
    "Raw",
    "NodeKind",
    "classify_node",
]
