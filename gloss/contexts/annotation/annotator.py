"""
Glossary Annotator

Orchestrates one annotation pass per document: computes the self term, creates
fresh state, seeds it from tooltips already present, and walks the tree.

The annotator holds only read-only data (match index, settings) and can be
shared across any number of documents. Each annotate() call owns its state.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from gloss.contexts.annotation.annotation_state import AnnotationState
from gloss.contexts.annotation.logger import log_annotation_result, log_index_built
from gloss.contexts.annotation.match_index import MatchRule, build_match_index
from gloss.contexts.annotation.node_data_structure import Parent
from gloss.contexts.annotation.settings import AnnotationSettings, load_annotation_settings
from gloss.contexts.annotation.tree_walker import seed_from_existing, walk_and_replace
from gloss.contexts.glossary.term_dictionary import TermDictionary


@dataclass
class AnnotationResult:
    """
    Outcome of annotating one document.

    Attributes:
        source_path: Document source path, if known
        self_term_id: Term the document defines, if any
        matched_term_ids: Slugs annotated by this pass, in reading order
        preexisting: Tooltips already in the document before this pass
        max_annotations: Cap in effect
        total: Tooltips counted toward the cap, preexisting ones included
    """

    source_path: Optional[str]
    self_term_id: Optional[str]
    matched_term_ids: List[str] = field(default_factory=list)
    preexisting: int = 0
    max_annotations: int = 0
    total: int = 0

    @property
    def count(self) -> int:
        """Tooltips made by this pass."""
        return len(self.matched_term_ids)

    @property
    def exhausted(self) -> bool:
        return self.total >= self.max_annotations


class GlossaryAnnotator:
    """
    Dictionary-driven tooltip annotator.

    Example:
        annotator = GlossaryAnnotator(TermDictionary.from_yaml())
        result = annotator.annotate(root, source_path="content/blog/launch.md")
    """

    def __init__(self, dictionary: TermDictionary, settings: AnnotationSettings = None):
        """
        Build the match index once.

        Args:
            dictionary: Glossary terms
            settings: Cap and URL settings (defaults to built-in defaults)
        """
        self.dictionary = dictionary
        self.settings = settings or AnnotationSettings.defaults()
        self.rules: Tuple[MatchRule, ...] = build_match_index(dictionary)
        log_index_built(len(self.rules), len(dictionary))

    @classmethod
    def from_config(
        cls,
        terms_path: Path = None,
        settings_path: Path = None,
        presets: List[str] = None,
    ) -> "GlossaryAnnotator":
        """
        Build an annotator from the glossary and settings files.

        The self-term path pattern comes from the settings, so the dictionary
        is loaded after them.
        """
        settings = load_annotation_settings(settings_path, presets)
        dictionary = TermDictionary.from_yaml(terms_path, settings.self_path_pattern)
        return cls(dictionary, settings)

    def new_state(self, source_path: Union[str, Path, None] = None) -> AnnotationState:
        """Fresh per-document state."""
        return AnnotationState(
            self_term_id=self.dictionary.self_term_id(source_path),
            max_annotations=self.settings.max_annotations,
        )

    def annotate(
        self, root: Parent, source_path: Union[str, Path, None] = None
    ) -> AnnotationResult:
        """
        Annotate a document tree in place.

        Args:
            root: Document root (mutated)
            source_path: Document source path, used only for the self-term lookup

        Returns:
            AnnotationResult summarizing the pass
        """
        state = self.new_state(source_path)

        preexisting = seed_from_existing(root, state)
        seeded = len(state.matched_order)

        walk_and_replace(root, state, self.rules, self.settings.url_prefix)

        result = AnnotationResult(
            source_path=str(source_path) if source_path else None,
            self_term_id=state.self_term_id,
            matched_term_ids=state.matched_order[seeded:],
            preexisting=preexisting,
            max_annotations=state.max_annotations,
            total=state.count,
        )
        log_annotation_result(result)
        return result
