"""
Per-document Annotation State

Transient state for one annotation pass: which terms are already annotated,
how many tooltips were made, and which term (if any) the document defines.
Created fresh for every document and discarded afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from gloss.contexts.annotation.defaults import MAX_ANNOTATIONS


class AnnotationPhase(Enum):
    """Lifecycle of an annotation pass. Transitions are one-way."""

    FRESH = "fresh"
    ACCUMULATING = "accumulating"
    EXHAUSTED = "exhausted"


@dataclass
class AnnotationState:
    """
    Mutable state owned by exactly one traversal.

    Attributes:
        self_term_id: Slug of the term the document defines (never annotated)
        max_annotations: Hard cap on tooltips for this document
        matched_term_ids: Slugs already annotated in this document
        count: Number of tooltips made so far
        matched_order: Slugs in the order they were annotated
    """

    self_term_id: Optional[str] = None
    max_annotations: int = MAX_ANNOTATIONS
    matched_term_ids: Set[str] = field(default_factory=set)
    count: int = 0
    matched_order: List[str] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.count >= self.max_annotations

    @property
    def phase(self) -> AnnotationPhase:
        if self.exhausted:
            return AnnotationPhase.EXHAUSTED
        if self.count == 0:
            return AnnotationPhase.FRESH
        return AnnotationPhase.ACCUMULATING

    def is_eligible(self, term_id: str) -> bool:
        """Whether a tooltip for term_id may still be made in this document."""
        return (
            not self.exhausted
            and term_id not in self.matched_term_ids
            and term_id != self.self_term_id
        )

    def record(self, term_id: str) -> None:
        """
        Record a tooltip for term_id.

        Raises:
            ValueError: If term_id is not eligible (already matched, self term, or cap reached)
        """
        if not self.is_eligible(term_id):
            raise ValueError(
                f"Term '{term_id}' cannot be annotated "
                f"(count={self.count}/{self.max_annotations}, self={self.self_term_id})"
            )
        self.matched_term_ids.add(term_id)
        self.matched_order.append(term_id)
        self.count += 1

    def seed(self, term_id: Optional[str]) -> None:
        """
        Account for a tooltip already present in the document.

        Existing tooltips count toward the cap and claim their term, so a
        second pass over annotated content makes no new tooltips for them.
        Tooltips beyond the cap, for the self term, or for an already seen
        term are ignored.
        """
        if term_id and self.is_eligible(term_id):
            self.record(term_id)
