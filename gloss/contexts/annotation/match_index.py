"""
Match Index

Flat, globally ordered list of match rules derived once from the term
dictionary. Read-only after construction, so one index can serve any number
of documents, including concurrently.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from gloss.contexts.glossary.term_dictionary import TermDictionary


@dataclass(frozen=True)
class MatchRule:
    """
    One matcher per term variant.

    Attributes:
        term_id: Slug of the term the variant belongs to
        title: Term display title (tooltip payload)
        short_definition: Term short definition (tooltip payload)
        variant: Literal surface form
        pattern: Case-insensitive, word-bounded, escaped regex of the variant
        order: Position of the variant in dictionary order (tie-break)
    """

    term_id: str
    title: str
    short_definition: str
    variant: str
    pattern: re.Pattern
    order: int

    def search(self, text: str) -> Optional[re.Match]:
        """Leftmost occurrence of the variant in text, or None."""
        return self.pattern.search(text)


def compile_variant(variant: str) -> re.Pattern:
    """
    Compile a variant for literal, case-insensitive, whole-word matching.

    Escaping neutralizes regex metacharacters in dictionary entries, so a
    variant like "C++" or "Node.js" can never fail or over-match at
    traversal time.

    Examples:
        >>> compile_variant("API").search("Les APIs REST") is None
        True
        >>> compile_variant("API").search("une api publique").group(0)
        'api'
    """
    return re.compile(rf"\b({re.escape(variant)})\b", re.IGNORECASE)


def build_match_index(dictionary: TermDictionary) -> Tuple[MatchRule, ...]:
    """
    Build the globally ordered rule list.

    Rules are sorted by descending variant length, so a longer variant is
    always tried before any shorter variant it contains ("referencement
    naturel" before "referencement"). Equal lengths keep dictionary order.

    Args:
        dictionary: Source terms

    Returns:
        Immutable tuple of MatchRule, longest variant first
    """
    rules = []
    for term in dictionary:
        for variant in term.variants:
            rules.append(
                MatchRule(
                    term_id=term.slug,
                    title=term.title,
                    short_definition=term.short_definition,
                    variant=variant,
                    pattern=compile_variant(variant),
                    order=len(rules),
                )
            )

    rules.sort(key=lambda rule: (-len(rule.variant), rule.order))
    return tuple(rules)
