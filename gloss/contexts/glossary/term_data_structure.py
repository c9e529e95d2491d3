"""
Glossary Term Data Structure

Defines the Term record consumed by the annotation context. Terms come from the
content source (data/glossary_terms.yaml) and are trusted to be schema-valid
once built through Term.from_record().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from gloss.contexts.glossary.exceptions import InvalidTermError

CATEGORIES = ("general", "technique", "finance", "legal")
DIFFICULTIES = ("debutant", "intermediaire", "avance")


@dataclass(frozen=True)
class Term:
    """
    One glossary entry.

    Attributes:
        slug: Canonical identifier, also the last segment of the term's page URL
        title: Display title shown in the tooltip
        short_definition: One or two sentence definition shown in the tooltip
        variants: Literal surface forms matched in text (case-insensitive)
        category: Content category of the term
        related_terms: Slugs of related glossary entries
        difficulty: Reader level the definition targets
    """

    slug: str
    title: str
    short_definition: str
    variants: Tuple[str, ...]
    category: str = "general"
    related_terms: Tuple[str, ...] = field(default_factory=tuple)
    difficulty: str = "debutant"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Term":
        """
        Build a Term from a content-source record.

        Accepts both `short_definition` and `shortDefinition`, and both
        `variants` and `matches` for the surface forms. Duplicate variants
        are dropped, keeping the first occurrence. YAML scalars such as
        `404` or `2024` are read as their text.

        Raises:
            InvalidTermError: If required fields are missing or values unknown
        """
        slug = _as_text(record.get("slug"), "slug")
        if not slug:
            raise InvalidTermError("Term record has no slug")

        title = _as_text(record.get("title"), "title", slug)
        if not title:
            raise InvalidTermError("Term record has no title", slug=slug)

        short_definition = _as_text(
            record.get("short_definition", record.get("shortDefinition")), "short definition", slug
        )
        if not short_definition:
            raise InvalidTermError("Term record has no short definition", slug=slug)

        raw_variants = record.get("variants", record.get("matches")) or []
        if not isinstance(raw_variants, (list, tuple)):
            raise InvalidTermError("Term variants must be a list", slug=slug)
        variants = tuple(
            dict.fromkeys(text for text in (_as_text(v, "variant", slug) for v in raw_variants) if text)
        )
        if not variants:
            raise InvalidTermError("Term record has no variants", slug=slug)

        category = record.get("category", "general")
        if category not in CATEGORIES:
            raise InvalidTermError(f"Unknown category '{category}'", slug=slug)

        difficulty = record.get("difficulty", "debutant")
        if difficulty not in DIFFICULTIES:
            raise InvalidTermError(f"Unknown difficulty '{difficulty}'", slug=slug)

        related_terms = record.get("related_terms", record.get("relatedTerms")) or ()
        return cls(
            slug=slug,
            title=title,
            short_definition=short_definition,
            variants=variants,
            category=category,
            related_terms=tuple(_as_text(related, "related term", slug) for related in related_terms),
            difficulty=difficulty,
        )


def _as_text(value: Any, field_name: str, slug: Optional[str] = None) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    raise InvalidTermError(f"Term {field_name} must be text, got {type(value).__name__}", slug=slug)
