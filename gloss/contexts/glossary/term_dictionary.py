"""
Term Dictionary

Static, hand-authored registry of glossary terms. Immutable once built.

The dictionary is the single source of truth for:
- the annotation context (match index construction, self-term lookup)
- glossary validation (scripts/validate_glossary.py)
- auto-linking helpers (match_entries)
"""

import os
import re
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from gloss.contexts.glossary.exceptions import (
    DuplicateTermError,
    GlossaryLoadError,
    InvalidTermError,
)
from gloss.contexts.glossary.logger import log_glossary_loaded, log_shared_variants
from gloss.contexts.glossary.term_data_structure import Term

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[3]))
GLOSSARY_TERMS_PATH = Path(
    os.getenv("GLOSSARY_TERMS_PATH", PROJECT_ROOT / "data" / "glossary_terms.yaml")
)

# Glossary pages live at content/glossaire/<slug>.md
DEFAULT_SELF_PATH_PATTERN = r"content/glossaire/([^/]+)\.md$"


class TermDictionary:
    """
    Ordered, read-only collection of glossary terms.

    Order is the authoring order of the content source; it is the tie-break
    used by the match index when two variants have the same length.
    """

    def __init__(
        self,
        terms: Iterable[Term],
        self_path_pattern: str = DEFAULT_SELF_PATH_PATTERN,
    ):
        """
        Initialize the dictionary.

        Args:
            terms: Term records in authoring order
            self_path_pattern: Regex whose first group extracts a term slug
                from a glossary page's source path

        Raises:
            DuplicateTermError: If two terms share a slug
        """
        self._terms: Tuple[Term, ...] = tuple(terms)
        self._by_slug: Dict[str, Term] = {}
        for term in self._terms:
            if term.slug in self._by_slug:
                raise DuplicateTermError(term.slug)
            self._by_slug[term.slug] = term

        self.self_path_pattern = re.compile(self_path_pattern)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Dict[str, Any]],
        self_path_pattern: str = DEFAULT_SELF_PATH_PATTERN,
    ) -> "TermDictionary":
        """Build a dictionary from raw content-source records."""
        return cls((Term.from_record(record) for record in records), self_path_pattern)

    @classmethod
    def from_yaml(
        cls,
        path: Path = None,
        self_path_pattern: str = DEFAULT_SELF_PATH_PATTERN,
    ) -> "TermDictionary":
        """
        Load a dictionary from a glossary YAML file.

        Expected layout:
            terms:
              - slug: seo
                title: SEO
                short_definition: ...
                variants: [SEO, referencement naturel]

        Args:
            path: Glossary file (defaults to GLOSSARY_TERMS_PATH env variable)
            self_path_pattern: See __init__

        Raises:
            GlossaryLoadError: If the file is missing or malformed
        """
        if path is None:
            path = GLOSSARY_TERMS_PATH

        if not path.exists():
            raise GlossaryLoadError("Glossary file not found", source_path=path)

        try:
            # Definitions are editorial text: "${...}" is kept literally, never resolved
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        except (yaml.YAMLError, OmegaConfBaseException, UnicodeDecodeError) as e:
            raise GlossaryLoadError(f"Glossary file is not valid YAML: {e}", source_path=path) from e

        if not isinstance(data, dict) or not isinstance(data.get("terms"), list):
            raise GlossaryLoadError("Glossary file must contain a 'terms' list", source_path=path)

        terms = []
        for index, record in enumerate(data["terms"]):
            if not isinstance(record, dict):
                raise GlossaryLoadError(
                    "Term record must be a mapping", source_path=path, record_index=index
                )
            try:
                terms.append(Term.from_record(record))
            except InvalidTermError as e:
                raise GlossaryLoadError(str(e), source_path=path, record_index=index) from e

        try:
            dictionary = cls(terms, self_path_pattern)
        except DuplicateTermError as e:
            raise GlossaryLoadError(str(e), source_path=path) from e

        log_glossary_loaded(path, len(dictionary), dictionary.variant_count)
        conflicts = dictionary.shared_variants()
        if conflicts:
            log_shared_variants(conflicts)

        return dictionary

    @property
    def terms(self) -> Tuple[Term, ...]:
        """All terms in authoring order."""
        return self._terms

    @property
    def variant_count(self) -> int:
        return sum(len(term.variants) for term in self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, slug: str) -> bool:
        return slug in self._by_slug

    def get(self, slug: str) -> Optional[Term]:
        """Look up a term by slug, or None."""
        return self._by_slug.get(slug)

    def self_term_id(self, source_path: Union[str, Path, None]) -> Optional[str]:
        """
        Slug of the term a source file defines, if any.

        A glossary page must never have its own term annotated inside itself.
        Paths that don't match the glossary page pattern, or that name a slug
        missing from the dictionary, yield None.

        Args:
            source_path: Source file path of the document being annotated

        Returns:
            Term slug or None

        Examples:
            >>> dictionary.self_term_id("site/src/content/glossaire/seo.md")
            'seo'
            >>> dictionary.self_term_id("site/src/content/blog/launch.md")
        """
        if not source_path:
            return None

        normalized = str(source_path).replace("\\", "/")
        match = self.self_path_pattern.search(normalized)
        if not match:
            return None

        slug = match.group(1)
        return slug if slug in self._by_slug else None

    def match_entries(self) -> List[Tuple[str, str]]:
        """
        Flat (variant, slug) pairs, longest variant first.

        Used by auto-linking code that needs every surface form without the
        tooltip payload. Ties keep authoring order.
        """
        entries = [(variant, term.slug) for term in self._terms for variant in term.variants]
        return sorted(entries, key=lambda entry: -len(entry[0]))

    def shared_variants(self) -> Dict[str, List[str]]:
        """
        Variants (case-insensitive) claimed by more than one term.

        Returns:
            Mapping of lowercased variant to the slugs claiming it, in order
        """
        claims: Dict[str, List[str]] = defaultdict(list)
        for term in self._terms:
            for variant in term.variants:
                key = variant.lower()
                if term.slug not in claims[key]:
                    claims[key].append(term.slug)

        return {variant: slugs for variant, slugs in claims.items() if len(slugs) > 1}
