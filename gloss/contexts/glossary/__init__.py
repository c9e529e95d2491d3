"""
Glossary Context

Responsibilities:
- Defines the Term record (slug, title, short definition, variants)
- Loads and validates the hand-authored glossary from the content source
- Resolves which term a glossary page defines (self-term lookup)

Owns: Term records, glossary file format, self-term path convention
Never: Touches document trees
"""

from gloss.contexts.glossary.exceptions import (
    DuplicateTermError,
    GlossaryLoadError,
    InvalidTermError,
)
from gloss.contexts.glossary.term_data_structure import Term
from gloss.contexts.glossary.term_dictionary import TermDictionary

__all__ = [
    "Term",
    "TermDictionary",
    "GlossaryLoadError",
    "InvalidTermError",
    "DuplicateTermError",
]
