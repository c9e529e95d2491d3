"""Custom exceptions for the glossary context with source references."""

from pathlib import Path
from typing import Optional


class GlossaryLoadError(Exception):
    """
    Exception raised when a glossary file cannot be read or has the wrong shape.

    Attributes:
        message: Error description
        source_path: Path to the glossary file being loaded
        record_index: Position of the offending term record, if any
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        record_index: Optional[int] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.record_index = record_index

        parts = [message]

        if source_path:
            parts.append(f"\nGlossary file: {source_path}")

        if record_index is not None:
            parts.append(f"Term record: #{record_index}")

        super().__init__("\n".join(parts))


class InvalidTermError(ValueError):
    """
    Exception raised when a term record is missing required fields.

    A record needs a slug, a title, a short definition and at least one
    variant. Category and difficulty must be known values.
    """

    def __init__(self, message: str, slug: Optional[str] = None):
        self.message = message
        self.slug = slug

        if slug:
            message = f"{message} (term '{slug}')"

        super().__init__(message)


class DuplicateTermError(ValueError):
    """Exception raised when two term records share the same slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Duplicate glossary slug: '{slug}'")
