"""Custom exceptions for the rendering context with page references."""

from pathlib import Path
from typing import Optional


class PageBuildError(Exception):
    """
    Exception raised when a page cannot be read, annotated or written.

    Attributes:
        message: Error description
        source_path: Page being built
        original_error: The underlying error
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"\nPage: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
