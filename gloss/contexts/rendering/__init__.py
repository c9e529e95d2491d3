"""
Rendering Context

Responsibilities:
- Parses rendered HTML into the annotation node tree (BeautifulSoup)
- Serializes annotated trees back to HTML
- Builds annotated copies of a content directory, one annotation pass per page

Owns: HTML parsing and serialization, page build orchestration
Never: Decides which spans become tooltips
"""

from gloss.contexts.rendering.exceptions import PageBuildError
from gloss.contexts.rendering.html_tree import find_elements, parse_html, to_html
from gloss.contexts.rendering.page_builder import (
    BuildResult,
    PageBuildResult,
    annotate_fragment,
    build_page,
    build_pages,
)

__all__ = [
    "parse_html",
    "to_html",
    "find_elements",
    "annotate_fragment",
    "build_page",
    "build_pages",
    "BuildResult",
    "PageBuildResult",
    "PageBuildError",
]
