"""
Tooltip Markup Constants

Class names and tag sets shared by tooltip synthesis, tree walking and the
stylesheet. Organized into frozen dataclasses for immutability and clear grouping.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TooltipClasses:
    """
    CSS classes of the synthesized tooltip markup.

    TOOLTIP doubles as the marker the tree walker uses to recognize an
    existing tooltip and skip it.
    """

    TOOLTIP: str = "glossary-tooltip"
    CONTENT: str = "glossary-tooltip-content"
    TITLE: str = "glossary-tooltip-title"
    DEFINITION: str = "glossary-tooltip-def"


@dataclass(frozen=True)
class TooltipAttributes:
    """Attribute names carried by a tooltip link."""

    TERM_ID: str = "data-glossary"
    HREF: str = "href"
    ROLE: str = "role"
    ARIA_HIDDEN: str = "aria-hidden"


HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LINK_TAGS = frozenset({"a"})
CODE_TAGS = frozenset({"code", "pre"})
RAW_TAGS = frozenset({"script", "style"})
GRAPHICS_TAGS = frozenset({"svg"})
# Text here is shown as plain text (tab title, form values), never as markup
METADATA_TAGS = frozenset({"head", "title"})
FORM_TAGS = frozenset({"textarea", "option"})

# Injecting a tooltip inside any of these would corrupt meaning or rendering
OPAQUE_TAGS = (
    HEADING_TAGS | LINK_TAGS | CODE_TAGS | RAW_TAGS | GRAPHICS_TAGS | METADATA_TAGS | FORM_TAGS
)
