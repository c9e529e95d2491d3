"""
HTML Tree Adapter

Converts rendered HTML fragments to the annotation node tree and back.
Parsing is delegated to BeautifulSoup; serialization is done here so the
output is stable across repeated passes.
"""

import html
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Comment as SoupComment
from bs4.element import NavigableString, PreformattedString, Tag

from gloss.contexts.annotation.node_data_structure import (
    Comment,
    Element,
    Node,
    Parent,
    Raw,
    Root,
    Text,
    iter_elements,
)

# Elements that never have a closing tag
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose text content is emitted without escaping
RAW_TEXT_TAGS = frozenset({"script", "style"})


def parse_html(markup: str) -> Root:
    """
    Parse an HTML fragment or document into a node tree.

    Uses the stdlib-backed "html.parser" builder, which keeps fragments as
    fragments (no implicit <html>/<body> wrapping).

    Args:
        markup: HTML source

    Returns:
        Root node owning the parsed tree
    """
    soup = BeautifulSoup(markup, "html.parser")
    return Root(children=_convert_children(soup))


def _convert_children(tag: Tag) -> List[Node]:
    return [node for node in (_convert(child) for child in tag.children) if node is not None]


def _convert(soup_node) -> Optional[Node]:
    if isinstance(soup_node, Tag):
        attributes = {
            name: list(value) if isinstance(value, list) else value
            for name, value in soup_node.attrs.items()
        }
        return Element(
            tag_name=soup_node.name,
            attributes=attributes,
            children=_convert_children(soup_node),
        )
    if isinstance(soup_node, SoupComment):
        return Comment(str(soup_node))
    if isinstance(soup_node, PreformattedString):
        # Doctype, CDATA, declarations, processing instructions. Some bs4
        # releases append a newline to doctypes; the source text keeps its own.
        return Raw(soup_node.output_ready().rstrip("\n"))
    if isinstance(soup_node, NavigableString):
        return Text(str(soup_node))
    return None


def to_html(node) -> str:
    """
    Serialize a node tree (or a single node) to HTML.

    Text is escaped (&, <, >), attribute values are quoted and escaped,
    multi-valued attributes such as class are space-joined.

    Args:
        node: Root, Element, Text, Comment or Raw

    Returns:
        HTML string
    """
    parts: List[str] = []
    _serialize(node, parts, raw_text=False)
    return "".join(parts)


def _serialize(node, parts: List[str], raw_text: bool) -> None:
    if isinstance(node, Text):
        parts.append(node.value if raw_text else html.escape(node.value, quote=False))
    elif isinstance(node, Comment):
        parts.append(f"<!--{node.value}-->")
    elif isinstance(node, Raw):
        parts.append(node.value)
    elif isinstance(node, Element):
        parts.append(f"<{node.tag_name}{_serialize_attributes(node)}>")
        if node.tag_name in VOID_TAGS and not node.children:
            return
        child_raw = node.tag_name in RAW_TEXT_TAGS
        for child in node.children:
            _serialize(child, parts, child_raw)
        parts.append(f"</{node.tag_name}>")
    elif isinstance(node, Root):
        for child in node.children:
            _serialize(child, parts, raw_text)
    else:
        raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def _serialize_attributes(element: Element) -> str:
    rendered = []
    for name, value in element.attributes.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        if value is None:
            rendered.append(f" {name}")
        else:
            rendered.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(rendered)


def find_elements(parent: Parent, tag_name: str = None, class_name: str = None) -> List[Element]:
    """
    Collect elements under parent, pre-order, filtered by tag and/or class.

    Example:
        >>> tooltips = find_elements(root, "a", "glossary-tooltip")
    """
    return [
        element
        for element in iter_elements(parent)
        if (tag_name is None or element.tag_name == tag_name)
        and (class_name is None or element.has_class(class_name))
    ]
