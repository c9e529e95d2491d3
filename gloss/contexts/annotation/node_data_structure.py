"""
Document Node Data Structures

A minimal HTML syntax tree (in the spirit of hast) that the annotation context
rewrites. Produced from markup by gloss.contexts.rendering.html_tree and
serialized back by the same module.

Every parent exclusively owns its children; nodes are never shared between
documents.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Union

from gloss.contexts.annotation.tooltip_markup import OPAQUE_TAGS, TooltipClasses

AttributeValue = Union[str, List[str]]


@dataclass(frozen=True)
class Text:
    """Text node with an immutable string payload."""

    value: str


@dataclass(frozen=True)
class Comment:
    """Markup comment. Never traversed."""

    value: str


@dataclass(frozen=True)
class Raw:
    """
    Raw markup region (doctype, processing instruction, pre-rendered HTML).

    Serialized verbatim and never traversed.
    """

    value: str


@dataclass
class Element:
    """
    Element node.

    Attributes:
        tag_name: Lowercase tag name (e.g., "p", "a", "span")
        attributes: HTML attributes; "class" holds a list of class names
        children: Ordered child nodes
    """

    tag_name: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    @property
    def class_names(self) -> List[str]:
        """Class names as a list, whether stored as list or space-separated string."""
        value = self.attributes.get("class", [])
        if isinstance(value, str):
            return value.split()
        return list(value)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.class_names


@dataclass
class Root:
    """Document root. Holds top-level nodes only."""

    children: List["Node"] = field(default_factory=list)


Node = Union[Text, Element, Comment, Raw]
Parent = Union[Root, Element]


class NodeKind(Enum):
    """How the tree walker treats a node."""

    TEXT = "text"  # candidate for span splitting
    CONTAINER = "container"  # recurse into children
    OPAQUE = "opaque"  # copied through unchanged
    ANNOTATION = "annotation"  # existing tooltip, copied through unchanged
    OTHER = "other"  # comments, never traversed


def classify_node(node: Node, opaque_tags: FrozenSet[str] = OPAQUE_TAGS) -> NodeKind:
    """
    Resolve a node's kind once, so the walker only dispatches on NodeKind.

    Args:
        node: Node to classify
        opaque_tags: Tag names whose subtrees are never annotated

    Returns:
        NodeKind for the node
    """
    if isinstance(node, Text):
        return NodeKind.TEXT
    if isinstance(node, Raw):
        return NodeKind.OPAQUE
    if isinstance(node, Element):
        # Tooltips are <a> elements, so the marker class is checked first
        if node.has_class(TooltipClasses.TOOLTIP):
            return NodeKind.ANNOTATION
        if node.tag_name in opaque_tags:
            return NodeKind.OPAQUE
        return NodeKind.CONTAINER
    return NodeKind.OTHER


def iter_elements(parent: Parent):
    """Yield every Element under parent, pre-order."""
    for child in parent.children:
        if isinstance(child, Element):
            yield child
            yield from iter_elements(child)

