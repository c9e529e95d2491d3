"""
Tree Walker

Pre-order, left-to-right traversal that hands text nodes to the span splitter,
so "first occurrence" matches the reader's first encounter with a term.
"""

from typing import FrozenSet, Iterator, List, Optional, Sequence

from gloss.contexts.annotation.annotation_state import AnnotationState
from gloss.contexts.annotation.defaults import URL_PREFIX
from gloss.contexts.annotation.match_index import MatchRule
from gloss.contexts.annotation.node_data_structure import (
    Element,
    Node,
    NodeKind,
    Parent,
    classify_node,
)
from gloss.contexts.annotation.span_splitter import split_text_node
from gloss.contexts.annotation.tooltip_markup import OPAQUE_TAGS, TooltipAttributes


def walk_and_replace(
    parent: Parent,
    state: AnnotationState,
    rules: Sequence[MatchRule],
    url_prefix: str = URL_PREFIX,
    opaque_tags: FrozenSet[str] = OPAQUE_TAGS,
) -> None:
    """
    Annotate parent's subtree in place.

    Text nodes are split, container elements are recursed into, and opaque
    elements, existing tooltips and comments are copied through unchanged.
    Once the cap is reached, the remaining siblings and subtrees are left
    untouched.

    A text node directly followed by an existing tooltip is also left
    untouched: it is the text that preceded a match when that tooltip was
    made, and was already scanned then.

    Args:
        parent: Root or Element whose children are rewritten
        state: Per-document state (mutated)
        rules: Match index
        url_prefix: Path prefix of glossary term pages
        opaque_tags: Tag names whose subtrees are never annotated
    """
    if state.exhausted:
        return

    children = parent.children
    new_children: List[Node] = []

    for index, child in enumerate(children):
        if state.exhausted:
            new_children.extend(children[index:])
            break

        kind = classify_node(child, opaque_tags)

        if kind is NodeKind.TEXT:
            if _next_kind(children, index, opaque_tags) is NodeKind.ANNOTATION:
                new_children.append(child)
            else:
                new_children.extend(split_text_node(child, state, rules, url_prefix))
        elif kind is NodeKind.CONTAINER:
            walk_and_replace(child, state, rules, url_prefix, opaque_tags)
            new_children.append(child)
        else:
            new_children.append(child)

    parent.children = new_children


def iter_existing_tooltips(
    parent: Parent, opaque_tags: FrozenSet[str] = OPAQUE_TAGS
) -> Iterator[Element]:
    """Yield tooltips reachable by the walker, in reading order."""
    for child in parent.children:
        kind = classify_node(child, opaque_tags)
        if kind is NodeKind.ANNOTATION:
            yield child
        elif kind is NodeKind.CONTAINER:
            yield from iter_existing_tooltips(child, opaque_tags)


def seed_from_existing(
    parent: Parent, state: AnnotationState, opaque_tags: FrozenSet[str] = OPAQUE_TAGS
) -> int:
    """
    Register tooltips already in the tree with the state.

    Returns:
        Number of tooltips found (whether or not they were counted)
    """
    found = 0
    for tooltip in iter_existing_tooltips(parent, opaque_tags):
        found += 1
        term_id = tooltip.attributes.get(TooltipAttributes.TERM_ID)
        state.seed(term_id if isinstance(term_id, str) else None)
    return found


def _next_kind(
    children: List[Node], index: int, opaque_tags: FrozenSet[str]
) -> Optional[NodeKind]:
    if index + 1 >= len(children):
        return None
    return classify_node(children[index + 1], opaque_tags)
