"""
Span Splitter

Splits one text node around glossary matches, replacing each match with a
tooltip node.
"""

from typing import List, Sequence

from gloss.contexts.annotation.annotation_state import AnnotationState
from gloss.contexts.annotation.defaults import URL_PREFIX
from gloss.contexts.annotation.match_index import MatchRule
from gloss.contexts.annotation.node_data_structure import Element, Node, Text
from gloss.contexts.annotation.tooltip_markup import TooltipAttributes, TooltipClasses


def create_tooltip_node(matched_text: str, rule: MatchRule, url_prefix: str = URL_PREFIX) -> Element:
    """
    Build the tooltip link for one match.

    Structure:
        <a href="/glossaire/seo" class="glossary-tooltip" data-glossary="seo">
          SEO
          <span class="glossary-tooltip-content" role="tooltip" aria-hidden="true">
            <strong class="glossary-tooltip-title">SEO</strong>
            <span class="glossary-tooltip-def">Search Engine Optimization : ...</span>
          </span>
        </a>

    Args:
        matched_text: Text as it appears in the document (original casing)
        rule: Rule that matched (carries slug, title and definition)
        url_prefix: Path prefix of glossary term pages

    Returns:
        Tooltip Element
    """
    payload = Element(
        tag_name="span",
        attributes={
            "class": [TooltipClasses.CONTENT],
            TooltipAttributes.ROLE: "tooltip",
            TooltipAttributes.ARIA_HIDDEN: "true",
        },
        children=[
            Element(
                tag_name="strong",
                attributes={"class": [TooltipClasses.TITLE]},
                children=[Text(rule.title)],
            ),
            Element(
                tag_name="span",
                attributes={"class": [TooltipClasses.DEFINITION]},
                children=[Text(rule.short_definition)],
            ),
        ],
    )

    return Element(
        tag_name="a",
        attributes={
            TooltipAttributes.HREF: f"{url_prefix.rstrip('/')}/{rule.term_id}",
            "class": [TooltipClasses.TOOLTIP],
            TooltipAttributes.TERM_ID: rule.term_id,
        },
        children=[Text(matched_text), payload],
    )


def split_text_node(
    text_node: Text,
    state: AnnotationState,
    rules: Sequence[MatchRule],
    url_prefix: str = URL_PREFIX,
) -> List[Node]:
    """
    Replace glossary matches in one text node with tooltips.

    Rules are scanned once, in index order (longest variant first). For each
    eligible rule, the leftmost occurrence in the not-yet-consumed text is
    used: the text before it is emitted as plain text, the match becomes a
    tooltip, and scanning continues on the text after it. The first rule
    that matches anywhere wins, even if a later rule would match earlier in
    the text.

    Args:
        text_node: Node to split
        state: Per-document state (mutated)
        rules: Match index
        url_prefix: Path prefix of glossary term pages

    Returns:
        Replacement nodes in reading order; [text_node] itself if nothing matched

    Example:
        >>> split_text_node(Text("Le SEO et le CMS"), state, rules)
        [Text('Le '), Element('a', ...SEO...), Text(' et le '), Element('a', ...CMS...)]
    """
    remaining = text_node.value
    result: List[Node] = []

    for rule in rules:
        if state.exhausted:
            break
        if not state.is_eligible(rule.term_id):
            continue

        match = rule.search(remaining)
        if match is None:
            continue

        before = remaining[: match.start()]
        if before:
            result.append(Text(before))

        result.append(create_tooltip_node(match.group(1), rule, url_prefix))
        state.record(rule.term_id)

        remaining = remaining[match.end() :]

    if not result:
        return [text_node]

    if remaining:
        result.append(Text(remaining))

    return result
