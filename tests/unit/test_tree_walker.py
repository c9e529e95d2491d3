"""Unit tests for tree traversal, node classification and skip rules."""

import pytest

from gloss.contexts.annotation import (
    AnnotationState,
    Comment,
    Element,
    NodeKind,
    Raw,
    Root,
    Text,
    build_match_index,
    classify_node,
    walk_and_replace,
)
from gloss.contexts.annotation.tree_walker import iter_existing_tooltips, seed_from_existing


def p(*children):
    return Element("p", children=list(children))


def tooltips_in(parent):
    return list(iter_existing_tooltips(parent))


@pytest.mark.unit
class TestClassifyNode:
    """Tests for the closed NodeKind classification."""

    def test_text(self):
        assert classify_node(Text("x")) is NodeKind.TEXT

    @pytest.mark.parametrize(
        "tag",
        [
            "h1", "h2", "h3", "h4", "h5", "h6", "a", "code", "pre", "svg", "script", "style",
            "head", "title", "textarea", "option",
        ],
    )
    def test_opaque_tags(self, tag):
        assert classify_node(Element(tag)) is NodeKind.OPAQUE

    def test_raw_is_opaque(self):
        assert classify_node(Raw("<!DOCTYPE html>")) is NodeKind.OPAQUE

    def test_tooltip_marker(self):
        node = Element("span", attributes={"class": ["note", "glossary-tooltip"]})
        assert classify_node(node) is NodeKind.ANNOTATION

    def test_tooltip_marker_as_string(self):
        node = Element("span", attributes={"class": "glossary-tooltip extra"})
        assert classify_node(node) is NodeKind.ANNOTATION

    def test_tooltip_link_is_annotation_not_opaque(self):
        node = Element(
            "a",
            attributes={"href": "/glossaire/seo", "class": ["glossary-tooltip"], "data-glossary": "seo"},
        )
        assert classify_node(node) is NodeKind.ANNOTATION

    def test_plain_link_is_opaque(self):
        assert classify_node(Element("a", attributes={"href": "/guides"})) is NodeKind.OPAQUE

    @pytest.mark.parametrize("tag", ["p", "div", "em", "strong", "li", "blockquote", "span"])
    def test_containers(self, tag):
        assert classify_node(Element(tag)) is NodeKind.CONTAINER

    def test_comment(self):
        assert classify_node(Comment(" SEO ")) is NodeKind.OTHER


@pytest.mark.unit
class TestWalkAndReplace:
    """Tests for walk_and_replace."""

    def test_recurses_into_containers(self, seo_cms_dictionary):
        root = Root([Element("div", children=[p(Element("em", children=[Text("Le SEO")]))])])
        state = AnnotationState()

        walk_and_replace(root, state, build_match_index(seo_cms_dictionary))

        em = root.children[0].children[0].children[0]
        assert em.children[0] == Text("Le ")
        assert em.children[1].attributes["data-glossary"] == "seo"

    @pytest.mark.parametrize(
        "tag", ["h2", "a", "code", "pre", "svg", "script", "style", "title", "textarea", "option"]
    )
    def test_structural_exclusion(self, seo_cms_dictionary, tag):
        excluded = Element(tag, children=[Text("Le SEO")])
        root = Root([excluded, p(Text("Sans terme."))])
        state = AnnotationState()

        walk_and_replace(root, state, build_match_index(seo_cms_dictionary))

        assert root.children[0] is excluded
        assert excluded.children == [Text("Le SEO")]
        assert state.count == 0

    def test_excluded_occurrence_does_not_count_as_first(self, seo_cms_dictionary):
        root = Root([Element("h1", children=[Text("Le SEO")]), p(Text("Parlons SEO."))])
        state = AnnotationState()

        walk_and_replace(root, state, build_match_index(seo_cms_dictionary))

        assert len(tooltips_in(root)) == 1
        assert root.children[1].children[1].attributes["data-glossary"] == "seo"

    def test_reading_order(self, seo_cms_dictionary):
        """The first occurrence in reading order gets the tooltip."""
        first = p(Text("Un SEO ici."))
        second = p(Text("Un SEO la."))
        root = Root([Element("section", children=[first]), second])

        walk_and_replace(root, AnnotationState(), build_match_index(seo_cms_dictionary))

        assert len(first.children) == 3
        assert second.children == [Text("Un SEO la.")]

    def test_existing_tooltip_skipped(self, seo_cms_dictionary):
        span_tooltip = Element(
            "span", attributes={"class": ["glossary-tooltip"]}, children=[Text("SEO")]
        )
        root = Root([p(span_tooltip, Text(" fin"))])

        walk_and_replace(root, AnnotationState(), build_match_index(seo_cms_dictionary))

        assert root.children[0].children[0] is span_tooltip
        assert span_tooltip.children == [Text("SEO")]

    def test_text_before_existing_tooltip_untouched(self, seo_cms_dictionary):
        before = Text("Le SEO et le ")
        tooltip = Element(
            "a",
            attributes={"class": ["glossary-tooltip"], "data-glossary": "cms"},
            children=[Text("CMS")],
        )
        root = Root([p(before, tooltip, Text(" puis le SEO."))])
        state = AnnotationState()

        walk_and_replace(root, state, build_match_index(seo_cms_dictionary))

        children = root.children[0].children
        assert children[0] is before
        assert children[1] is tooltip
        assert children[3].attributes["data-glossary"] == "seo"

    def test_hand_authored_tooltip_shadows_preceding_text(self, seo_cms_dictionary):
        """Text right before any tooltip is treated as already scanned."""
        before = Text("Notre CMS et le ")
        tooltip = Element(
            "a",
            attributes={"class": ["glossary-tooltip"], "data-glossary": "seo"},
            children=[Text("SEO")],
        )
        root = Root([p(before, tooltip), p(Text("Un autre CMS."))])
        state = AnnotationState()

        walk_and_replace(root, state, build_match_index(seo_cms_dictionary))

        assert root.children[0].children == [before, tooltip]
        assert root.children[1].children[1].attributes["data-glossary"] == "cms"

    def test_comments_untouched(self, seo_cms_dictionary):
        comment = Comment(" SEO ")
        root = Root([comment])

        walk_and_replace(root, AnnotationState(), build_match_index(seo_cms_dictionary))

        assert root.children == [comment]

    def test_cap_leaves_remaining_nodes_untouched(self, ten_term_dictionary):
        names = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta", "iota", "kappa"]
        paragraphs = [p(Text(f"Le terme {name} apparait.")) for name in names]
        root = Root(paragraphs)
        state = AnnotationState(max_annotations=8)

        walk_and_replace(root, state, build_match_index(ten_term_dictionary))

        assert state.count == 8
        assert len(tooltips_in(root)) == 8
        assert paragraphs[8].children == [Text("Le terme iota apparait.")]
        assert paragraphs[9].children == [Text("Le terme kappa apparait.")]

    def test_exhausted_state_does_nothing(self, seo_cms_dictionary):
        root = Root([p(Text("Le SEO"))])

        walk_and_replace(
            root, AnnotationState(max_annotations=0), build_match_index(seo_cms_dictionary)
        )

        assert root.children[0].children == [Text("Le SEO")]

    def test_custom_opaque_tags(self, seo_cms_dictionary):
        root = Root([Element("blockquote", children=[Text("Le SEO")])])

        walk_and_replace(
            root,
            AnnotationState(),
            build_match_index(seo_cms_dictionary),
            opaque_tags=frozenset({"blockquote"}),
        )

        assert root.children[0].children == [Text("Le SEO")]


@pytest.mark.unit
def test_seed_from_existing():
    tooltip = Element(
        "a",
        attributes={"class": ["glossary-tooltip"], "data-glossary": "cms"},
        children=[Text("CMS")],
    )
    hidden = Element(
        "h2",
        children=[
            Element(
                "a",
                attributes={"class": ["glossary-tooltip"], "data-glossary": "api"},
                children=[Text("API")],
            )
        ],
    )
    root = Root([p(Text("Le "), tooltip), hidden])
    state = AnnotationState()

    found = seed_from_existing(root, state)

    assert found == 1
    assert state.matched_term_ids == {"cms"}
    assert state.count == 1


@pytest.mark.unit
def test_seed_from_generated_tooltips(seo_cms_dictionary):
    rules = build_match_index(seo_cms_dictionary)
    root = Root([p(Text("Le SEO et le CMS sont liés. Le SEO reste clé."))])
    walk_and_replace(root, AnnotationState(), rules)

    state = AnnotationState()
    found = seed_from_existing(root, state)

    assert found == 2
    assert state.matched_order == ["seo", "cms"]
