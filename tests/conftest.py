"""Shared fixtures for GLOSS tests."""

from pathlib import Path

import pytest

from gloss.contexts.annotation import AnnotationSettings, GlossaryAnnotator
from gloss.contexts.glossary import Term, TermDictionary

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_PATH = PROJECT_ROOT / "data"


def make_term(slug, *variants, title=None, short_definition=None):
    """Build a Term with generated title/definition."""
    return Term(
        slug=slug,
        title=title or slug.upper(),
        short_definition=short_definition or f"Definition of {slug}",
        variants=tuple(variants) or (slug,),
    )


@pytest.fixture
def seo_cms_dictionary():
    """Two-term dictionary: SEO and CMS."""
    return TermDictionary([make_term("seo", "SEO"), make_term("cms", "CMS")])


@pytest.fixture
def site_dictionary():
    """The example site glossary (mirrors data/glossary_terms.yaml)."""
    return TermDictionary(
        [
            make_term("seo", "SEO", "referencement naturel", title="SEO"),
            make_term("cms", "CMS", title="CMS"),
            make_term("api", "API", "APIs", title="API"),
            make_term("responsive", "responsive", "responsive design", title="Responsive Design"),
            make_term("framework", "framework", "frameworks", title="Framework"),
        ]
    )


@pytest.fixture
def ten_term_dictionary():
    """Ten distinct single-variant terms: alpha ... kappa."""
    names = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta", "iota", "kappa"]
    return TermDictionary([make_term(name, name) for name in names])


@pytest.fixture
def site_annotator(site_dictionary):
    return GlossaryAnnotator(site_dictionary, AnnotationSettings.defaults())


@pytest.fixture
def data_path():
    return DATA_PATH


@pytest.fixture
def term_factory():
    """The make_term helper, for tests that build their own dictionaries."""
    return make_term
