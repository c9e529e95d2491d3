"""Unit tests for Term records and TermDictionary."""

import pytest

from gloss.contexts.glossary import (
    DuplicateTermError,
    InvalidTermError,
    Term,
    TermDictionary,
)


@pytest.mark.unit
class TestTermFromRecord:
    """Tests for Term.from_record."""

    def test_minimal_record(self):
        term = Term.from_record(
            {"slug": "cms", "title": "CMS", "short_definition": "Logiciel.", "variants": ["CMS"]}
        )

        assert term.slug == "cms"
        assert term.variants == ("CMS",)
        assert term.category == "general"
        assert term.difficulty == "debutant"
        assert term.related_terms == ()

    def test_camel_case_aliases(self):
        """Records in the content collection's camelCase shape are accepted."""
        term = Term.from_record(
            {
                "slug": "seo",
                "title": "SEO",
                "shortDefinition": "Search Engine Optimization.",
                "matches": ["SEO", "referencement naturel"],
                "relatedTerms": ["cms"],
            }
        )

        assert term.short_definition == "Search Engine Optimization."
        assert term.variants == ("SEO", "referencement naturel")
        assert term.related_terms == ("cms",)

    def test_duplicate_variants_dropped(self):
        term = Term.from_record(
            {"slug": "api", "title": "API", "short_definition": "x", "variants": ["API", "APIs", "API"]}
        )
        assert term.variants == ("API", "APIs")

    @pytest.mark.parametrize("missing", ["slug", "title", "short_definition", "variants"])
    def test_missing_required_field(self, missing):
        record = {"slug": "cms", "title": "CMS", "short_definition": "x", "variants": ["CMS"]}
        del record[missing]

        with pytest.raises(InvalidTermError):
            Term.from_record(record)

    def test_empty_variants(self):
        with pytest.raises(InvalidTermError, match="no variants"):
            Term.from_record({"slug": "cms", "title": "CMS", "short_definition": "x", "variants": []})

    def test_unknown_category(self):
        with pytest.raises(InvalidTermError, match="category"):
            Term.from_record(
                {
                    "slug": "cms",
                    "title": "CMS",
                    "short_definition": "x",
                    "variants": ["CMS"],
                    "category": "cooking",
                }
            )

    def test_numeric_scalars_read_as_text(self):
        term = Term.from_record(
            {"slug": 404, "title": 404, "short_definition": "Page introuvable", "variants": [404, "erreur 404"]}
        )

        assert term.slug == "404"
        assert term.title == "404"
        assert term.variants == ("404", "erreur 404")

    def test_structured_variant_rejected(self):
        with pytest.raises(InvalidTermError, match="variant must be text"):
            Term.from_record(
                {"slug": "cms", "title": "CMS", "short_definition": "x", "variants": [{"CMS": 1}]}
            )

    def test_variants_must_be_list(self):
        with pytest.raises(InvalidTermError, match="must be a list"):
            Term.from_record({"slug": "cms", "title": "CMS", "short_definition": "x", "variants": "CMS"})


@pytest.mark.unit
class TestTermDictionary:
    """Tests for TermDictionary lookup and enumeration."""

    def test_enumeration_keeps_order(self, site_dictionary):
        assert [term.slug for term in site_dictionary] == [
            "seo",
            "cms",
            "api",
            "responsive",
            "framework",
        ]
        assert len(site_dictionary) == 5
        assert "api" in site_dictionary
        assert "php" not in site_dictionary

    def test_get(self, site_dictionary):
        assert site_dictionary.get("cms").title == "CMS"
        assert site_dictionary.get("missing") is None

    def test_duplicate_slug_rejected(self, term_factory):
        with pytest.raises(DuplicateTermError):
            TermDictionary([term_factory("seo", "SEO"), term_factory("seo", "referencement")])

    def test_variant_count(self, site_dictionary):
        assert site_dictionary.variant_count == 9

    def test_from_records(self):
        dictionary = TermDictionary.from_records(
            [{"slug": "cms", "title": "CMS", "short_definition": "x", "variants": ["CMS"]}]
        )
        assert dictionary.get("cms").variants == ("CMS",)


@pytest.mark.unit
class TestSelfTermId:
    """Tests for resolving the term a glossary page defines."""

    def test_glossary_page(self, site_dictionary):
        assert site_dictionary.self_term_id("site/src/content/glossaire/seo.md") == "seo"

    def test_windows_path(self, site_dictionary):
        assert site_dictionary.self_term_id("site\\src\\content\\glossaire\\api.md") == "api"

    def test_non_glossary_page(self, site_dictionary):
        assert site_dictionary.self_term_id("site/src/content/blog/seo.md") is None

    def test_unknown_slug(self, site_dictionary):
        assert site_dictionary.self_term_id("content/glossaire/php.md") is None

    def test_no_path(self, site_dictionary):
        assert site_dictionary.self_term_id(None) is None
        assert site_dictionary.self_term_id("") is None

    def test_custom_pattern(self, term_factory):
        dictionary = TermDictionary(
            [term_factory("seo", "SEO")], self_path_pattern=r"content/glossary/([^/]+)\.mdx?$"
        )
        assert dictionary.self_term_id("content/glossary/seo.mdx") == "seo"
        assert dictionary.self_term_id("content/glossaire/seo.md") is None


@pytest.mark.unit
class TestMatchEntries:
    """Tests for the flat auto-link entry list."""

    def test_longest_first(self, site_dictionary):
        entries = site_dictionary.match_entries()

        assert entries[0] == ("referencement naturel", "seo")
        assert entries[1] == ("responsive design", "responsive")
        lengths = [len(variant) for variant, _ in entries]
        assert lengths == sorted(lengths, reverse=True)

    def test_ties_keep_dictionary_order(self, site_dictionary):
        three_letter = [entry for entry in site_dictionary.match_entries() if len(entry[0]) == 3]
        assert three_letter == [("SEO", "seo"), ("CMS", "cms"), ("API", "api")]


@pytest.mark.unit
def test_shared_variants(term_factory):
    dictionary = TermDictionary(
        [term_factory("seo", "SEO", "Referencement"), term_factory("sea", "referencement")]
    )
    assert dictionary.shared_variants() == {"referencement": ["seo", "sea"]}


@pytest.mark.unit
def test_no_shared_variants(site_dictionary):
    assert site_dictionary.shared_variants() == {}
