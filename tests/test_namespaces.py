"""Tests for namespace compaction."""

from __future__ import annotations

from sparqlviz.core.namespaces import (
    ANNOTATION_PREDICATE_IRIS,
    RDF_TYPE,
    best_prefix_for_iri,
    compact_iri,
)


class TestBestPrefix:
    def test_single_match(self):
        prefixes = {"foaf": "http://xmlns.com/foaf/0.1/"}
        assert best_prefix_for_iri("http://xmlns.com/foaf/0.1/name", prefixes) == (
            "foaf",
            "http://xmlns.com/foaf/0.1/",
        )

    def test_no_match(self):
        assert best_prefix_for_iri("http://other.org/x", {"a": "http://a/"}) is None

    def test_empty_or_missing_prefixes(self):
        assert best_prefix_for_iri("http://a/x", {}) is None
        assert best_prefix_for_iri("http://a/x", None) is None

    def test_longest_namespace_wins(self):
        prefixes = {"a": "http://a/", "ab": "http://a/b/"}
        assert best_prefix_for_iri("http://a/b/c", prefixes) == ("ab", "http://a/b/")

    def test_longest_wins_regardless_of_order(self):
        prefixes = {"ab": "http://a/b/", "a": "http://a/"}
        assert best_prefix_for_iri("http://a/b/c", prefixes) == ("ab", "http://a/b/")

    def test_equal_length_first_declared_wins(self):
        prefixes = {"one": "http://a/", "two": "http://a/"}
        assert best_prefix_for_iri("http://a/x", prefixes) == ("one", "http://a/")

    def test_non_string_namespaces_ignored(self):
        prefixes = {"bad": None, "a": "http://a/"}
        assert best_prefix_for_iri("http://a/x", prefixes) == ("a", "http://a/")


class TestCompactIri:
    def test_compacts(self):
        prefixes = {"foaf": "http://xmlns.com/foaf/0.1/"}
        assert compact_iri("http://xmlns.com/foaf/0.1/name", prefixes) == "foaf:name"

    def test_uses_longest_prefix(self):
        prefixes = {"a": "http://a/", "ab": "http://a/b/"}
        assert compact_iri("http://a/b/c", prefixes) == "ab:c"

    def test_default_prefix(self):
        assert compact_iri("http://ex.org/thing", {"": "http://ex.org/"}) == ":thing"

    def test_unchanged_without_match(self):
        assert compact_iri("http://ex.org/thing", {"a": "http://a/"}) == "http://ex.org/thing"

    def test_namespace_itself(self):
        assert compact_iri("http://a/", {"a": "http://a/"}) == "a:"


class TestWellKnownIris:
    def test_rdf_type(self):
        assert RDF_TYPE == "http://www.w3.org/1999/02/22-rdf-syntax-ns#type"

    def test_annotation_predicates(self):
        assert "http://www.w3.org/2000/01/rdf-schema#label" in ANNOTATION_PREDICATE_IRIS
        assert "http://www.w3.org/2000/01/rdf-schema#comment" in ANNOTATION_PREDICATE_IRIS
        assert "http://purl.org/dc/terms/title" in ANNOTATION_PREDICATE_IRIS
        assert "http://purl.org/dc/elements/1.1/title" in ANNOTATION_PREDICATE_IRIS
        assert "http://www.w3.org/2004/02/skos/core#prefLabel" in ANNOTATION_PREDICATE_IRIS
        assert "http://www.w3.org/2004/02/skos/core#altLabel" in ANNOTATION_PREDICATE_IRIS
        assert "http://www.w3.org/2004/02/skos/core#definition" in ANNOTATION_PREDICATE_IRIS
        assert len(ANNOTATION_PREDICATE_IRIS) == 7
