"""Tests for the SPARQL.js JSON reader."""

from __future__ import annotations

import pytest

from ast_factory import (
    FOAF,
    RDF,
    XSD,
    bgp,
    bnode,
    graph,
    group,
    iri,
    lit,
    optional,
    path,
    select,
    triple,
    union,
    var,
)
from sparqlviz.core.ast_reader import (
    read_pattern,
    read_predicate,
    read_query_ast,
    read_term,
)
from sparqlviz.core.models import (
    BgpPattern,
    BlankNodeTerm,
    GraphPattern,
    GroupPattern,
    LiteralTerm,
    NamedNodeTerm,
    OptionalPattern,
    OtherPattern,
    PropertyPath,
    QueryAst,
    UnionPattern,
    VariableTerm,
)
from sparqlviz.core.terms import term_label


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------

class TestReadTerm:
    def test_variable(self):
        assert read_term(var("x")) == VariableTerm(value="x")

    def test_named_node(self):
        assert read_term(iri(FOAF + "name")) == NamedNodeTerm(value=FOAF + "name")

    def test_blank_node(self):
        assert read_term(bnode("b0")) == BlankNodeTerm(value="b0")

    def test_literal_with_datatype(self):
        term = read_term(lit("42", datatype=XSD + "integer"))
        assert isinstance(term, LiteralTerm)
        assert term.datatype == NamedNodeTerm(value=XSD + "integer")

    def test_xsd_string_dropped(self):
        term = read_term(lit("Alice", datatype=XSD + "string"))
        assert term == LiteralTerm(value="Alice")
        assert term_label(term, {}) == "\"Alice\""

    def test_lang_string_dropped_when_tagged(self):
        term = read_term(lit("York", language="en", datatype=RDF + "langString"))
        assert term == LiteralTerm(value="York", language="en")

    @pytest.mark.parametrize(
        "raw",
        [None, "x", 42, {}, {"termType": "Quad", "value": "q"}, {"termType": "Variable"}],
    )
    def test_malformed(self, raw):
        assert read_term(raw) is None


class TestReadPredicate:
    def test_plain_iri(self):
        assert read_predicate(iri(FOAF + "knows")) == NamedNodeTerm(value=FOAF + "knows")

    def test_sequence_path(self):
        p = read_predicate(path("/", iri(FOAF + "knows"), iri(FOAF + "name")))
        assert isinstance(p, PropertyPath)
        assert p.path_type == "/"
        assert len(p.items) == 2

    def test_nested_path(self):
        p = read_predicate(path("/", path("*", iri(FOAF + "knows")), iri(FOAF + "name")))
        assert isinstance(p.items[0], PropertyPath)
        assert p.items[0].path_type == "*"

    def test_mapping_without_term_type_is_path(self):
        assert isinstance(read_predicate({"foo": "bar"}), PropertyPath)

    def test_not_a_mapping(self):
        assert read_predicate("a") is None


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

class TestReadPattern:
    def test_bgp(self):
        p = read_pattern(bgp(triple(var("s"), iri(FOAF + "name"), var("n"))))
        assert isinstance(p, BgpPattern)
        assert p.triples[0].subject == VariableTerm(value="s")

    def test_bgp_drops_non_dict_triples(self):
        p = read_pattern({"type": "bgp", "triples": [None, triple(var("s"), var("p"), var("o"))]})
        assert len(p.triples) == 1

    def test_optional(self):
        p = read_pattern(optional(bgp()))
        assert isinstance(p, OptionalPattern)
        assert isinstance(p.patterns[0], BgpPattern)

    def test_union_branches_as_groups(self):
        p = read_pattern(union(group(bgp()), group(bgp())))
        assert isinstance(p, UnionPattern)
        assert len(p.branches) == 2
        assert isinstance(p.branches[0][0], GroupPattern)

    def test_union_branch_as_list(self):
        p = read_pattern({"type": "union", "patterns": [[bgp()], [bgp(), bgp()]]})
        assert [len(b) for b in p.branches] == [1, 2]

    def test_graph(self):
        p = read_pattern(graph(iri("http://g/"), bgp()))
        assert isinstance(p, GraphPattern)
        assert p.name == NamedNodeTerm(value="http://g/")

    @pytest.mark.parametrize("ptype", ["filter", "bind", "values", "service", "minus", ""])
    def test_other(self, ptype):
        p = read_pattern({"type": ptype})
        assert isinstance(p, OtherPattern)
        assert p.raw_type == ptype

    def test_not_a_mapping(self):
        assert read_pattern(["bgp"]) is None


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------

class TestReadQueryAst:
    def test_select(self):
        ast = read_query_ast(select(bgp(), variables=[var("p")]))
        assert ast.query_type == "SELECT"
        assert ast.prefixes["foaf"] == FOAF
        assert ast.variables == [VariableTerm(value="p")]
        assert len(ast.where) == 1

    def test_star_string(self):
        assert read_query_ast(select(variables="*")).variables == "*"

    def test_wildcard_term(self):
        ast = read_query_ast(select(variables=[{"termType": "Wildcard", "value": "*"}]))
        assert ast.variables == "*"

    def test_expression_binding_reads_as_none(self):
        ast = read_query_ast(select(variables=[var("a"), {"expression": {}, "variable": var("n")}]))
        assert ast.variables == [VariableTerm(value="a"), None]

    def test_defaults(self):
        ast = read_query_ast({})
        assert ast.query_type == "UNKNOWN"
        assert ast.prefixes == {}
        assert ast.where == []

    def test_query_type_falls_back_to_type(self):
        assert read_query_ast({"type": "update"}).query_type == "update"

    def test_non_mapping(self):
        assert read_query_ast(None) == QueryAst()
        assert read_query_ast([1, 2]) == QueryAst()

    def test_non_string_prefixes_dropped(self):
        ast = read_query_ast({"prefixes": {"a": "http://a/", "b": 3}})
        assert ast.prefixes == {"a": "http://a/"}

    def test_passthrough(self):
        ast = QueryAst(query_type="ASK")
        assert read_query_ast(ast) is ast
