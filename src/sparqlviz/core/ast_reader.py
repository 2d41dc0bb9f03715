"""SPARQL.js JSON → ``QueryAst`` reader.

The external parser emits plain dicts with RDF/JS terms
(``{"termType": "Variable", "value": "x"}``).  This module walks that
structure and produces the typed models the builder works on.  It never
raises for odd shapes: unknown terms become ``None`` and unknown group
kinds become ``OtherPattern``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from rdflib.namespace import RDF, XSD

from .models import (
    BgpPattern,
    BlankNodeTerm,
    GraphPattern,
    GroupPattern,
    LiteralTerm,
    NamedNodeTerm,
    OptionalPattern,
    OtherPattern,
    Pattern,
    PatternType,
    PropertyPath,
    QueryAst,
    Term,
    Triple,
    UnionPattern,
    VariableTerm,
)

logger = logging.getLogger(__name__)

_XSD_STRING = str(XSD.string)
_RDF_LANG_STRING = str(RDF.langString)


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------

def read_term(node: Any) -> Optional[Term]:
    """Convert an RDF/JS term dict; ``None`` for anything unrecognised."""
    if not isinstance(node, Mapping):
        return None

    term_type = node.get("termType")
    value = node.get("value")
    if not isinstance(value, str):
        logger.debug("Term without string value: %r", node)
        return None

    if term_type == "Variable":
        return VariableTerm(value=value)
    if term_type == "NamedNode":
        return NamedNodeTerm(value=value)
    if term_type == "BlankNode":
        return BlankNodeTerm(value=value)
    if term_type == "Literal":
        return _read_literal(node, value)

    logger.debug("Unsupported termType %r", term_type)
    return None


def _read_literal(node: Mapping[str, Any], value: str) -> LiteralTerm:
    language = node.get("language") or ""
    datatype = read_term(node.get("datatype"))
    if not isinstance(datatype, NamedNodeTerm):
        datatype = None

    # RDF 1.1: simple literals are xsd:string, tagged ones rdf:langString.
    # Dropping them changes the label too: "x"^^xsd:string shows as "x".
    if datatype is not None:
        if datatype.value == _XSD_STRING and not language:
            datatype = None
        elif datatype.value == _RDF_LANG_STRING and language:
            datatype = None

    return LiteralTerm(value=value, language=str(language), datatype=datatype)


def read_predicate(node: Any) -> Optional[Union[Term, PropertyPath]]:
    """A predicate is either a term or a property-path expression."""
    if not isinstance(node, Mapping):
        return None
    if "termType" in node:
        return read_term(node)
    return _read_path(node)


def _read_path(node: Mapping[str, Any]) -> PropertyPath:
    items: list[Union[Term, PropertyPath]] = []
    raw_items = node.get("items")
    for item in raw_items if isinstance(raw_items, list) else []:
        parsed = read_predicate(item)
        if parsed is not None:
            items.append(parsed)
    return PropertyPath(path_type=str(node.get("pathType", "")), items=items)


def read_triple(node: Any) -> Optional[Triple]:
    if not isinstance(node, Mapping):
        return None
    return Triple(
        subject=read_term(node.get("subject")),
        predicate=read_predicate(node.get("predicate")),
        object=read_term(node.get("object")),
    )


# ---------------------------------------------------------------------------
# Pattern groups
# ---------------------------------------------------------------------------

def read_patterns(nodes: Any) -> list[Pattern]:
    """Read a list of pattern groups, dropping entries that are not dicts."""
    if isinstance(nodes, Mapping):
        nodes = [nodes]
    if not isinstance(nodes, list):
        return []

    patterns: list[Pattern] = []
    for node in nodes:
        pattern = read_pattern(node)
        if pattern is not None:
            patterns.append(pattern)
    return patterns


def read_pattern(node: Any) -> Optional[Pattern]:  # noqa: PLR0911
    if not isinstance(node, Mapping):
        return None

    ptype = node.get("type", "")

    if ptype == PatternType.BGP.value:
        raw_triples = node.get("triples")
        if not isinstance(raw_triples, list):
            raw_triples = []
        triples = [t for t in map(read_triple, raw_triples) if t is not None]
        return BgpPattern(triples=triples)

    if ptype == PatternType.OPTIONAL.value:
        return OptionalPattern(patterns=read_patterns(node.get("patterns")))

    if ptype == PatternType.UNION.value:
        # Each branch is usually a single group dict, sometimes a list.
        raw_branches = node.get("patterns")
        if not isinstance(raw_branches, list):
            raw_branches = []
        branches = [read_patterns(b) for b in raw_branches]
        return UnionPattern(branches=branches)

    if ptype == PatternType.GROUP.value:
        return GroupPattern(patterns=read_patterns(node.get("patterns")))

    if ptype == PatternType.GRAPH.value:
        return GraphPattern(
            name=read_term(node.get("name")),
            patterns=read_patterns(node.get("patterns")),
        )

    return OtherPattern(raw_type=str(ptype))


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------

def _read_variables(raw: Any) -> Union[str, list[Optional[Term]]]:
    if raw == "*":
        return "*"
    if not isinstance(raw, list):
        return []
    if any(isinstance(v, Mapping) and v.get("termType") == "Wildcard" for v in raw):
        return "*"
    # Expression bindings (``(COUNT(?x) AS ?n)``) read as None.
    return [read_term(v) for v in raw]


def read_query_ast(data: Any) -> QueryAst:
    """Build a ``QueryAst`` from parser output; non-dicts give an empty AST."""
    if isinstance(data, QueryAst):
        return data
    if not isinstance(data, Mapping):
        logger.debug("AST is not a mapping (%s); using empty query", type(data).__name__)
        return QueryAst()

    query_type = data.get("queryType") or data.get("type") or "UNKNOWN"
    raw_prefixes = data.get("prefixes")
    prefixes = {
        str(k): v
        for k, v in (raw_prefixes.items() if isinstance(raw_prefixes, Mapping) else ())
        if isinstance(v, str)
    }

    return QueryAst(
        query_type=str(query_type),
        prefixes=prefixes,
        variables=_read_variables(data.get("variables")),
        where=read_patterns(data.get("where")),
    )
