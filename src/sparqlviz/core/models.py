"""Pydantic models for query ASTs and the renderable graph model.

Two families live here:

* the *input* side: RDF/JS-style terms, property paths, triples and
  WHERE pattern groups, as read from the external SPARQL parser;
* the *output* side: ``GraphNode`` / ``GraphEdge`` / ``GraphModel``,
  the language-agnostic node/edge list handed to a renderer.

    SPARQL.js JSON → QueryAst → GraphModel → Renderers
                     (syntax)    (graph)      (output)
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TermType(str, Enum):
    """RDF/JS term kinds understood by the builder."""
    VARIABLE = "Variable"
    NAMED_NODE = "NamedNode"
    BLANK_NODE = "BlankNode"
    LITERAL = "Literal"


class PatternType(str, Enum):
    """WHERE pattern-group kinds."""
    BGP = "bgp"
    OPTIONAL = "optional"
    UNION = "union"
    GROUP = "group"
    GRAPH = "graph"
    OTHER = "other"


class NodeKind(str, Enum):
    """Syntactic kind of a graph node (derived from its term)."""
    VARIABLE = "variable"
    IDENTIFIER = "identifier"
    BLANK = "blank"
    LITERAL = "literal"


class NodeCategory(str, Enum):
    """Role of a graph node; ``unknown`` may be upgraded by heuristics."""
    CLASS = "class"
    INDIVIDUAL = "individual"
    LITERAL = "literal"
    VARIABLE = "variable"
    UNKNOWN = "unknown"


class EdgeCategory(str, Enum):
    """Classification of a predicate/object pair."""
    RDF_TYPE = "rdfType"
    OBJECT_PROP = "objectProp"
    DATATYPE_PROP = "datatypeProp"
    ANNOTATION_PROP = "annotationProp"
    PATH = "path"


class EdgeEffect(str, Enum):
    """Reserved for insert/delete diffing; always ``none`` for WHERE edges."""
    NONE = "none"
    INSERT = "insert"
    DELETE = "delete"


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------

class VariableTerm(BaseModel):
    """A query variable (``?name``)."""
    model_config = ConfigDict(frozen=True)

    term_type: TermType = TermType.VARIABLE
    value: str


class NamedNodeTerm(BaseModel):
    """A full IRI."""
    model_config = ConfigDict(frozen=True)

    term_type: TermType = TermType.NAMED_NODE
    value: str


class BlankNodeTerm(BaseModel):
    """A blank node placeholder, scoped to the query (``_:b0``)."""
    model_config = ConfigDict(frozen=True)

    term_type: TermType = TermType.BLANK_NODE
    value: str


class LiteralTerm(BaseModel):
    """A literal with optional language tag or datatype IRI."""
    model_config = ConfigDict(frozen=True)

    term_type: TermType = TermType.LITERAL
    value: str
    language: str = ""
    datatype: Optional[NamedNodeTerm] = None


Term = Union[VariableTerm, NamedNodeTerm, BlankNodeTerm, LiteralTerm]


class PropertyPath(BaseModel):
    """A composite predicate such as ``foaf:knows/foaf:name`` or ``^rdf:type``.

    Only the shape is kept; path algebra is not evaluated.
    """
    model_config = ConfigDict(frozen=True)

    path_type: str = ""
    items: list[Union[Term, PropertyPath]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Triples & pattern groups
# ---------------------------------------------------------------------------

class Triple(BaseModel):
    """One triple pattern.

    ``None`` stands for a term the reader could not recognise.  The
    ``optional`` / ``branch`` / ``graph`` fields are filled in by the
    flattener and describe where in the WHERE tree the triple came from.
    """
    subject: Optional[Term] = None
    predicate: Optional[Union[Term, PropertyPath]] = None
    object: Optional[Term] = None
    optional: bool = False
    branch: Optional[str] = None
    graph: Optional[str] = None


class BgpPattern(BaseModel):
    """A basic graph pattern: a flat list of triples."""
    type: PatternType = PatternType.BGP
    triples: list[Triple] = Field(default_factory=list)


class OptionalPattern(BaseModel):
    """``OPTIONAL { ... }``."""
    type: PatternType = PatternType.OPTIONAL
    patterns: list[Pattern] = Field(default_factory=list)


class UnionPattern(BaseModel):
    """``{ ... } UNION { ... }``, one pattern list per branch."""
    type: PatternType = PatternType.UNION
    branches: list[list[Pattern]] = Field(default_factory=list)


class GroupPattern(BaseModel):
    """A nested ``{ ... }`` group."""
    type: PatternType = PatternType.GROUP
    patterns: list[Pattern] = Field(default_factory=list)


class GraphPattern(BaseModel):
    """``GRAPH <name> { ... }``."""
    type: PatternType = PatternType.GRAPH
    name: Optional[Term] = None
    patterns: list[Pattern] = Field(default_factory=list)


class OtherPattern(BaseModel):
    """Any group kind the flattener does not descend into (FILTER, BIND, ...)."""
    type: PatternType = PatternType.OTHER
    raw_type: str = ""


Pattern = Union[
    BgpPattern,
    OptionalPattern,
    UnionPattern,
    GroupPattern,
    GraphPattern,
    OtherPattern,
]


class QueryAst(BaseModel):
    """The subset of a parsed query the graph builder consumes."""
    query_type: str = "UNKNOWN"
    prefixes: dict[str, str] = Field(default_factory=dict)
    variables: Union[Literal["*"], list[Optional[Term]]] = Field(default_factory=list)
    where: list[Pattern] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Graph model (output)
# ---------------------------------------------------------------------------

class GraphNode(BaseModel):
    """A deduplicated node; only ``category`` changes after creation."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str
    kind: NodeKind
    category: NodeCategory = NodeCategory.UNKNOWN
    is_selected_var: bool = Field(default=False, alias="isSelectedVar")


class GraphEdge(BaseModel):
    """A directed edge; one per flattened triple."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str
    target: str
    label: str
    category: EdgeCategory
    effect: EdgeEffect = EdgeEffect.NONE
    optional: bool = False
    branch: Optional[str] = None
    graph: Optional[str] = None


class GraphModel(BaseModel):
    """Renderable node/edge list built from one query AST."""
    model_config = ConfigDict(populate_by_name=True)

    query_type: str = Field(default="UNKNOWN", alias="queryType")
    prefixes: dict[str, str] = Field(default_factory=dict)
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
    where_triple_count: int = Field(default=0, alias="whereTripleCount")

    # -- Query helpers ---------------------------------------------------

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Find a node by ID."""
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def nodes_of_category(self, category: NodeCategory) -> list[GraphNode]:
        return [n for n in self.nodes if n.category == category]

    def edges_of_category(self, category: EdgeCategory) -> list[GraphEdge]:
        return [e for e in self.edges if e.category == category]

    def edges_from(self, node_id: str) -> list[GraphEdge]:
        return [e for e in self.edges if e.source == node_id]

    @property
    def selected_nodes(self) -> list[GraphNode]:
        return [n for n in self.nodes if n.is_selected_var]

    def compute_stats(self) -> dict[str, int]:
        """Count nodes and edges, broken down by category."""
        stats: dict[str, int] = {
            "total_nodes": len(self.nodes),
            "total_edges": len(self.edges),
            "where_triples": self.where_triple_count,
        }
        for nc in NodeCategory:
            count = len(self.nodes_of_category(nc))
            if count > 0:
                stats[f"nodes_{nc.value}"] = count
        for ec in EdgeCategory:
            count = len(self.edges_of_category(ec))
            if count > 0:
                stats[f"edges_{ec.value}"] = count
        stats["optional_edges"] = sum(1 for e in self.edges if e.optional)
        return stats

    def to_dict(self) -> dict:
        """JSON-ready dict using the renderer's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


PropertyPath.model_rebuild()
OptionalPattern.model_rebuild()
UnionPattern.model_rebuild()
GroupPattern.model_rebuild()
GraphPattern.model_rebuild()
QueryAst.model_rebuild()
