"""Build a ``GraphModel`` from a parsed query.

    QueryAst ─┬─ selected variables ──────────────┐
              └─ flatten WHERE → triples → nodes/edges → type heuristics → GraphModel

Every call starts from fresh node/edge collections; nothing is cached
between builds.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import DEFAULT_CONFIG, BuilderConfig
from .ast_reader import read_query_ast
from .classifier import classify_edge
from .flattener import flatten_where_triples
from .heuristics import apply_type_heuristics
from .models import (
    EdgeCategory,
    GraphEdge,
    GraphModel,
    GraphNode,
    NamedNodeTerm,
    NodeCategory,
    NodeKind,
    QueryAst,
    VariableTerm,
)
from .terms import node_kind, term_key, term_label

logger = logging.getLogger(__name__)

PATH_LABEL = "[path]"
PREDICATE_LABEL = "[predicate]"

_INITIAL_CATEGORY = {
    NodeKind.LITERAL: NodeCategory.LITERAL,
    NodeKind.VARIABLE: NodeCategory.VARIABLE,
}


def extract_returned_variable_keys(ast: QueryAst) -> set[str]:
    """Identity keys of the variables a SELECT projects (empty for ``*``)."""
    if ast.query_type != "SELECT" or not isinstance(ast.variables, list):
        return set()
    return {term_key(v) for v in ast.variables if isinstance(v, VariableTerm)}


class GraphModelBuilder:
    """Turn a query AST into a deduplicated, classified node/edge list.

    Usage::

        builder = GraphModelBuilder()
        model = builder.build(sparqljs_ast_dict)
        print(model.where_triple_count)
    """

    def __init__(self, config: Optional[BuilderConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def build(self, ast: Any) -> GraphModel:
        """Build the graph model for *ast* (a ``QueryAst`` or parser dict)."""
        query = read_query_ast(ast)
        prefixes = dict(query.prefixes)
        selected = extract_returned_variable_keys(query)
        triples = flatten_where_triples(query.where)

        nodes_by_id: dict[str, GraphNode] = {}
        edges: list[GraphEdge] = []

        def ensure_node(term: Any) -> str:
            node_id = term_key(term)
            if node_id in nodes_by_id:
                return node_id
            kind = node_kind(term)
            nodes_by_id[node_id] = GraphNode(
                id=node_id,
                label=term_label(term, prefixes),
                kind=kind,
                category=_INITIAL_CATEGORY.get(kind, NodeCategory.UNKNOWN),
                is_selected_var=node_id in selected,
            )
            return node_id

        for t in triples:
            source = ensure_node(t.subject)
            target = ensure_node(t.object)

            category = classify_edge(t.predicate, t.object, self.config)
            if isinstance(t.predicate, NamedNodeTerm):
                label = term_label(t.predicate, prefixes)
            elif category == EdgeCategory.PATH:
                label = PATH_LABEL
            else:
                label = PREDICATE_LABEL

            edges.append(GraphEdge(
                id=f"e:{source}::{label}::{target}::{len(edges)}",
                source=source,
                target=target,
                label=label,
                category=category,
                optional=t.optional,
                branch=t.branch,
                graph=t.graph,
            ))

        apply_type_heuristics(nodes_by_id, edges)

        logger.debug(
            "Built %s graph: %d node(s), %d edge(s) from %d triple(s)",
            query.query_type, len(nodes_by_id), len(edges), len(triples),
        )

        return GraphModel(
            query_type=query.query_type,
            prefixes=prefixes,
            nodes=list(nodes_by_id.values()),
            edges=edges,
            where_triple_count=len(triples),
        )


def build_graph_model(ast: Any, config: Optional[BuilderConfig] = None) -> GraphModel:
    """Convenience wrapper around ``GraphModelBuilder(config).build(ast)``."""
    return GraphModelBuilder(config).build(ast)
