"""sparqlviz: turn parsed SPARQL queries into renderable graph models."""

from .config import BuilderConfig
from .core.ast_reader import read_query_ast
from .core.builder import GraphModelBuilder, build_graph_model
from .core.models import (
    EdgeCategory,
    GraphEdge,
    GraphModel,
    GraphNode,
    NodeCategory,
    NodeKind,
    QueryAst,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "EdgeCategory",
    "GraphEdge",
    "GraphModel",
    "GraphModelBuilder",
    "GraphNode",
    "NodeCategory",
    "NodeKind",
    "QueryAst",
    "build_graph_model",
    "read_query_ast",
]
