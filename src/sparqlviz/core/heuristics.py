"""Infer class/individual roles from ``rdf:type`` edges."""

from __future__ import annotations

from typing import Iterable, Mapping

from .models import EdgeCategory, GraphEdge, GraphNode, NodeCategory, NodeKind

_INDIVIDUAL_KINDS = frozenset({NodeKind.IDENTIFIER, NodeKind.VARIABLE, NodeKind.BLANK})


def apply_type_heuristics(
    nodes_by_id: Mapping[str, GraphNode],
    edges: Iterable[GraphEdge],
) -> None:
    """Upgrade node categories in place.

    The object of ``rdf:type`` becomes a ``class`` when it is an IRI; the
    subject becomes an ``individual`` if it is still ``unknown``.  Never
    downgrades, so running it twice is the same as running it once.
    """
    for e in edges:
        if e.category != EdgeCategory.RDF_TYPE:
            continue
        subj = nodes_by_id.get(e.source)
        obj = nodes_by_id.get(e.target)
        if obj is not None and obj.kind == NodeKind.IDENTIFIER:
            obj.category = NodeCategory.CLASS
        if subj is not None and subj.kind in _INDIVIDUAL_KINDS:
            if subj.category == NodeCategory.UNKNOWN:
                subj.category = NodeCategory.INDIVIDUAL
