"""Term identity keys, display labels and node kinds.

Keys are the only deduplication mechanism in the graph builder: two
terms with the same key become one node, wherever they appear.
"""

from __future__ import annotations

from typing import Any, Mapping

from .models import (
    BlankNodeTerm,
    LiteralTerm,
    NamedNodeTerm,
    NodeKind,
    VariableTerm,
)
from .namespaces import compact_iri

UNKNOWN_TERM_KEY = "term:unknown"
UNKNOWN_TERM_LABEL = "<?>"


def term_key(term: Any) -> str:
    """Stable identity key for *term* (``var:?x``, ``iri:...``, ``lit:v|lang|dt``)."""
    if isinstance(term, VariableTerm):
        return f"var:?{term.value}"
    if isinstance(term, BlankNodeTerm):
        return f"bnode:{term.value}"
    if isinstance(term, NamedNodeTerm):
        return f"iri:{term.value}"
    if isinstance(term, LiteralTerm):
        dt = term.datatype.value if term.datatype is not None else ""
        return f"lit:{term.value}|{term.language}|{dt}"
    return UNKNOWN_TERM_KEY


def term_label(term: Any, prefixes: Mapping[str, str] | None) -> str:
    """Human-readable label, with IRIs compacted against *prefixes*."""
    if isinstance(term, VariableTerm):
        return f"?{term.value}"
    if isinstance(term, BlankNodeTerm):
        return f"_:{term.value}"
    if isinstance(term, NamedNodeTerm):
        return compact_iri(term.value, prefixes)
    if isinstance(term, LiteralTerm):
        label = f'"{term.value}"'
        if term.language:
            return f"{label}@{term.language}"
        if term.datatype is not None and term.datatype.value:
            return f"{label}^^{compact_iri(term.datatype.value, prefixes)}"
        return label
    return UNKNOWN_TERM_LABEL


def node_kind(term: Any) -> NodeKind:
    """Node kind for *term*; unrecognised terms are drawn as identifiers."""
    if isinstance(term, VariableTerm):
        return NodeKind.VARIABLE
    if isinstance(term, BlankNodeTerm):
        return NodeKind.BLANK
    if isinstance(term, LiteralTerm):
        return NodeKind.LITERAL
    return NodeKind.IDENTIFIER
