"""Edge classification from a predicate/object pair."""

from __future__ import annotations

from typing import Any, Optional

from ..config import DEFAULT_CONFIG, BuilderConfig
from .models import EdgeCategory, LiteralTerm, NamedNodeTerm, PropertyPath


def predicate_iri(predicate: Any) -> Optional[str]:
    """The predicate's IRI when it is a plain named node, else ``None``."""
    if isinstance(predicate, NamedNodeTerm):
        return predicate.value
    return None


def classify_edge(
    predicate: Any,
    obj: Any,
    config: BuilderConfig = DEFAULT_CONFIG,
) -> EdgeCategory:
    """Categorise an edge.

    Precedence: ``rdf:type`` → property path → literal object
    (annotation or datatype property) → object property.
    """
    iri = predicate_iri(predicate)

    if iri == config.type_predicate:
        return EdgeCategory.RDF_TYPE

    if isinstance(predicate, PropertyPath):
        return EdgeCategory.PATH

    if isinstance(obj, LiteralTerm):
        if iri is not None and iri in config.annotation_predicates:
            return EdgeCategory.ANNOTATION_PROP
        return EdgeCategory.DATATYPE_PROP

    return EdgeCategory.OBJECT_PROP
