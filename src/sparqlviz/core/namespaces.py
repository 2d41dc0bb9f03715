"""Namespace handling: well-known IRIs and CURIE compaction."""

from __future__ import annotations

from typing import Mapping, Optional

from rdflib.namespace import DC, DCTERMS, RDF, RDFS, SKOS

RDF_TYPE = str(RDF.type)

# Predicates that conventionally point at human-readable literals.
ANNOTATION_PREDICATE_IRIS: frozenset[str] = frozenset({
    str(RDFS.label),
    str(RDFS.comment),
    str(DCTERMS.title),
    str(DC.title),
    str(SKOS.prefLabel),
    str(SKOS.altLabel),
    str(SKOS.definition),
})


def best_prefix_for_iri(
    iri: str, prefixes: Mapping[str, str] | None
) -> Optional[tuple[str, str]]:
    """Return ``(prefix, namespace)`` of the longest namespace that starts *iri*.

    On equal-length matches the first declared prefix wins.
    """
    best: Optional[tuple[str, str]] = None
    for pfx, ns in (prefixes or {}).items():
        if not isinstance(ns, str) or not iri.startswith(ns):
            continue
        if best is None or len(ns) > len(best[1]):
            best = (pfx, ns)
    return best


def compact_iri(iri: str, prefixes: Mapping[str, str] | None) -> str:
    """Compact *iri* to ``prefix:local`` form, or return it unchanged."""
    best = best_prefix_for_iri(iri, prefixes)
    if best is None:
        return iri
    pfx, ns = best
    return f"{pfx}:{iri[len(ns):]}"
