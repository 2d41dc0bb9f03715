"""Builder configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from .core.namespaces import ANNOTATION_PREDICATE_IRIS, RDF_TYPE

ENV_ANNOTATION_PREDICATES = "SPARQLVIZ_ANNOTATION_PREDICATES"


@dataclass(frozen=True)
class BuilderConfig:
    """Immutable settings shared by every ``build`` call."""

    annotation_predicates: frozenset[str] = field(
        default_factory=lambda: ANNOTATION_PREDICATE_IRIS
    )
    type_predicate: str = RDF_TYPE

    def with_annotations(self, *iris: str) -> BuilderConfig:
        """Return a copy that also treats *iris* as annotation predicates."""
        extra = {i.strip() for i in iris if i and i.strip()}
        if not extra:
            return self
        return replace(self, annotation_predicates=self.annotation_predicates | extra)

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Defaults plus any whitespace-separated IRIs in the environment."""
        raw = os.environ.get(ENV_ANNOTATION_PREDICATES, "")
        return cls().with_annotations(*raw.split())


DEFAULT_CONFIG = BuilderConfig()
