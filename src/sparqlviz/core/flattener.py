"""Flatten a nested WHERE pattern tree into an ordered triple list.

OPTIONAL and UNION are not evaluated: every branch contributes its
triples.  Each flattened triple records where it came from so that a
renderer can still tell optional or per-branch edges apart.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import (
    BgpPattern,
    GraphPattern,
    GroupPattern,
    OptionalPattern,
    OtherPattern,
    Pattern,
    Triple,
    UnionPattern,
)
from .terms import term_key

logger = logging.getLogger(__name__)


def flatten_where_triples(
    patterns: Iterable[Pattern] | None,
    *,
    optional: bool = False,
    branch: Optional[str] = None,
    graph: Optional[str] = None,
) -> list[Triple]:
    """Depth-first walk of *patterns*, preserving encounter order.

    Parameters
    ----------
    patterns
        WHERE pattern groups (``None`` is treated as empty).
    optional
        Whether the walk is already inside an OPTIONAL block.
    branch
        Dotted UNION branch path of the enclosing scope (``"1.0"``).
    graph
        Identity key of the enclosing ``GRAPH`` name, if any.
    """
    triples: list[Triple] = []

    for p in patterns or ():
        if isinstance(p, BgpPattern):
            triples.extend(
                t.model_copy(update={"optional": optional, "branch": branch, "graph": graph})
                for t in p.triples
            )
        elif isinstance(p, OptionalPattern):
            triples.extend(flatten_where_triples(
                p.patterns, optional=True, branch=branch, graph=graph,
            ))
        elif isinstance(p, UnionPattern):
            for i, branch_patterns in enumerate(p.branches):
                child = f"{branch}.{i}" if branch is not None else str(i)
                triples.extend(flatten_where_triples(
                    branch_patterns, optional=optional, branch=child, graph=graph,
                ))
        elif isinstance(p, GroupPattern):
            triples.extend(flatten_where_triples(
                p.patterns, optional=optional, branch=branch, graph=graph,
            ))
        elif isinstance(p, GraphPattern):
            name = term_key(p.name) if p.name is not None else graph
            triples.extend(flatten_where_triples(
                p.patterns, optional=optional, branch=branch, graph=name,
            ))
        elif isinstance(p, OtherPattern):
            logger.debug("Skipping '%s' pattern group", p.raw_type or "unknown")
        else:
            logger.debug("Skipping unrecognised pattern %r", p)

    return triples
