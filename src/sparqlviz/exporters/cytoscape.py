"""Cytoscape.js element and style export.

The style sheet maps node/edge categories to colours and shapes; it is
the styling contract renderers use for ``GraphModel`` output.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.models import GraphModel

# ---------------------------------------------------------------------------
# Style sheet
# ---------------------------------------------------------------------------

_BASE_NODE_STYLE: dict[str, Any] = {
    "label": "data(label)",
    "text-wrap": "wrap",
    "text-max-width": 140,
    "font-size": 10,
    "border-width": 1,
    "border-color": "#999",
    "background-color": "#eee",
    "shape": "ellipse",
}

_BASE_EDGE_STYLE: dict[str, Any] = {
    "label": "data(label)",
    "font-size": 9,
    "text-rotation": "autorotate",
    "curve-style": "bezier",
    "target-arrow-shape": "triangle",
    "line-color": "#888",
    "target-arrow-color": "#888",
    "width": 2,
}

NODE_CATEGORY_STYLES: dict[str, tuple[str, str]] = {
    "class": ("#ffeaa7", "ellipse"),
    "individual": ("#d6b3ff", "diamond"),
}

NODE_KIND_STYLES: dict[str, tuple[str, str]] = {
    "literal": ("#dff9fb", "round-rectangle"),
    "variable": ("#f1f2f6", "round-rectangle"),
}

EDGE_CATEGORY_COLORS: dict[str, str] = {
    "objectProp": "#3498db",
    "datatypeProp": "#2ecc71",
    "annotationProp": "#e67e22",
    "rdfType": "#7f8c8d",
}

SELECTED_VAR_BORDER = "#f1c40f"


def cytoscape_stylesheet() -> list[dict[str, Any]]:
    """Return the Cytoscape style rules for graph models."""
    rules: list[dict[str, Any]] = [{"selector": "node", "style": dict(_BASE_NODE_STYLE)}]

    for category, (color, shape) in NODE_CATEGORY_STYLES.items():
        rules.append({
            "selector": f'node[category = "{category}"]',
            "style": {"background-color": color, "shape": shape},
        })
    for kind, (color, shape) in NODE_KIND_STYLES.items():
        rules.append({
            "selector": f'node[kind = "{kind}"]',
            "style": {"background-color": color, "shape": shape},
        })

    rules.append({
        "selector": "node[?isSelectedVar]",
        "style": {"border-width": 4, "border-color": SELECTED_VAR_BORDER},
    })

    rules.append({"selector": "edge", "style": dict(_BASE_EDGE_STYLE)})
    for category, color in EDGE_CATEGORY_COLORS.items():
        rules.append({
            "selector": f'edge[category = "{category}"]',
            "style": {"line-color": color, "target-arrow-color": color},
        })
    rules.append({"selector": "edge[?optional]", "style": {"line-style": "dashed"}})

    return rules


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

def to_cytoscape_elements(model: GraphModel) -> list[dict[str, Any]]:
    """Nodes then edges, each wrapped as ``{"data": {...}}``."""
    payload = model.to_dict()
    nodes = [{"data": n} for n in payload["nodes"]]
    edges = [{"data": e} for e in payload["edges"]]
    return [*nodes, *edges]


def prefix_legend(prefixes: Mapping[str, str] | None) -> list[tuple[str, str]]:
    """``(display_key, namespace)`` rows sorted by prefix name."""
    rows: list[tuple[str, str]] = []
    for pfx, ns in sorted((prefixes or {}).items(), key=lambda kv: kv[0]):
        rows.append((":" if pfx == "" else f"{pfx}:", ns))
    return rows
