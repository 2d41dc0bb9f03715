"""Renderer-facing exports of a ``GraphModel``."""

from .cytoscape import cytoscape_stylesheet, prefix_legend, to_cytoscape_elements
from .mermaid import to_mermaid

__all__ = [
    "cytoscape_stylesheet",
    "prefix_legend",
    "to_cytoscape_elements",
    "to_mermaid",
]
