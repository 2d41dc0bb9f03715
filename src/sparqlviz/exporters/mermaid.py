"""Export a graph model as a Mermaid flowchart."""

from __future__ import annotations

from ..core.models import GraphModel, NodeCategory, NodeKind

# classDef name → (fill, stroke)
_CLASS_DEFS: dict[str, tuple[str, str]] = {
    "cls": ("#ffeaa7", "#999"),
    "individual": ("#d6b3ff", "#999"),
    "literal": ("#dff9fb", "#999"),
    "variable": ("#f1f2f6", "#999"),
    "selected": ("#f1f2f6", "#f1c40f"),
}


def _escape(text: str) -> str:
    return text.replace('"', "'")


def _node_shape(safe_id: str, label: str, kind: NodeKind, category: NodeCategory) -> str:
    text = _escape(label)
    if category == NodeCategory.INDIVIDUAL:
        return f'{safe_id}{{"{text}"}}'
    if kind in (NodeKind.LITERAL, NodeKind.VARIABLE):
        return f'{safe_id}("{text}")'
    return f'{safe_id}["{text}"]'


def _class_for(kind: NodeKind, category: NodeCategory, selected: bool) -> str | None:
    if selected:
        return "selected"
    if category == NodeCategory.CLASS:
        return "cls"
    if category == NodeCategory.INDIVIDUAL:
        return "individual"
    if kind == NodeKind.LITERAL:
        return "literal"
    if kind == NodeKind.VARIABLE:
        return "variable"
    return None


def to_mermaid(model: GraphModel, *, direction: str = "LR") -> str:
    """Render *model* as ``graph LR`` Mermaid text.

    Node ids are positional (``n0``, ``n1``...) since identity keys
    contain characters Mermaid cannot use.  Optional edges are dotted.
    """
    lines = [f"graph {direction}"]

    safe_ids: dict[str, str] = {}
    classes: dict[str, list[str]] = {}
    for i, n in enumerate(model.nodes):
        safe_id = f"n{i}"
        safe_ids[n.id] = safe_id
        lines.append(f"    {_node_shape(safe_id, n.label, n.kind, n.category)}")
        cls = _class_for(n.kind, n.category, n.is_selected_var)
        if cls:
            classes.setdefault(cls, []).append(safe_id)

    for e in model.edges:
        src = safe_ids.get(e.source)
        tgt = safe_ids.get(e.target)
        if src is None or tgt is None:
            continue
        arrow = "-.->" if e.optional else "-->"
        lines.append(f'    {src} {arrow}|"{_escape(e.label)}"| {tgt}')

    for name, (fill, stroke) in _CLASS_DEFS.items():
        if name in classes:
            width = "4px" if name == "selected" else "1px"
            lines.append(f"    classDef {name} fill:{fill},stroke:{stroke},stroke-width:{width}")
            lines.append(f"    class {','.join(classes[name])} {name}")

    return "\n".join(lines)
