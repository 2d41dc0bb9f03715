"""sparqlviz CLI: turn SPARQL.js ASTs into graph models.

Usage:
    sparqlviz build query.ast.json [-f json|cytoscape|mermaid] [-o out]
    sparqlviz inspect query.ast.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from . import __version__
from .config import BuilderConfig
from .core.builder import GraphModelBuilder
from .core.models import GraphModel
from .exporters import (
    cytoscape_stylesheet,
    prefix_legend,
    to_cytoscape_elements,
    to_mermaid,
)

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_ast(stream: TextIO) -> Any:
    name = getattr(stream, "name", "<stdin>")
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"{name} is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read {name}: {exc}") from exc


def _build(stream: TextIO, annotation_predicates: tuple[str, ...]) -> GraphModel:
    config = BuilderConfig.from_env().with_annotations(*annotation_predicates)
    ast = _load_ast(stream)
    return GraphModelBuilder(config).build(ast)


def _render(model: GraphModel, fmt: str) -> str:
    if fmt == "mermaid":
        return to_mermaid(model)
    if fmt == "cytoscape":
        payload = {
            "elements": to_cytoscape_elements(model),
            "style": cytoscape_stylesheet(),
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return json.dumps(model.to_dict(), ensure_ascii=False, indent=2)


_annotation_option = click.option(
    "--annotation-predicate",
    "annotation_predicates",
    multiple=True,
    metavar="IRI",
    help="Extra predicate IRI to classify as an annotation property (repeatable).",
)
_verbose_option = click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Verbose logging."
)


@click.group()
@click.version_option(version=__version__, prog_name="sparqlviz")
def main():
    """sparqlviz: visualise SPARQL WHERE clauses as graphs."""
    pass


@main.command()
@click.argument("ast_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-f", "--format",
    "fmt",
    type=click.Choice(["json", "cytoscape", "mermaid"], case_sensitive=False),
    default="json",
    help="Output format (default: json).",
)
@click.option(
    "-o", "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write to this file instead of stdout.",
)
@_annotation_option
@_verbose_option
def build(
    ast_file: TextIO,
    fmt: str,
    output_path: str | None,
    annotation_predicates: tuple[str, ...],
    verbose: bool,
):
    """Build a graph model from a SPARQL.js JSON AST (use - for stdin)."""
    _setup_logging(verbose)
    model = _build(ast_file, annotation_predicates)
    text = _render(model, fmt.lower())

    if output_path is None:
        click.echo(text)
        return

    out = Path(output_path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise click.ClickException(f"Cannot write {out}: {exc}") from exc
    logger.info("Wrote %s output to %s", fmt, out)
    console.print(
        f"[green]✓[/] {len(model.nodes)} nodes, {len(model.edges)} edges → {escape(str(out))}"
    )


@main.command()
@click.argument("ast_file", type=click.File("r", encoding="utf-8"))
@_annotation_option
@_verbose_option
def inspect(ast_file: TextIO, annotation_predicates: tuple[str, ...], verbose: bool):
    """Show the graph model of a SPARQL.js JSON AST as tables."""
    _setup_logging(verbose)
    model = _build(ast_file, annotation_predicates)

    console.print(f"[bold]Query type:[/] {escape(model.query_type)}")
    console.print(f"[bold]WHERE triples:[/] {model.where_triple_count}")

    legend = prefix_legend(model.prefixes)
    if legend:
        table = RichTable(title="Prefixes", show_lines=False)
        table.add_column("Prefix", style="bold cyan")
        table.add_column("Namespace")
        for key, ns in legend:
            table.add_row(escape(key), escape(ns))
        console.print(table)
    else:
        console.print("[dim]No PREFIX declarations found.[/dim]")

    nodes = RichTable(title="Nodes")
    nodes.add_column("Label", style="bold")
    nodes.add_column("Kind")
    nodes.add_column("Category")
    nodes.add_column("Selected")
    for n in model.nodes:
        nodes.add_row(escape(n.label), n.kind.value, n.category.value, "★" if n.is_selected_var else "")
    console.print(nodes)

    edges = RichTable(title="Edges")
    edges.add_column("Source")
    edges.add_column("Predicate", style="bold")
    edges.add_column("Target")
    edges.add_column("Category")
    edges.add_column("Scope", style="dim")
    labels = {n.id: n.label for n in model.nodes}
    for e in model.edges:
        scope = []
        if e.optional:
            scope.append("optional")
        if e.branch is not None:
            scope.append(f"union {e.branch}")
        if e.graph is not None:
            scope.append(f"graph {e.graph}")
        edges.add_row(
            escape(labels.get(e.source, e.source)),
            escape(e.label),
            escape(labels.get(e.target, e.target)),
            e.category.value,
            escape(", ".join(scope)),
        )
    console.print(edges)

    stats = RichTable(title="Stats")
    stats.add_column("Metric", style="bold")
    stats.add_column("Count", justify="right")
    for key, count in model.compute_stats().items():
        stats.add_row(key, str(count))
    console.print(stats)


if __name__ == "__main__":
    main()
