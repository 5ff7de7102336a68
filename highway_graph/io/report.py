"""Plain-text reports for a loaded highway graph.

These helpers only format the plain records produced by the graph
package; they never look at the graph itself.
"""

from __future__ import annotations

from typing import List

from ..domain.models import (
    ConnectionSummary,
    EdgeCountCheck,
    EdgeExtremes,
    GraphAnalysis,
    GraphSummary,
    VertexExtremes,
)


def format_length(value: float, decimals: int = 3) -> str:
    """Format a length with at most ``decimals`` places, no trailing zeros."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _format_connection(connection: ConnectionSummary, decimals: int) -> str:
    parts = [
        f"  to {connection.destination_label} {connection.destination_location}"
        f" on {connection.edge_label}"
    ]
    if connection.shape_points:
        parts.append(" via")
        parts.extend(f" {point}" for point in connection.shape_points)
    parts.append(f" length {format_length(connection.length, decimals)}")
    return "".join(parts)


def format_summary(summary: GraphSummary, decimals: int = 3) -> str:
    """Render the full-graph summary, one line per vertex and per connection."""
    lines: List[str] = [f"|V|={summary.vertex_count}, |E|={summary.edge_count}"]
    for vertex in summary.vertices:
        lines.append(f"{vertex.label} {vertex.location}")
        lines.extend(_format_connection(c, decimals) for c in vertex.connections)
    return "\n".join(lines) + "\n"


def format_vertex_extremes(extremes: VertexExtremes) -> str:
    rows = [
        ("Northernmost Vertex", extremes.northernmost),
        ("Southernmost Vertex", extremes.southernmost),
        ("Easternmost Vertex", extremes.easternmost),
        ("Westernmost Vertex", extremes.westernmost),
        ("Shortest Vertex Label", extremes.shortest_label),
        ("Longest Vertex Label", extremes.longest_label),
    ]
    return "\n".join(f"{name}: {v.label} {v.location}" for name, v in rows) + "\n"


def format_edge_extremes(extremes: EdgeExtremes) -> str:
    return (
        f"Longest Edge: {extremes.longest.label} with length {extremes.longest.length}\n"
        f"Shortest Edge: {extremes.shortest.label} with length {extremes.shortest.length}\n"
    )


def format_edge_count(check: EdgeCountCheck) -> str:
    text = f"Count: {check.counted}\nEdge Count: {check.declared}\n"
    if not check.is_consistent:
        text += (
            f"Warning: scanned {check.counted} undirected edges but the "
            f"header declares {check.declared}\n"
        )
    return text


def format_analysis(analysis: GraphAnalysis, decimals: int = 3) -> str:
    """Render the summary followed by every query diagnostic."""
    sections = [format_summary(analysis.summary, decimals)]
    if analysis.vertex_extremes is not None:
        sections.append(format_vertex_extremes(analysis.vertex_extremes))
    else:
        sections.append("No vertices: extremal vertices are undefined\n")
    if analysis.edge_extremes is not None:
        sections.append(format_edge_extremes(analysis.edge_extremes))
    else:
        sections.append("No edges: extremal edges are undefined\n")
    sections.append(format_edge_count(analysis.edge_count))
    return "\n".join(sections)
