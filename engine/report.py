"""
report.py — Whole-Graph Statistics Report
==========================================
Collects the summary the CLI prints and the HTTP API returns:
node / edge counts, number of connected components, isolated nodes,
per-degree counts and the maximum degree.

    report = summarize(graph)
    for line in format_report(report):
        print(line)
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from wordgraph import Graph
from algorithms import count_components


@dataclass
class GraphReport:
    name:             Optional[str]  = None
    node_count:       int            = 0
    edge_count:       int            = 0
    component_count:  int            = 0
    isolated_count:   int            = 0
    max_degree:       int            = 0
    degree_histogram: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # JSON object keys must be strings
        data["degree_histogram"] = {str(k): v for k, v in self.degree_histogram.items()}
        return data


def summarize(graph: Graph) -> GraphReport:
    ids = graph.node_ids()
    return GraphReport(
        name=graph.name,
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        component_count=count_components(graph, ids[0]) if ids else 0,
        isolated_count=len(graph.isolated_nodes()),
        max_degree=graph.max_degree(),
        degree_histogram=graph.degree_histogram(),
    )


def format_report(report: GraphReport) -> List[str]:
    lines = []
    if report.name:
        lines.append(f"Graph: {report.name}")
    lines += [
        f"Nodes: {report.node_count}",
        f"Edges: {report.edge_count}",
        f"Connected components: {report.component_count}",
        f"Nodes without neighbours: {report.isolated_count}",
    ]
    for degree, count in report.degree_histogram.items():
        plural = "s" if degree != 1 else ""
        lines.append(f"Nodes with {degree} neighbour{plural}: {count}")
    lines.append(f"Maximum number of neighbours: {report.max_degree}")
    return lines
