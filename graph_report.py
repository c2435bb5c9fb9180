"""
CLI to load a weight-matrix graph and report every query and algorithm result.

Reads graphs/report.yml by default, loads the graph it names, runs the
structural queries, traversals, shortest-path and spanning-tree algorithms
from the configured start vertex, and prints the results. Distance tables can
also be written to CSV.
"""

from __future__ import annotations

import csv
import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import click
import yaml

from adjacency_list_graph import AdjacencyListGraph
from errors import IndexViolation, LoadError
from graph_io import (
    create_graph,
    format_adjacency,
    format_degrees,
    format_distance,
    format_distances,
    format_path,
)

logger = logging.getLogger(__name__)

ALGORITHMS: Tuple[str, ...] = ("dijkstra", "floyd_warshall", "bellman_ford")

DEFAULT_CONFIG = Path(__file__).parent / "graphs" / "report.yml"

_ALGORITHM_TITLES = {
    "dijkstra": "Dijkstra",
    "floyd_warshall": "Floyd-Warshall",
    "bellman_ford": "Bellman-Ford",
}


@dataclass(frozen=True)
class ReportConfig:
    graph_path: Path
    start_vertex: int = 0
    algorithms: Sequence[str] = ALGORITHMS
    continue_on_load_error: bool = False


@dataclass
class GraphReport:
    """Everything computed for one graph and start vertex."""

    start_vertex: int
    load_error: Optional[str]
    adjacency: List[str]
    is_undirected: bool
    edge_count: int
    degrees: List[Tuple[int, int]]
    dfs: List[int]
    bfs: List[int]
    has_cycle: bool
    is_connected: bool
    weak_components: int
    distances: Dict[str, List[float]] = field(default_factory=dict)
    prim: int = 0
    kruskal: int = 0


def load_config(path: Path) -> ReportConfig:
    """
    Parse a YAML report config. Relative graph paths resolve against the
    config file's directory.
    """
    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: report config must be a mapping")
    if "graph" not in data:
        raise ValueError(f"{path}: report config requires 'graph'")

    if not isinstance(data["graph"], str) or not data["graph"]:
        raise ValueError(f"{path}: 'graph' must be a file path")
    graph_path = Path(data["graph"])
    if not graph_path.is_absolute():
        graph_path = path.parent / graph_path

    start_vertex = data.get("start_vertex", 0)
    # bool is an int subclass; `start_vertex: yes` is not a vertex
    if not isinstance(start_vertex, int) or isinstance(start_vertex, bool):
        raise ValueError(f"{path}: 'start_vertex' must be an integer, got {start_vertex!r}")

    algorithms = data.get("algorithms", list(ALGORITHMS))
    if not isinstance(algorithms, list) or not all(isinstance(name, str) for name in algorithms):
        raise ValueError(f"{path}: 'algorithms' must be a list of names, got {algorithms!r}")
    unknown = [name for name in algorithms if name not in ALGORITHMS]
    if unknown:
        raise ValueError(f"{path}: unknown algorithm(s): {', '.join(unknown)}")

    continue_on_load_error = data.get("continue_on_load_error", False)
    if not isinstance(continue_on_load_error, bool):
        raise ValueError(f"{path}: 'continue_on_load_error' must be true or false")

    return ReportConfig(
        graph_path=graph_path,
        start_vertex=start_vertex,
        algorithms=algorithms,
        continue_on_load_error=continue_on_load_error,
    )


def build_report(
    graph: AdjacencyListGraph,
    start_vertex: int,
    algorithms: Sequence[str] = ALGORITHMS,
    load_error: Optional[str] = None,
) -> GraphReport:
    report = GraphReport(
        start_vertex=start_vertex,
        load_error=load_error,
        adjacency=format_adjacency(graph),
        is_undirected=graph.is_undirected_graph(),
        edge_count=graph.count_edges(),
        degrees=graph.count_in_out_degrees(),
        dfs=graph.dfs(start_vertex),
        bfs=graph.bfs(start_vertex),
        has_cycle=graph.has_cycle(),
        is_connected=graph.is_connected(),
        weak_components=graph.count_weakly_connected_components(),
    )
    for name in algorithms:
        report.distances[name] = getattr(graph, name)(start_vertex)
    report.prim = graph.prim()
    report.kruskal = graph.kruskal()
    return report


def render_report(report: GraphReport) -> List[str]:
    start = report.start_vertex
    lines: List[str] = []
    if report.load_error:
        lines.append(f"Load failed: {report.load_error}")
    lines.append("Adjacency list (weight, vertex):")
    lines.extend(report.adjacency)
    lines.append(f"Is undirected graph: {int(report.is_undirected)}")
    lines.append(f"Number of edges: {report.edge_count}")
    lines.extend(format_degrees(report.degrees))
    lines.append(f"DFS ({start}): {format_path(report.dfs)}")
    lines.append(f"BFS ({start}): {format_path(report.bfs)}")
    lines.append(f"Has cycle: {int(report.has_cycle)}")
    lines.append(f"Is strongly connected: {int(report.is_connected)}")
    lines.append(f"Number of WCC: {report.weak_components}")
    for name, distances in report.distances.items():
        lines.append(f"Shortest path ({_ALGORITHM_TITLES[name]}):")
        lines.extend(format_distances(distances))
    lines.append(f"Weight of MST (Prim): {report.prim}")
    lines.append(f"Weight of MST (Kruskal): {report.kruskal}")
    return lines


def run_report(config: ReportConfig) -> GraphReport:
    load_error: Optional[str] = None
    try:
        graph = create_graph(config.graph_path)
    except LoadError as exc:
        if not config.continue_on_load_error:
            raise
        logger.warning(f"[report] {exc}; continuing with an empty graph")
        load_error = str(exc)
        graph = exc.graph if isinstance(exc.graph, AdjacencyListGraph) else AdjacencyListGraph()

    logger.info(f"[report] start vertex {config.start_vertex}, algorithms: {', '.join(config.algorithms)}")
    return build_report(graph, config.start_vertex, config.algorithms, load_error)


def write_distances_csv(report: GraphReport, path: Path) -> None:
    """
    Write one row per vertex with a column per shortest-path algorithm.
    """
    fieldnames = ["vertex", *report.distances]
    rows = max((len(d) for d in report.distances.values()), default=0)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for vertex in range(rows):
            row: Dict[str, object] = {"vertex": vertex}
            for name, distances in report.distances.items():
                row[name] = format_distance(distances[vertex]) if vertex < len(distances) else ""
            writer.writerow(row)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


@click.command()
@click.argument("graph_file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML report config (defaults to graphs/report.yml when no GRAPH_FILE is given)",
)
@click.option("--start", "-s", type=int, default=None, help="Start vertex for traversals and shortest paths")
@click.option(
    "--distances-csv",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the distance tables to this CSV file",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(
    graph_file: Optional[Path],
    config_path: Optional[Path],
    start: Optional[int],
    distances_csv: Optional[Path],
    verbose: bool,
) -> None:
    """Print structural queries, traversals, shortest paths and MST weights for GRAPH_FILE."""
    _setup_logging(verbose)

    try:
        if config_path is None and graph_file is not None:
            config = ReportConfig(graph_path=graph_file)
        else:
            config = load_config(config_path or DEFAULT_CONFIG)
            if graph_file is not None:
                config = dataclasses.replace(config, graph_path=graph_file)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise click.ClickException(f"cannot load report config: {exc}") from exc
    if start is not None:
        config = dataclasses.replace(config, start_vertex=start)

    try:
        report = run_report(config)
    except (LoadError, IndexViolation) as exc:
        raise click.ClickException(str(exc)) from exc

    for line in render_report(report):
        click.echo(line)

    if distances_csv is not None:
        write_distances_csv(report, distances_csv)
        logger.info(f"[report] wrote distances to {distances_csv}")


if __name__ == "__main__":
    main()
