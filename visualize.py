from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph
from routing import PathResult, TransportPlan, plan_transport


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(range(graph.size()))
    for u, v, weight in graph.edges():
        if u != v:
            g.add_edge(u, v, weight=weight)
    return g


def compute_layout(graph: nx.Graph) -> Dict[int, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[int]) -> List[Tuple[int, int]]:
    return list(zip(path[:-1], path[1:]))


def _cost_label(result: PathResult) -> str:
    return f"{result.cost:.1f}" if result.reachable else "unreachable"


def draw_routes(
    graph: Graph,
    plan: TransportPlan,
    start: int,
    end: int,
    output: Path | None = None,
    show: bool = True,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    baseline_edges = route_edges(plan.baseline.path)
    if baseline_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=baseline_edges,
            edge_color="#1f77b4",
            width=4.0,
            alpha=0.6,
            ax=ax,
        )

    discount_edges = route_edges(plan.discount.result.path)
    if discount_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=discount_edges,
            edge_color="#d62728",
            width=2.0,
            style="dashed",
            ax=ax,
        )

    node_colors = [
        "#ff7f0e" if node in (start, end) else "#9ecae1" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    edge_labels = {(u, v): str(data["weight"]) for u, v, data in graph_nx.edges(data=True)}
    discount = plan.discount
    if discount.edge is not None and discount.edge[0] != discount.edge[1]:
        edge_labels[discount.edge] = (
            f"{discount.original_weight} -> {discount.discounted_weight}"
        )
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    summary_lines = [
        f"Route {start} -> {end}",
        f"Without discount: {_cost_label(plan.baseline)}",
        f"At a discount: {_cost_label(discount.result)}",
        (
            f"Discounted edge: {discount.edge[0]}-{discount.edge[1]}"
            if discount.edge is not None
            else "Discounted edge: none"
        ),
    ]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Transport Route – Baseline vs. Discount")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    from main import load_instance

    parser = argparse.ArgumentParser(
        description="Visualise the baseline and discounted transport routes."
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to a plain-text weight matrix or a YAML instance file.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and routes.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    instance = load_instance(args.input)
    plan = plan_transport(instance.graph, instance.start, instance.end)

    draw_routes(
        graph=instance.graph,
        plan=plan,
        start=instance.start,
        end=instance.end,
        output=args.static_out,
        show=not args.no_show,
    )


if __name__ == "__main__":
    main()
