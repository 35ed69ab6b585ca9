from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

import yaml

from graph import Graph
from routing import PathResult, TransportPlan, plan_transport


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class Instance:
    graph: Graph
    start: int
    end: int


def configure_logging(verbose: int = 0) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def _as_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}.")
    return value


def build_instance(matrix: Sequence[Sequence[int]], start: int, end: int) -> Instance:
    rows: List[List[int]] = []
    for i, row in enumerate(matrix):
        if not isinstance(row, (list, tuple)):
            raise ValueError(f"Matrix row {i} is not a list.")
        rows.append([_as_int(weight, f"Weight at ({i}, {j})") for j, weight in enumerate(row)])

    graph = Graph.from_matrix(rows)
    n = graph.size()
    for label, node in (("Start", start), ("End", end)):
        node = _as_int(node, f"{label} node")
        if not 0 <= node < n:
            raise ValueError(f"{label} node {node} is outside the graph (0..{n - 1}).")
    return Instance(graph=graph, start=start, end=end)


def parse_matrix_text(text: str) -> Instance:
    """Parse the plain-text format: n, then n*n weights, then start and end."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"Input contains a non-integer token ({exc}).") from exc

    if not numbers:
        raise ValueError("Input is empty.")
    n = numbers[0]
    if n <= 0:
        raise ValueError(f"Node count must be positive, got {n}.")

    expected = 1 + n * n + 2
    if len(numbers) < expected:
        raise ValueError(
            f"Input has {len(numbers)} integers, expected {expected} for {n} nodes."
        )

    weights = numbers[1 : 1 + n * n]
    matrix = [weights[row * n : (row + 1) * n] for row in range(n)]
    start, end = numbers[1 + n * n], numbers[2 + n * n]
    return build_instance(matrix, start, end)


def instance_from_config(config: Dict) -> Instance:
    if not isinstance(config, dict):
        raise ValueError("Instance configuration must be a mapping.")
    try:
        matrix = config["graph"]["matrix"]
        routing_config = config["routing"]
        start = routing_config["start_node"]
        end = routing_config["end_node"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Instance configuration is missing {exc}.") from exc

    if not isinstance(matrix, list):
        raise ValueError("graph.matrix must be a list of rows.")
    return build_instance(matrix, start, end)


def load_instance(path: Path) -> Instance:
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            config = load_config(path)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML ({exc}).") from exc
        return instance_from_config(config)
    return parse_matrix_text(path.read_text(encoding="utf-8"))


def format_path(path: Sequence[int]) -> str:
    return "[" + ", ".join(str(node) for node in path) + "]"


def format_result(result: PathResult, with_discount: bool) -> str:
    label = (
        "Minimum price for transporting goods at a discount: "
        if with_discount
        else "Minimum price for transport of goods without discount: "
    )
    if not result.reachable:
        return f"{label}-1, Route: []"
    return f"{label}{result.cost:.1f}, Route: {format_path(result.path)}"


def print_plan(plan: TransportPlan, explain: bool = False) -> None:
    print(format_result(plan.baseline, with_discount=False))
    print(format_result(plan.discount.result, with_discount=True))

    if not explain:
        return

    discount = plan.discount
    if discount.edge is None:
        print(f"No discount reaches the destination ({discount.trials} candidate edges tried).")
        return
    u, v = discount.edge
    print(
        f"Discounted edge {u}-{v}: {discount.original_weight} -> "
        f"{discount.discounted_weight} (best of {discount.trials} candidate edges, "
        f"saves {plan.savings:.1f})"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Find the cheapest transport route between two nodes, with and "
            "without halving the price of one edge."
        )
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=Path("matrixes/Matrix1.txt"),
        help="Path to a plain-text weight matrix or a YAML instance file.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Also report which edge was discounted.",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw both routes with matplotlib.",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        help="Optional path to save the route figure (PNG, SVG, PDF).",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display the figure interactively.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v for info, -vv for debug).",
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        instance = load_instance(args.input)
    except (OSError, ValueError) as exc:
        print(f"Failed to load {args.input}: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Loaded graph with %d nodes from %s (start=%d, end=%d)",
        instance.graph.size(),
        args.input,
        instance.start,
        instance.end,
    )

    plan = plan_transport(instance.graph, instance.start, instance.end)
    print_plan(plan, explain=args.explain)

    if args.visualize or args.figure_out:
        from visualize import draw_routes

        draw_routes(
            graph=instance.graph,
            plan=plan,
            start=instance.start,
            end=instance.end,
            output=args.figure_out,
            show=args.visualize and not args.no_show,
        )
        if args.figure_out:
            print(f"Figure stored at: {args.figure_out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
