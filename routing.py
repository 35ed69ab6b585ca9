from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from heapq import heappop, heappush
from typing import Dict, List, Optional, Sequence, Tuple

from graph import NO_EDGE, Graph, check_node


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    cost: float
    path: Tuple[int, ...]

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.cost)


UNREACHABLE = PathResult(cost=math.inf, path=())


@dataclass(frozen=True)
class DiscountOutcome:
    """Best route found when exactly one edge is charged at half price.

    ``edge`` is the discounted pair of the winning trial, or ``None`` when no
    trial reached the destination.
    """

    result: PathResult
    edge: Optional[Tuple[int, int]] = None
    original_weight: Optional[int] = None
    discounted_weight: Optional[int] = None
    trials: int = 0


@dataclass(frozen=True)
class TransportPlan:
    baseline: PathResult
    discount: DiscountOutcome

    @property
    def savings(self) -> float:
        if not (self.baseline.reachable and self.discount.result.reachable):
            return 0.0
        return self.baseline.cost - self.discount.result.cost


def shortest_path(graph: Graph, start: int, end: int) -> PathResult:
    """Compute the cheapest route from start to end using Dijkstra.

    Stale frontier entries are skipped lazily instead of being removed.
    Returns ``UNREACHABLE`` when end cannot be reached from start.
    """
    n = graph.size()
    check_node(start, n)
    check_node(end, n)

    distances: List[float] = [math.inf] * n
    predecessors: Dict[int, int] = {}
    distances[start] = 0.0

    queue: List[Tuple[float, int]] = [(0.0, start)]

    while queue:
        distance_u, u = heappop(queue)
        if distance_u > distances[u]:
            continue

        for v in range(n):
            weight = graph.get_edge_weight(u, v)
            if weight == NO_EDGE:
                continue
            candidate = distance_u + weight
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heappush(queue, (candidate, v))

    path: List[int] = [end]
    while path[-1] in predecessors and path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()

    if path[0] != start:
        return UNREACHABLE
    return PathResult(cost=float(distances[end]), path=tuple(path))


def path_cost(graph: Graph, path: Sequence[int]) -> float:
    """Return the total cost of walking along the given node sequence."""
    total_cost = 0.0
    for u, v in zip(path[:-1], path[1:]):
        weight = graph.get_edge_weight(u, v)
        if weight == NO_EDGE:
            raise ValueError(f"Edge {u}-{v} not present in graph.")
        total_cost += weight
    return total_cost


def discounted_weight(weight: int) -> int:
    # Truncate toward zero.
    return int(weight / 2) if weight < 0 else weight // 2


def find_best_discount(graph: Graph, start: int, end: int) -> DiscountOutcome:
    """Try halving every positive edge and keep the cheapest resulting route.

    Edges are visited once each, row-major over ``u <= v``. A full scan of the
    ordered pairs meets every edge at that cell first, so the winner is the
    same. Only a strictly lower cost replaces the current best.
    Each trial runs on an override view; ``graph`` itself is left untouched.
    """
    check_node(start, graph.size())
    check_node(end, graph.size())

    best = DiscountOutcome(result=UNREACHABLE)
    trials = 0

    for u, v, weight in graph.edges():
        if weight <= 0:
            continue

        trials += 1
        halved = discounted_weight(weight)
        result = shortest_path(graph.with_edge_override(u, v, halved), start, end)

        if result.cost < best.result.cost:
            logger.debug(
                "Discount on edge %d-%d (%d -> %d) improves cost to %s via %s",
                u,
                v,
                weight,
                halved,
                result.cost,
                list(result.path),
            )
            best = DiscountOutcome(
                result=result,
                edge=(u, v),
                original_weight=weight,
                discounted_weight=halved,
            )

    logger.info("Evaluated %d discount candidates between %d and %d", trials, start, end)
    return replace(best, trials=trials)


def plan_transport(graph: Graph, start: int, end: int) -> TransportPlan:
    baseline = shortest_path(graph, start, end)
    logger.debug("Baseline cost %s via %s", baseline.cost, list(baseline.path))
    discount = find_best_discount(graph, start, end)
    return TransportPlan(baseline=baseline, discount=discount)
