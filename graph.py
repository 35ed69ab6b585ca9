from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple


NO_EDGE = -1


class InvalidSizeError(ValueError):
    """Raised when a graph is created with a non-positive node count."""


class OutOfRangeError(IndexError):
    """Raised when a node index lies outside ``[0, n)``."""


def check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise OutOfRangeError(f"Node index {node} out of range for graph of size {n}.")


class Graph:
    """Undirected weighted graph stored as a symmetric adjacency matrix.

    Weights are integers; ``NO_EDGE`` marks a missing edge. The matrix is
    mutated only through ``set_edge``, which always writes both directions.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidSizeError(f"Graph size must be a positive integer, got {n!r}.")
        self._matrix: List[List[int]] = [[NO_EDGE] * n for _ in range(n)]

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> Graph:
        """Build a graph from a square weight matrix.

        Cells are written in row-major order with ``set_edge``, so for an
        asymmetric matrix the lower triangle overwrites the upper one.
        """
        n = len(matrix)
        if n == 0:
            raise ValueError("Weight matrix is empty.")
        for i, row in enumerate(matrix):
            if len(row) != n:
                raise ValueError(
                    f"Weight matrix is not square: row {i} has {len(row)} entries, expected {n}."
                )

        graph = cls(n)
        for i, row in enumerate(matrix):
            for j, weight in enumerate(row):
                graph.set_edge(i, j, weight)
        return graph

    def size(self) -> int:
        return len(self._matrix)

    def __len__(self) -> int:
        return self.size()

    def set_edge(self, u: int, v: int, weight: int) -> None:
        n = self.size()
        check_node(u, n)
        check_node(v, n)
        self._matrix[u][v] = weight
        self._matrix[v][u] = weight

    def get_edge_weight(self, u: int, v: int) -> int:
        n = self.size()
        check_node(u, n)
        check_node(v, n)
        return self._matrix[u][v]

    def neighbors(self, node: int) -> Iterator[Tuple[int, int]]:
        for v in range(self.size()):
            weight = self.get_edge_weight(node, v)
            if weight != NO_EDGE:
                yield v, weight

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield each undirected edge once as ``(u, v, weight)`` with ``u <= v``."""
        n = self.size()
        for u in range(n):
            for v in range(u, n):
                weight = self.get_edge_weight(u, v)
                if weight != NO_EDGE:
                    yield u, v, weight

    def to_matrix(self) -> List[List[int]]:
        return [
            [self.get_edge_weight(u, v) for v in range(self.size())]
            for u in range(self.size())
        ]

    def with_edge_override(self, u: int, v: int, weight: int) -> EdgeOverrideView:
        return EdgeOverrideView(self, u, v, weight)


class EdgeOverrideView(Graph):
    """Read-only view of a graph with a single edge weight replaced.

    Lookups for the overridden pair (in either direction) return the new
    weight; everything else is answered by the base graph, which is never
    modified.
    """

    def __init__(self, base: Graph, u: int, v: int, weight: int) -> None:
        n = base.size()
        check_node(u, n)
        check_node(v, n)
        self._base = base
        self._pair = (u, v)
        self._weight = weight

    @property
    def overridden_edge(self) -> Tuple[int, int]:
        return self._pair

    def size(self) -> int:
        return self._base.size()

    def set_edge(self, u: int, v: int, weight: int) -> None:
        raise TypeError("EdgeOverrideView is read-only; use with_edge_override().")

    def get_edge_weight(self, u: int, v: int) -> int:
        if (u, v) == self._pair or (v, u) == self._pair:
            return self._weight
        return self._base.get_edge_weight(u, v)
