"""
Mutable, weighted, directed graph abstraction.

Vertices are identified by labels of any hashable type, compared by value.
Edges are directed: source -> target with a strictly positive int weight.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Set, TypeVar

L = TypeVar("L", bound=Hashable)


class InvalidWeightError(ValueError):
    """Raised when a negative edge weight is rejected."""


def check_weight_type(weight: object) -> None:
    """Raise TypeError unless weight is an int (bool excluded)."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an int, got {weight!r}.")


class Graph(ABC, Generic[L]):
    """
    Directed, weighted graph over labelled vertices.

    Observers return fresh containers; mutating them never touches the graph.
    """

    @abstractmethod
    def add(self, label: L) -> bool:
        """
        Add a vertex with no edges.

        Returns True if the vertex was added, False if it already existed.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, change, or remove the edge source -> target.

        A positive weight creates any missing vertex and records the edge.
        A zero weight removes the edge if present and never adds vertices.

        Returns: the previous weight of the edge, or 0 if there was none.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, label: L) -> bool:
        """
        Remove a vertex together with every edge into or out of it.

        Returns True if the vertex existed.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Return the labels of all vertices."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Incoming neighbours of target and their edge weights.

        Returns: dict[L, int], empty if target is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Outgoing neighbours of source and their edge weights.

        Returns: dict[L, int], empty if source is absent.
        """
        raise NotImplementedError


def empty() -> Graph:
    """Return a new empty graph using the default implementation."""
    from weighted_directed_graph import WeightedDirectedGraph

    return WeightedDirectedGraph()
