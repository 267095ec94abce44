"""
Concrete weighted directed graph.

Implements the Graph interface with an adjacency representation: a
label -> Vertex mapping where every Vertex owns its outgoing edges.
"""

import logging
from typing import Dict, Optional, Set

from graph import Graph, InvalidWeightError, L, check_weight_type
from graph_config import GraphConfig, NegativeWeightPolicy
from vertex import Vertex

logger = logging.getLogger(__name__)


class WeightedDirectedGraph(Graph[L]):
    """
    Directed graph with positive integer edge weights.

    Keying vertices by label makes duplicate labels impossible. Removing a
    vertex also clears every edge that points at it, so no edge ever names
    a missing vertex once a public call returns.

    Not thread-safe: share one instance across threads only under an
    external lock.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self._config = config or GraphConfig()
        self._vertices: Dict[L, Vertex[L]] = {}

    @property
    def config(self) -> GraphConfig:
        return self._config

    def _ensure_vertex(self, label: L) -> Vertex[L]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
            logger.debug("Added vertex %r", label)
        return vertex

    def _after_mutation(self) -> None:
        if self._config.check_invariants:
            self.check_rep()

    # --- Mutation API --------------------------------------------------------

    def add(self, label: L) -> bool:
        if label in self._vertices:
            return False
        self._ensure_vertex(label)
        self._after_mutation()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_weight_type(weight)
        if weight < 0:
            if self._config.negative_weight_policy == NegativeWeightPolicy.REJECT:
                raise InvalidWeightError(
                    f"Edge {source!r} -> {target!r} has negative weight {weight}."
                )
            logger.warning(
                "Ignoring negative weight %d for edge %r -> %r", weight, source, target
            )
            return 0

        if weight == 0:
            vertex = self._vertices.get(source)
            if vertex is None or not vertex.has_target(target):
                return 0
            previous = vertex.set_target(target, 0)
        else:
            vertex = self._ensure_vertex(source)
            self._ensure_vertex(target)
            previous = vertex.set_target(target, weight)

        self._after_mutation()
        return previous

    def remove(self, label: L) -> bool:
        if label not in self._vertices:
            return False

        removed = self._vertices.pop(label)
        cleared = 0
        for vertex in self._vertices.values():
            if vertex.has_target(label):
                vertex.set_target(label, 0)
                cleared += 1
        logger.debug(
            "Removed vertex %r with %d outgoing and %d incoming edges",
            label,
            len(removed),
            cleared,
        )

        self._after_mutation()
        return True

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {
            label: vertex.weight(target)
            for label, vertex in self._vertices.items()
            if vertex.has_target(target)
        }

    def targets(self, source: L) -> Dict[L, int]:
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.targets()

    # --- Diagnostics ---------------------------------------------------------

    def edge_count(self) -> int:
        return sum(len(vertex) for vertex in self._vertices.values())

    def check_rep(self) -> None:
        """
        Verify the representation invariants.

        Raises AssertionError if a vertex is filed under the wrong label, a
        vertex stores a non-positive weight, or an edge targets a label that
        is not a vertex.
        """
        for label, vertex in self._vertices.items():
            if vertex.label != label:
                raise AssertionError(f"Vertex {vertex.label!r} filed under {label!r}")
            vertex.check_rep()
            for target in vertex.targets():
                if target not in self._vertices:
                    raise AssertionError(f"Edge {label!r} -> {target!r} targets a missing vertex")

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        return f"Graph contains {len(self._vertices)} vertices and {self.edge_count()} edges"
