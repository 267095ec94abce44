"""
Vertex of a weighted directed graph.

Each vertex owns the map of its outgoing edges: target label -> weight.
Only positive weights are ever stored; a zero weight means "no edge".
"""

import logging
from typing import Dict, Generic

from graph import InvalidWeightError, L, check_weight_type

logger = logging.getLogger(__name__)


class Vertex(Generic[L]):
    """
    A labelled vertex and its outgoing edges.

    Internal to WeightedDirectedGraph; the graph never hands one out.
    """

    def __init__(self, label: L) -> None:
        self._label = label
        self._targets: Dict[L, int] = {}

    @property
    def label(self) -> L:
        return self._label

    def set_target(self, target: L, weight: int) -> int:
        """
        Add, replace, or (with weight 0) remove the edge to target.

        Returns the previous weight, 0 if there was no edge.
        """
        check_weight_type(weight)
        if weight < 0:
            raise InvalidWeightError(
                f"Edge {self._label!r} -> {target!r} has negative weight {weight}."
            )

        previous = self._targets.get(target, 0)
        if weight == 0:
            if previous:
                del self._targets[target]
                logger.debug("Cleared edge %r -> %r (was %d)", self._label, target, previous)
        else:
            self._targets[target] = weight
            logger.debug("Set edge %r -> %r to %d", self._label, target, weight)
        return previous

    def has_target(self, target: L) -> bool:
        return target in self._targets

    def weight(self, target: L) -> int:
        """
        Weight of the edge to target.

        Raises KeyError if there is no such edge; check has_target first.
        """
        try:
            return self._targets[target]
        except KeyError:
            raise KeyError(f"Vertex {self._label!r} has no edge to {target!r}") from None

    def targets(self) -> Dict[L, int]:
        return dict(self._targets)  # defensive copy

    @property
    def target_count(self) -> int:
        return len(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def check_rep(self) -> None:
        """Raise AssertionError if a stored weight is not a positive int."""
        for target, weight in self._targets.items():
            if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                raise AssertionError(
                    f"Vertex {self._label!r} stores invalid weight {weight!r} to {target!r}"
                )

    def __str__(self) -> str:
        return f"Vertex {self._label} has {len(self._targets)} targets"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, targets={self._targets!r})"
