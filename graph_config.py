"""
Configuration for WeightedDirectedGraph.

Settings live in a small YAML file, e.g.:

    negative_weight_policy: reject
    check_invariants: true

Both keys are optional.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class NegativeWeightPolicy(Enum):
    """
    What set() does with a negative weight.

    IGNORE: leave the graph untouched and return 0.
    REJECT: raise InvalidWeightError, leaving the graph untouched.
    """

    IGNORE = "ignore"
    REJECT = "reject"


@dataclass(frozen=True)
class GraphConfig:
    negative_weight_policy: NegativeWeightPolicy = NegativeWeightPolicy.IGNORE
    check_invariants: bool = False


_KNOWN_KEYS = {"negative_weight_policy", "check_invariants"}


def config_from_mapping(data: Mapping[str, Any]) -> GraphConfig:
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown graph config keys: {sorted(unknown)}")

    policy = NegativeWeightPolicy.IGNORE
    if "negative_weight_policy" in data:
        raw = str(data["negative_weight_policy"]).strip().lower()
        try:
            policy = NegativeWeightPolicy(raw)
        except ValueError:
            raise ValueError(f"Unknown negative weight policy: {raw!r}") from None

    check_invariants = data.get("check_invariants", False)
    if not isinstance(check_invariants, bool):
        raise ValueError(f"check_invariants must be true or false, got {check_invariants!r}")

    return GraphConfig(
        negative_weight_policy=policy,
        check_invariants=check_invariants,
    )


def load_config(path: Path) -> GraphConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Graph config in {path} must be a mapping.")
    return config_from_mapping(data)
