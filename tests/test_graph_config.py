from pathlib import Path

import pytest

from graph import InvalidWeightError
from graph_config import GraphConfig, NegativeWeightPolicy, config_from_mapping, load_config
from weighted_directed_graph import WeightedDirectedGraph


def test_load_config_reads_policy_and_checks(tmp_path: Path):
    cfg = tmp_path / "graph.yml"
    cfg.write_text(
        """
negative_weight_policy: REJECT
check_invariants: true
"""
    )

    config = load_config(cfg)
    assert config == GraphConfig(
        negative_weight_policy=NegativeWeightPolicy.REJECT,
        check_invariants=True,
    )

    g = WeightedDirectedGraph(config)
    with pytest.raises(InvalidWeightError):
        g.set("A", "B", -1)


def test_load_config_empty_file_uses_defaults(tmp_path: Path):
    cfg = tmp_path / "empty.yml"
    cfg.write_text("")
    assert load_config(cfg) == GraphConfig()


def test_load_config_rejects_non_mapping(tmp_path: Path):
    cfg = tmp_path / "list.yml"
    cfg.write_text("- ignore\n- reject\n")
    with pytest.raises(ValueError):
        load_config(cfg)


def test_unknown_policy_raises():
    with pytest.raises(ValueError, match="negative weight policy"):
        config_from_mapping({"negative_weight_policy": "clamp"})


def test_unknown_key_raises():
    with pytest.raises(ValueError, match="Unknown graph config keys"):
        config_from_mapping({"negative_weights": "reject"})


def test_partial_mapping_keeps_defaults():
    config = config_from_mapping({"check_invariants": True})
    assert config.negative_weight_policy is NegativeWeightPolicy.IGNORE
    assert config.check_invariants


@pytest.mark.parametrize("value", ["false", "no", 1, 0])
def test_check_invariants_must_be_boolean(value):
    with pytest.raises(ValueError, match="check_invariants"):
        config_from_mapping({"check_invariants": value})


def test_quoted_boolean_in_yaml_is_rejected(tmp_path: Path):
    cfg = tmp_path / "graph.yml"
    cfg.write_text('check_invariants: "false"\n')
    with pytest.raises(ValueError):
        load_config(cfg)
