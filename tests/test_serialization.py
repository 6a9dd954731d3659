"""
Tests for serialization and deserialization of configuration trees.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `kspver.serialization`.
"""

import pytest

from kspver.examples import build_example_part
from kspver.exceptions import MalformedTreeError
from kspver.serialization import (
    tree_from_dict,
    tree_from_json,
    tree_from_yaml,
    tree_to_dict,
    tree_to_json,
    tree_to_yaml,
)
from kspver.tree import ConfigNode


def test_json_roundtrip():
    part = build_example_part()
    before = tree_to_dict(part)
    restored = tree_from_json(tree_to_json(part))
    assert tree_to_dict(restored) == before


def test_yaml_roundtrip():
    part = build_example_part()
    before = tree_to_dict(part)
    restored = tree_from_yaml(tree_to_yaml(part))
    assert tree_to_dict(restored) == before


def test_yaml_keeps_comparator_symbols_readable():
    assert ">≈1.8" in tree_to_yaml(build_example_part())


def test_none_name_preserved():
    node = ConfigNode("ROOT")
    node.add_node(ConfigNode(None))
    restored = tree_from_yaml(tree_to_yaml(node))
    assert restored.nodes[0].name is None


def test_missing_sections_default_to_empty():
    node = tree_from_dict({"name": "PART"})
    assert node.values == []
    assert node.nodes == []


def test_non_mapping_rejected():
    with pytest.raises(MalformedTreeError):
        tree_from_dict(["PART"])


def test_non_string_node_name_rejected():
    with pytest.raises(MalformedTreeError, match="float"):
        tree_from_yaml("name: 1.10\n")


def test_non_string_value_name_rejected():
    with pytest.raises(MalformedTreeError):
        tree_from_yaml("name: PART\nvalues:\n- name: 42\n  value: x\n")


def test_null_value_loads_as_empty_string():
    node = tree_from_yaml("name: PART\nvalues:\n- name: tags\n  value: null\n")
    assert node.values[0].value == ""


def test_scalar_value_kept_as_text():
    node = tree_from_yaml("name: PART\nvalues:\n- name: amount\n  value: 90\n")
    assert node.values[0].value == "90"
