"""
Serialization helpers for configuration trees (ConfigNode, ConfigValue).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Order of values and child nodes is preserved; None names stay None.
Names must be strings or null; a null value loads as the empty string.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from kspver.exceptions import MalformedTreeError
from kspver.tree import ConfigNode, ConfigValue


def _name_from_dict(d: Dict[str, Any], kind: str) -> str | None:
    name = d.get("name")
    if name is not None and not isinstance(name, str):
        raise MalformedTreeError(f"{kind} name must be a string or null, got {type(name).__name__}: {name!r}")
    return name


def value_to_dict(v: ConfigValue) -> Dict[str, Any]:
    return {"name": v.name, "value": v.value}


def value_from_dict(d: Dict[str, Any]) -> ConfigValue:
    if not isinstance(d, dict):
        raise MalformedTreeError(f"Expected a mapping for a config value, got {type(d).__name__}")
    value = d.get("value")
    return ConfigValue(name=_name_from_dict(d, "Value"), value="" if value is None else str(value))


def tree_to_dict(node: ConfigNode) -> Dict[str, Any]:
    return {
        "name": node.name,
        "values": [value_to_dict(v) for v in node.values],
        "nodes": [tree_to_dict(n) for n in node.nodes],
    }


def tree_from_dict(d: Dict[str, Any]) -> ConfigNode:
    if not isinstance(d, dict):
        raise MalformedTreeError(f"Expected a mapping for a config node, got {type(d).__name__}")
    node = ConfigNode(name=_name_from_dict(d, "Node"))
    node.values = [value_from_dict(v) for v in d.get("values") or []]
    node.nodes = [tree_from_dict(n) for n in d.get("nodes") or []]
    return node


def tree_to_json(node: ConfigNode) -> str:
    return json.dumps(tree_to_dict(node), ensure_ascii=False, indent=2)


def tree_from_json(s: str) -> ConfigNode:
    d = json.loads(s)
    return tree_from_dict(d)


def tree_to_yaml(node: ConfigNode) -> str:
    return yaml.safe_dump(tree_to_dict(node), allow_unicode=True, sort_keys=False)


def tree_from_yaml(s: str) -> ConfigNode:
    d = yaml.safe_load(s)
    return tree_from_dict(d)
