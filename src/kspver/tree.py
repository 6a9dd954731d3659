"""
Configuration Tree Model

Defines the mutable tree that pruning operates on:
    - ConfigValue (a named key/value entry)
    - ConfigNode (a named node owning ordered values and child nodes)
    - NodeStack (an immutable ancestor path used for reporting)

ARCHITECTURAL RULE:
    Nodes are identified within their parent by position, not by name.
    Sibling names may collide and are freely rewritten during pruning.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class ConfigValue:
    """
    A single key/value entry of a node.

    Properties:
        name: Key, possibly carrying an annotation (e.g. "mass:KSP_VERSION[1.8]")
        value: Raw value text
    """

    name: Optional[str]
    value: str = ""


@dataclass
class ConfigNode:
    """
    A node of the configuration tree.

    Properties:
        name: Node name, possibly annotated; may be None
        values: Ordered key/value entries
        nodes: Ordered child nodes

    IMPORTANT:
        The tree is owned by the caller. Pruning mutates it in place.
    """

    name: Optional[str]
    values: List[ConfigValue] = field(default_factory=list)
    nodes: List["ConfigNode"] = field(default_factory=list)

    def add_value(self, name: Optional[str], value: str = "") -> ConfigValue:
        """Append a value and return it."""
        entry = ConfigValue(name, value)
        self.values.append(entry)
        return entry

    def add_node(self, node_or_name) -> "ConfigNode":
        """Append a child node (or a new node with the given name) and return it."""
        node = node_or_name if isinstance(node_or_name, ConfigNode) else ConfigNode(node_or_name)
        self.nodes.append(node)
        return node

    def get_value(self, name: str) -> Optional[str]:
        """
        Retrieve the first value with the given name.

        Returns:
            Value text or None if not found
        """
        for entry in self.values:
            if entry.name == name:
                return entry.value
        return None

    def get_node(self, name: str) -> Optional["ConfigNode"]:
        """Retrieve the first child node with the given name, or None."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_nodes(self, name: str) -> List["ConfigNode"]:
        """Retrieve all child nodes with the given name, in order."""
        return [node for node in self.nodes if node.name == name]


@dataclass(frozen=True, eq=False)
class NodeStack:
    """
    Immutable stack of nodes from the root down to the current node.

    push() returns a new stack sharing its tail with the old one, so
    sibling traversals never see each other's entries.

    Properties:
        value: The node on top of the stack
        parent: The rest of the stack, or None at the root
    """

    value: ConfigNode
    parent: Optional["NodeStack"] = None

    def push(self, node: ConfigNode) -> "NodeStack":
        return NodeStack(node, self)

    @property
    def depth(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[ConfigNode]:
        """Yield nodes from the top of the stack down to the root."""
        current = self
        while current is not None:
            yield current.value
            current = current.parent

    def get_path(self) -> str:
        """Node names from the root down, joined with "/"."""
        names = [node.name or "" for node in self]
        return "/".join(reversed(names))
