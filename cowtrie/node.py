"""Immutable trie nodes.

A node is one position in the key space. ``TrieNode`` is a plain branch;
``ValueNode`` also terminates a key and carries a payload. Nodes are never
modified once built: every helper below returns a new node, and the
children mapping is a private copy behind a read-only proxy. Nodes compare
and hash by identity so that versions can be checked for shared subtrees.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

Children = Mapping[int, "TrieNode"]

EMPTY_CHILDREN: Children = MappingProxyType({})


def _freeze(children: Children) -> Children:
    """Read-only view of ``children``.

    A plain mapping is copied. A ``MappingProxyType`` is taken as already
    frozen and shared as-is, which is how nodes pass their own children on.
    """
    if not children:
        return EMPTY_CHILDREN
    if isinstance(children, MappingProxyType):
        return children
    return MappingProxyType(dict(children))


@dataclass(frozen=True, eq=False)
class TrieNode:
    """A branch node: edges to children, no stored value."""

    children: Children = field(default_factory=lambda: EMPTY_CHILDREN)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _freeze(self.children))

    @property
    def has_value(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        """True for a value-less node with no children (prunable)."""
        return not self.has_value and not self.children

    def holds(self, value_type: type) -> bool:
        """Checked downcast: does this node store a value of exactly ``value_type``?"""
        return False

    def with_children(self, children: Children) -> "TrieNode":
        """Copy of this node (same variant and payload) over ``children``."""
        return TrieNode(children)

    def with_child(self, label: int, child: "TrieNode | None") -> "TrieNode":
        """Copy of this node with the edge ``label`` replaced.

        ``child=None`` drops the edge.
        """
        children = dict(self.children)
        if child is None:
            children.pop(label, None)
        else:
            children[label] = child
        return self.with_children(MappingProxyType(children))

    def with_value(self, value: Any, value_type: type) -> "ValueNode":
        return ValueNode(self.children, value, value_type)

    def without_value(self) -> "TrieNode":
        return TrieNode(self.children)


@dataclass(frozen=True, eq=False)
class ValueNode(TrieNode):
    """A node that terminates a key.

    ``value`` is held by reference and never copied, so objects that refuse
    to be copied are stored as-is. ``value_type`` is the type recorded at
    put time; lookups that ask for a type compare against it.
    """

    value: Any = None
    value_type: type = field(default=object)

    @property
    def has_value(self) -> bool:
        return True

    def holds(self, value_type: type) -> bool:
        return self.value_type is value_type

    def with_children(self, children: Children) -> "ValueNode":
        return ValueNode(children, self.value, self.value_type)
