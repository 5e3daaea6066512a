"""Trie: an immutable version handle over a copy-on-write node tree."""

from dataclasses import dataclass
from types import GenericAlias
from typing import Any, Iterable

from .errors import InvalidKeyError, ValueTypeError
from .keys import KeyLike, to_key
from .logging import get_logger
from .node import TrieNode, ValueNode

logger = get_logger("trie")


def _descend(root: TrieNode | None, key: bytes) -> list[TrieNode | None]:
    """Existing node (or None) at each position along ``key``.

    ``path[0]`` is the root and ``path[i]`` the node reached after
    ``key[:i]``; positions past the first missing edge are None.
    """
    path: list[TrieNode | None] = [root]
    node = root
    for label in key:
        if node is not None:
            node = node.children.get(label)
        path.append(node)
    return path


def _relink(
    path: list[TrieNode | None], key: bytes, child: TrieNode | None
) -> TrieNode | None:
    """Rebuild ancestors bottom-up, splicing ``child`` in at ``key``.

    Every ancestor on the path is copied with one edge replaced; everything
    off the path is shared. A copy left with no value and no children is
    dropped from its own parent in turn. Returns the new root.
    """
    pruned = 0
    for depth in range(len(key) - 1, -1, -1):
        parent = path[depth]
        if parent is None:
            parent = TrieNode()
        child = parent.with_child(key[depth], child)
        if child.is_empty:
            child = None
            pruned += 1
    if pruned:
        logger.debug("pruned %d empty node(s) removing %r", pruned, key)
    return child


@dataclass(frozen=True, eq=False)
class Trie:
    """A persistent trie version.

    Holds exactly one reference to a root node, or None for the empty trie.
    ``put`` and ``remove`` return new versions and never touch this one, so
    a version can be read from any number of threads while others derive
    new versions from it.
    """

    root: TrieNode | None = None

    @classmethod
    def empty(cls) -> "Trie":
        """The canonical empty trie."""
        return cls()

    @classmethod
    def from_items(cls, items: Iterable[tuple[KeyLike, Any]]) -> "Trie":
        """Build a trie by putting each ``(key, value)`` pair in order."""
        trie = cls()
        for key, value in items:
            trie = trie.put(key, value)
        return trie

    # -- Read operations --

    def node_at(self, key: KeyLike) -> TrieNode | None:
        """The node at ``key``'s position, value-bearing or not."""
        node = self.root
        for label in to_key(key):
            if node is None:
                return None
            node = node.children.get(label)
        return node

    def get(
        self,
        key: KeyLike,
        default: Any = None,
        *,
        value_type: type | None = None,
    ) -> Any:
        """Get the value stored at ``key``, or ``default`` if there is none.

        With ``value_type``, the value is only returned if it was stored as
        exactly that type; any other stored type also yields ``default``.
        The stored object itself is returned, not a copy.
        """
        node = self.node_at(key)
        if node is None or not node.has_value:
            return default
        if value_type is not None and not node.holds(value_type):
            return default
        return node.value

    def __getitem__(self, key: KeyLike) -> Any:
        node = self.node_at(key)
        if node is None or not node.has_value:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: object) -> bool:
        try:
            node = self.node_at(key)  # type: ignore[arg-type]
        except InvalidKeyError:
            return False
        return node is not None and node.has_value

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        if self.root is None:
            return "Trie(empty)"
        return f"Trie(root=0x{id(self.root):x})"

    # -- Write operations --

    def put(
        self, key: KeyLike, value: Any, *, value_type: type | None = None
    ) -> "Trie":
        """New version with ``value`` stored at ``key``.

        Overwrites any existing value there and keeps the node's children.
        ``value_type`` is recorded for typed lookups and defaults to
        ``type(value)``.
        """
        if value_type is None:
            value_type = type(value)
        elif not isinstance(value_type, type) or isinstance(value_type, GenericAlias):
            raise ValueTypeError(value_type)
        elif not isinstance(value, value_type):
            raise ValueTypeError(value_type, type(value))

        raw = to_key(key)
        path = _descend(self.root, raw)
        terminal = path[-1]
        if terminal is None:
            terminal = TrieNode()
        leaf = terminal.with_value(value, value_type)
        return Trie(_relink(path, raw, leaf))

    def remove(self, key: KeyLike) -> "Trie":
        """New version with no value at ``key``.

        A terminal node with children is demoted to a branch; one without is
        dropped along with any ancestors left empty. Removing an absent key
        returns a new handle over the same root.
        """
        raw = to_key(key)
        path = _descend(self.root, raw)
        terminal = path[-1]
        if terminal is None or not terminal.has_value:
            logger.debug("remove %r: no value stored", raw)
            return Trie(self.root)

        replacement: TrieNode | None = terminal.without_value()
        if replacement.is_empty:
            replacement = None
        return Trie(_relink(path, raw, replacement))
