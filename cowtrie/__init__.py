"""cowtrie: Persistent copy-on-write trie."""

from .errors import InvalidKeyError, ValueTypeError
from .keys import KeyLike, to_key
from .node import TrieNode, ValueNode
from .trie import Trie

__all__ = [
    "InvalidKeyError",
    "KeyLike",
    "Trie",
    "TrieNode",
    "ValueNode",
    "ValueTypeError",
    "to_key",
]
