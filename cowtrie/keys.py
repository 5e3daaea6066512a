"""Key normalization: every trie key is a byte sequence."""

from .errors import InvalidKeyError

KeyLike = str | bytes | bytearray | memoryview


def to_key(key: KeyLike) -> bytes:
    """Return ``key`` as immutable bytes.

    ``str`` keys are UTF-8 encoded, so ``"é"`` and ``"é".encode()`` address
    the same slot. Each byte labels one edge of the trie.
    """
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    raise InvalidKeyError(key)
