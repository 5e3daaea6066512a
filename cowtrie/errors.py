"""cowtrie error types."""


class InvalidKeyError(TypeError):
    """Raised when a key is not a str or bytes-like object.

    Keys are byte sequences. ``str`` keys are encoded as UTF-8 first;
    anything else (ints, tuples, None) cannot address a trie position.
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(
            f"Trie keys must be str or bytes-like, got {type(key).__name__}"
        )


class ValueTypeError(TypeError):
    """Raised when ``put`` is given an unusable or mismatched ``value_type``.

    Attributes:
        value_type: The type the caller asked to record.
        actual_type: The type of the value that was supplied, or None when
            ``value_type`` itself is not a plain class (e.g. ``list[int]``).
    """

    def __init__(self, value_type: object, actual_type: type | None = None) -> None:
        self.value_type = value_type
        self.actual_type = actual_type
        if actual_type is None:
            message = f"value_type must be a class, got {value_type!r}"
        else:
            message = (
                f"Value of type {actual_type.__name__} is not a "
                f"{getattr(value_type, '__name__', value_type)!s}"
            )
        super().__init__(message)
