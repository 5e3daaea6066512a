"""Tests for key normalization."""

import pytest

from cowtrie import InvalidKeyError, to_key


class TestToKey:
    def test_bytes_passthrough(self):
        raw = b"abc"
        assert to_key(raw) is raw

    def test_str_encoded_utf8(self):
        assert to_key("é") == b"\xc3\xa9"

    def test_bytearray_and_memoryview(self):
        assert to_key(bytearray(b"ab")) == b"ab"
        assert to_key(memoryview(b"ab")) == b"ab"

    def test_empty(self):
        assert to_key("") == b""

    @pytest.mark.parametrize("bad", [1, None, ("a",), 2.5])
    def test_rejects_non_bytes(self, bad):
        with pytest.raises(InvalidKeyError) as exc:
            to_key(bad)
        assert exc.value.key is bad

    def test_invalid_key_is_type_error(self):
        with pytest.raises(TypeError):
            to_key(42)
