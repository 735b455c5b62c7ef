"""Tests for decoding the compiled module payload."""

import pytest

from hooks_builder.binary import decode_binary
from hooks_builder.errors import DecodeError


class TestDecodeBinary:
    def test_known_fixture(self):
        assert decode_binary("3q2+7w==") == bytes([0xDE, 0xAD, 0xBE, 0xEF])

    def test_line_wrapped_payload(self):
        assert decode_binary("3q2+\n7w==\n") == bytes([0xDE, 0xAD, 0xBE, 0xEF])

    def test_deterministic(self):
        assert decode_binary("AAECAwQ=") == decode_binary("AAECAwQ=") == b"\x00\x01\x02\x03\x04"

    @pytest.mark.parametrize("encoded", ["", "   ", "not base64!", "3q2+7w=", "@@@@"])
    def test_malformed(self, encoded: str):
        with pytest.raises(DecodeError):
            decode_binary(encoded)

    def test_non_text_rejected(self):
        with pytest.raises(DecodeError):
            decode_binary(b"3q2+7w==")
