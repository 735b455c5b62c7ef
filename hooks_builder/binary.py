"""Decoding of the compiled module returned by the compile service.

The service ships the module as base64 text. Decoding is strict: any
character outside the base64 alphabet or bad padding is rejected, so a
truncated or mangled payload never turns into a half-written artifact.
"""

import base64
import binascii

from .errors import DecodeError


def decode_binary(encoded: str) -> bytes:
    """Decode the service's textual encoding into raw module bytes."""
    if not isinstance(encoded, str):
        raise DecodeError(f"Expected encoded output as text, got {type(encoded).__name__}")

    compact = "".join(encoded.split())
    if not compact:
        raise DecodeError("Encoded output is empty")

    try:
        data = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Malformed encoded output: {e}") from e

    if not data:
        raise DecodeError("Encoded output decoded to zero bytes")
    return data
