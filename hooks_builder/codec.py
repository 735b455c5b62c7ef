"""Build request codec - contract between the CLI and the compile service."""

import json
from typing import Sequence

from pydantic import ValidationError

from .errors import ProtocolError
from .models import BuildRequest, BuildResult, BuildUnit


def encode_request(units: Sequence[BuildUnit]) -> bytes:
    """Serialize units into a compile request body.

    ``compress`` and ``strip`` are always enabled and the output format is
    fixed; unit order is preserved.
    """
    request = BuildRequest(units=list(units))
    return request.model_dump_json(by_alias=True).encode("utf-8")


def decode_result(payload: bytes) -> BuildResult:
    """Parse a compile service response.

    Unknown fields are ignored. A missing/non-boolean ``success`` flag, a
    malformed ``tasks`` list, or a successful result without output raises
    ProtocolError.
    """
    try:
        raw = json.loads(payload)
    except (ValueError, TypeError) as e:
        raise ProtocolError(f"Response is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ProtocolError(f"Response must be a JSON object, got {type(raw).__name__}")
    if raw.get("tasks") is None:
        raw.pop("tasks", None)
    if raw.get("success") is not True:
        raw.pop("output", None)

    try:
        result = BuildResult.model_validate(raw)
    except ValidationError as e:
        raise ProtocolError(f"Invalid response from compile service: {e}") from e

    if result.succeeded and not result.encoded_output:
        raise ProtocolError("Compile service reported success without output")
    return result
