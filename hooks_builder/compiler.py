"""Compile service client."""

from typing import Optional, Protocol, Sequence

import requests
from loguru import logger

from .codec import decode_result, encode_request
from .errors import ConfigError, TransportError
from .models import BuildResult, BuildUnit

BUILD_ENDPOINT = "/api/build/js"


class Compiler(Protocol):
    """Anything that turns build units into a BuildResult."""

    def compile(self, units: Sequence[BuildUnit]) -> BuildResult: ...


class RemoteCompiler:
    """Compiler backed by the remote compile service over HTTP."""

    def __init__(self, host: Optional[str], timeout: Optional[float] = None):
        if not host:
            raise ConfigError("HOOKS_COMPILE_HOST is not set. Add it to your environment or .env file.")
        self.host = host.rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.host}{BUILD_ENDPOINT}"

    def compile(self, units: Sequence[BuildUnit]) -> BuildResult:
        body = encode_request(units)
        names = ", ".join(unit.name for unit in units)
        logger.debug(f"POST {self.url} [{names}]")

        try:
            response = requests.post(
                self.url,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise TransportError(f"Compile service returned {e.response.status_code}: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Failed to connect to compile service at {self.host}") from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Compile service timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"API request failed: {e}") from e

        return decode_result(response.content)
