"""Live debug stream for a hook account."""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional

import click
import websockets
from loguru import logger

# Close code used when the stream is closed because the account changed
ACCOUNT_SWITCH_CLOSE_CODE = 4999
ABNORMAL_CLOSE_CODE = 1006
RECONNECT_DELAY = 1.0


@dataclass(frozen=True)
class DebugSession:
    """Account whose hook traces are streamed."""

    account: str
    host: str

    @property
    def url(self) -> str:
        return f"{self.host.rstrip('/')}/{self.account}"


def _close_code(exc: websockets.ConnectionClosed) -> int:
    if exc.rcvd is not None:
        return exc.rcvd.code
    return ABNORMAL_CLOSE_CODE


class DebugStream:
    """Reconnecting websocket listener bound to one DebugSession."""

    def __init__(
        self,
        session: DebugSession,
        connect: Callable[[str], Any] = websockets.connect,
        echo: Callable[..., None] = click.echo,
        reconnect_delay: float = RECONNECT_DELAY,
    ):
        self.session = session
        self._connect = connect
        self._echo = echo
        self.reconnect_delay = reconnect_delay

    def on_open(self) -> None:
        self._echo(f"Debug stream opened for account {self.session.account}")

    def on_message(self, data: Any) -> None:
        # Pings answer with the bare account address
        if data == self.session.account:
            return
        self._echo(data)

    def on_close(self, code: Optional[int]) -> None:
        if code != ACCOUNT_SWITCH_CLOSE_CODE:
            self._echo(f"Connection was closed. [code: {code}]", err=True)

    def on_error(self, error: Exception) -> None:
        logger.debug(f"Debug stream error: {error!r}")
        self._echo("Something went wrong! Check your connection and try again.", err=True)

    async def listen_once(self) -> None:
        """Hold one connection open until it closes or fails."""
        try:
            async with self._connect(self.session.url) as ws:
                self.on_open()
                async for message in ws:
                    self.on_message(message)
                code = ws.close_code
        except websockets.ConnectionClosed as e:
            self.on_close(_close_code(e))
        except (OSError, websockets.InvalidHandshake, websockets.InvalidURI, asyncio.TimeoutError) as e:
            self.on_error(e)
        else:
            self.on_close(code)

    async def run(self, max_attempts: Optional[int] = None) -> None:
        """Listen, reconnecting after each drop until ``max_attempts`` is spent."""
        attempt = 0
        while max_attempts is None or attempt < max_attempts:
            attempt += 1
            logger.debug(f"Connecting to {self.session.url} (attempt {attempt})")
            await self.listen_once()
            if max_attempts is not None and attempt >= max_attempts:
                break
            await asyncio.sleep(self.reconnect_delay)
