"""Debug command."""

import asyncio
from typing import Optional

import click

from hooks_builder.errors import ConfigError
from hooks_cli.config import get_debug_host
from hooks_cli.debug import DebugSession, DebugStream


@click.command()
@click.argument("account")
@click.option("--host", help="Debug stream URL (defaults to HOOKS_DEBUG_HOST)", default=None)
def debug(account: str, host: Optional[str]):
    """Stream hook debug traces for ACCOUNT."""
    try:
        session = DebugSession(account=account, host=host or get_debug_host())
    except ConfigError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()

    try:
        asyncio.run(DebugStream(session).run())
    except KeyboardInterrupt:
        click.echo("Debug stream stopped.")
