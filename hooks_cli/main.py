"""CLI entrypoint."""

import click
from loguru import logger

from .commands.compile import compile_cmd
from .commands.debug import debug
from .commands.init import init


def _stderr_sink(message) -> None:
    click.echo(message, err=True, nl=False)


@click.group()
@click.version_option(version="1.0.0", prog_name="hooks-cli")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Hooks CLI - scaffold, compile and debug hook projects."""
    logger.remove()
    logger.add(_stderr_sink, level="DEBUG" if verbose else "WARNING")


cli.add_command(init)
cli.add_command(compile_cmd)
cli.add_command(debug)


if __name__ == "__main__":
    cli()
