"""Compile command."""

import asyncio
from pathlib import Path
from typing import Optional

import click

from hooks_builder import RemoteCompiler, build_dir, build_file
from hooks_builder.errors import CompileFailed, HooksBuildError
from hooks_builder.models import BuildReport, UnitOutcome
from hooks_cli.config import get_compile_host, get_compile_timeout


def report_outcome(outcome: UnitOutcome) -> None:
    """Print one unit's result for the operator."""
    if outcome.artifact is not None:
        artifact = outcome.artifact
        click.echo(f"Hook Hash: {click.style(artifact.content_hash, fg='green')}")
        click.echo(f"Output: {artifact.path} {click.style(f'{artifact.size}b', fg='blue')}")
        return

    error = outcome.error
    if isinstance(error, CompileFailed):
        if error.diagnostics:
            click.echo(error.diagnostics, err=True)
        click.echo(f"❌ {outcome.unit_name}: {error.message or 'Build failed'}", err=True)
        if error.log_path is not None:
            click.echo(f"   Log: {error.log_path}", err=True)
    else:
        click.echo(f"❌ Error building {outcome.unit_name}: {error}", err=True)


def run_compile(in_path: Path, out_dir: Path, host: Optional[str] = None) -> BuildReport:
    """Validate paths, build, and return the report."""
    if out_dir.exists() and not out_dir.is_dir():
        raise NotADirectoryError(f"Output path must be a directory: {out_dir}")

    compiler = RemoteCompiler(host or get_compile_host(), timeout=get_compile_timeout())
    if in_path.is_dir():
        return asyncio.run(build_dir(in_path, out_dir, compiler))
    return asyncio.run(build_file(in_path, out_dir, compiler))


@click.command(name="compile")
@click.argument("in_path", type=click.Path(exists=True, path_type=Path))
@click.argument("out_dir", type=click.Path(path_type=Path), default=Path("build"))
@click.option("--host", help="Compile service URL (defaults to HOOKS_COMPILE_HOST)", default=None)
def compile_cmd(in_path: Path, out_dir: Path, host: Optional[str]):
    """Compile a .js/.ts file, or every source file in a directory."""
    try:
        report = run_compile(in_path, out_dir, host)
    except (HooksBuildError, NotADirectoryError) as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()

    for outcome in report.outcomes:
        report_outcome(outcome)

    if not report.outcomes:
        click.echo(f"No .js or .ts files found in {in_path}")

    if not report.succeeded:
        failed = len(report.failures)
        click.echo(f"❌ {failed} of {len(report.outcomes)} build(s) failed", err=True)
        raise click.Abort()
