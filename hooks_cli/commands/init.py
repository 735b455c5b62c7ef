"""Init command."""

import shutil
from pathlib import Path

import click

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "starter"
PROJECT_LABELS = {"c": "CHooks", "js": "JSHooks"}


def create_project(project_type: str, project_dir: Path) -> Path:
    """Copy the starter template into a new project directory."""
    if project_type not in PROJECT_LABELS:
        raise ValueError('Invalid type. Use "c" for CHooks or "js" for JSHooks.')
    if project_dir.exists():
        raise FileExistsError(f"Directory {project_dir.name} already exists.")

    shutil.copytree(TEMPLATE_DIR, project_dir)
    return project_dir


@click.command()
@click.argument("project_type", metavar="TYPE")
@click.argument("folder_name")
def init(project_type: str, folder_name: str):
    """Initialize a new hooks project."""
    project_dir = Path.cwd() / folder_name
    try:
        create_project(project_type, project_dir)
    except (ValueError, FileExistsError) as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()
    except OSError as e:
        click.echo(f"❌ Failed to create project: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Created {PROJECT_LABELS[project_type]} project in {project_dir}")
