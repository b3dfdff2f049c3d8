"""`quasar clean`: remove build artifacts from the project."""

import shutil
from pathlib import Path

import click

from quasar_cli.output import log

BUILD_DIRS = (".quasar", "dist")


@click.command()
def clean():
    """Clean all build artifacts."""
    project_dir = Path.cwd()
    for dirname in BUILD_DIRS:
        target = project_dir / dirname
        if target.is_dir():
            shutil.rmtree(target)
            log(f"Removed {dirname}/")
    log("Cleaned build artifacts")
