"""`quasar info`: print environment and package versions."""

import json
import platform
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

PACKAGE_NAME = "quasar-cli"
DEPENDENCIES = ("click", "pydantic", "PyYAML")
QUASAR_PACKAGE_JSON = Path("node_modules/quasar/package.json")


def package_version(name: str = PACKAGE_NAME) -> str | None:
    try:
        return version(name)
    except PackageNotFoundError:
        return None


def quasar_version(project_dir: Path) -> str | None:
    """Version of the framework installed in the project, if any."""
    package_json = project_dir / QUASAR_PACKAGE_JSON
    if not package_json.is_file():
        return None
    try:
        return json.loads(package_json.read_text(encoding="utf-8")).get("version")
    except (OSError, json.JSONDecodeError, AttributeError):
        return None


@click.command()
def info():
    """Display info about your machine and your app."""
    rows = [
        ("Operating System", f"{platform.system()}({platform.release()}) - {platform.machine()}"),
        ("Python", platform.python_version()),
        (PACKAGE_NAME, package_version()),
    ]
    rows.extend((dep, package_version(dep)) for dep in DEPENDENCIES)
    rows.append(("quasar", quasar_version(Path.cwd())))

    width = max(len(label) for label, _ in rows) + 2
    click.echo()
    for label, value in rows:
        shown = click.style(value, fg="green") if value else click.style("Not installed", fg="bright_black")
        click.echo(f"{label.ljust(width)}{shown}")
    click.echo()
