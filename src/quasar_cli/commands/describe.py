"""`quasar describe`: print the API of a component, directive or plugin."""

from pathlib import Path

import click

from quasar_cli.api.base import PARTS, ApiDescriptor, ApiPartsSelection, RenderOptions
from quasar_cli.api.filter import filter_api_list
from quasar_cli.api.loader import ApiError, get_api, get_api_list
from quasar_cli.config import ConfigError, DescribeConfig, load_config
from quasar_cli.output import fatal, log
from quasar_cli.render.describe import render_api

PART_FLAGS = (
    ("props", "p", "Show only properties"),
    ("slots", "s", "Show only slots"),
    ("methods", "m", "Show only methods"),
    ("events", "e", "Show only events"),
    ("value", "v", "Show only value"),
    ("arg", "a", "Show only arg"),
    ("modifiers", "M", "Show only modifiers"),
    ("injection", "i", "Show only injection"),
    ("quasar", "q", "Show only quasar.config file configuration"),
    ("docs", "d", "Open the documentation page in a browser"),
)


def _part_options(func):
    for part, short, help_text in reversed(PART_FLAGS):
        func = click.option(f"-{short}", f"--{part}", is_flag=True, help=help_text)(func)
    return func


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("item", required=False)
@click.argument("positional_filter", required=False, metavar="[FILTER]")
@_part_options
@click.option("-f", "--filter", "filter_", default=None, help="Only show entries whose name contains this text.")
@click.option(
    "--api-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="QUASAR_API_DIR",
    default=None,
    help="Directory holding the framework's API JSON files.",
)
@click.pass_context
def describe(ctx, item: str | None, positional_filter: str | None, filter_: str | None, api_dir: Path | None, **flags: bool):
    """Describe a component, directive or plugin API.

    ITEM is the name of the API entry (e.g. QBtn, TouchPan, Notify),
    or "list" to show every entry, optionally filtered.

    \b
    Examples:
        quasar describe QIcon
        quasar describe QIcon icon
        quasar describe QIcon -p -f icon
        quasar describe TouchPan --modifiers
        quasar describe list storage
    """
    if item is None:
        click.echo(ctx.get_help())
        return

    needle = filter_ if filter_ is not None else positional_filter

    try:
        config = load_config(Path.cwd(), api_dir=api_dir)
    except ConfigError as e:
        fatal("Could not load the project configuration", e)

    if item == "list":
        _list_apis(config, needle)
        return

    try:
        api, supplier = get_api(item, config)
    except ApiError as e:
        fatal(f'Could not retrieve the API for "{item}"', e)

    parts = ApiPartsSelection.from_flags(**{part: flags[part] for part in PARTS})
    if parts.docs:
        open_docs(api)
        return

    options = RenderOptions(parts=parts, filter=needle)
    click.echo(render_api(api, options, name=item, supplier=supplier))


def open_docs(api: ApiDescriptor) -> None:
    """Open the docs page for `api` in the default browser, without waiting."""
    docs_url = api.meta.docs_url if api.meta else None
    if not docs_url:
        click.echo("\n  Docs URL missing in the API definition. Please report this issue.\n")
        return
    log(f"Opening {docs_url}")
    click.launch(docs_url)


def _list_apis(config: DescribeConfig, needle: str | None) -> None:
    try:
        names = get_api_list(config)
    except ApiError as e:
        fatal("Could not retrieve the list of APIs", e)

    names = filter_api_list(names, needle)
    if needle and not names:
        click.echo(f'\n  Nothing matches "{needle}"\n')
        return

    click.echo()
    for name in names:
        click.echo(f" ● {name}")
    click.echo()
