"""`quasar run`: execute a command supplied by an installed extension."""

import click

from quasar_cli.commands.delegate import EXTENSION_GROUP, PASSTHROUGH, find_entry_point, run_entry_point
from quasar_cli.output import fatal


@click.command(context_settings={**PASSTHROUGH, "allow_interspersed_args": False})
@click.option("--fallback-to-help", is_flag=True, hidden=True)
@click.argument("ext_command", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx, fallback_to_help: bool, ext_command: str | None, args: tuple[str, ...]):
    """Run a command provided by an installed extension."""
    if ext_command is None:
        fatal("Please specify the extension command to run")

    ep = find_entry_point(EXTENSION_GROUP, ext_command)
    if ep is None:
        if fallback_to_help and ctx.parent is not None:
            click.echo(ctx.parent.get_help())
            return
        fatal(f'Unknown extension command "{ext_command}"')

    run_entry_point(ep, list(args))
