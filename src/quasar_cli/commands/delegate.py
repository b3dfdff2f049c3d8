"""Commands provided by other installed packages.

Packages register click commands under these entry-point groups:

    [project.entry-points."quasar_cli.commands"]
    dev = "quasar_app.dev:dev"

    [project.entry-points."quasar_cli.extensions"]
    generate = "my_extension.cli:generate"
"""

from importlib.metadata import EntryPoint, entry_points

import click

from quasar_cli.output import fatal

COMMAND_GROUP = "quasar_cli.commands"
EXTENSION_GROUP = "quasar_cli.extensions"

PASSTHROUGH = {"ignore_unknown_options": True, "allow_extra_args": True}


def find_entry_point(group: str, name: str) -> EntryPoint | None:
    for ep in entry_points(group=group):
        if ep.name == name:
            return ep
    return None


def run_entry_point(ep: EntryPoint, args: list[str]) -> None:
    """Load the click command behind `ep` and run it with `args`."""
    command = ep.load()
    command.main(args, prog_name=f"quasar {ep.name}", standalone_mode=False)


def delegated_command(name: str, summary: str) -> click.Command:
    """Build a built-in command whose implementation lives in another package."""

    @click.command(name, help=summary, context_settings=PASSTHROUGH, add_help_option=False)
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    def command(args: tuple[str, ...]):
        ep = find_entry_point(COMMAND_GROUP, name)
        if ep is None:
            fatal(f'Command "{name}" is not available in this installation')
        run_entry_point(ep, list(args))

    return command
