"""CLI entry point for quasar."""

import click

from quasar_cli.commands.clean import clean
from quasar_cli.commands.delegate import delegated_command
from quasar_cli.commands.describe import describe
from quasar_cli.commands.info import info, package_version
from quasar_cli.commands.run import run
from quasar_cli.dispatch import ALIASES, COMMANDS, resolve_alias, resolve_command
from quasar_cli.output import warn

DELEGATED = {
    "dev": "Start a dev server for your App",
    "build": "Build your app for production",
    "inspect": "Inspect the generated build configuration",
    "ext": "Manage App Extensions",
    "mode": "Add/remove Quasar Modes for your App",
    "new": "Quickly generate a new page, layout, component, store and more",
    "test": "Run @quasar/testing App Extension command",
}


class QuasarGroup(click.Group):
    """Group that resolves aliases, the version flag and extension commands itself."""

    def parse_args(self, ctx, args):
        resolution = resolve_command(args)
        if resolution.warning:
            warn(resolution.warning)

        if resolution.command == "version":
            click.echo(package_version() or "unknown")
            ctx.exit(0)

        rewritten = [resolution.command]
        if resolution.fallback_to_help:
            rewritten.append("--fallback-to-help")
        rewritten.extend(resolution.args)
        return super().parse_args(ctx, rewritten)

    def list_commands(self, ctx):
        return list(COMMANDS)

    def format_commands(self, ctx, formatter):
        shortcuts = {command: alias for alias, command in ALIASES.items()}
        rows = []
        for name in self.list_commands(ctx):
            command = self.get_command(ctx, name)
            if command is None:
                continue
            label = f"{name}, {shortcuts[name]}" if name in shortcuts else name
            rows.append((label, command.get_short_help_str(limit=70)))
        with formatter.section("Commands"):
            formatter.write_dl(rows)


@click.group(cls=QuasarGroup, add_help_option=False)
def main():
    """Quasar CLI.

    \b
    Usage: quasar <command> <options>
    Help for a command: quasar <command> --help
    Example: quasar describe QBtn --props

    Any other command name is looked up among the commands
    of your installed App Extensions.

    \b
    Options:
      -v, --version  Print Quasar CLI version
      -h, --help     Show this message and exit.
    """


@main.command("help")
@click.argument("command_name", required=False)
@click.pass_context
def help_(ctx, command_name: str | None):
    """Displays this message"""
    group_ctx = ctx.parent
    if command_name is None:
        click.echo(group_ctx.get_help())
        return

    command = main.get_command(group_ctx, resolve_alias(command_name))
    if command is None:
        warn(f'Unknown command "{command_name}"')
        click.echo(group_ctx.get_help())
        return

    with command.make_context(command.name, [], parent=group_ctx, resilient_parsing=True) as sub_ctx:
        click.echo(command.get_help(sub_ctx))


main.add_command(describe)
main.add_command(run)
main.add_command(info)
main.add_command(clean)
for _name, _summary in DELEGATED.items():
    main.add_command(delegated_command(_name, _summary))
