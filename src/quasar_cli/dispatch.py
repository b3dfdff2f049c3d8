"""Resolve the first CLI token into a built-in command."""

from pydantic import BaseModel

ALIASES = {
    "d": "dev",
    "b": "build",
    "e": "ext",
    "r": "run",
    "c": "clean",
    "m": "mode",
    "i": "info",
    "n": "new",
    "t": "test",
    "h": "help",
}

COMMANDS = (
    "dev",
    "build",
    "clean",
    "inspect",
    "describe",
    "ext",
    "run",
    "mode",
    "info",
    "new",
    "test",
    "help",
)


class Resolution(BaseModel):
    """Which command to run and with what arguments."""

    command: str
    args: list[str] = []
    warning: str | None = None
    fallback_to_help: bool = False


def resolve_alias(token: str) -> str:
    """Map a single-letter alias to its command; anything else is returned as is."""
    if len(token) == 1:
        return ALIASES.get(token, token)
    return token


def resolve_command(argv: list[str]) -> Resolution:
    """Decide what the dispatcher should run for `argv`.

    `version` is not a real command; the caller prints the version for it.
    Unknown names are handed to `run` as extension commands, with a
    fallback to help if no extension provides them.
    """
    if not argv:
        return Resolution(command="help")

    token = resolve_alias(argv[0])
    if token in COMMANDS:
        return Resolution(command=token, args=list(argv[1:]))

    if token in ("-v", "--version"):
        return Resolution(command="version")
    if token in ("-h", "--help"):
        return Resolution(command="help")
    if token.startswith("-"):
        return Resolution(command="help", warning="Command must come before options")

    return Resolution(command="run", args=list(argv), fallback_to_help=True)
