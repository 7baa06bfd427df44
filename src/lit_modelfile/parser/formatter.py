from collections.abc import Iterable

from lit_modelfile.parser.command import Command
from lit_modelfile.parser.quoting import QUOTE, quote

QUOTED_DIRECTIVES = frozenset({"license", "template", "system", "adapter"})


def _value(value: str) -> str:
    # a bare empty value would swallow the next line when parsed back
    return quote(value) if value else QUOTE * 2


def format_command(cmd: Command) -> str:
    if cmd.name == "model":
        return f"FROM {cmd.args or QUOTE * 2}"
    if cmd.name in QUOTED_DIRECTIVES:
        return f"{cmd.name.upper()} {_value(cmd.args)}"
    if cmd.name == "message":
        role, _, content = cmd.args.partition(": ")
        return f"MESSAGE {role} {_value(content)}"
    return f"PARAMETER {cmd.name} {_value(cmd.args)}"


def format_commands(commands: Iterable[Command]) -> str:
    """Render commands as Modelfile text, one directive per line.

    Commands are trusted as they are, nothing is validated.
    """
    return "".join(f"{format_command(cmd)}\n" for cmd in commands)
