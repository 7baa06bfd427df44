"""Modelfile grammar: scanner, driver, quoting codec and formatter."""

from lit_modelfile.parser.command import Command
from lit_modelfile.parser.driver import Parser, parse
from lit_modelfile.parser.formatter import format_command, format_commands
from lit_modelfile.parser.quoting import quote, unquote
from lit_modelfile.parser.validate import is_valid_directive, is_valid_role

__all__ = [
    "Command",
    "Parser",
    "format_command",
    "format_commands",
    "is_valid_directive",
    "is_valid_role",
    "parse",
    "quote",
    "unquote",
]
