from lit_modelfile.__about__ import __version__
from lit_modelfile.errors import (
    InvalidCommandError,
    InvalidMessageRoleError,
    InvalidValueError,
    MissingFromError,
    ModelfileError,
    UnexpectedEOFError,
)
from lit_modelfile.models.file import ModelFile
from lit_modelfile.parser import Command, Parser, format_commands, parse, quote, unquote

__all__ = [
    "Command",
    "InvalidCommandError",
    "InvalidMessageRoleError",
    "InvalidValueError",
    "MissingFromError",
    "ModelFile",
    "ModelfileError",
    "Parser",
    "UnexpectedEOFError",
    "__version__",
    "format_commands",
    "parse",
    "quote",
    "unquote",
]
