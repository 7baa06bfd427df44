"""Errors raised while reading a Modelfile.

Every error derives from :class:`ModelfileError`, itself a ``ValueError``, so callers that
only care about "bad input" can catch the base class.
"""


class ModelfileError(ValueError):
    """Raised when a Modelfile is invalid."""


class InvalidCommandError(ModelfileError):
    def __init__(self, command: str = "") -> None:
        self.command = command
        super().__init__(
            'command must be one of "from", "license", "template", "system", "adapter", "parameter", or "message"'
        )


class InvalidMessageRoleError(ModelfileError):
    def __init__(self, role: str = "") -> None:
        self.role = role
        super().__init__('message role must be one of "system", "user", or "assistant"')


class UnexpectedEOFError(ModelfileError):
    """Raised when the input ends, or a key/role token breaks, in the middle of a token.

    ``buffer`` holds the partial token read so far.
    """

    def __init__(self, buffer: str = "") -> None:
        self.buffer = buffer
        super().__init__(f"unexpected EOF: {buffer}")


class InvalidValueError(ModelfileError):
    def __init__(self, value: str = "") -> None:
        self.value = value
        super().__init__(f"double-quoted value may not contain a double quote: {value}")


class MissingFromError(ModelfileError):
    def __init__(self) -> None:
        super().__init__("no FROM line")
