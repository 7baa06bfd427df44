from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """A parsed directive.

    ``name`` is the canonical lowercase directive (``model`` for FROM) or the key of a PARAMETER.
    ``args`` is the unquoted payload; MESSAGE payloads read ``"<role>: <content>"``.
    """

    name: str
    args: str = ""
