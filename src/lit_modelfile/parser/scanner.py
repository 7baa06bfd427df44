"""Character classifier for the Modelfile state machine.

``classify`` is pure: it maps the current state and one character to the next state, the
character to keep (if any) and the error to raise (if any). The driver owns everything else.
"""

from enum import Enum
from typing import NamedTuple

from lit_modelfile.errors import InvalidCommandError, ModelfileError, UnexpectedEOFError


class State(Enum):
    NIL = "nil"
    NAME = "name"
    VALUE = "value"
    PARAMETER = "parameter"
    MESSAGE = "message"
    COMMENT = "comment"


class CharClass(Enum):
    LETTER = "letter"
    DIGIT = "digit"
    UNDERSCORE = "underscore"
    SPACE = "space"
    NEWLINE = "newline"
    HASH = "hash"
    OTHER = "other"


class Transition(NamedTuple):
    next: State
    emit: str | None = None
    error: type[ModelfileError] | None = None


def char_class(char: str) -> CharClass:
    # ASCII only, str.isalpha() would accept any unicode letter
    if "a" <= char <= "z" or "A" <= char <= "Z":
        return CharClass.LETTER
    if "0" <= char <= "9":
        return CharClass.DIGIT
    if char in " \t":
        return CharClass.SPACE
    if char in "\r\n":
        return CharClass.NEWLINE
    if char == "_":
        return CharClass.UNDERSCORE
    if char == "#":
        return CharClass.HASH
    return CharClass.OTHER


def classify(state: State, char: str) -> Transition:
    cls = char_class(char)

    if state is State.NIL:
        if cls is CharClass.HASH:
            return Transition(State.COMMENT)
        if cls in (CharClass.SPACE, CharClass.NEWLINE):
            return Transition(State.NIL)
        return Transition(State.NAME, char)

    if state is State.NAME:
        if cls is CharClass.LETTER:
            return Transition(State.NAME, char)
        if cls is CharClass.SPACE:
            return Transition(State.VALUE)
        return Transition(State.NIL, error=InvalidCommandError)

    if state is State.VALUE:
        # a delimiter only tentatively ends the value, the driver decides
        if cls in (CharClass.SPACE, CharClass.NEWLINE):
            return Transition(State.NIL, char)
        return Transition(State.VALUE, char)

    if state is State.PARAMETER:
        if cls in (CharClass.LETTER, CharClass.DIGIT, CharClass.UNDERSCORE):
            return Transition(State.PARAMETER, char)
        if cls is CharClass.SPACE:
            return Transition(State.VALUE)
        return Transition(State.NIL, error=UnexpectedEOFError)

    if state is State.MESSAGE:
        if cls is CharClass.LETTER:
            return Transition(State.MESSAGE, char)
        if cls is CharClass.SPACE:
            return Transition(State.VALUE)
        return Transition(State.NIL, error=UnexpectedEOFError)

    if state is State.COMMENT:
        if cls is CharClass.NEWLINE:
            return Transition(State.NIL)
        return Transition(State.COMMENT)

    raise ValueError(f"Unknown scanner state {state!r}")
