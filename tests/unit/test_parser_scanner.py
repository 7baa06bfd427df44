import pytest

from lit_modelfile.errors import InvalidCommandError, UnexpectedEOFError
from lit_modelfile.parser.scanner import CharClass, State, Transition, char_class, classify


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("a", CharClass.LETTER),
        ("Z", CharClass.LETTER),
        ("7", CharClass.DIGIT),
        ("_", CharClass.UNDERSCORE),
        (" ", CharClass.SPACE),
        ("\t", CharClass.SPACE),
        ("\n", CharClass.NEWLINE),
        ("\r", CharClass.NEWLINE),
        ("#", CharClass.HASH),
        ("-", CharClass.OTHER),
        ("é", CharClass.OTHER),
    ],
)
def test_char_class(char: str, expected: CharClass) -> None:
    assert char_class(char) is expected


@pytest.mark.parametrize(
    ("state", "char", "expected"),
    [
        (State.NIL, "#", Transition(State.COMMENT)),
        (State.NIL, " ", Transition(State.NIL)),
        (State.NIL, "\t", Transition(State.NIL)),
        (State.NIL, "\n", Transition(State.NIL)),
        (State.NIL, "F", Transition(State.NAME, "F")),
        (State.NIL, "1", Transition(State.NAME, "1")),
        (State.NAME, "r", Transition(State.NAME, "r")),
        (State.NAME, " ", Transition(State.VALUE)),
        (State.NAME, "\t", Transition(State.VALUE)),
        (State.VALUE, "\n", Transition(State.NIL, "\n")),
        (State.VALUE, " ", Transition(State.NIL, " ")),
        (State.VALUE, '"', Transition(State.VALUE, '"')),
        (State.VALUE, "#", Transition(State.VALUE, "#")),
        (State.PARAMETER, "k", Transition(State.PARAMETER, "k")),
        (State.PARAMETER, "9", Transition(State.PARAMETER, "9")),
        (State.PARAMETER, "_", Transition(State.PARAMETER, "_")),
        (State.PARAMETER, " ", Transition(State.VALUE)),
        (State.MESSAGE, "u", Transition(State.MESSAGE, "u")),
        (State.MESSAGE, " ", Transition(State.VALUE)),
        (State.COMMENT, "\n", Transition(State.NIL)),
        (State.COMMENT, "x", Transition(State.COMMENT)),
        (State.COMMENT, " ", Transition(State.COMMENT)),
    ],
)
def test_classify(state: State, char: str, expected: Transition) -> None:
    assert classify(state, char) == expected


@pytest.mark.parametrize("char", ["\n", "1", "_", "-", "#"])
def test_classify_name_rejects(char: str) -> None:
    assert classify(State.NAME, char).error is InvalidCommandError


@pytest.mark.parametrize(
    ("state", "char"),
    [
        (State.PARAMETER, "\n"),
        (State.PARAMETER, "-"),
        (State.MESSAGE, "\n"),
        (State.MESSAGE, "1"),
        (State.MESSAGE, "_"),
    ],
)
def test_classify_key_and_role_reject(state: State, char: str) -> None:
    assert classify(state, char).error is UnexpectedEOFError


def test_classify_every_state_is_handled() -> None:
    for state in State:
        for char in ("a", "0", "_", " ", "\n", "#", "-"):
            assert isinstance(classify(state, char), Transition)
