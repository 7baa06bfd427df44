import pytest

from lit_modelfile.parser.validate import is_valid_directive, is_valid_role


@pytest.mark.parametrize(
    "name", ["from", "FROM", "From", "license", "template", "system", "adapter", "parameter", "MESSAGE"]
)
def test_valid_directive(name: str) -> None:
    assert is_valid_directive(name)


@pytest.mark.parametrize("name", ["", "requires", "run", "model", "fromx"])
def test_invalid_directive(name: str) -> None:
    assert not is_valid_directive(name)


def test_roles_are_case_sensitive() -> None:
    for role in ("system", "user", "assistant"):
        assert is_valid_role(role)
    for role in ("User", "ASSISTANT", "tool", "robot", ""):
        assert not is_valid_role(role)
