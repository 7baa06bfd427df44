from lit_modelfile.schema.base import Directive, Role
from lit_modelfile.schema.chat import Message
from lit_modelfile.schema.create import CreateRequest


def test_roles() -> None:
    assert [r.value for r in Role] == ["system", "user", "assistant"]


def test_directives() -> None:
    assert Directive("from") is Directive.FROM
    assert len(Directive) == 7


def test_message_serialize() -> None:
    assert Message("user", "hi").serialize() == {"role": "user", "content": "hi"}
    assert Message(Role.ASSISTANT, "yo").serialize() == {"role": "assistant", "content": "yo"}


def test_create_request_alias() -> None:
    req = CreateRequest(model="m", **{"from": "llama"})
    assert req.from_ == "llama"


def test_create_request_serialize() -> None:
    req = CreateRequest(
        model="m",
        from_="llama",
        system="sys",
        parameters={"stop": ["<|end|>"]},
        messages=[Message("user", "hi")],
    )
    assert req.serialize() == {
        "model": "m",
        "from": "llama",
        "system": "sys",
        "parameters": {"stop": ["<|end|>"]},
        "messages": [{"role": "user", "content": "hi"}],
    }
