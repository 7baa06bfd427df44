from typing import Any

from pydantic import ConfigDict, Field
from pydantic.dataclasses import dataclass

from lit_modelfile.schema.chat import Message

# https://github.com/ollama/ollama/blob/main/docs/api.md#create-a-model


@dataclass(config=ConfigDict(populate_by_name=True))
class CreateRequest:
    model: str
    from_: str | None = Field(default=None, alias="from")
    adapters: dict[str, str] | None = None
    template: str | None = None
    license: str | list[str] | None = None
    system: str | None = None
    # https://github.com/ollama/ollama/blob/main/docs/modelfile.mdx#valid-parameters-and-values
    parameters: dict[str, Any] | None = None
    messages: list[Message] | None = None
    stream: bool | None = None

    def serialize(self) -> dict[str, Any]:
        d: dict[str, Any] = {"model": self.model}
        if self.from_ is not None:
            d["from"] = self.from_
        for key in ("adapters", "template", "license", "system", "parameters", "stream"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        if self.messages is not None:
            d["messages"] = [m.serialize() for m in self.messages]
        return d
