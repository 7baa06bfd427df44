from pydantic.dataclasses import dataclass

from lit_modelfile.schema.base import Role

# https://github.com/ollama/ollama/blob/main/docs/api.md#generate-a-chat-completion


@dataclass
class Message:
    role: str | Role
    content: str

    def serialize(self) -> dict[str, str]:
        return {
            "role": self.role.value if isinstance(self.role, Role) else self.role,
            "content": self.content,
        }
