from collections.abc import Iterable
from pathlib import Path
import re
from typing import Any

from lit_modelfile.parser import Command, format_commands, parse
from lit_modelfile.schema.base import Role
from lit_modelfile.schema.chat import Message
from lit_modelfile.schema.create import CreateRequest

# https://github.com/ollama/ollama/blob/main/docs/modelfile.md#valid-parameters-and-values
VALID_PARAMETERS = frozenset(
    {
        "mirostat",
        "mirostat_eta",
        "mirostat_tau",
        "num_ctx",
        "num_gpu",
        "num_predict",
        "num_thread",
        "repeat_last_n",
        "repeat_penalty",
        "temperature",
        "seed",
        "stop",
        "tfs_z",
        "top_k",
        "top_p",
        "min_p",
        "typical_p",
        "presence_penalty",
        "frequency_penalty",
        "penalize_newline",
        "num_keep",
        "num_batch",
    }
)

# parameters that may repeat, each occurrence adds a value
LIST_PARAMETERS = frozenset({"stop"})

_INT = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(r"[+-]?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)([eE][+-]?[0-9]+)?")


def _coerce(value: str) -> Any:
    if _INT.fullmatch(value):
        return int(value)
    if _FLOAT.fullmatch(value):
        return float(value)
    return value


class ModelFile:
    """Structured view of a Modelfile based on https://github.com/ollama/ollama/blob/main/docs/modelfile.md."""

    def __init__(self) -> None:
        self.base: str | None = None  # FROM
        self.parameters: dict[str, Any] = {}
        self.system: str | None = None
        self.template: str | None = None
        self.adapter: str | None = None
        self.license: str | None = None
        self.messages: list[dict[str, str]] = []

    def set_base(self, base: str) -> "ModelFile":
        self.base = base
        return self

    def set_parameter(self, key: str, value: Any) -> "ModelFile":
        if key in LIST_PARAMETERS:
            values = self.parameters.setdefault(key, [])
            values.extend(value if isinstance(value, list) else [value])
        elif key in self.parameters:
            current = self.parameters[key]
            self.parameters[key] = [*current, value] if isinstance(current, list) else [current, value]
        else:
            self.parameters[key] = value
        return self

    def set_system(self, system: str) -> "ModelFile":
        self.system = system
        return self

    def set_template(self, template: str) -> "ModelFile":
        self.template = template
        return self

    def set_adapter(self, adapter: str) -> "ModelFile":
        self.adapter = adapter
        return self

    def set_license(self, license_text: str) -> "ModelFile":
        self.license = license_text
        return self

    def add_message(self, role: str, content: str) -> "ModelFile":
        self.messages.append({"role": role, "content": content})
        return self

    def add_command(self, cmd: Command) -> "ModelFile":
        if cmd.name == "model":
            self.set_base(cmd.args)
        elif cmd.name == "system":
            self.set_system(cmd.args)
        elif cmd.name == "template":
            self.set_template(cmd.args)
        elif cmd.name == "adapter":
            self.set_adapter(cmd.args)
        elif cmd.name == "license":
            self.set_license(cmd.args)
        elif cmd.name == "message":
            role, _, content = cmd.args.partition(": ")
            self.add_message(role, content)
        elif cmd.name in LIST_PARAMETERS:
            self.set_parameter(cmd.name, cmd.args)
        else:
            self.set_parameter(cmd.name, _coerce(cmd.args))
        return self

    def to_commands(self) -> list[Command]:
        commands: list[Command] = []
        if self.base:
            commands.append(Command("model", self.base))
        for key, value in self.parameters.items():
            for v in value if isinstance(value, list) else [value]:
                commands.append(Command(key, str(v)))
        for name in ("system", "template", "adapter", "license"):
            value = getattr(self, name)
            if value is not None:
                commands.append(Command(name, value))
        for msg in self.messages:
            commands.append(Command("message", f"{msg['role']}: {msg['content']}"))
        return commands

    def render(self) -> str:
        return format_commands(self.to_commands())

    def validate(self, strict: bool = False) -> list[str]:
        """Check the Modelfile and return warnings.

        A missing FROM is always an error. Unknown parameters are warnings, or errors when
        ``strict`` is set.
        """
        if not self.base:
            raise ValueError("FROM instruction is required")
        warnings: list[str] = []
        for key in self.parameters:
            if key in VALID_PARAMETERS:
                continue
            message = f"Unknown parameter '{key}'"
            if strict:
                raise ValueError(message)
            warnings.append(message)
        return warnings

    def to_create_request(self, model: str, stream: bool | None = None) -> CreateRequest:
        return CreateRequest(
            model=model,
            from_=self.base,
            template=self.template,
            license=self.license,
            system=self.system,
            adapters={"adapter": self.adapter} if self.adapter else None,
            parameters=dict(self.parameters) or None,
            messages=[Message(role=m["role"], content=m["content"]) for m in self.messages] or None,
            stream=stream,
        )

    @classmethod
    def from_create_request(cls, req: CreateRequest) -> "ModelFile":
        model = cls()
        if req.from_:
            model.set_base(req.from_)
        if req.system is not None:
            model.set_system(req.system)
        if req.template is not None:
            model.set_template(req.template)
        if req.license is not None:
            model.set_license(req.license if isinstance(req.license, str) else "\n".join(req.license))
        if req.adapters:
            # a Modelfile carries a single ADAPTER line
            model.set_adapter(next(iter(req.adapters.values())))
        for key, value in (req.parameters or {}).items():
            model.set_parameter(key, value)
        for msg in req.messages or []:
            role = msg.role.value if isinstance(msg.role, Role) else msg.role
            model.add_message(role, msg.content)
        return model

    @classmethod
    def from_commands(cls, commands: Iterable[Command]) -> "ModelFile":
        model = cls()
        for cmd in commands:
            model.add_command(cmd)
        return model

    @classmethod
    def from_string(cls, text: str) -> "ModelFile":
        return cls.from_commands(parse(text))

    @classmethod
    def from_file(cls, filepath: str | Path) -> "ModelFile":
        with Path(filepath).open(encoding="utf-8") as f:
            return cls.from_commands(parse(f))
