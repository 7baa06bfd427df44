from enum import Enum


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Directive(str, Enum):
    FROM = "from"
    LICENSE = "license"
    TEMPLATE = "template"
    SYSTEM = "system"
    ADAPTER = "adapter"
    PARAMETER = "parameter"
    MESSAGE = "message"
