from lit_modelfile.schema.base import Directive, Role

VALID_DIRECTIVES = frozenset(d.value for d in Directive)
VALID_ROLES = frozenset(r.value for r in Role)


def is_valid_directive(name: str) -> bool:
    return name.lower() in VALID_DIRECTIVES


def is_valid_role(role: str) -> bool:
    # roles are case sensitive, directives are not
    return role in VALID_ROLES
