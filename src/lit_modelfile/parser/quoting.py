"""Quoting rules shared by the parser and the formatter.

Values are written bare, double-quoted or triple-quoted. There are no escape sequences: a
value holding a double quote can only be written in triple-quoted form.
"""

QUOTE = '"'
TRIPLE_QUOTE = '"""'


def quote(value: str) -> str:
    if "\n" in value or value.startswith(" ") or value.endswith(" "):
        if QUOTE in value:
            return f"{TRIPLE_QUOTE}{value}{TRIPLE_QUOTE}"
        return f"{QUOTE}{value}{QUOTE}"
    return value


def unquote(text: str) -> tuple[str, bool]:
    """Strip the quotes around ``text``.

    Returns the value and whether ``text`` is a complete token. Unterminated quotes are
    not complete, neither is a double-quoted value with a double quote inside it.
    """
    if not text:
        return "", False

    if text.startswith(TRIPLE_QUOTE):
        if len(text) >= 6 and text.endswith(TRIPLE_QUOTE):
            return text[3:-3], True
        return "", False

    if text.startswith(QUOTE):
        if len(text) >= 2 and text.endswith(QUOTE):
            inner = text[1:-1]
            if QUOTE in inner:
                return "", False
            return inner, True
        return "", False

    return text, True


def is_closed_quote(text: str) -> bool:
    """Whether ``text`` opens and closes a double-quoted (not triple-quoted) token."""
    return not text.startswith(TRIPLE_QUOTE) and len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE
