from collections.abc import Iterable, Iterator
from typing import Protocol

from lit_modelfile.errors import (
    InvalidCommandError,
    InvalidMessageRoleError,
    InvalidValueError,
    MissingFromError,
    UnexpectedEOFError,
)
from lit_modelfile.parser.command import Command
from lit_modelfile.parser.quoting import is_closed_quote, unquote
from lit_modelfile.parser.scanner import CharClass, State, char_class, classify
from lit_modelfile.parser.validate import is_valid_directive, is_valid_role
from lit_modelfile.schema.base import Directive
from lit_modelfile.utils import logging

logger = logging.get_logger(__name__)

CHUNK_SIZE = 4096
MODEL = "model"


class SupportsRead(Protocol):
    def read(self, size: int = -1, /) -> str: ...


class Parser:
    """Incremental Modelfile parser.

    Feed it text in chunks of any size, then call :meth:`close` to get the commands. A parser
    reads one document; it cannot be reused after :meth:`close` or after raising.
    """

    def __init__(self) -> None:
        self._state = State.NIL
        self._buffer: list[str] = []
        self._name = ""
        self._role = ""
        self._commands: list[Command] = []
        self._consumed = 0
        self._done = False

    @property
    def state(self) -> State:
        return self._state

    def feed(self, text: str) -> None:
        if self._done:
            raise RuntimeError("Parser is already closed")
        try:
            for char in text:
                self._step(char)
                self._consumed += 1
        except Exception:
            self._done = True
            raise

    def close(self) -> tuple[Command, ...]:
        if self._done:
            raise RuntimeError("Parser is already closed")
        self._done = True

        if self._state is State.VALUE:
            text = self._text()
            value, ok = unquote(text)
            if not ok:
                if is_closed_quote(text):
                    raise InvalidValueError(text)
                raise UnexpectedEOFError(text)
            self._finish(value)
        elif self._state not in (State.NIL, State.COMMENT):
            raise UnexpectedEOFError(self._text())

        if not any(cmd.name == MODEL for cmd in self._commands):
            raise MissingFromError()

        logger.debug("Parsed %d commands from %d characters", len(self._commands), self._consumed)
        return tuple(self._commands)

    def _text(self) -> str:
        return "".join(self._buffer)

    def _step(self, char: str) -> None:
        transition = classify(self._state, char)
        if transition.error is not None:
            raise transition.error(self._text())

        if transition.next is not self._state:
            next_state = self._leave(transition.next, char)
            if next_state is None:
                return
            self._buffer.clear()
            self._state = next_state

        # control characters never reach the buffer
        if transition.emit is not None and transition.emit.isprintable():
            self._buffer.append(transition.emit)

    def _leave(self, next_state: State, char: str) -> State | None:
        """Run the exit action of the current state.

        Returns the state to enter, which the buffer contents may redirect, or ``None`` when
        the current state continues.
        """
        text = self._text()

        if self._state is State.NAME:
            if not is_valid_directive(text):
                raise InvalidCommandError(text)
            directive = text.lower()
            if directive == Directive.FROM:
                self._name = MODEL
            elif directive == Directive.PARAMETER:
                # the key read in PARAMETER names the command
                next_state = State.PARAMETER
            elif directive == Directive.MESSAGE:
                next_state = State.MESSAGE
                self._name = directive
            else:
                self._name = directive
        elif self._state is State.PARAMETER:
            self._name = text
        elif self._state is State.MESSAGE:
            if not is_valid_role(text):
                raise InvalidMessageRoleError(text)
            self._role = text
        elif self._state is State.VALUE:
            if not self._close_value(char):
                return None
        return next_state

    def _close_value(self, delimiter: str) -> bool:
        """Try to end the value at ``delimiter``.

        A space never ends a value, nor does any delimiter inside an open quote. In that case
        the delimiter becomes part of the value and ``False`` is returned.
        """
        text = self._text()
        value, ok = unquote(text)
        # a closed double-quoted token with a quote inside can never become valid
        if not ok and char_class(delimiter) is CharClass.NEWLINE and is_closed_quote(text):
            raise InvalidValueError(text)
        if not ok or char_class(delimiter) is CharClass.SPACE:
            self._buffer.append(delimiter)
            return False
        self._finish(value)
        return True

    def _finish(self, value: str) -> None:
        if self._role:
            value = f"{self._role}: {value}"
            self._role = ""
        self._commands.append(Command(name=self._name, args=value))
        self._name = ""


def _text_chunk(chunk: str) -> str:
    if not isinstance(chunk, str):
        raise TypeError("Modelfile input must be text, decode it first")
    return chunk


def _chunks(stream: str | SupportsRead | Iterable[str]) -> Iterator[str]:
    if isinstance(stream, (bytes, bytearray)):
        _text_chunk(stream)
    if isinstance(stream, str):
        yield stream
        return
    read = getattr(stream, "read", None)
    if read is not None:
        chunk = _text_chunk(read(CHUNK_SIZE))
        while chunk:
            yield chunk
            chunk = _text_chunk(read(CHUNK_SIZE))
        return
    for chunk in stream:
        yield _text_chunk(chunk)


def parse(stream: str | SupportsRead | Iterable[str]) -> tuple[Command, ...]:
    """Parse a Modelfile.

    ``stream`` is the document text, a text file object or an iterable of text chunks.
    Raises a :class:`~lit_modelfile.errors.ModelfileError` on the first malformed token.
    """
    parser = Parser()
    for chunk in _chunks(stream):
        parser.feed(chunk)
    return parser.close()
