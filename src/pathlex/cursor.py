from __future__ import annotations

from .errors import EndOfInputError


class Cursor:
    """Forward-only read position over an immutable string.

    Callers check :meth:`is_empty` before :meth:`peek` or :meth:`consume`;
    reading past the end raises :class:`EndOfInputError`.
    """

    __slots__ = ("_text", "_index")

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> int:
        return self._index

    def is_empty(self) -> bool:
        return self._index == len(self._text)

    def peek(self) -> str:
        if self.is_empty():
            raise EndOfInputError(f"No character left at index {self._index}")
        return self._text[self._index]

    def consume(self) -> str:
        char = self.peek()
        self._index += 1
        return char

    def skip(self, char: str) -> None:
        """Consume a run of ``char``, stopping at the end of input."""
        while not self.is_empty() and self._text[self._index] == char:
            self._index += 1

    def __repr__(self) -> str:
        return f"Cursor(index={self._index}, length={len(self._text)})"
