"""Exceptions raised while tokenizing a path expression.

Every rejection of user input derives from :class:`InvalidPathError`, so
callers that only care about "is this path usable" can catch one type.
:class:`EndOfInputError` is different: it signals misuse of
:class:`~pathlex.cursor.Cursor` and is an :class:`IndexError`.
"""

from __future__ import annotations


class InvalidPathError(ValueError):
    """Base exception for paths that cannot be tokenized."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MalformedPathSyntaxError(InvalidPathError):
    """Raised when the whole-string pre-check rejects the input."""


class IncompletePathError(InvalidPathError):
    """Raised when input ends while a closing ``]`` or ``)`` is still expected."""


class UnexpectedCharacterError(InvalidPathError):
    """Raised when the cursor sits on a character that is not allowed there."""

    def __init__(self, message: str, *, char: str, index: int, path: str | None = None) -> None:
        super().__init__(message, path=path)
        self.char = char
        self.index = index


class EndOfInputError(IndexError):
    """Raised by :class:`~pathlex.cursor.Cursor` when reading past the end."""
