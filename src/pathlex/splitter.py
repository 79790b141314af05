"""Single-pass scanner that splits a root-normalized path into fragments.

The scanner dispatches on the character under the cursor:

* ``$`` is the root marker,
* ``.`` separates dot-accessed fragments, ``..`` is the recursive descent marker,
* ``[`` starts a bracket fragment that runs through the matching ``]``,
* anything else starts a dot fragment that runs up to the next ``[`` or ``.``.

Parenthesized groups are copied verbatim so filter expressions such as
``?(@.price<10)`` survive as one fragment, and a backslash makes the next
character literal.
"""

from __future__ import annotations

import logging

from .cursor import Cursor
from .errors import IncompletePathError, UnexpectedCharacterError
from .normalize import CLOSE_PAREN, OPEN_PAREN, clean, clean_bracket
from .validate import ROOT

logger = logging.getLogger(__name__)

DOT = "."
RECURSIVE_DESCENT = ".."
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
BACKSLASH = "\\"
SPACE = " "

Fragment = tuple[str, bool]


class PathSplitter:
    def __init__(self, path: str) -> None:
        self.path = path
        self._cursor = Cursor(path)

    def split(self) -> list[Fragment]:
        """Return ``(fragment, from_brackets)`` pairs in path order."""
        cursor = self._cursor
        fragments: list[Fragment] = []
        while not cursor.is_empty():
            cursor.skip(SPACE)
            if cursor.is_empty():
                break
            char = cursor.peek()

            if char == ROOT:
                fragment = (cursor.consume(), False)
            elif char == DOT:
                cursor.consume()
                if cursor.is_empty() or cursor.peek() != DOT:
                    # a single dot only separates fragments
                    continue
                cursor.consume()
                self._reject_next(DOT)
                fragment = (RECURSIVE_DESCENT, False)
            elif char == OPEN_BRACKET:
                raw = self._extract(CLOSE_BRACKET, include_stop=True)
                fragment = (clean_bracket(raw), True)
            else:
                raw = self._extract(OPEN_BRACKET, DOT, include_stop=False)
                fragment = (clean(raw), False)

            fragments.append(fragment)
            logger.debug("fragment %r ends at index %d of %r", fragment[0], cursor.index, self.path)
        return fragments

    def _extract(self, *stop_chars: str, include_stop: bool) -> str:
        """Consume characters up to the first unescaped stop character.

        With ``include_stop`` the stop character is consumed and kept, and
        running out of input first is an error.  Without it the stop
        character is left for the caller, and the end of input is a valid
        boundary.
        """
        cursor = self._cursor
        buf: list[str] = []
        escaped = False
        while not cursor.is_empty():
            char = cursor.peek()
            if not escaped and char in stop_chars:
                break
            if not escaped and char == OPEN_PAREN:
                self._extract_group(buf)
                continue
            cursor.consume()
            # backslashes are never kept, not even an escaped one
            if char != BACKSLASH:
                buf.append(char)
            escaped = not escaped and char == BACKSLASH

        if include_stop:
            if cursor.is_empty():
                raise IncompletePathError(
                    f"Path is incomplete: {self.path!r} (expected {stop_chars[0]!r})",
                    path=self.path,
                )
            buf.append(cursor.consume())
        return "".join(buf)

    def _extract_group(self, buf: list[str]) -> None:
        # The first ")" closes the group. Nesting is not counted, so in
        # "?(@.a==(1+2))" the group ends after "2)".
        cursor = self._cursor
        buf.append(cursor.consume())
        while not cursor.is_empty():
            char = cursor.consume()
            buf.append(char)
            if char == CLOSE_PAREN:
                return
        raise IncompletePathError(
            f"Path is incomplete: {self.path!r} (unclosed {OPEN_PAREN!r})", path=self.path
        )

    def _reject_next(self, *invalid_chars: str) -> None:
        cursor = self._cursor
        if cursor.is_empty():
            return
        char = cursor.peek()
        if char in invalid_chars:
            raise UnexpectedCharacterError(
                f"Char: {char} at index {cursor.index} is not valid in {self.path!r}",
                char=char,
                index=cursor.index,
                path=self.path,
            )
