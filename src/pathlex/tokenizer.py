from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import InvalidPathError
from .options import TokenizerOptions
from .splitter import PathSplitter
from .tokens import PathToken, build_tokens
from .validate import check_function_calls, normalize_root

logger = logging.getLogger(__name__)

_RULE = "-" * 75


def _flag(value: bool) -> str:
    return "true" if value else "false"


class PathTokenizer:
    """Tokenize a path expression such as ``$.store.book[0].title``.

    All work happens in the constructor: the input is pre-checked, made
    absolute (``store.book`` becomes ``$.store.book``), split into fragments
    and wrapped into :class:`~pathlex.tokens.PathToken` objects.  Any problem
    raises an :class:`~pathlex.errors.InvalidPathError` subclass and no
    tokenizer is created.
    """

    def __init__(self, path: str, options: TokenizerOptions | None = None) -> None:
        options = options or TokenizerOptions()
        if options.max_length is not None:
            if options.max_length <= 0:
                raise ValueError("max_length must be > 0")
            if len(path) > options.max_length:
                raise InvalidPathError(
                    f"Path is longer than {options.max_length} characters: {path!r}", path=path
                )

        try:
            if options.check_function_calls:
                check_function_calls(path)
            if options.auto_root:
                path = normalize_root(path)
            fragments = PathSplitter(path).split()
        except InvalidPathError as exc:
            logger.debug("rejected path %r: %s", path, exc)
            raise

        self._path = path
        self._tokens: list[PathToken] = build_tokens(fragments)

    @property
    def path(self) -> str:
        return self._path

    def get_path(self) -> str:
        return self._path

    def get_fragments(self) -> list[str]:
        return [token.fragment for token in self._tokens]

    def get_path_tokens(self) -> list[PathToken]:
        return list(self._tokens)

    def size(self) -> int:
        return len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[PathToken]:
        return iter(self._tokens)

    def remove_last_path_token(self) -> PathToken:
        """Pop and return the last token.

        Only the token list shrinks: :attr:`path` still holds the full input
        and the new last token keeps ``is_end=False``.
        """
        if not self._tokens:
            raise IndexError("No path tokens left to remove")
        return self._tokens.pop()

    def describe(self) -> str:
        lines = [
            _RULE,
            f"PATH: {self._path}",
            f"{'Fragment':<50}{'Root':<10}{'End':<10}{'Array':<10}",
            _RULE,
        ]
        for token in self._tokens:
            lines.append(
                f"{token.fragment:<50}{_flag(token.is_root):<10}"
                f"{_flag(token.is_end):<10}{_flag(token.is_array_index_token):<10}"
            )
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"PathTokenizer({self._path!r}, size={len(self._tokens)})"
