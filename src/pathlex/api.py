from __future__ import annotations

from .options import TokenizerOptions
from .tokens import PathToken
from .tokenizer import PathTokenizer


def tokenize(path: str, *, options: TokenizerOptions | None = None) -> list[PathToken]:
    """Tokenize ``path`` and return its tokens in order."""
    return PathTokenizer(path, options).get_path_tokens()


def split_path(path: str, *, options: TokenizerOptions | None = None) -> list[str]:
    """Tokenize ``path`` and return only the cleaned fragments.

    >>> split_path("$.store.book[0].title")
    ['$', 'store', 'book', '0', 'title']
    """
    return PathTokenizer(path, options).get_fragments()
