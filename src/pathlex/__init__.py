from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pathlex")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .api import split_path, tokenize
from .cursor import Cursor
from .errors import (
    EndOfInputError,
    IncompletePathError,
    InvalidPathError,
    MalformedPathSyntaxError,
    UnexpectedCharacterError,
)
from .normalize import clean, clean_bracket
from .options import TokenizerOptions
from .tokens import PathToken, build_tokens, tokens_adapter
from .tokenizer import PathTokenizer

__all__ = [
    "Cursor",
    "EndOfInputError",
    "IncompletePathError",
    "InvalidPathError",
    "MalformedPathSyntaxError",
    "PathToken",
    "PathTokenizer",
    "TokenizerOptions",
    "UnexpectedCharacterError",
    "build_tokens",
    "clean",
    "clean_bracket",
    "split_path",
    "tokenize",
    "tokens_adapter",
]
