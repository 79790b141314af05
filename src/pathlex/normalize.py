"""Normalization of raw path fragments.

The extractor hands over fragments exactly as they were written, including
the syntactic sugar of the dialect (space padding around quotes and parens,
``?``/``@`` sigils, ``['key']`` brackets).  :func:`clean` strips that sugar.

Each rule only ever deletes characters, and :func:`clean` re-runs the rules
until nothing changes, so cleaning an already cleaned fragment is a no-op.
The one exception is ``['key']``: its content is a literal key and is
returned as written, even if it looks like sugar itself.
"""

from __future__ import annotations

QUOTE = "'"
OPEN_PAREN = "("
CLOSE_PAREN = ")"
FILTER_SIGIL = "?"
CURRENT_NODE_SIGIL = "@"
QUOTED_KEY_PREFIX = "['"


def collapse_spaces(src: str, char: str) -> str:
    """Remove spaces directly after and directly before every ``char``."""
    padded_right = f"{char} "
    while padded_right in src:
        src = src.replace(padded_right, char)
    padded_left = f" {char}"
    while padded_left in src:
        src = src.replace(padded_left, char)
    return src


def _strip_sigil(src: str, sigil: str) -> str:
    if src.startswith(sigil + " "):
        return src[1:].lstrip(" ")
    return src


def _strip_filter_sigil(src: str) -> str:
    # "? x" -> "x", "?(@.price<10)" -> "@.price<10"
    src = _strip_sigil(src, FILTER_SIGIL)
    if src.startswith(FILTER_SIGIL + OPEN_PAREN) and src.endswith(CLOSE_PAREN):
        return src[2:-1]
    return src


def is_quoted_key(src: str) -> bool:
    return len(src) >= 5 and src.startswith(QUOTED_KEY_PREFIX)


def clean(raw: str) -> str:
    """Strip syntactic sugar from a raw fragment.

    The content of a ``['key']`` fragment is returned as written, without
    another pass over it.
    """
    src = raw
    while True:
        cleaned = collapse_spaces(src, QUOTE)
        cleaned = collapse_spaces(cleaned, CLOSE_PAREN)
        cleaned = collapse_spaces(cleaned, OPEN_PAREN)
        cleaned = _strip_filter_sigil(cleaned)
        cleaned = _strip_sigil(cleaned, CURRENT_NODE_SIGIL)
        if is_quoted_key(cleaned):
            return cleaned[2:-2].strip()
        cleaned = cleaned.strip()
        if cleaned == src:
            return cleaned
        src = cleaned


def clean_bracket(raw: str) -> str:
    """Clean a fragment extracted from bracket notation.

    ``raw`` still carries its enclosing ``[`` and ``]``.  The ``['key']`` form
    is unwrapped by :func:`clean` itself; any other bracket content (indexes,
    wildcards, slices, filters) loses the brackets before cleaning.
    """
    if is_quoted_key(collapse_spaces(raw, QUOTE)):
        return clean(raw)
    return clean(raw[1:-1])
