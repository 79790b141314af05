from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TokenizerOptions:
    """Knobs for :class:`~pathlex.tokenizer.PathTokenizer`.

    With ``auto_root=False`` a relative path such as ``store.book`` is split
    as written, so its first token is ``store`` and no token is the root.
    """

    auto_root: bool = True
    check_function_calls: bool = True
    max_length: int | None = None
