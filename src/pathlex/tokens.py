from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .validate import ROOT


class PathToken(BaseModel):
    """One lexical segment of a tokenized path.

    ``is_array_index_token`` only records that the fragment came from bracket
    notation; whether it is an index, a wildcard, a slice or a filter is left
    to the evaluator.  Only a leading ``$`` is a root token, so paths
    tokenized with ``auto_root=False`` may have none.
    """

    model_config = ConfigDict(frozen=True)

    fragment: str
    position: int = Field(ge=0)
    is_end: bool = False
    is_array_index_token: bool = False

    @property
    def is_root(self) -> bool:
        return self.position == 0 and self.fragment == ROOT


tokens_adapter: TypeAdapter[list[PathToken]] = TypeAdapter(list[PathToken])


def build_tokens(fragments: Iterable[tuple[str, bool]]) -> list[PathToken]:
    """Wrap ordered ``(fragment, is_array_index)`` pairs into tokens."""
    pairs = list(fragments)
    last = len(pairs) - 1
    return [
        PathToken(
            fragment=fragment,
            position=position,
            is_end=position == last,
            is_array_index_token=is_array_index,
        )
        for position, (fragment, is_array_index) in enumerate(pairs)
    ]
