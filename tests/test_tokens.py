from __future__ import annotations

from pathlex.tokens import PathToken, build_tokens


def test_build_tokens_positions_and_end():
    tokens = build_tokens([("$", False), ("a", False), ("0", True)])
    assert [t.position for t in tokens] == [0, 1, 2]
    assert [t.is_end for t in tokens] == [False, False, True]
    assert [t.is_array_index_token for t in tokens] == [False, False, True]
    assert tokens[0].is_root


def test_build_tokens_accepts_generator():
    tokens = build_tokens((f, False) for f in ["$", "x"])
    assert [t.fragment for t in tokens] == ["$", "x"]


def test_build_tokens_empty():
    assert build_tokens([]) == []


def test_is_root_needs_first_position_and_root_marker():
    assert PathToken(fragment="$", position=0).is_root
    assert not PathToken(fragment="store", position=0).is_root
    assert not PathToken(fragment="$", position=1).is_root
