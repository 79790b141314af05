"""pathlex demo — split path expressions into tokens for an evaluator."""

import pathlex as pl

# ── 1. Split: path text → fragments ──────────────────────────────────

path = "$.store.book[0].title"
print("1) split_path — dot and bracket access")
print(f"   {path!r} → {pl.split_path(path)}")
print()


# ── 2. Relative paths are made absolute ──────────────────────────────

tokenizer = pl.PathTokenizer("store.book")
print("2) PathTokenizer — relative path")
print(f"   path={tokenizer.get_path()!r}  fragments={tokenizer.get_fragments()}")
print()


# ── 3. Filters, recursive descent and quoted keys ────────────────────
#
# Parenthesized groups are copied verbatim, so a filter survives as one
# fragment. The "?" sigil and its parens are stripped by clean().

for p in ["$..author", "$.store.book[?(@.price<10)]", "$['store']['book'][*]"]:
    print(f"3) {p!r:35s} → {pl.split_path(p)}")
print()


# ── 4. Token table ───────────────────────────────────────────────────

print("4) describe — root / end / array flags")
print(pl.PathTokenizer("$.store.book[0].title").describe())


# ── 5. Tokens as JSON for a downstream evaluator ─────────────────────

tokens = pl.tokenize(r"$.config.a\.b[1]")
print("5) tokens_adapter.dump_json — escaped dot kept in one fragment")
print(f"   {pl.tokens_adapter.dump_json(tokens).decode()}")
print()


# ── 6. Invalid paths fail fast ───────────────────────────────────────

for bad in ["$[", "foo(", "$...a"]:
    try:
        pl.PathTokenizer(bad)
    except pl.InvalidPathError as exc:
        print(f"6) {bad!r:8s} → {type(exc).__name__}: {exc}")
