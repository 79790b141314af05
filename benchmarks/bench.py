from __future__ import annotations

import argparse
import platform
import statistics
import timeit
from collections.abc import Callable
from dataclasses import dataclass

import pydantic

from pathlex import PathTokenizer, split_path, tokens_adapter
from pathlex.normalize import clean


def _time_per_call(fn: Callable[[], object], *, target_seconds: float, repeats: int) -> float:
    timer = timeit.Timer(fn)
    number, _ = timer.autorange()
    # autorange stops at 0.2s; scale up to the requested budget
    number = max(number, int(number * target_seconds / 0.2))
    return statistics.median(t / number for t in timer.repeat(repeat=repeats, number=number))


def _fmt_seconds(s: float) -> str:
    for scale, unit in ((1e9, "ns"), (1e6, "µs"), (1e3, "ms")):
        if s * scale < 1000:
            return f"{s * scale:.1f} {unit}"
    return f"{s:.3f} s"


@dataclass(frozen=True, slots=True)
class Paths:
    short: str
    dotted: str
    bracketed: str
    filtered: str
    escaped: str
    long: str


def _paths() -> Paths:
    dotted = "$.store.book.author.name.first"
    return Paths(
        short="$.a",
        dotted=dotted,
        bracketed="$['store']['book'][0]['title']",
        filtered="$..book[?( @.price < 10 && @.category == 'fiction' )].title",
        escaped=r"$.config.a\.b\.c.value",
        long=dotted + "".join(f".k{i}[{i}]" for i in range(200)),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Microbenchmarks for pathlex.")
    parser.add_argument("--target-seconds", type=float, default=0.25)
    parser.add_argument("--repeats", type=int, default=7)
    args = parser.parse_args()

    paths = _paths()
    long_tokens = PathTokenizer(paths.long).get_path_tokens()

    scenarios: dict[str, Callable[[], object]] = {
        "split_path short": lambda: split_path(paths.short),
        "split_path dotted": lambda: split_path(paths.dotted),
        "split_path bracketed quoted keys": lambda: split_path(paths.bracketed),
        "split_path filter with padding": lambda: split_path(paths.filtered),
        "split_path escaped dots": lambda: split_path(paths.escaped),
        f"PathTokenizer long ({len(long_tokens)} tokens)": lambda: PathTokenizer(paths.long),
        "clean padded filter fragment": lambda: clean("?( @.price < 10 )"),
        "tokens_adapter.dump_json long": lambda: tokens_adapter.dump_json(long_tokens),
    }

    print("Environment")
    print(f"- python: {platform.python_version()} ({platform.python_implementation()})")
    print(f"- platform: {platform.platform()}")
    print(f"- pydantic: {pydantic.__version__}")
    print()

    name_w = max(len(name) for name in scenarios)
    print(f"{'scenario'.ljust(name_w)}  {'median/op'.rjust(12)}  {'ops/s'.rjust(12)}")
    for name, fn in scenarios.items():
        per_call = _time_per_call(fn, target_seconds=args.target_seconds, repeats=args.repeats)
        print(f"{name.ljust(name_w)}  {_fmt_seconds(per_call).rjust(12)}  {1.0 / per_call:12.0f}")


if __name__ == "__main__":
    main()
