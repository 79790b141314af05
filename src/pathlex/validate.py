from __future__ import annotations

from .errors import MalformedPathSyntaxError

ROOT = "$"

# Characters allowed directly before "(": filter sigil and arithmetic/comparison operators.
CALL_PREFIXES = frozenset("?+=-*/!")


def find_function_call(path: str) -> int | None:
    """Return the index of the first ``(`` preceded by a non-operator character.

    ``foo(`` looks like a function call, which the path dialect does not
    support; ``?(`` and ``==(`` are filter and arithmetic groups and are fine.
    """
    for index in range(1, len(path)):
        if path[index] == "(" and path[index - 1] not in CALL_PREFIXES:
            return index
    return None


def check_function_calls(path: str) -> None:
    index = find_function_call(path)
    if index is not None:
        raise MalformedPathSyntaxError(
            f"Invalid path: {path!r} (unsupported call syntax {path[index - 1 : index + 1]!r}"
            f" at index {index - 1})",
            path=path,
        )


def normalize_root(path: str) -> str:
    """Make a relative path absolute by prefixing ``$.``.

    Paths starting with ``$`` (including ``$[``) are returned unchanged.
    """
    if path.startswith(ROOT):
        return path
    return f"{ROOT}.{path}"
