"""Client-side substitution of statement parameters into query text."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from chnative.word_matcher import WordMatcher

_KEYWORD_CHARS = frozenset("=<>(,+-*/[")


@dataclass(frozen=True)
class Parameter:
    """A statement argument: positional when ``name`` is empty, named otherwise."""

    value: Any
    name: str = ""
    ordinal: int = 0


def positional(values: Iterable[Any]) -> list[Parameter]:
    """Wrap plain values as unnamed parameters numbered from 1."""
    return [Parameter(value=value, ordinal=number) for number, value in enumerate(values, 1)]


def _is_param_char(char: str) -> bool:
    return char == "_" or char.isalnum()


def bind(query: str, args: Sequence[Parameter], quote: Callable[[Any], str]) -> str:
    """Return ``query`` with placeholders replaced by quoted argument values.

    ``?`` is replaced by the next unnamed argument only where it follows an
    operator, an opening bracket, a comma or one of the words LIMIT, LIKE,
    BETWEEN and the AND of a BETWEEN; elsewhere it is kept as is.
    ``@name`` is replaced by every argument carrying that name.
    Without arguments the query is returned unchanged.
    """
    if not args:
        return query

    like = WordMatcher("like")
    limit = WordMatcher("limit")
    between = WordMatcher("between")
    and_ = WordMatcher("and")

    out: list[str] = []
    index = 0
    keyword = False
    in_between = False
    position = 0
    length = len(query)

    while position < length:
        char = query[position]
        position += 1
        if char == "@":
            start = position
            while position < length and _is_param_char(query[position]):
                position += 1
            name = query[start:position]
            if name:
                out.extend(quote(arg.value) for arg in args if arg.name and arg.name == name)
        elif char == "?":
            if keyword and index < len(args) and not args[index].name:
                out.append(quote(args[index].value))
                index += 1
            else:
                out.append(char)
        else:
            if char in _KEYWORD_CHARS:
                keyword = True
            elif limit.match(char) or like.match(char):
                keyword = True
            elif between.match(char):
                keyword = True
                in_between = True
            elif in_between and and_.match(char):
                keyword = True
                in_between = False
            else:
                keyword = keyword and char.isspace()
            out.append(char)
    return "".join(out)