"""Matcher expressions: ``@name(arg1, arg2, ...)@`` placeholders.

An expected String value of this shape hands the comparison of its node to
the matcher registered as ``name``.  Arguments are separated by commas and
may be wrapped in single or double quotes; commas inside quotes belong to the
argument.  ``@name@`` without parentheses is accepted as a call with no
arguments.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass

from cachetools import LRUCache, cached

from json_tree_validator.exceptions import MatcherExpressionError

__all__ = ["MatcherExpression", "is_matcher_expression"]

_EXPRESSION = re.compile(r"^@(?P<name>[A-Za-z_][\w-]*)(?:\((?P<args>.*)\))?@$", re.S)


def is_matcher_expression(value: object) -> bool:
    """Return True if ``value`` is a String shaped like ``@name(...)@``."""
    return isinstance(value, str) and _EXPRESSION.match(value.strip()) is not None


def _split_arguments(expression: str, raw: str) -> tuple[str, ...]:
    if not raw.strip():
        return ()

    arguments: list[str] = []
    current: list[str] = []
    quote: str | None = None
    quoted = False

    for char in raw:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
        elif char in "'\"" and not "".join(current).strip():
            quote = char
            quoted = True
            current = []
        elif char == ",":
            arguments.append("".join(current) if quoted else "".join(current).strip())
            current = []
            quoted = False
        else:
            if quoted and not char.isspace():
                msg = f"Unexpected text after quoted argument in '{expression}'"
                raise MatcherExpressionError(msg)
            current.append(char)

    if quote is not None:
        msg = f"Unterminated quote in matcher expression '{expression}'"
        raise MatcherExpressionError(msg)
    arguments.append("".join(current) if quoted else "".join(current).strip())
    return tuple(arguments)


@dataclass(frozen=True, slots=True)
class MatcherExpression:
    """A parsed matcher expression.

    Attributes:
        name:      Registry name of the matcher (``equalsIgnoreCase``).
        arguments: Control arguments with quotes removed.
        text:      The original expression.
    """

    name: str
    arguments: tuple[str, ...]
    text: str

    @staticmethod
    @cached(cache=LRUCache(maxsize=512), lock=threading.RLock())
    def parse(text: str) -> MatcherExpression:
        """Parse ``text``; results are cached per expression string.

        Raises:
            MatcherExpressionError: If ``text`` is not a matcher expression.
        """
        match = _EXPRESSION.match(text.strip())
        if match is None:
            raise MatcherExpressionError(f"Not a matcher expression: '{text}'")
        return MatcherExpression(
            name=match.group("name"),
            arguments=_split_arguments(text, match.group("args") or ""),
            text=text,
        )

    @property
    def first_argument(self) -> str | None:
        return self.arguments[0] if self.arguments else None
