"""Ignore expressions: path patterns that exempt subtrees from validation.

Supported grammar (a restricted JSONPath):

- ``$``                 root
- ``.key`` / ``['key']`` child by key (``["key"]`` also accepted)
- ``[N]``               child by index
- ``..key`` / ``..[N]`` descendant at any depth (zero or more segments in between)
- ``[*]`` / ``.*``      any single segment

Matching works on the selector tuple of a ``PathNode`` (see
``PathNode.segments``), never on regular expressions.  An expression must
match the whole path: ``$.a`` ignores ``$['a']`` but not ``$['a']['b']`` on
its own (the engine never descends into an ignored node anyway).
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto

from cachetools import LRUCache, cached

from json_tree_validator.exceptions import IgnoreExpressionError

__all__ = ["IgnoreExpression", "TokenType", "is_ignored"]


class TokenType(StrEnum):
    """Token kinds of a compiled ignore expression."""

    LITERAL = auto()
    WILDCARD = auto()
    DESCENDANT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    value: str | int | None = None

    def accepts(self, segment: str | int) -> bool:
        if self.type == TokenType.WILDCARD:
            return True
        # "0" must not match index 0 and vice versa
        return type(segment) is type(self.value) and segment == self.value


_WILDCARD = Token(TokenType.WILDCARD)
_DESCENDANT = Token(TokenType.DESCENDANT)


class _Tokenizer:
    """Single-pass tokenizer over one ignore expression."""

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._text = expression.strip()
        self._pos = 0

    def _fail(self, reason: str) -> IgnoreExpressionError:
        return IgnoreExpressionError(self._expression, reason)

    def tokenize(self) -> tuple[Token, ...]:
        text = self._text
        if not text.startswith("$"):
            raise self._fail("must start with '$'")
        self._pos = 1
        tokens: list[Token] = []

        while self._pos < len(text):
            if text.startswith("..", self._pos):
                self._pos += 2
                tokens.append(_DESCENDANT)
                if self._pos < len(text) and text[self._pos] == "[":
                    tokens.append(self._bracket())
                else:
                    tokens.append(self._name())
            elif text[self._pos] == ".":
                self._pos += 1
                tokens.append(self._name())
            elif text[self._pos] == "[":
                tokens.append(self._bracket())
            else:
                raise self._fail(f"unexpected character at position {self._pos}")

        return tuple(tokens)

    def _name(self) -> Token:
        text = self._text
        start = self._pos
        while self._pos < len(text) and text[self._pos] not in ".[":
            self._pos += 1
        name = text[start : self._pos].strip()
        if not name:
            raise self._fail(f"empty segment at position {start}")
        if name == "*":
            return _WILDCARD
        return Token(TokenType.LITERAL, name)

    def _bracket(self) -> Token:
        text = self._text
        start = self._pos + 1
        if start < len(text) and text[start] in "'\"":
            quote = text[start]
            end_quote = text.find(quote, start + 1)
            if end_quote == -1 or not text.startswith("]", end_quote + 1):
                raise self._fail(f"unterminated quoted segment at position {start}")
            self._pos = end_quote + 2
            return Token(TokenType.LITERAL, text[start + 1 : end_quote])

        close = text.find("]", start)
        if close == -1:
            raise self._fail(f"missing ']' after position {start}")
        content = text[start:close].strip()
        self._pos = close + 1
        if content == "*":
            return _WILDCARD
        if content.isdigit():
            return Token(TokenType.LITERAL, int(content))
        raise self._fail(f"unsupported bracket segment '[{content}]'")


@dataclass(frozen=True, slots=True)
class IgnoreExpression:
    """A compiled ignore expression.

    Attributes:
        text:   The expression as written by the caller.
        tokens: Compiled tokens, root token ``$`` excluded.
    """

    text: str
    tokens: tuple[Token, ...]

    @staticmethod
    @cached(cache=LRUCache(maxsize=256), lock=threading.RLock())
    def compile(text: str) -> IgnoreExpression:
        """Compile ``text``; results are cached per expression string.

        Raises:
            IgnoreExpressionError: If the expression is malformed.
        """
        return IgnoreExpression(text=text, tokens=_Tokenizer(text).tokenize())

    def matches(self, segments: Sequence[str | int]) -> bool:
        """Return True when the expression matches the full selector path."""
        tokens = self.tokens
        memo: dict[tuple[int, int], bool] = {}

        def _match(ti: int, si: int) -> bool:
            key = (ti, si)
            if key in memo:
                return memo[key]
            if ti == len(tokens):
                result = si == len(segments)
            elif tokens[ti].type == TokenType.DESCENDANT:
                result = any(_match(ti + 1, k) for k in range(si, len(segments) + 1))
            elif si == len(segments):
                result = False
            else:
                result = tokens[ti].accepts(segments[si]) and _match(ti + 1, si + 1)
            memo[key] = result
            return result

        return _match(0, 0)


def is_ignored(
    segments: Sequence[str | int], expressions: Iterable[IgnoreExpression]
) -> IgnoreExpression | None:
    """Return the first expression matching ``segments``, or None."""
    for expression in expressions:
        if expression.matches(segments):
            return expression
    return None
