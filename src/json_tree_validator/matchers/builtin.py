"""Standard matchers available through ``default_registry()``.

Every matcher follows the same contract: accept by returning, reject by
raising ``MatcherError`` whose text names the received value and the control
argument ("Received value is 'Lorem', control value is 'lorem ipsum'").
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from decimal import Decimal

from json_tree_validator.exceptions import MatcherError
from json_tree_validator.protocols import Matcher, MatcherContext

__all__ = ["STANDARD_MATCHERS"]

# plain decimal notation only: no NaN, Infinity or digit separators
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _mismatch(actual: str | None, argument: str | None) -> MatcherError:
    return MatcherError(
        f"Received value is '{actual}', control value is '{argument}'",
        argument=argument,
    )


def _argument(name: str, arguments: Sequence[str], index: int = 0) -> str:
    if len(arguments) <= index:
        raise MatcherError(
            f"Matcher '{name}' requires at least {index + 1} argument(s), "
            f"got {len(arguments)}"
        )
    return arguments[index]


def _number(name: str, text: str | None) -> Decimal:
    if text is None:
        raise MatcherError(f"Matcher '{name}' received no value, expected a number")
    if _NUMBER.fullmatch(text.strip()) is None:
        raise MatcherError(f"Matcher '{name}' received '{text}', which is not a number")
    return Decimal(text.strip())


class _StringMatcher:
    """Compares the received text with the first control argument.

    ``transform`` is applied to both sides before ``predicate`` runs.
    """

    def __init__(
        self,
        name: str,
        predicate: Callable[[str, str], bool],
        transform: Callable[[str], str] | None = None,
    ) -> None:
        self._name = name
        self._predicate = predicate
        self._transform = transform

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        control = _argument(self._name, arguments)
        if actual is None:
            raise _mismatch(actual, control)
        received, wanted = actual, control
        if self._transform is not None:
            received = self._transform(received)
            wanted = self._transform(wanted)
        if not self._predicate(received, wanted):
            raise _mismatch(actual, control)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class _ComparisonMatcher:
    """Numeric comparison of the received value with the first argument."""

    def __init__(self, name: str, predicate: Callable[[Decimal, Decimal], bool]) -> None:
        self._name = name
        self._predicate = predicate

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        control = _argument(self._name, arguments)
        received = _number(self._name, actual)
        if not self._predicate(received, _number(self._name, control)):
            raise _mismatch(actual, control)


class MatchesMatcher:
    """Full regular-expression match against the first argument."""

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        pattern = _argument("matches", arguments)
        try:
            compiled = re.compile(pattern, re.S)
        except re.error as exc:
            raise MatcherError(
                f"Invalid pattern '{pattern}': {exc}", argument=pattern
            ) from exc
        if actual is None or compiled.fullmatch(actual) is None:
            raise _mismatch(actual, pattern)


class IsNumberMatcher:
    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        _number("isNumber", actual)


class EmptyMatcher:
    def __init__(self, expect_empty: bool) -> None:
        self._expect_empty = expect_empty

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        is_empty = not actual
        if is_empty != self._expect_empty:
            expectation = "empty" if self._expect_empty else "not empty"
            raise MatcherError(
                f"Received value is '{actual}', expected value to be {expectation}"
            )


class NullMatcher:
    def __init__(self, expect_null: bool) -> None:
        self._expect_null = expect_null

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        is_null = actual is None or actual == "null"
        if is_null != self._expect_null:
            expectation = "null" if self._expect_null else "not null"
            raise MatcherError(
                f"Received value is '{actual}', expected value to be {expectation}"
            )


class IgnoreMatcher:
    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        return None


class StringLengthMatcher:
    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        control = _argument("stringLength", arguments)
        try:
            length = int(control)
        except ValueError:
            raise MatcherError(
                f"Matcher 'stringLength' needs an integer argument, got '{control}'",
                argument=control,
            ) from None
        if actual is None or len(actual) != length:
            raise _mismatch(actual, control)


class IsUUIDMatcher:
    """Canonical hyphenated UUID text (8-4-4-4-12 hex digits)."""

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        if actual is None or _UUID.fullmatch(actual) is None:
            raise MatcherError(f"Received value is '{actual}', expected a UUID")


def _strip_newlines(text: str) -> str:
    return re.sub(r"\r?\n\s*", "", text)


def _strip_whitespace(text: str) -> str:
    return re.sub(r"\s", "", text)


def _equals(a: str, b: str) -> bool:
    return a == b


STANDARD_MATCHERS: dict[str, Matcher] = {
    "equalsIgnoreCase": _StringMatcher(
        "equalsIgnoreCase", lambda a, c: a.casefold() == c.casefold()
    ),
    "contains": _StringMatcher("contains", lambda a, c: c in a),
    "containsIgnoreCase": _StringMatcher(
        "containsIgnoreCase", lambda a, c: c.casefold() in a.casefold()
    ),
    "startsWith": _StringMatcher("startsWith", str.startswith),
    "endsWith": _StringMatcher("endsWith", str.endswith),
    "trim": _StringMatcher("trim", _equals, transform=str.strip),
    "trimAllWhitespaces": _StringMatcher(
        "trimAllWhitespaces", _equals, transform=_strip_whitespace
    ),
    "ignoreNewLine": _StringMatcher("ignoreNewLine", _equals, transform=_strip_newlines),
    "matches": MatchesMatcher(),
    "isNumber": IsNumberMatcher(),
    "greaterThan": _ComparisonMatcher("greaterThan", lambda a, c: a > c),
    "lowerThan": _ComparisonMatcher("lowerThan", lambda a, c: a < c),
    "empty": EmptyMatcher(expect_empty=True),
    "notEmpty": EmptyMatcher(expect_empty=False),
    "null": NullMatcher(expect_null=True),
    "notNull": NullMatcher(expect_null=False),
    "ignore": IgnoreMatcher(),
    "stringLength": StringLengthMatcher(),
    "isUUID": IsUUIDMatcher(),
}
