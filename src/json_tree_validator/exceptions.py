"""Exception hierarchy for JSON tree validation.

``ValidationFailure`` is the one failure type callers need to catch.  Its
subclasses keep the kind of mismatch visible for tests and logging:

- ``StructuralMismatch``: kind, entry count, missing key or missing element
- ``ValueMismatch``: same kind, different value
- ``MatcherFailure``: a matcher rejected the value or could not be resolved

``ValidationFailure`` derives from ``AssertionError`` so failures read
naturally inside test runners.
"""

from __future__ import annotations

from typing import Any

from json_tree_validator.tree.values import ABSENT

__all__ = [
    "IgnoreExpressionError",
    "MatcherError",
    "MatcherExpressionError",
    "MatcherFailure",
    "StructuralMismatch",
    "UnknownMatcherError",
    "ValidationFailure",
    "ValueMismatch",
]


class ValidationFailure(AssertionError):
    """The actual document does not satisfy the expected document.

    Attributes:
        path: Rendered path of the node where validation stopped (``$['a'][0]``).
        message: Human-readable description of the mismatch.
        expected: The conflicting value from the expected document.
        actual: The conflicting value from the actual document (``ABSENT``
            when the position does not exist).
    """

    def __init__(
        self,
        message: str,
        path: str,
        expected: Any = None,
        actual: Any = ABSENT,
    ) -> None:
        self.message = message
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class StructuralMismatch(ValidationFailure):
    """Kind, entry count, missing key or missing array element."""


class ValueMismatch(ValidationFailure):
    """Equal kinds with unequal values."""


class MatcherFailure(ValidationFailure):
    """A named matcher rejected the value, or the name is not registered.

    Attributes:
        matcher_name: Name used in the matcher expression.
        argument: The control argument the matcher was checking against, if any.
    """

    def __init__(
        self,
        message: str,
        path: str,
        matcher_name: str,
        argument: str | None = None,
        expected: Any = None,
        actual: Any = ABSENT,
    ) -> None:
        self.matcher_name = matcher_name
        self.argument = argument
        super().__init__(message, path, expected=expected, actual=actual)


class MatcherError(Exception):
    """Raised by a matcher to reject a value.

    Attributes:
        argument: The control argument that was not satisfied, if any.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.argument = argument
        super().__init__(message)


class UnknownMatcherError(LookupError):
    """No matcher is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unsupported matcher: {name}")


class MatcherExpressionError(ValueError):
    """A string looks like a matcher expression but cannot be parsed."""


class IgnoreExpressionError(ValueError):
    """An ignore expression does not follow the path-expression grammar."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        super().__init__(f"Invalid ignore expression '{expression}': {reason}")
