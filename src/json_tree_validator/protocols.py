"""Matcher Protocol for the json-tree-validator extension point.

Defines the structural interface all matchers must satisfy.  Users can plug
in custom matchers without inheriting from any base class; any class with a
conformant ``validate`` method passes ``isinstance`` checks.

Example::

    from json_tree_validator.exceptions import MatcherError
    from json_tree_validator.protocols import Matcher

    class IsEven:
        def validate(self, actual, arguments, context):
            if actual is None or int(actual) % 2:
                raise MatcherError(f"Received value is '{actual}', expected an even number")

    assert isinstance(IsEven(), Matcher)  # True: structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

__all__ = ["Matcher", "MatcherContext", "MatcherResolver"]


@dataclass(frozen=True, slots=True)
class MatcherContext:
    """What a matcher may know about the node it is validating.

    Attributes:
        path:      Rendered path of the node (``$['user']['id']``).
        name:      The node's own name (``id``, ``[3]`` or ``$``).
        variables: Read-only caller-supplied values.
    """

    path: str
    name: str
    variables: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@runtime_checkable
class Matcher(Protocol):
    """Structural protocol for named matchers.

    ``validate`` receives the actual value as text (``None`` when the value is
    absent from the actual document) and the control arguments parsed from the
    expression.  It returns None to accept and raises ``MatcherError`` to reject.
    """

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None: ...


@runtime_checkable
class MatcherResolver(Protocol):
    """Anything that turns a matcher name into a Matcher.

    ``resolve`` raises ``UnknownMatcherError`` for unregistered names.
    """

    def resolve(self, name: str) -> Matcher: ...
