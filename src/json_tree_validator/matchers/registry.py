"""MatcherRegistry: name-keyed lookup of Matcher implementations.

Registries are plain objects handed to the comparator; there is no module
level registry to mutate.  ``default_registry()`` returns a fresh registry
preloaded with the standard matchers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from json_tree_validator.exceptions import UnknownMatcherError
from json_tree_validator.matchers.builtin import STANDARD_MATCHERS
from json_tree_validator.protocols import Matcher, MatcherContext

__all__ = ["FunctionMatcher", "MatcherRegistry", "default_registry"]

logger = logging.getLogger(__name__)

MatcherFunction = Callable[[str | None, Sequence[str], MatcherContext], None]


class FunctionMatcher:
    """Adapts a plain function to the ``Matcher`` protocol."""

    def __init__(self, function: MatcherFunction) -> None:
        self._function = function

    def validate(
        self,
        actual: str | None,
        arguments: Sequence[str],
        context: MatcherContext,
    ) -> None:
        self._function(actual, arguments, context)

    def __repr__(self) -> str:
        name = getattr(self._function, "__name__", repr(self._function))
        return f"FunctionMatcher({name})"


class MatcherRegistry:
    """Mapping from matcher name to Matcher.

    Example::

        registry = default_registry()
        registry.register("isEven", IsEven())
        registry.resolve("isEven").validate("4", (), context)
    """

    def __init__(self, matchers: dict[str, Matcher] | None = None) -> None:
        self._matchers: dict[str, Matcher] = {}
        for name, matcher in (matchers or {}).items():
            self.register(name, matcher)

    def register(self, name: str, matcher: Matcher | MatcherFunction) -> None:
        """Register ``matcher`` under ``name``, replacing any previous entry.

        Plain callables are wrapped in ``FunctionMatcher``.

        Raises:
            ValueError: If ``name`` is empty.
            TypeError: If ``matcher`` is neither a Matcher nor callable.
        """
        if not name:
            raise ValueError("Matcher name must not be empty")
        if isinstance(matcher, Matcher):
            resolved: Matcher = matcher
        elif callable(matcher):
            resolved = FunctionMatcher(matcher)
        else:
            raise TypeError(f"Not a matcher: {matcher!r}")
        if name in self._matchers:
            logger.debug("Replacing matcher '%s'", name)
        self._matchers[name] = resolved

    def resolve(self, name: str) -> Matcher:
        try:
            return self._matchers[name]
        except KeyError:
            raise UnknownMatcherError(name) from None

    def names(self) -> list[str]:
        return sorted(self._matchers)

    def copy(self) -> MatcherRegistry:
        return MatcherRegistry(dict(self._matchers))

    def __contains__(self, name: Any) -> bool:
        return name in self._matchers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._matchers)


def default_registry() -> MatcherRegistry:
    """Return a new registry holding the standard matchers."""
    return MatcherRegistry(dict(STANDARD_MATCHERS))
