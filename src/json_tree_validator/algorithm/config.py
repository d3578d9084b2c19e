"""ValidationConfig: mode flags for the comparison engine.

``ValidationConfig`` is a frozen (immutable) dataclass; one instance may be
shared freely across threads and ``validate`` calls.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from json_tree_validator.algorithm.ignore import IgnoreExpression

__all__ = ["ENV_CHECK_ARRAY_ORDER", "ENV_STRICT", "ValidationConfig"]

ENV_STRICT = "JSON_TREE_VALIDATOR_STRICT"
ENV_CHECK_ARRAY_ORDER = "JSON_TREE_VALIDATOR_CHECK_ARRAY_ORDER"

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{name} must be a boolean flag (true/false), got {raw!r}"
    raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Immutable mode configuration for one or more validations.

    Attributes:
        strict: When True, object key sets must match exactly and arrays
            must have the same number of elements.  When False, the expected
            document may be a subset of the actual one.
        check_array_order: When True, arrays are compared position by
            position; when False, as multisets.  ``None`` (default) falls
            back to ``strict``; see ``array_order_checked``.
        ignore_expressions: Path patterns whose subtrees are not validated.
            Compiled (and checked) at construction time.
    """

    strict: bool = True
    check_array_order: bool | None = None
    ignore_expressions: frozenset[str] = frozenset()
    _compiled: tuple[IgnoreExpression, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.ignore_expressions, frozenset):
            object.__setattr__(
                self, "ignore_expressions", frozenset(self.ignore_expressions)
            )
        compiled = tuple(
            IgnoreExpression.compile(text) for text in sorted(self.ignore_expressions)
        )
        object.__setattr__(self, "_compiled", compiled)

    @property
    def array_order_checked(self) -> bool:
        """Effective array-order flag."""
        if self.check_array_order is None:
            return self.strict
        return self.check_array_order

    @property
    def compiled_ignore_expressions(self) -> tuple[IgnoreExpression, ...]:
        return self._compiled

    def with_ignored(self, expressions: Iterable[str]) -> ValidationConfig:
        """Return a copy with ``expressions`` added to the ignore set."""
        return ValidationConfig(
            strict=self.strict,
            check_array_order=self.check_array_order,
            ignore_expressions=self.ignore_expressions | frozenset(expressions),
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        ignore_expressions: Iterable[str] = (),
    ) -> ValidationConfig:
        """Build a config from ``JSON_TREE_VALIDATOR_*`` environment variables.

        ``JSON_TREE_VALIDATOR_STRICT`` defaults to true; an unset
        ``JSON_TREE_VALIDATOR_CHECK_ARRAY_ORDER`` leaves the flag unset.

        Raises:
            ValueError: If a variable holds something other than a boolean flag.
        """
        env = os.environ if environ is None else environ
        strict = _parse_flag(ENV_STRICT, env.get(ENV_STRICT, "true"))
        raw_order = env.get(ENV_CHECK_ARRAY_ORDER)
        check_array_order = (
            None
            if raw_order is None or not raw_order.strip()
            else _parse_flag(ENV_CHECK_ARRAY_ORDER, raw_order)
        )
        return cls(
            strict=strict,
            check_array_order=check_array_order,
            ignore_expressions=frozenset(ignore_expressions),
        )
