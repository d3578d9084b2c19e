"""Public API functions for json-tree-validator.

This module provides the user-facing functions: validate, validate_text,
compare and is_valid.  Each call creates a fresh JsonComparator to guarantee
zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from json_tree_validator.algorithm.config import ValidationConfig
from json_tree_validator.comparator import JsonComparator
from json_tree_validator.result import ValidationResult

if TYPE_CHECKING:
    from json_tree_validator.protocols import MatcherResolver

__all__ = ["compare", "is_valid", "validate", "validate_text"]


def validate(
    actual: Any,
    expected: Any,
    config: ValidationConfig | None = None,
    registry: MatcherResolver | None = None,
    variables: Mapping[str, Any] | None = None,
) -> None:
    """Validate ``actual`` against the control document ``expected``.

    Args:
        actual:    The received, already parsed JSON value.
        expected:  The control JSON value.
        config:    Mode flags.  Defaults to ``ValidationConfig()`` (strict).
        registry:  Matcher lookup.  Defaults to ``default_registry()``.
        variables: Read-only values handed to matchers.

    Raises:
        ValidationFailure: On the first mismatch, with the path of the
            offending node in ``.path``.
    """
    JsonComparator(config=config, registry=registry, variables=variables).validate(
        actual, expected
    )


def validate_text(
    actual_text: str | None,
    expected_text: str | None,
    config: ValidationConfig | None = None,
    registry: MatcherResolver | None = None,
    variables: Mapping[str, Any] | None = None,
) -> None:
    """Parse two JSON texts and validate them.

    A blank ``expected_text`` skips validation entirely.

    Raises:
        ValidationFailure: On the first mismatch, or when ``actual_text`` is
            blank while ``expected_text`` is not.
        ValueError: When a text is not valid JSON.
    """
    JsonComparator(
        config=config, registry=registry, variables=variables
    ).validate_text(actual_text, expected_text)


def compare(
    actual: Any,
    expected: Any,
    config: ValidationConfig | None = None,
    registry: MatcherResolver | None = None,
) -> ValidationResult:
    """Validate without raising and return a ValidationResult.

    Returns:
        A ``ValidationResult`` with valid, failure and computation_time_ms populated.
    """
    return JsonComparator(config=config, registry=registry).compare(actual, expected)


def is_valid(
    actual: Any,
    expected: Any,
    config: ValidationConfig | None = None,
    registry: MatcherResolver | None = None,
) -> bool:
    """Return True if ``actual`` satisfies ``expected``."""
    return compare(actual, expected, config=config, registry=registry).valid
