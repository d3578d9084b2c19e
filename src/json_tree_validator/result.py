"""ValidationResult dataclass for non-raising comparison output.

This module provides the result type returned by ``compare()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_validator.exceptions import ValidationFailure

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a compare() call.

    Attributes:
        valid: True when the actual document satisfies the expected one.
        failure: The first mismatch found, or None when valid.
        computation_time_ms: Wall-clock duration of the validation in milliseconds.
    """

    valid: bool
    failure: ValidationFailure | None
    computation_time_ms: float

    @property
    def path(self) -> str | None:
        """Rendered path of the failing node, None when valid."""
        return self.failure.path if self.failure is not None else None

    @property
    def message(self) -> str | None:
        return self.failure.message if self.failure is not None else None

    def __bool__(self) -> bool:
        return self.valid
