"""JSON tree validator - structural validation of JSON documents against control documents."""

from __future__ import annotations

from json_tree_validator.algorithm.config import ValidationConfig
from json_tree_validator.api import (
    compare,
    is_valid,
    validate,
    validate_text,
)
from json_tree_validator.comparator import JsonComparator
from json_tree_validator.exceptions import (
    MatcherError,
    MatcherFailure,
    StructuralMismatch,
    ValidationFailure,
    ValueMismatch,
)
from json_tree_validator.matchers.registry import MatcherRegistry, default_registry
from json_tree_validator.result import ValidationResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "JsonComparator",
    "MatcherError",
    "MatcherFailure",
    "MatcherRegistry",
    "StructuralMismatch",
    "ValidationConfig",
    "ValidationFailure",
    "ValidationResult",
    "ValueMismatch",
    "compare",
    "default_registry",
    "is_valid",
    "validate",
    "validate_text",
]
