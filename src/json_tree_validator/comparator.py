"""JsonComparator: orchestrator that wires ValidationConfig + MatcherRegistry + ComparisonEngine.

This is the wiring layer between the raw engine and the public API.  It
builds the root ``PathNode`` for a pair of documents, runs the engine, and
turns the outcome into either a raised ``ValidationFailure`` (``validate``)
or a ``ValidationResult`` (``compare``).

Architecture:
- validate() wraps both documents in a root PathNode and delegates to
  ComparisonEngine.validate(); failures propagate unchanged.
- compare() runs the same validation under a wall-clock timer and captures
  the first ValidationFailure instead of raising it.
- validate_text() parses JSON text first.  A blank control text skips
  validation; a blank actual text against a non-blank control text fails.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from json_tree_validator.algorithm.config import ValidationConfig
from json_tree_validator.algorithm.engine import ComparisonEngine
from json_tree_validator.exceptions import StructuralMismatch, ValidationFailure
from json_tree_validator.matchers.registry import default_registry
from json_tree_validator.result import ValidationResult
from json_tree_validator.tree.nodes import PathNode
from json_tree_validator.tree.values import parse_json

if TYPE_CHECKING:
    from json_tree_validator.protocols import MatcherResolver

__all__ = ["EMPTY_MESSAGE_ERROR", "JsonComparator"]

logger = logging.getLogger(__name__)

EMPTY_MESSAGE_ERROR = (
    "Validation failed - expected message contents, but received empty message!"
)


class JsonComparator:
    """Validate actual JSON documents against expected control documents.

    Two separate ``JsonComparator`` instances never share state; a single
    instance holds only immutable configuration and may be used from several
    threads at once.

    Example::

        from json_tree_validator.comparator import JsonComparator
        from json_tree_validator.algorithm import ValidationConfig

        cmp = JsonComparator(ValidationConfig(strict=False))
        cmp.validate({"id": "x1", "text": "hi"}, {"id": "x1"})   # passes
        result = cmp.compare({"id": "x2"}, {"id": "x1"})
        print(result.message)
        # Values not equal for entry: '$['id']', expected 'x1' but was 'x2'
    """

    def __init__(
        self,
        config: ValidationConfig | None = None,
        registry: MatcherResolver | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:    Mode flags.  Defaults to ``ValidationConfig()`` (strict).
            registry:  Matcher lookup.  Defaults to ``default_registry()``.
            variables: Read-only values handed to matchers.
        """
        self._config: ValidationConfig = config if config is not None else ValidationConfig()
        self._registry: MatcherResolver = (
            registry if registry is not None else default_registry()
        )
        self._engine = ComparisonEngine(self._config, self._registry, variables)

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, actual: Any, expected: Any) -> None:
        """Validate parsed documents, raising on the first mismatch.

        Args:
            actual:   The received document (dict, list, str, number, bool, None).
            expected: The control document, optionally holding ``@ignore@``
                markers and ``@name(args)@`` matcher expressions.

        Raises:
            ValidationFailure: When ``actual`` does not satisfy ``expected``.
        """
        logger.debug("Start JSON validation (strict=%s)", self._config.strict)
        self._engine.validate(PathNode.root(actual, expected))
        logger.debug("JSON validation successful: All values OK")

    def compare(self, actual: Any, expected: Any) -> ValidationResult:
        """Validate parsed documents and return a ValidationResult.

        Only ``ValidationFailure`` is captured; any other error propagates.
        """
        t0 = time.perf_counter()
        failure: ValidationFailure | None = None
        try:
            self.validate(actual, expected)
        except ValidationFailure as exc:
            failure = exc
            logger.debug("JSON validation failed at '%s': %s", exc.path, exc.message)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return ValidationResult(
            valid=failure is None,
            failure=failure,
            computation_time_ms=elapsed_ms,
        )

    def validate_text(self, actual_text: str | None, expected_text: str | None) -> None:
        """Parse and validate two JSON texts.

        Raises:
            ValidationFailure: When the actual text is blank but the control
                text is not, or the parsed documents do not match.
            ValueError: When either text is not valid JSON.
        """
        if expected_text is None or not expected_text.strip():
            logger.debug("Skip JSON validation as no control document was defined")
            return
        if actual_text is None or not actual_text.strip():
            raise StructuralMismatch(
                EMPTY_MESSAGE_ERROR, "$", expected=expected_text, actual=actual_text
            )

        self.validate(parse_json(actual_text), parse_json(expected_text))
