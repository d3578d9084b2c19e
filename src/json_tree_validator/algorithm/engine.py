"""ComparisonEngine: recursive validation of an actual tree against an expected tree.

Per node, in order:

1. Ignore check: the ``@ignore@`` marker or a matching ignore expression
   accepts the node without looking at either value.
2. Matcher check: an expected ``@name(args)@`` string hands the decision to
   the named matcher; its verdict ends the branch.
3. Presence check: the position must exist in the actual document.
4. Null check: ``null`` on one side only is a value mismatch.
5. Kind check: Object / Array / String / Number / Boolean must agree.
6. Dispatch by kind: scalars compare by value, objects by key, arrays by
   position or as multisets depending on ``ValidationConfig``.

The engine is fail-fast: the first mismatch raises a ``ValidationFailure``
and aborts the traversal.  It never mutates either tree and keeps no state
between calls, so one instance may serve concurrent validations.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import numpy as np

from json_tree_validator.algorithm.config import ValidationConfig
from json_tree_validator.algorithm.ignore import is_ignored
from json_tree_validator.algorithm.pairing import unpaired_rows
from json_tree_validator.exceptions import (
    MatcherError,
    MatcherExpressionError,
    MatcherFailure,
    StructuralMismatch,
    UnknownMatcherError,
    ValidationFailure,
    ValueMismatch,
)
from json_tree_validator.matchers.expression import (
    MatcherExpression,
    is_matcher_expression,
)
from json_tree_validator.protocols import MatcherContext
from json_tree_validator.tree.nodes import PathNode
from json_tree_validator.tree.values import (
    ABSENT,
    ValueKind,
    is_ignore_marker,
    kind_of,
    numbers_equal,
    to_display_text,
    to_json_text,
    to_matcher_text,
)

if TYPE_CHECKING:
    from json_tree_validator.protocols import MatcherResolver

__all__ = ["ComparisonEngine"]

logger = logging.getLogger(__name__)


def _key_list(keys: Any) -> str:
    return "[" + ", ".join(str(key) for key in keys) + "]"


class ComparisonEngine:
    """Fail-fast structural validator over ``PathNode`` pairs.

    Example::

        from json_tree_validator.algorithm import ComparisonEngine, ValidationConfig
        from json_tree_validator.matchers import default_registry
        from json_tree_validator.tree import PathNode

        engine = ComparisonEngine(ValidationConfig(strict=False), default_registry())
        engine.validate(PathNode.root({"id": 1, "extra": 2}, {"id": 1}))  # passes
    """

    def __init__(
        self,
        config: ValidationConfig,
        resolver: MatcherResolver,
        variables: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config:    Mode flags and ignore expressions.
            resolver:  Looks up matchers named in ``@name(args)@`` expressions.
            variables: Read-only values exposed to matchers via ``MatcherContext``.
        """
        self._config = config
        self._resolver = resolver
        self._variables: Mapping[str, Any] = MappingProxyType(dict(variables or {}))

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, node: PathNode) -> None:
        """Validate the subtree rooted at ``node``.

        Raises:
            ValidationFailure: On the first mismatch (``StructuralMismatch``,
                ``ValueMismatch`` or ``MatcherFailure``).
            TypeError: If either tree holds a non-JSON Python value.
        """
        if self._is_ignored(node):
            return

        if is_matcher_expression(node.expected):
            self._apply_matcher(node)
            return

        if node.actual is ABSENT:
            raise self._missing_entry(node)

        expected, actual = node.expected, node.actual
        if expected is None or actual is None:
            if expected is not actual:
                raise self._value_mismatch(node)
            return

        expected_kind = kind_of(expected)
        actual_kind = kind_of(actual)
        if expected_kind != actual_kind:
            raise StructuralMismatch(
                f"Type mismatch for JSON entry: '{node.render_path()}', "
                f"expected '{expected_kind.display}' but was '{actual_kind.display}'",
                node.render_path(),
                expected=expected,
                actual=actual,
            )

        if expected_kind == ValueKind.OBJECT:
            self._validate_object(node)
        elif expected_kind == ValueKind.ARRAY:
            self._validate_array(node)
        else:
            self._validate_scalar(node, expected_kind)

    def matches(self, node: PathNode) -> bool:
        """Return True when ``node`` validates, False on any ValidationFailure."""
        try:
            self.validate(node)
        except ValidationFailure:
            return False
        return True

    # ------------------------------------------------------------------
    # Step 1 and 2: ignore rules and matchers
    # ------------------------------------------------------------------

    def _is_ignored(self, node: PathNode) -> bool:
        if is_ignore_marker(node.expected):
            logger.debug("JSON entry '%s' is ignored by placeholder", node.render_path())
            return True
        expression = is_ignored(
            node.segments(), self._config.compiled_ignore_expressions
        )
        if expression is not None:
            logger.debug(
                "JSON entry '%s' is ignored by expression '%s'",
                node.render_path(),
                expression.text,
            )
            return True
        return False

    def _apply_matcher(self, node: PathNode) -> None:
        path = node.render_path()
        try:
            expression = MatcherExpression.parse(node.expected)
        except MatcherExpressionError as exc:
            raise MatcherFailure(
                f"Invalid matcher expression for entry: '{path}'. {exc}",
                path,
                matcher_name="",
                expected=node.expected,
                actual=node.actual,
            ) from exc

        try:
            matcher = self._resolver.resolve(expression.name)
        except UnknownMatcherError as exc:
            raise MatcherFailure(
                f"Matcher expression for entry: '{path}' failed, {exc}",
                path,
                matcher_name=expression.name,
                argument=expression.first_argument,
                expected=node.expected,
                actual=node.actual,
            ) from exc

        context = MatcherContext(path=path, name=node.name(), variables=self._variables)
        try:
            matcher.validate(to_matcher_text(node.actual), expression.arguments, context)
        except MatcherError as exc:
            argument = exc.argument if exc.argument is not None else expression.first_argument
            raise MatcherFailure(
                f"Matcher '{expression.name}' failed for entry: '{path}'. {exc}",
                path,
                matcher_name=expression.name,
                argument=argument,
                expected=node.expected,
                actual=node.actual,
            ) from exc

        logger.debug("Matcher '%s' accepted JSON entry '%s'", expression.name, path)

    # ------------------------------------------------------------------
    # Failures
    # ------------------------------------------------------------------

    def _missing_entry(self, node: PathNode) -> StructuralMismatch:
        parent = node.parent
        if parent is not None and isinstance(parent.actual, dict):
            keys = _key_list(parent.actual)
        elif parent is not None and parent.actual is not ABSENT:
            keys = to_json_text(parent.actual)
        else:
            keys = "[]"
        return StructuralMismatch(
            f"Missing JSON entry, expected '{node.name()}' to be in '{keys}'",
            node.render_path(),
            expected=node.expected,
            actual=ABSENT,
        )

    def _value_mismatch(self, node: PathNode) -> ValueMismatch:
        return ValueMismatch(
            f"Values not equal for entry: '{node.render_path()}', "
            f"expected '{to_display_text(node.expected)}' "
            f"but was '{to_display_text(node.actual)}'",
            node.render_path(),
            expected=node.expected,
            actual=node.actual,
        )

    # ------------------------------------------------------------------
    # Step 6: dispatch by kind
    # ------------------------------------------------------------------

    def _validate_scalar(self, node: PathNode, kind: ValueKind) -> None:
        if kind == ValueKind.NUMBER:
            equal = numbers_equal(node.expected, node.actual)
        else:
            equal = node.expected == node.actual
        if not equal:
            raise self._value_mismatch(node)

    def _validate_object(self, node: PathNode) -> None:
        expected: dict[str, Any] = node.expected
        actual: dict[str, Any] = node.actual

        if self._config.strict:
            expected_keys = [k for k in expected if not self._key_ignored(node, k)]
            actual_keys = [k for k in actual if not self._key_ignored(node, k)]
            if set(expected_keys) != set(actual_keys):
                raise StructuralMismatch(
                    f"Number of entries is not equal in element: '{node.render_path()}', "
                    f"expected '{_key_list(expected_keys)}' "
                    f"but was '{_key_list(actual_keys)}'",
                    node.render_path(),
                    expected=expected,
                    actual=actual,
                )

        for key, expected_value in expected.items():
            self.validate(node.child(key, actual.get(key, ABSENT), expected_value))
            logger.debug("Validation successful for JSON entry '%s'", key)

    def _key_ignored(self, node: PathNode, key: str) -> bool:
        return (
            is_ignored(
                (*node.segments(), key), self._config.compiled_ignore_expressions
            )
            is not None
        )

    def _validate_array(self, node: PathNode) -> None:
        expected: list[Any] = list(node.expected)
        actual: list[Any] = list(node.actual)

        logger.debug(
            "Validating array '%s' containing %d entries",
            node.render_path(),
            len(expected),
        )

        if self._config.strict and len(expected) != len(actual):
            raise StructuralMismatch(
                f"Number of entries is not equal in element: '{node.render_path()}', "
                f"expected '{to_json_text(expected)}' but was '{to_json_text(actual)}'",
                node.render_path(),
                expected=node.expected,
                actual=node.actual,
            )

        if self._config.array_order_checked:
            self._validate_ordered(node, expected, actual)
        else:
            self._validate_unordered(node, expected, actual)

    def _validate_ordered(
        self, node: PathNode, expected: list[Any], actual: list[Any]
    ) -> None:
        for i, expected_item in enumerate(expected):
            actual_item = actual[i] if i < len(actual) else ABSENT
            try:
                self.validate(node.child(i, actual_item, expected_item))
            except ValidationFailure as exc:
                raise ValueMismatch(
                    f"Elements not equal for array '{node.render_path()}' at position {i}, "
                    f"expected '{to_display_text(expected_item)}' "
                    f"but was '{to_display_text(actual_item)}'",
                    node.render_path(),
                    expected=expected_item,
                    actual=actual_item,
                ) from exc

    def _validate_unordered(
        self, node: PathNode, expected: list[Any], actual: list[Any]
    ) -> None:
        if self._config.strict:
            # each expected element needs its own actual partner
            unpaired = self._pair_first_fit(node, expected, actual)
            if unpaired is None:
                return
            if not any(
                self.matches(node.child(unpaired, item, expected[unpaired]))
                for item in actual
            ):
                raise self._missing_item(node, expected[unpaired], actual)
            logger.debug(
                "First-fit pairing incomplete for array '%s', solving assignment",
                node.render_path(),
            )
            equal = np.array(
                [
                    [self.matches(node.child(i, item, expected_item)) for item in actual]
                    for i, expected_item in enumerate(expected)
                ],
                dtype=bool,
            ).reshape(len(expected), len(actual))
            missing = unpaired_rows(equal)
            if missing:
                raise self._missing_item(node, expected[missing[0]], actual)
            return

        for i, expected_item in enumerate(expected):
            if self._is_ignored(node.child(i, ABSENT, expected_item)):
                continue
            if not any(
                self.matches(node.child(i, item, expected_item)) for item in actual
            ):
                raise self._missing_item(node, expected_item, actual)

    def _pair_first_fit(
        self, node: PathNode, expected: list[Any], actual: list[Any]
    ) -> int | None:
        """Give each expected element the first unused equal actual element.

        Returns the index of the first expected element left without a
        partner, or None when every expected element was paired.
        """
        unused = list(range(len(actual)))
        for i, expected_item in enumerate(expected):
            partner = next(
                (
                    j
                    for j in unused
                    if self.matches(node.child(i, actual[j], expected_item))
                ),
                None,
            )
            if partner is None:
                return i
            unused.remove(partner)
        return None

    def _missing_item(
        self, node: PathNode, expected_item: Any, actual: list[Any]
    ) -> StructuralMismatch:
        return StructuralMismatch(
            f"An item in '{node.render_path()}' is missing, "
            f"expected '{to_display_text(expected_item)}' "
            f"to be in '{to_json_text(actual)}'",
            node.render_path(),
            expected=expected_item,
            actual=node.actual,
        )
