"""pytest plugin for json-tree-validator.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from json_tree_validator import ValidationConfig, validate
from json_tree_validator.protocols import MatcherResolver


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns a callable JSON control-document asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to validate() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_response(assert_json_matches):
            assert_json_matches({"id": 7, "name": "x"}, {"id": "@isNumber()@"}, strict=False)

        def test_wrong_value(assert_json_matches):
            with pytest.raises(AssertionError, match=r"Values not equal"):
                assert_json_matches({"id": 7}, {"id": 8})

    Returns:
        A callable ``_assert(actual, expected, strict=True, check_array_order=None,
        ignore=(), registry=None) -> None`` that raises ``AssertionError``
        (a ``ValidationFailure``) on the first mismatch.
    """

    def _assert(
        actual: Any,
        expected: Any,
        strict: bool = True,
        check_array_order: bool | None = None,
        ignore: Iterable[str] = (),
        registry: MatcherResolver | None = None,
    ) -> None:
        """Assert that ``actual`` satisfies the control document ``expected``.

        Args:
            actual:            The JSON value produced by the code under test.
            expected:          The control JSON value.
            strict:            Require equal key sets and array lengths.
            check_array_order: Compare arrays positionally; None follows ``strict``.
            ignore:            Ignore expressions such as ``"$..timestamp"``.
            registry:          Optional matcher registry.

        Raises:
            AssertionError: A ``ValidationFailure`` naming the failing path.
        """
        config = ValidationConfig(
            strict=strict,
            check_array_order=check_array_order,
            ignore_expressions=frozenset(ignore),
        )
        validate(actual, expected, config=config, registry=registry)

    return _assert
