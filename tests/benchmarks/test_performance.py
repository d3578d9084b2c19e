"""Performance benchmark suite for json-tree-validator.

Timing targets with the default registry:
- 10-key flat documents: <10ms
- 100-key nested documents: <100ms
- 500-key deeply nested documents with ignore expressions: <1s
- 50-element unordered arrays of objects: <1s
- 6x6x6 nested unordered arrays against a reversed mirror: <1s

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from json_tree_validator import ValidationConfig, compare

IGNORE_DETAILS = ValidationConfig(ignore_expressions={"$..details"})
UNORDERED = ValidationConfig(check_array_order=False)
UNORDERED_LENIENT = ValidationConfig(strict=False, check_array_order=False)


class TestPerformance10Key:
    """Benchmark suite for 10-key flat documents. Target: <10ms."""

    def test_10key(self, benchmark, pair_10key):  # type: ignore[no-untyped-def]
        received, control = pair_10key
        result = benchmark(compare, received, control)
        # Verify the result is valid (not just timing)
        assert result.valid


class TestPerformance100Key:
    """Benchmark suite for 100-key nested documents. Target: <100ms."""

    def test_100key(self, benchmark, pair_100key):  # type: ignore[no-untyped-def]
        received, control = pair_100key
        result = benchmark(compare, received, control)
        assert result.valid


class TestPerformance500Key:
    """Benchmark suite for 500-key deeply nested documents. Target: <1s."""

    def test_500key_ignored_details(self, benchmark, pair_500key):  # type: ignore[no-untyped-def]
        received, control = pair_500key
        result = benchmark(compare, received, control, config=IGNORE_DETAILS)
        assert result.valid


class TestPerformanceUnorderedArrays:
    """Benchmark suite for element pairing. Target: <1s."""

    def test_strict_pairing(self, benchmark, pair_unordered_50):  # type: ignore[no-untyped-def]
        received, control = pair_unordered_50
        result = benchmark(compare, received, control, config=UNORDERED)
        assert result.valid

    def test_lenient_search(self, benchmark, pair_unordered_50):  # type: ignore[no-untyped-def]
        received, control = pair_unordered_50
        result = benchmark(compare, received, control[:10], config=UNORDERED_LENIENT)
        assert result.valid

    def test_nested_strict_pairing(self, benchmark, pair_nested_unordered_6):  # type: ignore[no-untyped-def]
        received, control = pair_nested_unordered_6
        result = benchmark(compare, received, control, config=UNORDERED)
        assert result.valid
