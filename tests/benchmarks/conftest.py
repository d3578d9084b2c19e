"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested, plus
unordered array tiers that exercise element pairing.
Each tier provides a (received, control) pair that validates successfully.
"""

from __future__ import annotations

from typing import Any

import pytest


def _make_flat(num_keys: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a flat pair whose control uses matchers for every other key."""
    received = {f"field_{i}": f"value_{i}" for i in range(num_keys)}
    control = {
        key: ("@startsWith('value_')@" if i % 2 else value)
        for i, (key, value) in enumerate(received.items())
    }
    return received, control


def _make_nested_100() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 100-key nested pair.

    Structure: 10 sections x (9 leaf keys each) + 10 section keys.
    """
    received: dict[str, Any] = {}
    for i in range(10):
        received[f"section_{i}"] = {f"field_{i}_{j}": j for j in range(9)}
    return received, {key: dict(value) for key, value in received.items()}


def _make_nested_500() -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 500-key deeply nested pair.

    Structure: 5 sections x 5 groups x (8 leaf keys + a 6-key detail object).
    The control ignores every ``details`` object by expression.
    """
    received: dict[str, Any] = {}
    for i in range(5):
        groups: dict[str, Any] = {}
        for j in range(5):
            leaf: dict[str, Any] = {f"field_{k}": f"v_{i}_{j}_{k}" for k in range(8)}
            leaf["details"] = {f"detail_{k}": [k, k + 1] for k in range(6)}
            groups[f"group_{j}"] = leaf
        received[f"section_{i}"] = groups

    control: dict[str, Any] = {}
    for section, groups in received.items():
        control[section] = {
            name: {**leaf, "details": {}} for name, leaf in groups.items()
        }
    return received, control


def _make_unordered_array(size: int) -> tuple[list[Any], list[Any]]:
    """Generate an array of objects and the same array reversed."""
    received = [{"id": i, "name": f"item_{i}", "tags": [i % 3, i % 5]} for i in range(size)]
    return received, list(reversed(received))


def _make_nested_unordered(width: int) -> tuple[list[Any], list[Any]]:
    """Generate a width x width x width nested array of 3-element leaves.

    The control mirrors the received document with every level reversed.
    """
    received = [
        [[[i, j, k] for k in range(width)] for j in range(width)] for i in range(width)
    ]
    control = [
        [[list(reversed(leaf)) for leaf in reversed(middle)] for middle in reversed(outer)]
        for outer in reversed(received)
    ]
    return received, control


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-key flat pair, half of the control values are matcher expressions."""
    return _make_flat(10)


@pytest.fixture
def pair_100key() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair (10 sections x 9 leaf keys)."""
    return _make_nested_100()


@pytest.fixture
def pair_500key() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-key deeply nested pair with ignored detail objects."""
    return _make_nested_500()


@pytest.fixture
def pair_unordered_50() -> tuple[list[Any], list[Any]]:
    """50-element array of objects in reversed order."""
    return _make_unordered_array(50)


@pytest.fixture
def pair_nested_unordered_6() -> tuple[list[Any], list[Any]]:
    """6x6x6 nested array of 3-element leaves against its reversed mirror."""
    return _make_nested_unordered(6)
