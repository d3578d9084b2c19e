"""Multiset pairing of array elements with an np.inf guard.

Order-independent strict comparison must pair every expected element with a
distinct, structurally equal actual element.  The "equal" relation is a
boolean matrix; it becomes a 0 / inf cost matrix and is solved with scipy's
``linear_sum_assignment``.  Infinite-cost cells never reach the solver
(which would raise ``ValueError``); they are replaced with a guard value and
filtered out after assignment.

The engine only builds the matrix when first-fit pairing leaves an expected
element unpaired that still equals some actual element.

Guard value: ``1.0`` (every finite cost is ``0.0``).
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["pair_elements", "unpaired_rows"]

_GUARD = 1.0


def pair_elements(equal: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Compute a maximum pairing over a boolean equality matrix.

    Args:
        equal: 2-D boolean matrix of shape ``(m, n)``; ``equal[i, j]`` is True
            when expected element ``i`` matches actual element ``j``.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays holding the pairs.
        Only pairs whose cells are True are returned.
    """
    if equal.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    mask = np.asarray(equal, dtype=bool)
    if not mask.any():
        return np.array([], dtype=int), np.array([], dtype=int)

    cost = np.where(mask, 0.0, _GUARD)
    row_ind, col_ind = linear_sum_assignment(cost)

    keep = mask[row_ind, col_ind]
    return row_ind[keep], col_ind[keep]


def unpaired_rows(equal: np.ndarray) -> list[int]:
    """Return the expected indices left without a partner, in ascending order."""
    rows = equal.shape[0]
    row_ind, _ = pair_elements(equal)
    paired = set(row_ind.tolist())
    return [i for i in range(rows) if i not in paired]
