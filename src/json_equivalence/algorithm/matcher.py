"""ArrayMatcher: order-insensitive array comparison as bipartite matching.

Expected element *i* is compatible with actual element *j* when a full,
independent recursive comparison of the two passes.  The arrays are
equivalent iff the compatibility graph has a perfect matching, which is
computed with scipy's ``maximum_bipartite_matching`` (Hopcroft-Karp).

Greedy first-fit pairing is NOT sufficient: with expected ``[{"a": 1},
{"a": 1, "b": 2}]`` and extra fields allowed, actual ``[{"a": 1, "b": 2},
{"a": 1}]`` fails greedily because the first expected element consumes the
only element that could satisfy the second.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import csr_matrix  # type: ignore[import-untyped]
from scipy.sparse.csgraph import maximum_bipartite_matching  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from json_equivalence.result import ComparisonResult, PathSegment
    from json_equivalence.tree.nodes import Value

__all__ = ["ArrayMatch", "ArrayMatcher", "maximum_matching"]

# Signature of the engine callback: (expected, actual, path) -> result
CompareFn = Callable[["Value", "Value", "tuple[PathSegment, ...]"], "ComparisonResult"]


def maximum_matching(compatible: np.ndarray) -> np.ndarray:
    """Compute a maximum bipartite matching over a boolean biadjacency matrix.

    Args:
        compatible: 2-D boolean matrix of shape ``(m, n)``; ``True`` at
            ``[i, j]`` means row *i* may be paired with column *j*.

    Returns:
        1-D integer array of length ``m``: the column matched to each row,
        or ``-1`` for rows left unmatched.
    """
    compatible = np.asarray(compatible, dtype=bool)
    if compatible.ndim != 2:
        msg = f"compatibility matrix must be 2-D, got shape {compatible.shape}"
        raise ValueError(msg)

    m, n = compatible.shape
    if m == 0 or n == 0:
        return np.full(m, -1, dtype=int)

    graph = csr_matrix(compatible.astype(np.int8))
    return np.asarray(
        maximum_bipartite_matching(graph, perm_type="column"), dtype=int
    )


@dataclass(frozen=True, slots=True)
class ArrayMatch:
    """Outcome of matching an expected array against an actual array.

    Attributes:
        assignment: Actual index assigned to each expected index, ``-1`` when
            the expected element is unmatched.
        witness: Expected index reported as the cause of failure; None when
            every expected element is matched.
        compatible_count: Number of actual elements compatible with the
            witness (they are all claimed by other expected elements when
            this is non-zero).
        nearest: Index of the actual element that came closest to matching
            the witness, or None when there is no failing candidate.
        nearest_result: The failed comparison of the witness against
            ``nearest``.
    """

    assignment: tuple[int, ...]
    witness: int | None = None
    compatible_count: int = 0
    nearest: int | None = None
    nearest_result: ComparisonResult | None = None

    @property
    def complete(self) -> bool:
        return self.witness is None


class ArrayMatcher:
    """Decides whether two arrays are equal up to a permutation.

    The matcher does not know how to compare elements; it calls back into
    the engine through ``compare_fn`` so that nested configuration applies to
    every trial pairing.
    """

    def __init__(self, compare_fn: CompareFn) -> None:
        self._compare = compare_fn

    def match(
        self,
        expected: Sequence[Value],
        actual: Sequence[Value],
        path: tuple[PathSegment, ...] = (),
    ) -> ArrayMatch:
        """Match expected elements to actual elements.

        Every trial comparison for expected element *i* is run at
        ``path + (i,)`` so that a witness's nearest-candidate failure is
        located inside the expected document.

        Args:
            expected: Elements of the expected array.
            actual:   Elements of the actual array.
            path:     Path of the arrays from the document root.

        Returns:
            An ``ArrayMatch``; ``complete`` is True iff a perfect matching of
            the expected elements exists.
        """
        m, n = len(expected), len(actual)
        compatible = np.zeros((m, n), dtype=bool)
        trials: list[list[ComparisonResult]] = []

        for i, exp_item in enumerate(expected):
            row: list[ComparisonResult] = []
            for j, act_item in enumerate(actual):
                result = self._compare(exp_item, act_item, (*path, i))
                compatible[i, j] = result.passed()
                row.append(result)
            trials.append(row)

        matching = maximum_matching(compatible)
        assignment = tuple(int(col) for col in matching)
        unmatched = [i for i, col in enumerate(assignment) if col < 0]
        if not unmatched:
            return ArrayMatch(assignment=assignment)

        # Prefer an element nothing could match: it explains the failure on
        # its own, independent of how the other elements were paired.
        isolated = [i for i in range(m) if not compatible[i].any()]
        witness = isolated[0] if isolated else unmatched[0]

        nearest, nearest_result = self._nearest_candidate(trials[witness])
        return ArrayMatch(
            assignment=assignment,
            witness=witness,
            compatible_count=int(compatible[witness].sum()),
            nearest=nearest,
            nearest_result=nearest_result,
        )

    @staticmethod
    def _nearest_candidate(
        row: list[ComparisonResult],
    ) -> tuple[int | None, ComparisonResult | None]:
        """Pick the failed trial whose divergence lies deepest in the tree.

        Ties go to the lowest actual index so diagnostics are deterministic.
        """
        best: int | None = None
        best_result: ComparisonResult | None = None
        for j, result in enumerate(row):
            if result.passed():
                continue
            if best_result is None or len(result.path) > len(best_result.path):
                best, best_result = j, result
        return best, best_result
