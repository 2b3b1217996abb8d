"""
Elimination solver for the polynomial normal equations.

The augmented system is reduced to upper-triangular form one column at a
time, always using the current top row as the pivot row. This is NOT
partial pivoting by magnitude: rows are only exchanged when the next
pivot is exactly zero, and then the first row with a nonzero entry in the
pivot column is used. When no such row exists, the remaining block is
zero-filled and the reduction stops; the unknowns in that block are
unresolved and reported as zero.

Both steps work in place on a single copy of the augmented matrix, with
the step index k acting as the offset of the current sub-matrix.

Arithmetic follows IEEE-754: a zero divisor yields inf/NaN in the output
instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class EliminationResult:
    """
    Outcome of solving an augmented system.

    Attributes:
        coefficients: Solution vector, length = number of equations
        triangular: Reduced (upper-triangular) augmented matrix
        degenerate: True if the reduction ran out of nonzero pivots
        resolved: Number of leading unknowns determined by back-substitution
    """
    coefficients: NDArray[np.floating[Any]]
    triangular: NDArray[np.floating[Any]]
    degenerate: bool
    resolved: int


def reduce_augmented(matrix: NDArray) -> tuple[NDArray, int]:
    """
    Reduce an (m, m+1) augmented matrix to upper-triangular form.

    At step k, for each row e > k:
        factor = M[k, k] / M[e, k]
        M[e, c] = M[k, c] - M[e, c] * factor    for c > k
        M[e, k] = 0

    Args:
        matrix: Augmented matrix. Not modified.

    Returns:
        (triangular, resolved) where resolved is the number of leading
        unknowns that can be back-substituted. resolved < m means the
        system was degenerate and rows/columns from resolved onward are
        zero.
    """
    M = np.array(matrix, dtype=np.float64)
    m = M.shape[0]

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for k in range(m - 1):
            pivot = M[k]
            below = slice(k + 1, m)
            factors = pivot[k] / M[below, k]
            M[below, k + 1:] = pivot[k + 1:] - M[below, k + 1:] * factors[:, np.newaxis]
            M[below, k] = 0.0

            nxt = k + 1
            if M[nxt, nxt] == 0.0:
                candidates = np.flatnonzero(M[nxt:, nxt] != 0.0)
                if candidates.size == 0:
                    M[nxt:, nxt:] = 0.0
                    return M, nxt
                swap = nxt + int(candidates[0])
                M[[nxt, swap]] = M[[swap, nxt]]

    return M, m


def back_substitute(triangular: NDArray, resolved: int | None = None) -> NDArray:
    """
    Solve an upper-triangular augmented system from the last equation up.

    Args:
        triangular: (m, m+1) reduced augmented matrix
        resolved: Number of leading unknowns to solve for; the rest are
            left at zero. Defaults to all m.

    Returns:
        Coefficient vector of length m.
    """
    m = triangular.shape[0]
    if resolved is None:
        resolved = m
    coefficients = np.zeros(m, dtype=np.float64)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for e in range(resolved - 1, -1, -1):
            value = triangular[e, m] - triangular[e, e:m] @ coefficients[e:]
            coefficients[e] = value / triangular[e, e]

    return coefficients


def solve_augmented(matrix: NDArray) -> EliminationResult:
    """
    Solve an augmented (m, m+1) system.

    Singular or rank-deficient systems do not raise: the result is flagged
    degenerate and the unresolved coefficients are zero.
    """
    m = matrix.shape[0]
    triangular, resolved = reduce_augmented(matrix)
    coefficients = back_substitute(triangular, resolved)
    return EliminationResult(
        coefficients=coefficients,
        triangular=triangular,
        degenerate=resolved < m,
        resolved=resolved,
    )
