"""
Normal equations for polynomial least squares.

For y = a0 + a1*x + ... + ak*x^k the least-squares coefficients solve
X'X a = X'y with X the Vandermonde matrix of x. Entry (e, c) of X'X is
the power sum Σ x^(e+c) and entry e of X'y is Σ y*x^e, so the system can
be assembled from 2k+1 power sums without materialising X'X by product.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def build_normal_equations(x: NDArray, y: NDArray, order: int) -> NDArray:
    """
    Build the augmented normal-equation matrix for a polynomial fit.

    Parameters
    ----------
    x, y : NDArray
        1D arrays of NaN-free observations, same length.
    order : int
        Polynomial order k >= 1.

    Returns
    -------
    matrix : NDArray
        Shape (k+1, k+2). matrix[e, c] = Σ x^(e+c) for c <= k and
        matrix[e, k+1] = Σ y * x^e.
    """
    equations = order + 1
    powers = x[:, np.newaxis] ** np.arange(2 * order + 1)
    power_sums = powers.sum(axis=0)

    idx = np.arange(equations)
    matrix = np.empty((equations, equations + 1), dtype=np.float64)
    matrix[:, :equations] = power_sums[idx[:, np.newaxis] + idx[np.newaxis, :]]
    matrix[:, equations] = y @ powers[:, :equations]
    return matrix
