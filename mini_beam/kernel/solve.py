# mini_beam/kernel/solve.py
"""Dense LU factorization with partial pivoting, factorized once and reused."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class LUFactorization:
    """
    Doolittle LU decomposition of a square matrix with partial row pivoting.

    L (unit lower, diagonal implied) and U share one buffer. The matrix is
    copied, so the caller's K is left untouched and can still be used for
    residual checks.

    Columns whose best available pivot is below pivot_tol are skipped rather
    than failing the factorization; their indices are kept in
    singular_pivots. During solve() any U diagonal below diagonal_tol gives
    a zero solution component.

    Usage:
        lu = LUFactorization(K)
        d_main = lu.solve(F_main)
        d_unit = lu.solve(F_unit)   # no refactorization
    """

    def __init__(self, K: np.ndarray, pivot_tol: float = 1e-18, diagonal_tol: float = 1e-22):
        lu = np.array(K, dtype=float, copy=True)
        if lu.ndim != 2 or lu.shape[0] != lu.shape[1]:
            raise ValueError(f"Expected a square matrix, got shape {lu.shape}")

        n = lu.shape[0]
        perm = np.arange(n)
        singular = []

        for i in range(n):
            column = np.abs(lu[i:, i])
            offset = int(np.argmax(column))
            if column[offset] < pivot_tol:
                singular.append(i)
                continue

            row = i + offset
            if row != i:
                lu[[i, row]] = lu[[row, i]]
                perm[[i, row]] = perm[[row, i]]

            lu[i+1:, i] /= lu[i, i]
            lu[i+1:, i+1:] -= np.outer(lu[i+1:, i], lu[i, i+1:])

        self.n = n
        self.lu = lu
        self.perm = perm
        self.singular_pivots = tuple(singular)
        self.diagonal_tol = diagonal_tol

        if singular:
            logger.debug("Skipped %d near-zero pivot(s): %s", len(singular), singular)

    def solve(self, b: np.ndarray) -> np.ndarray:
        """Solve K x = b using the stored factors."""
        b = np.asarray(b, dtype=float)
        if b.shape != (self.n,):
            raise ValueError(f"Right-hand side has shape {b.shape}, expected ({self.n},)")

        lu = self.lu

        # Forward substitution (L y = P b)
        y = np.zeros(self.n, dtype=float)
        for i in range(self.n):
            y[i] = b[self.perm[i]] - lu[i, :i] @ y[:i]

        # Back substitution (U x = y)
        x = np.zeros(self.n, dtype=float)
        for i in range(self.n - 1, -1, -1):
            pivot = lu[i, i]
            if abs(pivot) < self.diagonal_tol:
                x[i] = 0.0
            else:
                x[i] = (y[i] - lu[i, i+1:] @ x[i+1:]) / pivot
        return x
