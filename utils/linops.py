# utils/linops.py
from __future__ import annotations
import numpy as np
import scipy.linalg as la


class LinearOperator:
    """
    Wraps a pivoted dense LU factorisation and exposes a .solve(b) method.

    Non-finite input is not rejected and singular matrices are not
    regularised: LAPACK's output (possibly inf/nan) is passed through.
    """
    __slots__ = ("_solve",)

    def __init__(self, A: "np.ndarray"):
        lu, piv = la.lu_factor(A, check_finite=False)          # dense LU, partial pivoting
        self._solve = lambda b: la.lu_solve((lu, piv), b, check_finite=False)

    def solve(self, rhs: "np.ndarray") -> "np.ndarray":
        return self._solve(rhs)
