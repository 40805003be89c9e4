# core/solver.py
"""
Single-frequency nodal solve: assemble G and I, then solve G x = I.
"""
import warnings
from typing import Sequence

import numpy as np
from scipy.linalg import LinAlgWarning

from core.components.base import Component
from core.stamping.matrix_builder import MatrixAssembler
from utils.linops import LinearOperator
from utils.logging_config import get_logger

logger = get_logger(__name__)


def solve_system(G: np.ndarray, I: np.ndarray, omega: float = float("nan")) -> np.ndarray:
    """
    Solve G x = I with a pivoted LU. A singular or ill-conditioned G is
    logged, never raised; the caller receives whatever LAPACK produced.
    """
    if G.shape[0] == 0:
        return np.zeros(0, dtype=np.complex128)

    with warnings.catch_warnings(record=True) as caught, np.errstate(all="ignore"):
        warnings.simplefilter("always", LinAlgWarning)
        warnings.simplefilter("always", RuntimeWarning)
        x = LinearOperator(G).solve(I)

    for w in caught:
        if issubclass(w.category, (LinAlgWarning, RuntimeWarning)):
            logger.warning("Ill-conditioned system at omega=%.6g rad/s: %s", omega, w.message)
    if not np.all(np.isfinite(x)):
        logger.debug("Non-finite node voltages at omega=%.6g rad/s", omega)
    return x


def solve(components: Sequence[Component], num_nodes: int, angular_frequency: float) -> np.ndarray:
    """
    Node voltages (index node-1) of the circuit at `angular_frequency` rad/s.
    """
    G, I = MatrixAssembler(components, num_nodes).assemble(angular_frequency)
    return solve_system(G, I, angular_frequency)


class FrequencySolver:
    """Repeated single-frequency solves over a fixed circuit."""

    def __init__(self, components: Sequence[Component], num_nodes: int):
        self.assembler = MatrixAssembler(components, num_nodes)

    @property
    def num_nodes(self) -> int:
        return self.assembler.num_nodes

    def solve(self, angular_frequency: float) -> np.ndarray:
        G, I = self.assembler.assemble(angular_frequency)
        return solve_system(G, I, angular_frequency)
