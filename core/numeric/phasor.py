# core/numeric/phasor.py
"""
Small complex-number helpers shared by the assembler and the sweep driver.
"""
import cmath
import math
from typing import Union

import numpy as np

GROUND = 0


def node_to_index(node: int) -> int:
    """Map a 1-based circuit node id to its 0-based matrix row/column."""
    if node == GROUND:
        raise ValueError("Ground (node 0) has no matrix row/column.")
    return node - 1


def polar(amplitude: float, phase: float) -> complex:
    """Phasor amplitude * e^(j*phase), phase in radians."""
    return cmath.rect(amplitude, phase)


def angular_frequency(freq: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Hz -> rad/s."""
    return 2 * math.pi * freq


def magnitude_db(value: Union[complex, np.ndarray]) -> Union[float, np.ndarray]:
    """20*log10(|value|); zero maps to -inf without a warning."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return 20.0 * np.log10(np.abs(value))


def phase_degrees(value: Union[complex, np.ndarray]) -> Union[float, np.ndarray]:
    return np.degrees(np.angle(value))
