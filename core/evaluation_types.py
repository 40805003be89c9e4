# core/evaluation_types.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass(frozen=True)
class SweepPoint:
    """
    Output-node response at one sweep frequency.

    Attributes:
        frequency: Frequency in Hz.
        magnitude: 20*log10(|V|) in dB.
        phase: arg(V) in degrees.
        voltage: The complex node voltage the two figures were derived from.
    """
    frequency: float
    magnitude: float
    phase: float
    voltage: complex = 0j

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self.voltage))


@dataclass
class SweepResult:
    """
    Ascending-frequency AC response of one output node.

    Attributes:
        points: One SweepPoint per frequency.
        output_node: Node the response was read at.
        input_source: Name of the reference source.
        errors: Messages for points whose solve produced non-finite values.
        stats: {"points": int, "elapsed": seconds}.
    """
    points: List[SweepPoint]
    output_node: int
    input_source: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def frequencies(self) -> np.ndarray:
        return np.array([p.frequency for p in self.points], dtype=float)

    @property
    def magnitudes(self) -> np.ndarray:
        return np.array([p.magnitude for p in self.points], dtype=float)

    @property
    def phases(self) -> np.ndarray:
        return np.array([p.phase for p in self.points], dtype=float)

    @property
    def voltages(self) -> np.ndarray:
        return np.array([p.voltage for p in self.points], dtype=np.complex128)
