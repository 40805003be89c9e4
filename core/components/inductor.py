# core/components/inductor.py
"""
Inductor component plugin for acsweep.
Two-terminal inductor with admittance Y = 1/(jωL).
"""
import math
from typing import List, Sequence

from core.components.base import ComponentKind, TwoTerminalComponent
from core.components.plugin_loader import ComponentFactory
from core.exceptions import ComponentError


class Inductor(TwoTerminalComponent):
    """
    Two-terminal inductor.

    Parameters:
      L: inductance in Henries (non-zero)
    """
    type_name = "inductor"
    kind = ComponentKind.PASSIVE
    property_names = ("L",)

    def __init__(self, name: str, nodes: Sequence[int], inductance: float):
        super().__init__(name, nodes)
        self._apply_properties([float(inductance)])

    def _apply_properties(self, values: List[float]) -> None:
        if values[0] == 0:
            raise ComponentError(f"Inductor '{self.name}' has zero inductance.")
        self.inductance = values[0]

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        if not self._connects(node_from, node_to):
            return 0j
        if omega == 0:
            # At DC an ideal inductor is a short
            return complex(math.inf, 0.0)
        return 1 / (1j * omega * self.inductance)

    def get_properties(self) -> List[float]:
        return [self.inductance]


# Register plugin
ComponentFactory.register(Inductor)
