# core/components/resistor.py
"""
Resistor component plugin for acsweep.
Two-terminal resistor with conductance G = 1/R.
"""
from typing import List, Sequence

from core.components.base import ComponentKind, TwoTerminalComponent
from core.components.plugin_loader import ComponentFactory
from core.exceptions import ComponentError


class Resistor(TwoTerminalComponent):
    """
    Two-terminal resistor.

    Parameters:
      R: resistance in Ohms (non-zero)
    """
    type_name = "resistor"
    kind = ComponentKind.PASSIVE
    property_names = ("R",)

    def __init__(self, name: str, nodes: Sequence[int], resistance: float):
        super().__init__(name, nodes)
        self._apply_properties([float(resistance)])

    def _apply_properties(self, values: List[float]) -> None:
        if values[0] == 0:
            raise ComponentError(f"Resistor '{self.name}' has zero resistance => infinite conductance.")
        self.resistance = values[0]

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        if not self._connects(node_from, node_to):
            return 0j
        return complex(1.0 / self.resistance)

    def get_properties(self) -> List[float]:
        return [self.resistance]


# Register plugin
ComponentFactory.register(Resistor)
