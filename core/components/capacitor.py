# core/components/capacitor.py
"""
Capacitor component plugin for acsweep.
Two-terminal capacitor with admittance Y = jωC.
"""
from typing import List, Sequence

from core.components.base import ComponentKind, TwoTerminalComponent
from core.components.plugin_loader import ComponentFactory


class Capacitor(TwoTerminalComponent):
    """
    Two-terminal capacitor.

    Parameters:
      C: capacitance in Farads
    """
    type_name = "capacitor"
    kind = ComponentKind.PASSIVE
    property_names = ("C",)

    def __init__(self, name: str, nodes: Sequence[int], capacitance: float):
        super().__init__(name, nodes)
        self.capacitance = float(capacitance)

    def _apply_properties(self, values: List[float]) -> None:
        self.capacitance = values[0]

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        if not self._connects(node_from, node_to):
            return 0j
        return 1j * omega * self.capacitance

    def get_properties(self) -> List[float]:
        return [self.capacitance]


# Register plugin
ComponentFactory.register(Capacitor)
