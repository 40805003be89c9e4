# core/components/sources.py
"""
Independent source plugins for acsweep.

AC sources carry [amplitude, phase] (phase in radians); DC sources carry
[value]. Current sources drive current from node[0] into node[1]; voltage
sources are ordered (plus, minus). None of them contributes admittance.
"""
from typing import List, Sequence

from core.components.base import ComponentKind, TwoTerminalComponent
from core.components.plugin_loader import ComponentFactory


class _ACSource(TwoTerminalComponent):
    property_names = ("amplitude", "phase")
    default_params = {"phase": 0.0}

    def __init__(self, name: str, nodes: Sequence[int], amplitude: float, phase: float = 0.0):
        super().__init__(name, nodes)
        self.amplitude = float(amplitude)
        self.phase = float(phase)

    def _apply_properties(self, values: List[float]) -> None:
        self.amplitude, self.phase = values

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        return 0j

    def get_properties(self) -> List[float]:
        return [self.amplitude, self.phase]


class _DCSource(TwoTerminalComponent):
    property_names = ("value",)

    def __init__(self, name: str, nodes: Sequence[int], value: float):
        super().__init__(name, nodes)
        self.value = float(value)

    def _apply_properties(self, values: List[float]) -> None:
        self.value = values[0]

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        return 0j

    def get_properties(self) -> List[float]:
        return [self.value]


class ACCurrentSource(_ACSource):
    type_name = "ac_current"
    kind = ComponentKind.AC_CURRENT_SOURCE


class DCCurrentSource(_DCSource):
    type_name = "dc_current"
    kind = ComponentKind.DC_CURRENT_SOURCE


class ACVoltageSource(_ACSource):
    type_name = "ac_voltage"
    kind = ComponentKind.AC_VOLTAGE_SOURCE


class DCVoltageSource(_DCSource):
    type_name = "dc_voltage"
    kind = ComponentKind.DC_VOLTAGE_SOURCE


# Register plugins
for _cls in (ACCurrentSource, DCCurrentSource, ACVoltageSource, DCVoltageSource):
    ComponentFactory.register(_cls)
