# core/components/vccs.py
"""
Voltage-controlled current source plugin for acsweep.

Nodes are ordered (out+, out-, ctrl+, ctrl-). A current gm*(V(ctrl+) - V(ctrl-))
flows from out+ through the source to out-.
"""
from typing import List, Sequence

from core.components.base import Component, ComponentKind
from core.components.plugin_loader import ComponentFactory


class VoltageControlledCurrentSource(Component):
    """
    Parameters:
      gm: transconductance in Siemens
    """
    type_name = "vccs"
    kind = ComponentKind.DEPENDENT
    n_nodes = 4
    property_names = ("gm",)

    def __init__(self, name: str, nodes: Sequence[int], transconductance: float):
        super().__init__(name, nodes)
        self.transconductance = float(transconductance)

    @property
    def output_nodes(self) -> List[int]:
        return self.nodes[:2]

    @property
    def control_nodes(self) -> List[int]:
        return self.nodes[2:]

    def _apply_properties(self, values: List[float]) -> None:
        self.transconductance = values[0]

    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        """
        Transconductance seen in the KCL row of output node `node_from` for the
        voltage of control node `node_to`. Zero for any other pairing, so the
        stamp is not symmetric.
        """
        signs = (1, -1)
        total = 0
        for out_node, s_out in zip(self.output_nodes, signs):
            if out_node != node_from:
                continue
            for ctrl_node, s_ctrl in zip(self.control_nodes, signs):
                if ctrl_node == node_to:
                    total += s_out * s_ctrl
        return complex(total * self.transconductance)

    def get_properties(self) -> List[float]:
        return [self.transconductance]


# Register plugin
ComponentFactory.register(VoltageControlledCurrentSource)
