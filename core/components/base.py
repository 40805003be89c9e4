# core/components/base.py
"""
Base Component API for acsweep.
Defines the capability contract the nodal-analysis core reads through:
node list, directional conductance, property vector and a variant tag.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from core.exceptions import ComponentError


class ComponentKind(Enum):
    """Closed set of stamping behaviours understood by the matrix builder."""
    PASSIVE = "passive"
    DEPENDENT = "dependent"
    AC_CURRENT_SOURCE = "ac_current_source"
    DC_CURRENT_SOURCE = "dc_current_source"
    AC_VOLTAGE_SOURCE = "ac_voltage_source"
    DC_VOLTAGE_SOURCE = "dc_voltage_source"


VOLTAGE_SOURCE_KINDS = frozenset({ComponentKind.AC_VOLTAGE_SOURCE, ComponentKind.DC_VOLTAGE_SOURCE})
CURRENT_SOURCE_KINDS = frozenset({ComponentKind.AC_CURRENT_SOURCE, ComponentKind.DC_CURRENT_SOURCE})


class Component(ABC):
    """
    Abstract base class for all circuit elements.
    Subclasses set `type_name`, `kind` and `n_nodes` and implement the
    conductance and property accessors.
    """
    type_name: str = "undefined"
    kind: ComponentKind = ComponentKind.PASSIVE
    n_nodes: int = 2
    # Names of the entries returned by get_properties(), in order
    property_names: Sequence[str] = ()
    default_params: Dict[str, float] = {}

    @classmethod
    def from_params(cls, name: str, nodes: Sequence[int], params: Mapping[str, float]) -> "Component":
        """Build an instance from resolved netlist parameters keyed by `property_names`."""
        merged = {**cls.default_params, **params}
        unknown = set(merged) - set(cls.property_names)
        if unknown:
            raise ComponentError(f"{cls.type_name} '{name}' has unknown parameter(s): {', '.join(sorted(unknown))}")
        missing = [k for k in cls.property_names if k not in merged]
        if missing:
            raise ComponentError(f"{cls.type_name} '{name}' missing parameter(s): {', '.join(missing)}")
        return cls(name, nodes, *[merged[k] for k in cls.property_names])

    def __init__(self, name: str, nodes: Sequence[int]):
        nodes = [int(n) for n in nodes]
        if len(nodes) != self.n_nodes:
            raise ComponentError(
                f"{self.type_name} '{name}' needs {self.n_nodes} nodes, got {len(nodes)}."
            )
        if any(n < 0 for n in nodes):
            raise ComponentError(f"{self.type_name} '{name}' has a negative node id: {nodes}")
        self.name = name
        self.nodes = nodes

    @property
    def is_voltage_source(self) -> bool:
        return self.kind in VOLTAGE_SOURCE_KINDS

    @property
    def is_current_source(self) -> bool:
        return self.kind in CURRENT_SOURCE_KINDS

    @property
    def is_source(self) -> bool:
        """True for independent sources (the only valid sweep references)."""
        return self.is_voltage_source or self.is_current_source

    def get_nodes(self) -> List[int]:
        return list(self.nodes)

    @abstractmethod
    def get_conductance(self, node_from: int, node_to: int, omega: float) -> complex:
        """
        Admittance contribution seen from `node_from` towards `node_to` at
        angular frequency `omega` (rad/s).
        """
        pass

    @abstractmethod
    def get_properties(self) -> List[float]:
        """Numeric property vector (see `property_names`)."""
        pass

    @abstractmethod
    def _apply_properties(self, values: List[float]) -> None:
        pass

    def set_properties(self, values: Sequence[float]) -> None:
        """
        Overwrite the property vector, e.g. with companion-model values from a
        DC operating-point pass.
        """
        values = [float(v) for v in values]
        if len(values) != len(self.property_names):
            raise ComponentError(
                f"{self.type_name} '{self.name}' expects {len(self.property_names)} "
                f"properties {list(self.property_names)}, got {len(values)}."
            )
        self._apply_properties(values)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}: nodes={self.nodes}, properties={self.get_properties()}>"


class TwoTerminalComponent(Component):
    """Component connected between exactly two nodes."""
    n_nodes = 2

    def _connects(self, node_from: int, node_to: int) -> bool:
        return sorted((node_from, node_to)) == sorted(self.nodes)
