import pytest
from core.components.base import Component, ComponentKind
from core.components.plugin_loader import ComponentFactory
from core.components.resistor import Resistor
from core.components.vccs import VoltageControlledCurrentSource
from core.exceptions import ComponentError


def test_builtin_types_registered():
    types = ComponentFactory.types()
    for name in ["resistor", "capacitor", "inductor", "ac_current", "dc_current",
                 "ac_voltage", "dc_voltage", "vccs"]:
        assert name in types

def test_get_is_case_insensitive():
    assert ComponentFactory.get("Resistor") is Resistor

def test_unknown_type():
    with pytest.raises(ComponentError, match="Unknown component type"):
        ComponentFactory.get("nonexistent")

def test_non_string_type():
    with pytest.raises(ComponentError, match="must be a string"):
        ComponentFactory.get(123)

def test_register_non_component():
    with pytest.raises(ComponentError, match="non-Component"):
        ComponentFactory.register(int)

def test_create_with_defaults():
    src = ComponentFactory.create("ac_voltage", "V1", [1, 0], {"amplitude": 2.0})
    assert src.get_properties() == [2.0, 0.0]

def test_create_vccs():
    g = ComponentFactory.create("vccs", "G1", [2, 0, 1, 0], {"gm": 0.01})
    assert isinstance(g, VoltageControlledCurrentSource)

def test_create_missing_and_unknown_params():
    with pytest.raises(ComponentError, match="missing parameter"):
        ComponentFactory.create("resistor", "R1", [1, 0], {})
    with pytest.raises(ComponentError, match="unknown parameter"):
        ComponentFactory.create("resistor", "R1", [1, 0], {"R": 1.0, "X": 2.0})

def test_register_custom_component():
    class Conductance(Component):
        type_name = "test_conductance"
        kind = ComponentKind.PASSIVE
        property_names = ("G",)

        def __init__(self, name, nodes, g):
            super().__init__(name, nodes)
            self.g = g

        def _apply_properties(self, values):
            self.g = values[0]

        def get_conductance(self, node_from, node_to, omega):
            return complex(self.g)

        def get_properties(self):
            return [self.g]

    ComponentFactory.register(Conductance)
    comp = ComponentFactory.create("test_conductance", "G1", [1, 0], {"G": 0.5})
    assert comp.get_conductance(1, 0, 0.0) == 0.5
