import pytest
from core.components.resistor import Resistor
from core.components.capacitor import Capacitor
from core.components.sources import ACVoltageSource


@pytest.fixture
def divider_circuit():
    """1 V AC source at node 1, two 1 kOhm resistors in series, midpoint is node 2."""
    components = [
        ACVoltageSource("V1", [1, 0], 1.0, 0.0),
        Resistor("R1", [1, 2], 1000.0),
        Resistor("R2", [2, 0], 1000.0),
    ]
    return components, 2


@pytest.fixture
def rc_lowpass():
    """R = 1 kOhm, C = 1 uF, corner at 1/(2*pi*RC) ~= 159.15 Hz, output across C."""
    R, C = 1000.0, 1e-6
    components = [
        ACVoltageSource("V1", [1, 0], 1.0, 0.0),
        Resistor("R1", [1, 2], R),
        Capacitor("C1", [2, 0], C),
    ]
    return components, 2, R, C


@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog


@pytest.fixture
def floating_circuit(divider_circuit):
    """Divider plus a current source feeding node 3, which has no path to ground."""
    from core.components.sources import ACCurrentSource
    components, _ = divider_circuit
    return components + [ACCurrentSource("I1", [0, 3], 1e-3, 0.0)], 3
