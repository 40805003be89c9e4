import math
import pytest
import sympy
from core.exceptions import ParameterError
from core.parameters.resolver import resolve, parse_quantity


def test_plain_numbers():
    assert resolve({"a": 1, "b": 2.5, "c": "1e-9"}) == {"a": 1.0, "b": 2.5, "c": 1e-9}

def test_units_reduce_to_si():
    resolved = resolve({"R": "1 kohm", "C": "100 nF", "L": "2 uH"})
    assert resolved["R"] == pytest.approx(1000.0)
    assert resolved["C"] == pytest.approx(1e-7)
    assert resolved["L"] == pytest.approx(2e-6)

def test_angle_in_degrees_becomes_radians():
    assert parse_quantity("45 degree") == pytest.approx(math.pi / 4)

def test_nested_dependency():
    params = {
        "a_val": "2",
        "b_val": "a_val + 3",
        "c_val": "b_val * 2",
        "d_val": "c_val + a_val",
    }
    resolved = resolve(params)
    assert resolved["b_val"] == 5.0
    assert resolved["c_val"] == 10.0
    assert resolved["d_val"] == 12.0

def test_expression_with_units_and_constants():
    resolved = resolve({"R0": "1 kohm", "Cx": "1 uF", "fc": "1/(2*pi*R0*Cx)"})
    assert resolved["fc"] == pytest.approx(1 / (2 * math.pi * 1e-3))

def test_parameter_name_shadows_unit_symbol():
    # "L" would be litre for Pint; here it is a parameter
    resolved = resolve({"x": "2*L"}, context={"L": 1e-6})
    assert resolved == {"x": pytest.approx(2e-6)}

def test_context_values_are_not_returned():
    resolved = resolve({"R": "R0"}, context={"R0": 50.0})
    assert resolved == {"R": 50.0}

def test_sympy_expression_accepted():
    assert resolve({"a": 2, "b": sympy.sympify("a**2")})["b"] == 4.0

def test_circular_dependency():
    with pytest.raises(ParameterError, match="Circular dependency"):
        resolve({"a": "b + 1", "b": "a + 1"})

def test_undefined_symbol():
    with pytest.raises(ParameterError, match="Undefined symbol"):
        resolve({"a": "2*not_defined_here"})

def test_unsupported_type():
    with pytest.raises(ParameterError, match="Unsupported type"):
        resolve({"a": [1, 2]})
