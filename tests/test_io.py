import io
import math
import numpy as np
import pytest
import yaml
from core.components.capacitor import Capacitor
from core.components.sources import ACVoltageSource
from core.evaluation_types import SweepPoint
from core.exceptions import NetlistError, SweepConfigError
from core.inout.csv_writer import CSV_HEADER, render_csv, write_csv
from core.inout.netlist import load_netlist, parse_netlist
from core.inout.sweep import load_sweep_config, parse_sweep_config

NETLIST = """
parameters:
  R0: 1 kohm
components:
  - name: V1
    type: ac_voltage
    nodes: [1, 0]
    params: {amplitude: 1, phase: 90 degree}
  - name: R1
    type: resistor
    nodes: [1, 2]
    params: {R: R0}
  - name: C1
    type: capacitor
    nodes: [2, 0]
    params: {C: 100 nF}
"""


def test_load_netlist(tmp_path):
    path = tmp_path / "netlist.yml"
    path.write_text(NETLIST)
    circuit = load_netlist(path)
    assert circuit.num_nodes == 2
    assert [c.name for c in circuit.components] == ["V1", "R1", "C1"]
    assert isinstance(circuit.components[0], ACVoltageSource)
    assert circuit.components[0].get_properties() == pytest.approx([1.0, math.pi / 2])
    assert circuit.components[1].get_conductance(1, 2, 0.0) == pytest.approx(1e-3)
    assert isinstance(circuit.components[2], Capacitor)
    assert circuit.components[2].capacitance == pytest.approx(1e-7)
    assert circuit.parameters == {"R0": pytest.approx(1000.0)}
    assert circuit.index_of("C1") == 2

def test_missing_netlist_file(tmp_path):
    with pytest.raises(NetlistError, match="Failed to read"):
        load_netlist(tmp_path / "missing.yml")

def test_schema_violation():
    with pytest.raises(NetlistError, match="schema"):
        parse_netlist({"components": [{"name": "R1", "type": "resistor", "nodes": [1, -2]}]})

def test_duplicate_names():
    doc = yaml.safe_load(NETLIST)
    doc["components"][1]["name"] = "V1"
    with pytest.raises(NetlistError, match="Duplicate component names"):
        parse_netlist(doc)

def test_unknown_component_type():
    doc = {"components": [{"name": "Q1", "type": "bjt", "nodes": [1, 2, 0]}]}
    with pytest.raises(NetlistError, match="Unknown component type"):
        parse_netlist(doc)

def test_bad_parameter_expression():
    doc = {"components": [{"name": "R1", "type": "resistor", "nodes": [1, 0], "params": {"R": "Rx*2"}}]}
    with pytest.raises(NetlistError, match="R1"):
        parse_netlist(doc)

def test_load_sweep_config(tmp_path):
    path = tmp_path / "sweep.yml"
    path.write_text(
        "analysis:\n  output_node: 2\n  input_source: V1\n  start: 10\n  stop: 1e5\n  points_per_decade: 10\n"
    )
    cfg = load_sweep_config(path)
    assert cfg.output_node == 2
    assert cfg.input_source == "V1"
    assert cfg.start == 10.0
    assert cfg.stop == 1e5
    assert cfg.points_per_decade == 10

def test_sweep_config_rejects_inverted_range():
    raw = {"analysis": {"output_node": 1, "input_source": 0, "start": 100, "stop": 10, "points_per_decade": 5}}
    with pytest.raises(SweepConfigError, match="stop"):
        parse_sweep_config(raw)

def test_sweep_config_requires_fields():
    with pytest.raises(SweepConfigError, match="schema"):
        parse_sweep_config({"analysis": {"output_node": 1}})

def test_csv_format():
    points = [SweepPoint(100.0, -3.0103, -45.0), SweepPoint(1e6, -60.0, -89.99)]
    lines = render_csv(points).splitlines()
    assert lines[0] == CSV_HEADER == "Frequency / Hz, Amplitude / dB, Phase / Degrees"
    assert lines[1] == "100, -3.0103, -45,"
    assert lines[2] == "1e+06, -60, -89.99,"

def test_csv_non_finite_values():
    stream = io.StringIO()
    write_csv([SweepPoint(10.0, float("nan"), float("nan"), complex("nan"))], stream)
    assert stream.getvalue().splitlines()[1] == "10, nan, nan,"

def test_write_csv_to_path(tmp_path):
    out = tmp_path / "out.csv"
    write_csv([SweepPoint(1.0, 0.0, 0.0)], out)
    assert out.read_text() == CSV_HEADER + "\n1, 0, 0,\n"
