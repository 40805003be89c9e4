import logging
import pytest
from run_sweep import main

NETLIST = """
components:
  - {name: V1, type: ac_voltage, nodes: [1, 0], params: {amplitude: 1}}
  - {name: R1, type: resistor, nodes: [1, 2], params: {R: 1 kohm}}
  - {name: C1, type: capacitor, nodes: [2, 0], params: {C: 1 uF}}
"""

SWEEP = """
analysis:
  output_node: 2
  input_source: V1
  start: 100
  stop: 10000
  points_per_decade: 10
"""


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def inputs(tmp_path):
    netlist = tmp_path / "netlist.yml"
    sweep = tmp_path / "sweep.yml"
    netlist.write_text(NETLIST)
    sweep.write_text(SWEEP)
    return netlist, sweep


def test_cli_writes_csv(inputs, tmp_path):
    netlist, sweep = inputs
    out = tmp_path / "output.csv"
    code = main(["--netlist", str(netlist), "--sweep", str(sweep), "--output", str(out)])
    assert code == 0
    lines = out.read_text().splitlines()
    assert lines[0] == "Frequency / Hz, Amplitude / dB, Phase / Degrees"
    assert len(lines) == 22
    assert lines[1].startswith("100, ")
    assert all(line.endswith(",") for line in lines[1:])

def test_cli_missing_netlist(tmp_path, inputs):
    _, sweep = inputs
    out = tmp_path / "output.csv"
    code = main(["--netlist", str(tmp_path / "nope.yml"), "--sweep", str(sweep), "--output", str(out)])
    assert code == 1
    assert not out.exists()

def test_cli_unwritable_output(inputs, tmp_path):
    netlist, sweep = inputs
    out = tmp_path / "no_such_dir" / "output.csv"
    code = main(["--netlist", str(netlist), "--sweep", str(sweep), "--output", str(out)])
    assert code == 1

def test_cli_input_source_by_index(inputs, tmp_path):
    netlist, sweep = inputs
    sweep.write_text(SWEEP.replace("input_source: V1", "input_source: 0"))
    out = tmp_path / "output.csv"
    assert main(["--netlist", str(netlist), "--sweep", str(sweep), "--output", str(out), "--verbose"]) == 0

def test_cli_unknown_input_source(inputs, tmp_path):
    netlist, sweep = inputs
    sweep.write_text(SWEEP.replace("input_source: V1", "input_source: V9"))
    assert main(["--netlist", str(netlist), "--sweep", str(sweep), "--output", str(tmp_path / "o.csv")]) == 1
