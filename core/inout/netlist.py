# core/inout/netlist.py
"""
Load and validate YAML netlists into a CircuitModel.

    parameters:            # optional, resolved before the components
      R0: 1 kohm
    components:
      - {name: V1, type: ac_voltage, nodes: [1, 0], params: {amplitude: 1}}
      - {name: R1, type: resistor,   nodes: [1, 2], params: {R: R0}}
      - {name: C1, type: capacitor,  nodes: [2, 0], params: {C: 100 nF}}

Node 0 is ground; the remaining nodes are numbered 1..N.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Union

import yaml
from cerberus import Validator

from core.components.base import Component
from core.components.plugin_loader import ComponentFactory
from core.exceptions import ACSweepError, NetlistError
from core.parameters.resolver import resolve as resolve_parameters
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Schema for netlist validation
NETLIST_SCHEMA: Dict[str, Any] = {
    "parameters": {
        "type": "dict", "required": False, "nullable": True,
        "valuesrules": {"type": ["string", "number"]},
    },

    "components": {
        "type": "list", "required": True, "minlength": 1,
        "schema": {
            "type": "dict", "schema": {
                "name":   {"type": "string", "required": True, "empty": False},
                "type":   {"type": "string", "required": True, "empty": False},
                "nodes": {
                    "type": "list", "required": True, "minlength": 2,
                    "schema": {"type": "integer", "min": 0},
                },
                "params": {
                    "type": "dict", "required": False, "nullable": True,
                    "valuesrules": {"type": ["string", "number"]},
                },
            },
        },
    },
}


@dataclass
class CircuitModel:
    # Instantiated components, in netlist order
    components: List[Component] = field(default_factory=list)
    # Highest node number in the netlist
    num_nodes: int = 0
    # Resolved global parameters
    parameters: Dict[str, float] = field(default_factory=dict)

    def index_of(self, name: str) -> int:
        """Position of the component called `name` in `components`."""
        for i, comp in enumerate(self.components):
            if comp.name == name:
                return i
        raise NetlistError(f"No component named '{name}'.")


def _ensure_unique(seq: List[str], kind: str) -> None:
    """Raise *once* if duplicates found in *seq*."""
    dup = {x for x in seq if seq.count(x) > 1}
    if dup:
        raise NetlistError(f"Duplicate {kind}: {', '.join(sorted(dup))}")


def parse_netlist(raw: Any) -> CircuitModel:
    """Validate an already-loaded netlist document and instantiate it."""
    v = Validator(NETLIST_SCHEMA, allow_unknown=False)
    if not v.validate(raw if isinstance(raw, dict) else {}):
        raise NetlistError(f"Netlist schema violations: {v.errors}")
    doc = v.document

    _ensure_unique([c['name'] for c in doc['components']], 'component names')

    model = CircuitModel()

    # ---------- globals ------------------------------------------------
    try:
        model.parameters = resolve_parameters(doc.get('parameters') or {})
    except ACSweepError as exc:
        raise NetlistError(f"Global parameter error: {exc}") from exc

    # ---------- components --------------------------------------------
    for cdoc in doc['components']:
        name = cdoc['name']
        try:
            local = resolve_parameters(cdoc.get('params') or {}, context=model.parameters)
            inst = ComponentFactory.create(cdoc['type'], name, cdoc['nodes'], local)
        except ACSweepError as exc:
            raise NetlistError(f"Cannot instantiate component '{name}': {exc}") from exc
        model.components.append(inst)

    model.num_nodes = max(max(c.get_nodes()) for c in model.components)
    logger.debug("Netlist: %d components, %d nodes", len(model.components), model.num_nodes)
    return model


def load_netlist(path: Union[str, Path]) -> CircuitModel:
    """Read→validate→instantiate a YAML netlist file."""
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as exc:
        raise NetlistError(f"Failed to read YAML '{path}': {exc}") from exc
    return parse_netlist(raw)
