# core/stamping/matrix_builder.py
"""
Assemble the nodal conductance matrix and current-excitation vector for one
angular frequency.

Passive and dependent elements accumulate into the matrix in a first pass.
Ideal voltage sources are deferred and, in a strictly ordered second pass,
overwrite the KCL row of the node they pin (modified nodal analysis without
an auxiliary branch-current unknown). Node 0 is ground and never has a row.
"""
from typing import List, Optional, Sequence, Tuple

import numpy as np

from core.components.base import Component, ComponentKind
from core.numeric.phasor import GROUND, node_to_index, polar
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _stamp_two_terminal(G: np.ndarray, comp: Component, omega: float) -> None:
    a, b = comp.get_nodes()[:2]
    # Each direction is evaluated on its own; dependent elements are not symmetric
    g_ab = comp.get_conductance(a, b, omega)
    g_ba = comp.get_conductance(b, a, omega)

    if a != GROUND and b != GROUND:
        G[node_to_index(a), node_to_index(b)] -= g_ab
        G[node_to_index(b), node_to_index(a)] -= g_ba

    if a != GROUND:
        G[node_to_index(a), node_to_index(a)] += g_ab

    if b != GROUND:
        G[node_to_index(b), node_to_index(b)] += g_ba


def _stamp_transconductance(G: np.ndarray, comp: Component, omega: float) -> None:
    nodes = comp.get_nodes()
    outputs = [n for n in dict.fromkeys(nodes[:2]) if n != GROUND]
    controls = [n for n in dict.fromkeys(nodes[2:]) if n != GROUND]
    for o in outputs:
        for c in controls:
            G[node_to_index(o), node_to_index(c)] += comp.get_conductance(o, c, omega)


def _stamp_dependent(G: np.ndarray, comp: Component, omega: float) -> None:
    if len(comp.get_nodes()) == 2:
        _stamp_two_terminal(G, comp, omega)
    else:
        _stamp_transconductance(G, comp, omega)


def _force_voltage_row(G: np.ndarray, comp: Component) -> None:
    node_plus, node_minus = comp.get_nodes()[:2]
    if node_plus == node_minus:
        return

    if node_plus != GROUND:
        p = node_to_index(node_plus)
        G[p, :] = 0
        G[p, p] = 1
        if node_minus != GROUND:
            G[p, node_to_index(node_minus)] = -1
    else:
        m = node_to_index(node_minus)
        G[m, :] = 0
        G[m, m] = -1


def _forced_row(comp: Component) -> Optional[int]:
    """Row written by a voltage source: plus terminal's, else minus terminal's."""
    node_plus, node_minus = comp.get_nodes()[:2]
    if node_plus == node_minus:
        return None
    return node_to_index(node_plus if node_plus != GROUND else node_minus)


def _source_phasor(comp: Component) -> complex:
    amplitude, phase = comp.get_properties()[:2]
    return polar(amplitude, phase)


def build_conductance_matrix(components: Sequence[Component], num_nodes: int, omega: float) -> np.ndarray:
    """
    Return the (num_nodes, num_nodes) complex conductance matrix at `omega`.
    """
    G = np.zeros((num_nodes, num_nodes), dtype=np.complex128)
    voltage_sources: List[Component] = []

    for comp in components:
        kind = comp.kind
        if kind in (ComponentKind.AC_CURRENT_SOURCE, ComponentKind.DC_CURRENT_SOURCE):
            continue
        elif kind in (ComponentKind.AC_VOLTAGE_SOURCE, ComponentKind.DC_VOLTAGE_SOURCE):
            voltage_sources.append(comp)
        elif kind is ComponentKind.PASSIVE:
            _stamp_two_terminal(G, comp, omega)
        elif kind is ComponentKind.DEPENDENT:
            _stamp_dependent(G, comp, omega)
        else:
            raise TypeError(f"Unhandled component kind {kind!r} for '{comp.name}'")

    # Second pass, in discovery order: a later source pinning the same row wins
    for comp in voltage_sources:
        _force_voltage_row(G, comp)

    return G


def build_current_vector(components: Sequence[Component], num_nodes: int) -> np.ndarray:
    """
    Return the length-num_nodes complex excitation vector.
    """
    I = np.zeros(num_nodes, dtype=np.complex128)
    voltage_sources: List[Component] = []

    for comp in components:
        kind = comp.kind
        if kind is ComponentKind.AC_CURRENT_SOURCE:
            node_in, node_out = comp.get_nodes()[:2]
            current = _source_phasor(comp)
            if node_in != GROUND:
                I[node_to_index(node_in)] -= current
            if node_out != GROUND:
                I[node_to_index(node_out)] += current
        elif kind is ComponentKind.DC_CURRENT_SOURCE:
            # No small-signal excitation from a constant current
            continue
        elif kind in (ComponentKind.AC_VOLTAGE_SOURCE, ComponentKind.DC_VOLTAGE_SOURCE):
            voltage_sources.append(comp)
        elif kind in (ComponentKind.PASSIVE, ComponentKind.DEPENDENT):
            continue
        else:
            raise TypeError(f"Unhandled component kind {kind!r} for '{comp.name}'")

    for comp in voltage_sources:
        row = _forced_row(comp)
        if row is None:
            continue
        if comp.kind is ComponentKind.DC_VOLTAGE_SOURCE:
            I[row] = 0
        else:
            I[row] = _source_phasor(comp)

    return I


class MatrixAssembler:
    """
    Bundles a component list and node count so callers can assemble the
    system repeatedly across a sweep.
    """

    def __init__(self, components: Sequence[Component], num_nodes: int):
        self.components = list(components)
        self.num_nodes = int(num_nodes)
        logger.debug("MatrixAssembler: %d components, %d nodes", len(self.components), self.num_nodes)

    def conductance_matrix(self, omega: float) -> np.ndarray:
        return build_conductance_matrix(self.components, self.num_nodes, omega)

    def current_vector(self) -> np.ndarray:
        return build_current_vector(self.components, self.num_nodes)

    def assemble(self, omega: float) -> Tuple[np.ndarray, np.ndarray]:
        return self.conductance_matrix(omega), self.current_vector()
