# core/parameters/resolver.py
"""
Parameter resolver for acsweep.
Resolves netlist parameter values (plain numbers, unit-bearing quantities and
symbolic expressions over other parameters) into floats in SI base units,
using sympy for expressions and Pint for units.
"""

from typing import Dict, Union, Set, List, Mapping, Optional
import sympy as sp
from pint import UnitRegistry

from core.exceptions import ParameterError
from core.safe_math import parse_expr

# Unit handling
ureg = UnitRegistry()

ParamValue = Union[str, int, float, sp.Expr]


def parse_quantity(expr: str) -> float:
    """
    Parse a unit-bearing string (e.g. "10 nF", "1 kohm", "45 degree") and
    return its magnitude in SI base units. Angles come back in radians.
    """
    try:
        qty = ureg.Quantity(expr)
    except Exception as e:
        raise ValueError(f"Could not parse '{expr}' as a quantity: {e}")
    if hasattr(qty, "to_base_units"):
        return float(qty.to_base_units().magnitude)
    return float(qty)


def _classify(key: str, expr: ParamValue, names: Set[str]) -> Union[float, sp.Expr]:
    """
    Turn one raw value into either a float or a sympy expression whose free
    symbols are parameter names.
    """
    if isinstance(expr, bool):
        raise ParameterError(f"Unsupported type for parameter '{key}': bool")
    if isinstance(expr, (int, float)):
        return float(expr)
    if isinstance(expr, sp.Expr):
        return expr
    if not isinstance(expr, str):
        raise ParameterError(f"Unsupported type for parameter '{key}': {type(expr)}")

    text = expr.strip()
    try:
        return float(text)
    except ValueError:
        pass

    parsed: Optional[sp.Expr] = None
    try:
        parsed = parse_expr(text)
    except ValueError:
        parsed = None

    # Symbols that name parameters take precedence over Pint units ("L", "C", "m"...)
    if parsed is not None:
        free = {str(s) for s in parsed.free_symbols}
        if free and free <= names:
            return parsed
        if not free:
            try:
                return float(parsed)
            except TypeError as e:
                raise ParameterError(f"Expression for '{key}' is not real-valued: {e}")

    try:
        return parse_quantity(text)
    except ValueError as e:
        if parsed is not None:
            unknown = sorted({str(s) for s in parsed.free_symbols} - names)
            raise ParameterError(f"Undefined symbol(s) {', '.join(unknown)} in parameter '{key}'")
        raise ParameterError(f"Failed to parse expression for '{key}': {e}")


def _build_dependency_graph(parsed: Dict[str, Union[float, sp.Expr]]) -> Dict[str, Set[str]]:
    """Map each parameter to the set of other local parameters it depends on."""
    graph: Dict[str, Set[str]] = {}
    for key, expr in parsed.items():
        deps: Set[str] = set()
        if isinstance(expr, sp.Expr):
            for sym in expr.free_symbols:
                name = str(sym)
                if name in parsed:
                    deps.add(name)
        graph[key] = deps
    return graph


def _topological_sort(graph: Dict[str, Set[str]]) -> List[str]:
    """
    Perform Kahn's algorithm to topologically sort the dependency graph.
    Raises ParameterError on cycles.
    """
    in_degree: Dict[str, int] = {node: 0 for node in graph}
    reverse_map: Dict[str, Set[str]] = {node: set() for node in graph}
    for node, deps in graph.items():
        for dep in deps:
            in_degree[node] += 1
            reverse_map.setdefault(dep, set()).add(node)

    queue: List[str] = [n for n, deg in in_degree.items() if deg == 0]
    sorted_list: List[str] = []

    while queue:
        n = queue.pop(0)
        sorted_list.append(n)
        for dependent in sorted(reverse_map.get(n, [])):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(sorted_list) != len(graph):
        cycle_candidates = [k for k, deg in in_degree.items() if deg > 0]
        raise ParameterError(f"Circular dependency among: {', '.join(cycle_candidates)}")

    return sorted_list


def resolve(param_dict: Mapping[str, ParamValue],
            context: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
    """
    Resolve all parameters in `param_dict` to numeric float values.

    Args:
        param_dict: Mapping from parameter name to a number, a quantity string
            or an expression string / sympy.Expr.
        context: Already resolved values (e.g. netlist-global parameters) that
            expressions may reference. Names in `param_dict` shadow them.

    Returns:
        Dictionary mapping parameter name to evaluated float value.

    Raises:
        ParameterError: If expression parsing or evaluation fails.
    """
    context = dict(context or {})
    names = set(param_dict) | set(context)
    parsed = {key: _classify(key, expr, names) for key, expr in param_dict.items()}
    order = _topological_sort(_build_dependency_graph(parsed))

    resolved: Dict[str, float] = {}
    for key in order:
        expr = parsed[key]
        if isinstance(expr, float):
            resolved[key] = expr
            continue
        subs = {**context, **resolved}
        try:
            val = expr.evalf(subs={sp.Symbol(k): v for k, v in subs.items()})
            resolved[key] = float(val)
        except Exception as e:
            raise ParameterError(f"Evaluation failed for '{key}': {e}")

    return {key: resolved[key] for key in param_dict}
