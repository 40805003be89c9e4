# evaluation/sweep.py
"""
Logarithmic AC sweep: one nodal solve per frequency, reduced to the
magnitude/phase response of a single output node.
"""
import math
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

import numpy as np

from core.components.base import Component
from core.evaluation_types import SweepPoint, SweepResult
from core.exceptions import AnalysisError
from core.numeric.phasor import angular_frequency, magnitude_db, node_to_index, phase_degrees
from core.solver import FrequencySolver
from utils.logging_config import get_logger

logger = get_logger(__name__)


def frequency_points(start_freq: float, stop_freq: float, points_per_decade: int) -> np.ndarray:
    """
    Log-spaced frequencies start * 10**(k/ppd), k = 0 .. ceil(decades*ppd).
    Both endpoints are included; the last point may overshoot `stop_freq`
    when the range is not a whole number of steps.
    """
    if start_freq <= 0 or stop_freq <= 0:
        raise AnalysisError(f"Sweep frequencies must be positive, got {start_freq}..{stop_freq} Hz")
    if stop_freq < start_freq:
        raise AnalysisError(f"Stop frequency {stop_freq} Hz is below start frequency {start_freq} Hz")
    if points_per_decade < 1:
        raise AnalysisError(f"points_per_decade must be >= 1, got {points_per_decade}")

    decades = math.log10(stop_freq / start_freq)
    # round() keeps float noise like 20.000000000000004 from adding a point
    count = int(math.ceil(round(decades * points_per_decade, 9))) + 1
    k = np.arange(count, dtype=float)
    return start_freq * np.power(10.0, k / points_per_decade)


def _check_preconditions(output_node: int, input_source_index: int,
                         components: Sequence[Component], num_nodes: int) -> Component:
    if not 1 <= output_node <= num_nodes:
        raise AnalysisError(
            f"Output node {output_node} is not a valid node (expected 1..{num_nodes}; 0 is ground)."
        )
    if not 0 <= input_source_index < len(components):
        raise AnalysisError(
            f"Input source index {input_source_index} out of range for {len(components)} components."
        )
    source = components[input_source_index]
    if not source.is_source:
        raise AnalysisError(
            f"Input component '{source.name}' ({source.type_name}) is not an independent source."
        )
    return source


def evaluate_point(args: Tuple[FrequencySolver, int, float]) -> SweepPoint:
    """Solve one frequency and extract the output-node response."""
    solver, output_node, freq = args
    voltages = solver.solve(angular_frequency(freq))
    v = complex(voltages[node_to_index(output_node)])
    return SweepPoint(
        frequency=float(freq),
        magnitude=float(magnitude_db(v)),
        phase=float(phase_degrees(v)),
        voltage=v,
    )


def sweep(output_node: int, input_source_index: int, start_freq: float, stop_freq: float,
          points_per_decade: int, components: Sequence[Component], num_nodes: int,
          workers: Optional[int] = None) -> SweepResult:
    """
    Run the AC sweep and return every point in ascending frequency order.

    The response is absolute: it is not divided by the input source's
    amplitude, so it equals the transfer function only for a unit source.
    A singular system at some frequency does not stop the sweep; the point is
    kept with non-finite values and reported in `SweepResult.errors`.

    Args:
        workers: Evaluate points in a process pool of this size when > 1.
    """
    source = _check_preconditions(output_node, input_source_index, components, num_nodes)
    freqs = frequency_points(start_freq, stop_freq, points_per_decade)
    solver = FrequencySolver(components, num_nodes)

    logger.info("AC sweep: %d points, %.6g..%.6g Hz, output node %d, input '%s'",
                len(freqs), freqs[0], freqs[-1], output_node, source.name)
    start_time = time.time()

    tasks = [(solver, output_node, f) for f in freqs]
    if workers and workers > 1:
        chunksize = max(1, len(tasks) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as executor:
            points: List[SweepPoint] = list(executor.map(evaluate_point, tasks, chunksize=chunksize))
    else:
        points = [evaluate_point(task) for task in tasks]

    errors: List[str] = []
    for point in points:
        logger.debug("f=%.6g Hz: %.6g dB, %.6g deg", point.frequency, point.magnitude, point.phase)
        if not point.is_finite:
            msg = f"Frequency {point.frequency:.3e} Hz: non-finite response (singular system?)"
            logger.warning(msg)
            errors.append(msg)

    elapsed = time.time() - start_time
    logger.info("AC sweep completed in %.3f s", elapsed)
    return SweepResult(
        points=points,
        output_node=output_node,
        input_source=source.name,
        errors=errors,
        stats={"points": len(points), "elapsed": elapsed},
    )
