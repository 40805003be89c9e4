# core/inout/csv_writer.py
"""
Fixed-format CSV output of a sweep:

    Frequency / Hz, Amplitude / dB, Phase / Degrees
    100, -0.0043, -3.59,

Each row keeps its trailing comma for compatibility with existing readers.
"""
from pathlib import Path
from typing import Iterable, TextIO, Union

from core.evaluation_types import SweepPoint

CSV_HEADER = "Frequency / Hz, Amplitude / dB, Phase / Degrees"


def format_row(point: SweepPoint) -> str:
    return f"{point.frequency:g}, {point.magnitude:g}, {point.phase:g},"


def render_csv(points: Iterable[SweepPoint]) -> str:
    lines = [CSV_HEADER]
    lines.extend(format_row(p) for p in points)
    return "\n".join(lines) + "\n"


def write_csv(points: Iterable[SweepPoint], target: Union[str, Path, TextIO]) -> None:
    """
    Write the sweep to a path or an open text stream. The text is rendered in
    full before the file is opened, so an error never leaves a partial file.
    """
    text = render_csv(points)
    if hasattr(target, "write"):
        target.write(text)
        return
    with open(target, "w", newline="") as f:
        f.write(text)
