#!/usr/bin/env python
import argparse
import logging
import sys
from typing import List, Optional

from core.exceptions import ACSweepError
from core.inout.csv_writer import write_csv
from core.inout.netlist import load_netlist
from core.inout.sweep import load_sweep_config
from evaluation.sweep import sweep
from utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run an AC frequency sweep described by YAML netlist/analysis files and
    write the output-node response as CSV.

    Command-line arguments:
      --netlist: Path to the YAML netlist file.
      --sweep: Path to the YAML analysis configuration file.
      --output: CSV file to write (default: output.csv).
      --workers: Evaluate sweep points in N processes.
      --verbose: Enable DEBUG logging.
      --log-file: Also write the log to this file.

    Returns the process exit code: 1 if an input cannot be read or validated
    or the output cannot be written, 0 otherwise.
    """
    parser = argparse.ArgumentParser(description="Run a small-signal AC sweep.")
    parser.add_argument("--netlist", required=True, help="Path to the YAML netlist file.")
    parser.add_argument("--sweep", required=True, help="Path to the YAML analysis configuration file.")
    parser.add_argument("--output", default="output.csv", help="CSV file for the sweep result.")
    parser.add_argument("--workers", type=int, default=None, help="Number of worker processes.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    parser.add_argument("--log-file", default=None, help="Optional log file.")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)
    logger.debug("Verbose logging enabled.")

    try:
        circuit = load_netlist(args.netlist)
        config = load_sweep_config(args.sweep)
        if isinstance(config.input_source, str):
            source_index = circuit.index_of(config.input_source)
        else:
            source_index = config.input_source
        result = sweep(
            config.output_node, source_index,
            config.start, config.stop, config.points_per_decade,
            circuit.components, circuit.num_nodes,
            workers=args.workers,
        )
    except ACSweepError as e:
        logger.error("%s", e)
        return 1

    if result.errors:
        logger.warning("%d of %d points are non-finite.", len(result.errors), len(result))

    try:
        write_csv(result.points, args.output)
    except OSError as e:
        logger.error("Failed to open %s: %s", args.output, e)
        return 1

    logger.info("Sweep completed: %d points written to %s", len(result), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
