"""Oscillator Monte Carlo: Metropolis walk, relaxation time, block errors."""
from .errors import InvalidInputError, EquilibrationError
from .energy import beta_delta_e, rate
from .walk import RandomWalk, run_random_walk
from .relaxation import relaxation_time, equilibrated
from .blocks import (
    block_lengths,
    split_blocks,
    block_statistics,
    scan_block_errors,
)
from .exact import partition_function, exact_observables
from .io import write_trajectory, read_trajectory, line_sink
from .pipeline import SimulationParams, run_simulation, report

__all__ = [
    "InvalidInputError",
    "EquilibrationError",
    "beta_delta_e",
    "rate",
    "RandomWalk",
    "run_random_walk",
    "relaxation_time",
    "equilibrated",
    "block_lengths",
    "split_blocks",
    "block_statistics",
    "scan_block_errors",
    "partition_function",
    "exact_observables",
    "write_trajectory",
    "read_trajectory",
    "line_sink",
    "SimulationParams",
    "run_simulation",
    "report",
]
