import math
from dataclasses import dataclass
from typing import Optional

from .blocks import block_statistics, scan_block_errors
from .errors import InvalidInputError
from .exact import exact_observables
from .io import line_sink
from .relaxation import equilibrated
from .walk import RandomWalk


@dataclass
class SimulationParams:
    num_steps: int
    n_init: int
    coupling: float  # beta * k * a^2
    chunks: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        if self.num_steps <= 0:
            raise InvalidInputError(f"num_steps must be positive, got {self.num_steps}")
        if self.chunks <= 0:
            raise InvalidInputError(f"chunks must be positive, got {self.chunks}")
        if not math.isfinite(self.coupling):
            raise InvalidInputError(f"coupling must be finite, got {self.coupling}")


def _exact_mean_x2(coupling):
    """Exact E[x^2], or None where the stationary distribution is not defined."""
    if coupling <= 0:
        return None
    value = exact_observables(coupling)["mean_x2"]
    return value if math.isfinite(value) else None


def run_simulation(params, out_path=None, verbose=True, scan=False):
    """Walk, trim the transient, block-average. Returns a dict of observables."""
    if verbose:
        print(f"\nRunning {params.num_steps} Metropolis steps from n={params.n_init} "
              f"(beta*k*a^2 = {params.coupling})...", flush=True)

    if out_path is not None:
        with open(out_path, "w") as fh:
            walk = RandomWalk(params.coupling, params.n_init, seed=params.seed, sink=line_sink(fh))
            times, states = walk.run(params.num_steps)
    else:
        walk = RandomWalk(params.coupling, params.n_init, seed=params.seed)
        times, states = walk.run(params.num_steps)

    eq_times, eq_states = equilibrated(times, states)
    # times are dense from 0, so the first kept time is tau
    tau = int(eq_times[0])
    if verbose:
        print(f"Relaxation time tau = {tau} | {len(eq_states)} equilibrated steps", flush=True)
    if params.chunks > len(eq_states):
        raise InvalidInputError(
            f"chunks = {params.chunks} exceeds the {len(eq_states)} equilibrated steps"
        )

    results = {"tau": tau}
    results.update(block_statistics(eq_states, params.chunks))
    results["exact_mean_x2"] = _exact_mean_x2(params.coupling)
    if scan:
        results["scan"] = scan_block_errors(eq_states)
    return results


def report(results):
    """Print block averages and the final estimators."""
    for i, (m, m2) in enumerate(zip(results["block_means_x"], results["block_means_x2"])):
        print(f"Block {i:3d} | len {results['block_lengths'][i]:7d} | <x> = {m: .5f} | <x^2> = {m2: .5f}")
    print(f"E[x]   = {results['mean_x']: .5f} +/- {results['err_x']:.5f}")
    print(f"E[x^2] = {results['mean_x2']: .5f} +/- {results['err_x2']:.5f}")
    if results.get("exact_mean_x2") is not None:
        print(f"exact E[x^2] = {results['exact_mean_x2']:.5f}")
    for row in results.get("scan", []):
        print(f"chunks {row['chunks']:4d} | err x = {row['err_x']:.4e} | err x^2 = {row['err_x2']:.4e}")
