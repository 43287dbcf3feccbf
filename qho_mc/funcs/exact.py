import numpy as np

from .errors import InvalidInputError

# beyond this lattice half-width the continuum (Poisson summation) form is used
MAX_LATTICE = 100000


def _cutoff(val):
    if val <= 0:
        raise InvalidInputError(f"distribution is not normalisable for coupling {val}")
    # weights below exp(-50) are dropped
    return np.ceil(np.sqrt(100.0 / val)) + 1


def _weights(val, n_max):
    n = np.arange(-n_max, n_max + 1)
    return n, np.exp(-0.5 * val * n ** 2)


def partition_function(val, n_max=None):
    """Z = sum_n exp(-val n^2 / 2) over the integer lattice."""
    return exact_observables(val, n_max)["Z"]


def exact_observables(val, n_max=None):
    """Stationary E[x], E[x^2] of the walk, for comparison with the MCMC estimate.

    For couplings so small that the lattice sum would need more than
    MAX_LATTICE sites on each side, the continuum values sqrt(2 pi / val) and
    1 / val are returned; the lattice corrections are O(exp(-2 pi^2 / val)).
    """
    cutoff = _cutoff(val)
    if n_max is None:
        if cutoff > MAX_LATTICE:
            return {
                "Z": float(np.sqrt(2 * np.pi / val)),
                "mean_x": 0.0,
                "mean_x2": float(np.float64(1.0) / val),
            }
        n_max = int(cutoff)
    n, w = _weights(val, n_max)
    Z = np.sum(w)
    return {
        "Z": float(Z),
        "mean_x": float(np.sum(n * w) / Z),
        "mean_x2": float(np.sum(n ** 2 * w) / Z),
    }
