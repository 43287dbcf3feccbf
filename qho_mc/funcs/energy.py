import numpy as np

from .errors import InvalidInputError


def beta_delta_e(val, n_prev, n_next):
    """beta * dE between occupation numbers; val = beta * k * a^2."""
    if n_prev == n_next:
        raise InvalidInputError(f"states must differ, got {n_prev} twice")
    return 0.5 * float(val) * (n_next * n_next - n_prev * n_prev)


def rate(val, n_prev, n_next):
    """Metropolis acceptance probability for n_prev -> n_next."""
    exponent = beta_delta_e(val, n_prev, n_next)
    # to lower energy level
    if exponent <= 0:
        return 1.0
    return float(np.exp(-exponent))
