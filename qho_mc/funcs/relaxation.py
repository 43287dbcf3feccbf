import numpy as np

from .errors import EquilibrationError, InvalidInputError


def relaxation_time(times, states):
    """Index of the first return to state 0 after the start.

    A walk that starts in 0 counts as already equilibrated (tau = 0).
    """
    times = np.asarray(times)
    states = np.asarray(states)
    if len(times) != len(states):
        raise InvalidInputError(
            f"time and state series differ in length ({len(times)} vs {len(states)})"
        )
    if len(states) == 0:
        raise InvalidInputError("empty trajectory")
    if states[0] == 0:
        return 0
    zeros = np.flatnonzero(states[1:] == 0)
    if len(zeros) == 0:
        raise EquilibrationError(
            "relaxation time not found: state 0 never recurs, rerun with more steps"
        )
    return int(zeros[0]) + 1


def equilibrated(times, states):
    """Drop the transient part before the relaxation time."""
    tau = relaxation_time(times, states)
    return np.array(times[tau:]), np.array(states[tau:])
