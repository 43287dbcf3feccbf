import numpy as np

from .errors import InvalidInputError

HEADER = "time state"


def write_trajectory(path, times, states):
    """Two-column text table, one row per step."""
    table = np.column_stack([np.asarray(times, dtype=np.int64), np.asarray(states, dtype=np.int64)])
    np.savetxt(path, table, fmt="%d", header=HEADER, comments="")


def read_trajectory(path):
    """Inverse of write_trajectory. Returns (times, states)."""
    try:
        table = np.loadtxt(path, dtype=np.int64, skiprows=1, ndmin=2)
    except ValueError as exc:
        raise InvalidInputError(f"{path}: malformed trajectory table ({exc})") from exc
    if table.size == 0:
        return np.zeros(0, dtype=np.int64), np.zeros(0, dtype=np.int64)
    if table.shape[1] != 2:
        raise InvalidInputError(f"{path}: expected 2 columns, found {table.shape[1]}")
    return table[:, 0].copy(), table[:, 1].copy()


def line_sink(fh):
    """Sink that streams each step to an open text file, header first."""
    fh.write(HEADER + "\n")

    def sink(t, state):
        fh.write(f"{t} {state}\n")

    return sink
