import numpy as np

from .errors import InvalidInputError


def block_lengths(n_eq, chunks):
    """Equal blocks of n_eq // chunks, the last one takes the remainder."""
    if chunks <= 0 or chunks > n_eq:
        raise InvalidInputError(f"chunks must be in [1, {n_eq}], got {chunks}")
    size = n_eq // chunks
    lengths = np.full(chunks, size, dtype=np.int64)
    lengths[-1] = n_eq - (chunks - 1) * size
    return lengths


def split_blocks(values, chunks):
    """Contiguous, non-overlapping blocks of values."""
    values = np.asarray(values)
    edges = np.cumsum(block_lengths(len(values), chunks))[:-1]
    return np.split(values, edges)


def _block_error(block_estimates, estimate):
    # population variance around the global estimate
    return float(np.sqrt(np.mean((block_estimates - estimate) ** 2)))


def block_statistics(values, chunks):
    """E[x], E[x^2] over equilibrated states with block-averaged errors."""
    x = np.asarray(values, dtype=np.float64)
    if x.size == 0:
        raise InvalidInputError("no equilibrated states to average")
    blocks = split_blocks(x, chunks)
    means_x = np.array([b.mean() for b in blocks])
    means_x2 = np.array([(b ** 2).mean() for b in blocks])

    mean_x = float(x.mean())
    mean_x2 = float((x ** 2).mean())
    return {
        "mean_x": mean_x,
        "err_x": _block_error(means_x, mean_x),
        "mean_x2": mean_x2,
        "err_x2": _block_error(means_x2, mean_x2),
        "block_means_x": means_x,
        "block_means_x2": means_x2,
        "block_lengths": np.array([len(b) for b in blocks]),
        "chunks": chunks,
        "n_eq": x.size,
    }


def scan_block_errors(values, chunk_counts=(2, 4, 8, 16, 32, 64, 128)):
    """Errors for several block counts; counts larger than the sample are skipped."""
    n_eq = len(values)
    rows = []
    for chunks in chunk_counts:
        if chunks > n_eq:
            continue
        stats = block_statistics(values, chunks)
        rows.append({"chunks": chunks, "err_x": stats["err_x"], "err_x2": stats["err_x2"]})
    return rows
