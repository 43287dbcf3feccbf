import numpy as np
import pytest

from qho_mc.funcs import (
    InvalidInputError,
    line_sink,
    read_trajectory,
    run_random_walk,
    write_trajectory,
)


def test_round_trip(tmp_path):
    times, states = run_random_walk(400, -3, 0.2, seed=4)
    path = tmp_path / "traj.txt"
    write_trajectory(path, times, states)
    t2, s2 = read_trajectory(path)
    assert np.array_equal(times, t2)
    assert np.array_equal(states, s2)


def test_table_layout(tmp_path):
    path = tmp_path / "traj.txt"
    write_trajectory(path, [0, 1, 2], [1, 0, -1])
    assert path.read_text().splitlines() == ["time state", "0 1", "1 0", "2 -1"]


def test_streamed_file_matches_written_file(tmp_path):
    streamed = tmp_path / "streamed.txt"
    with open(streamed, "w") as fh:
        times, states = run_random_walk(250, 1, 0.5, seed=8, sink=line_sink(fh))
    written = tmp_path / "written.txt"
    write_trajectory(written, times, states)
    assert streamed.read_text() == written.read_text()


def test_single_row(tmp_path):
    path = tmp_path / "one.txt"
    write_trajectory(path, [0], [7])
    times, states = read_trajectory(path)
    assert times.tolist() == [0]
    assert states.tolist() == [7]


def test_wrong_column_count_rejected(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("time state\n0 1 2\n1 0 3\n")
    with pytest.raises(InvalidInputError):
        read_trajectory(path)
