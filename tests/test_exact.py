import numpy as np
import pytest

from qho_mc.funcs import InvalidInputError, exact_observables, partition_function


def test_unit_coupling_matches_continuum():
    # Poisson summation: corrections are O(exp(-2 pi^2))
    assert np.isclose(partition_function(1.0), np.sqrt(2 * np.pi), atol=1e-6)
    obs = exact_observables(1.0)
    assert abs(obs["mean_x"]) < 1e-12
    assert np.isclose(obs["mean_x2"], 1.0, atol=1e-6)


def test_stiff_coupling_two_level_limit():
    val = 20.0
    w = np.exp(-val / 2)
    obs = exact_observables(val)
    assert np.isclose(obs["mean_x2"], 2 * w / (1 + 2 * w))


def test_explicit_cutoff():
    assert np.isclose(partition_function(1.0, n_max=0), 1.0)


@pytest.mark.parametrize("val", [0.0, -1.0])
def test_non_normalisable_rejected(val):
    with pytest.raises(InvalidInputError):
        exact_observables(val)


def test_tiny_coupling_uses_continuum_form():
    obs = exact_observables(1e-20)
    assert np.isclose(obs["mean_x2"], 1e20)
    assert np.isclose(obs["Z"], np.sqrt(2 * np.pi / 1e-20))
    assert obs["mean_x"] == 0.0


def test_lattice_sum_agrees_with_continuum_for_soft_coupling():
    # still summed on the lattice, but deep in the continuum regime
    obs = exact_observables(1e-6)
    assert np.isclose(obs["mean_x2"], 1e6)
    assert np.isclose(partition_function(1e-6), np.sqrt(2 * np.pi / 1e-6))
