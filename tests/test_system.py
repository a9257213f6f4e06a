import numpy as np
import pytest
from itertools import product

import liquid


def test_invariants():
    for n_lateral, fill_fraction in product((1, 2, 3, 5), (0.05, 0.35, 0.6, 0.95)):
        system = liquid.new_system(n_lateral, fill_fraction)
        assert system.n == n_lateral ** 3
        assert np.isclose(system.density, 6 * fill_fraction / np.pi)
        assert np.isclose(system.box_length, np.cbrt(system.n / system.density))
        assert system.positions.shape == (system.n, 3)


def test_lattice_placement():
    system = liquid.new_system(3, 0.35)
    gap = np.cbrt(system.density)
    p = 0
    for i in range(3):
        for j in range(3):
            for k in range(3):
                expect = ((i + 0.5) * gap, (j + 0.5) * gap, (k + 0.5) * gap)
                assert np.array_equal(system.positions[p], expect)
                p += 1


def test_gap_is_not_box_over_lattice():
    system = liquid.new_system(4, 0.35)
    assert np.isclose(system.gap, np.cbrt(system.density))
    assert not np.isclose(system.gap, system.box_length / system.n_lateral)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        liquid.new_system(0, 0.35)
    with pytest.raises(ValueError):
        liquid.new_system(2.5, 0.35)
    with pytest.raises(ValueError):
        liquid.new_system(2, 0.0)
    with pytest.raises(ValueError):
        liquid.new_system(2, 1.0)
    with pytest.raises(ValueError):
        liquid.crystal.get_crystal_lattice('fcc', 2, 1.0)


def test_load_positions():
    system = liquid.new_system(2, 0.35)
    positions = np.random.default_rng(0).uniform(0, system.box_length, (8, 3))
    copied = liquid.System(2, 0.35, positions)
    assert np.allclose(copied.positions, positions)
    with pytest.raises(ValueError):
        system.load_positions(np.zeros((7, 3)))


def test_report(capsys):
    system = liquid.new_system(2, 0.35, report=True)
    out = capsys.readouterr().out
    assert "N = 8" in out
    overview = str(system)
    assert overview.startswith("Number of particles: 8")
    assert overview.count("p_") == 8


def test_allocation_failure(monkeypatch):
    def no_memory(*args, **kwargs):
        raise MemoryError
    monkeypatch.setattr(liquid.system.np, "empty", no_memory)
    with pytest.raises(liquid.AllocationFailure):
        liquid.new_system(2, 0.35)


def test_lattice_allocation_failure(monkeypatch):
    def no_memory(*args, **kwargs):
        raise MemoryError
    monkeypatch.setattr(liquid.crystal.np, "indices", no_memory)
    with pytest.raises(liquid.AllocationFailure):
        liquid.new_system(2, 0.35)


def test_lattice_indices_order():
    indices = liquid.crystal.get_lattice_indices(2, 3, 4)
    expect = [(i, j, k) for i in range(2) for j in range(3) for k in range(4)]
    assert indices.shape == (24, 3)
    assert np.array_equal(indices, expect)


if __name__ == "__main__":
    test_invariants()
    test_lattice_placement()
    test_gap_is_not_box_over_lattice()
