import numpy as np

import liquid
from liquid import potential


def test_radial_potential_at_one():
    assert potential.radial_potential(1.0) == 1 / potential.DT
    assert np.isclose(potential.radial_potential(1.0), 0.6785, atol=1e-4)


def test_radial_potential_shape():
    r_min = potential.DL / (potential.DL - 1)
    assert np.isclose(potential.radial_potential(r_min), 0.0, atol=1e-10)
    r = np.linspace(0.9, 1.5, 100)
    v = potential.radial_potential(r)
    assert v.shape == r.shape
    assert np.all(v > -1e-10)
    assert np.all(np.diff(v[r < r_min]) < 0)  # repulsive core
    assert potential.radial_potential(0.9) > 100


def test_constants():
    assert potential.DL == 50
    assert potential.DT == 1.4737
    assert np.isclose(potential.DA, 50 * (50 / 49) ** 49)


def test_pair_potential_cutoff():
    system = liquid.new_system(2, 0.35)
    box = system.box_length
    system.positions[0] = (0.0, 0.0, 0.0)
    system.positions[1] = (box / 2, 0.0, 0.0)
    assert liquid.pair_potential(system, 0, 1) == 0
    system.positions[1] = (0.6 * box, 0.0, 0.0)
    assert liquid.pair_potential(system, 0, 1) == 0
    system.positions[1] = (1.0, 0.0, 0.0)
    assert liquid.pair_potential(system, 0, 1) == 1 / potential.DT


def test_pair_potential_minimum_image():
    system = liquid.new_system(2, 0.35)
    box = system.box_length
    system.positions[0] = (0.1, 0.0, 0.0)
    system.positions[1] = (box - 0.9, 0.0, 0.0)
    assert liquid.pair_potential(system, 0, 1) == 0
    assert np.isclose(
        liquid.pair_potential(system, 0, 1, minimum_image=True),
        1 / potential.DT
    )


if __name__ == "__main__":
    test_radial_potential_at_one()
    test_radial_potential_shape()
    test_pair_potential_cutoff()
