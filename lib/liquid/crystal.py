#!/usr/bin/env python
import numpy as np


crystal_info = {
    "cubic": {
        "motif": np.array((0.5, 0.5, 0.5)).reshape((1, 3)),
        "lattice_points": 1,
    },
}  # the motif is in units of the lattice gap


def get_lattice_indices(nx, ny, nz):
    """
    Get the integer indices of a lattice, the last axis changes fastest

    Args:
        nx (int): the number of unit cells in x direction
        ny (int): the number of unit cells in y direction
        nz (int): the number of unit cells in z direction

    Return:
        numpy.ndarray: the lattice indices, shape (nx * ny * nz, 3)
    """
    indices = np.indices((nx, ny, nz), dtype=float)
    return indices.reshape((3, nx * ny * nz)).T


def get_crystal_lattice(kind, n_lateral, gap, out=None):
    """
    Get the positions of a lattice with n_lateral cells along each axis.
        Lattice point (i, j, k) is placed at ((i, j, k) + motif) * gap.

    Args:
        kind (str): the type of crystals to get, only "cubic" is known
        n_lateral (int): the number of unit cells in each direction
        gap (float): the distance between neighbouring lattice points
        out (numpy.ndarray): optional array to be filled, shape (n, 3)

    Return:
        numpy.ndarray: the positions of the lattice points, shape (n, 3)
    """
    crystal = crystal_info.get(kind)
    if not crystal:
        raise ValueError("Invalid crystal type", kind)
    indices = get_lattice_indices(n_lateral, n_lateral, n_lateral)
    if out is None:
        out = np.empty(indices.shape)
    out[:] = (indices + crystal['motif']) * gap
    return out


def get_lattice_gap(density):
    """
    Get the lattice gap of a cubic crystal at given number density

    Args:
        density (float): the number density, e.g. 6 * 0.35 / pi

    Result:
        float: the lattice gap
    """
    return np.cbrt(density)


def get_density(fill_fraction, sigma=1.0):
    """
    Get the number density of spheres at given fill fraction

    Args:
        fill_fraction (float): the volume fraction, e.g. 0.35
        sigma (float): the diameter of the particles.

    Result:
        float: the number density
    """
    return 6.0 * fill_fraction / np.pi / sigma**3


if __name__ == "__main__":
    import matplotlib.pyplot as plt

    pos = get_crystal_lattice("cubic", 3, get_lattice_gap(get_density(0.35)))
    fig = plt.figure()
    ax = fig.add_subplot(projection='3d')
    ax.set_title("cubic")
    ax.scatter(*pos.T)
    plt.show()
