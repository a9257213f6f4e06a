"""
Periodic geometry of the cubic box.

Coordinates are folded with abs(x) mod L, so a particle leaving the box
through the lower face re-enters mirrored rather than through the upper
face. Distances are measured between the folded points, without the
minimum image convention. Both corrected variants are available behind
explicit flags: `rewrap_one` and `distance_minimum_image`, they change
the simulated trajectory.
"""
import numpy as np


def wrap(x, box_length):
    """
    Fold coordinates into [0, box_length)

    Args:
        x (float or numpy.ndarray): the coordinates
        box_length (float): the edge of the cubic box

    Return:
        float or numpy.ndarray: abs(x) mod box_length
    """
    return np.fmod(np.abs(x), box_length)


def rewrap_all(system):
    """
    Fold every coordinate of every particle, in place
    """
    np.fmod(np.abs(system.positions), system.box_length, out=system.positions)


def rewrap_one(system, i):
    """
    Fold the coordinates of particle i only, in place
    """
    system.positions[i] = wrap(system.positions[i], system.box_length)


def distance(system, i, j):
    """
    The Euclidean distance between the folded positions of particle i and j
    """
    shift = wrap(system.positions[i], system.box_length) - \
        wrap(system.positions[j], system.box_length)
    return np.sqrt(np.sum(shift ** 2))


def distance_minimum_image(system, i, j):
    """
    The distance between particle i and the closest periodic image of j
    """
    shift = wrap(system.positions[i], system.box_length) - \
        wrap(system.positions[j], system.box_length)
    shift -= system.box_length * np.round(shift / system.box_length)
    return np.sqrt(np.sum(shift ** 2))


def distances_from(system, i, minimum_image=False):
    """
    The distances from particle i to every particle, including itself

    Args:
        system (System): the liquid
        i (int): the index of the particle
        minimum_image (bool): if true, use the closest periodic images

    Return:
        numpy.ndarray: the distances, shape (n,)
    """
    folded = wrap(system.positions, system.box_length)
    shift = folded - folded[i][np.newaxis, :]
    if minimum_image:
        shift -= system.box_length * np.round(shift / system.box_length)
    return np.sqrt(np.sum(shift ** 2, axis=1))


def pair_distances(system, minimum_image=False):
    """
    The distances of all unordered pairs i < j

    Return:
        tuple: (i, j, distances), the indices follow numpy.triu_indices
    """
    folded = wrap(system.positions, system.box_length)
    i, j = np.triu_indices(system.n, k=1)
    shift = folded[i] - folded[j]
    if minimum_image:
        shift -= system.box_length * np.round(shift / system.box_length)
    return i, j, np.sqrt(np.sum(shift ** 2, axis=1))
