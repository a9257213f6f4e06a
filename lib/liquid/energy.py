import numpy as np

from .geometry import distances_from, pair_distances
from .potential import radial_potential


def _sum_within_cutoff(r, box_length):
    r = r[r < box_length / 2]
    if len(r) == 0:
        return 0.0
    return float(np.sum(radial_potential(r)))


def particle_energy(system, i, minimum_image=False):
    """
    The interaction energy between particle i and all other particles

    Args:
        system (System): the liquid
        i (int): the index of the particle
        minimum_image (bool): if true, use the closest periodic images

    Return:
        float: the sum of pair_potential(system, i, j) over j != i
    """
    r = distances_from(system, i, minimum_image=minimum_image)
    r = np.delete(r, i)
    return _sum_within_cutoff(r, system.box_length)


def system_energy(system, minimum_image=False):
    """
    The total potential energy, summed over all unordered pairs. It is
        O(n^2) and only evaluated once at the start of a run.
    """
    _, _, r = pair_distances(system, minimum_image=minimum_image)
    return _sum_within_cutoff(r, system.box_length)
