import numpy as np

from .geometry import distance, distance_minimum_image


DL = 50
DT = 1.4737
DA = DL * (DL / (DL - 1)) ** (DL - 1)


def radial_potential(r):
    """
    The pseudo hard sphere potential, a steep (50, 49) Mie repulsion
        shifted to reach its minimum of zero at r = DL / (DL - 1).
        It is singular at r = 0.

    Args:
        r (float or numpy.ndarray): the separation of two particles

    Return:
        float or numpy.ndarray: the potential energy in units of kT
    """
    repulsion = np.power(r, -float(DL))
    attraction = np.power(r, -float(DL - 1))
    return (DA / DT) * (repulsion - attraction) + 1 / DT


def pair_potential(system, i, j, minimum_image=False):
    """
    The interaction between particle i and j, zero beyond half of the box

    Args:
        system (System): the liquid
        i (int): the index of a particle
        j (int): the index of another particle
        minimum_image (bool): if true, use the closest periodic image of j

    Return:
        float: the potential energy
    """
    if minimum_image:
        r = distance_minimum_image(system, i, j)
    else:
        r = distance(system, i, j)
    if r >= system.box_length / 2:
        return 0.0
    return radial_potential(r)
