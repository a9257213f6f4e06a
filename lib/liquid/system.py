import numpy as np
from numbers import Integral

from . import crystal
from .errors import AllocationFailure


class System:
    """
    The particles of a one-component liquid inside a cubic periodic box.

    Only the rows of `positions` change after construction, one particle
    at a time. The particle index is its identity and is never reordered.

    Attributes:
        n (int): the number of particles, n_lateral ** 3
        n_lateral (int): the number of particles along each lattice edge
        fill_fraction (float): the target packing fraction
        density (float): the number density, 6 * fill_fraction / pi
        box_length (float): the edge of the cubic box, cbrt(n / density)
        positions (numpy.ndarray): the positions of particles, shape (n, 3)
    """
    def __init__(self, n_lateral, fill_fraction, positions=None):
        if not isinstance(n_lateral, Integral) or isinstance(n_lateral, bool):
            raise ValueError("The lattice size must be an integer", n_lateral)
        if n_lateral < 1:
            raise ValueError("The lattice size must be positive", n_lateral)
        if not (0 < fill_fraction < 1):
            raise ValueError("The fill fraction must be in (0, 1)", fill_fraction)
        self.n_lateral = int(n_lateral)
        self.n = self.n_lateral ** 3
        self.fill_fraction = float(fill_fraction)
        self.density = crystal.get_density(self.fill_fraction)
        self.box_length = np.cbrt(self.n / self.density)
        try:
            self.positions = np.empty((self.n, 3))
            if positions is None:
                crystal.get_crystal_lattice(
                    "cubic", self.n_lateral, self.gap, out=self.positions
                )
        except MemoryError as err:
            raise AllocationFailure(
                f"Cannot allocate the lattice of {self.n} particles"
            ) from err
        if positions is not None:
            self.load_positions(positions)

    @property
    def gap(self):
        """
        The spacing of the initial lattice, derived from the density
            rather than from box_length / n_lateral
        """
        return crystal.get_lattice_gap(self.density)

    def load_positions(self, positions):
        positions = np.asarray(positions, dtype=float)
        if positions.shape != (self.n, 3):
            raise ValueError(
                f"Invalid shape of positions, expecting ({self.n}, 3)",
                positions.shape
            )
        self.positions[:] = positions

    def copy_positions(self):
        return self.positions.copy()

    def __repr__(self):
        return (
            f"System(n_lateral={self.n_lateral}, "
            f"fill_fraction={self.fill_fraction})"
        )

    def __str__(self):
        lines = [
            f"Number of particles: {self.n}",
            f"Box length: {self.box_length:.6f}",
            "Configuration:",
        ]
        for i, (x, y, z) in enumerate(self.positions):
            lines.append(f"p_{i} = ({x:.2f}, {y:.2f}, {z:.2f})")
        return "\n".join(lines)


def new_system(n_lateral, fill_fraction, report=False):
    """
    Create a liquid whose particles sit on a simple cubic lattice

    Args:
        n_lateral (int): the number of particles along each lattice edge
        fill_fraction (float): the target packing fraction, in (0, 1)
        report (bool): if true, print a summary of the created lattice

    Return:
        System: the new system with n_lateral ** 3 particles
    """
    system = System(n_lateral, fill_fraction)
    if report:
        print(
            f"Creating cubic lattice in a box of {system.box_length:.4f}, "
            f"N = {system.n}, fill fraction = {system.fill_fraction}"
        )
    return system
