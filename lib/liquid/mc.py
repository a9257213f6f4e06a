"""
Metropolis Monte Carlo thermalisation of a liquid.

Each step displaces one random particle, folds the whole configuration
back into the box and accepts the move if exp(-dE) exceeds a uniform
random number. The maximum displacement is tuned towards a target
acceptance ratio using the cumulative ratio since the start of the run.
"""
import numpy as np
from numbers import Integral

from . import geometry
from .energy import particle_energy, system_energy
from .report import print_progress


INITIAL_MAX_DISPLACEMENT = 0.1
SHRINK = 0.95
GROW = 1.05
REWRAP_MODES = ('all', 'single')


class RunContext:
    """
    The running counters of a thermalisation run, only mutated by
        `trial_move` and `iter_thermalize`.

    Attributes:
        energy (float): the total potential energy, updated by the
            accepted energy changes after the initial evaluation
        n_accept (int): the number of accepted moves
        n_attempt (int): the number of attempted moves
        max_displacement (float): the magnitude of the trial moves
    """
    def __init__(self, energy, max_displacement=INITIAL_MAX_DISPLACEMENT):
        self.energy = energy
        self.n_accept = 0
        self.n_attempt = 0
        self.max_displacement = max_displacement

    @property
    def ratio(self):
        if self.n_attempt == 0:
            return 0.0
        return self.n_accept / self.n_attempt

    def record(self):
        return self.energy, self.max_displacement, self.ratio

    def __repr__(self):
        return (
            f"RunContext(energy={self.energy:.6f}, n_accept={self.n_accept}, "
            f"n_attempt={self.n_attempt}, "
            f"max_displacement={self.max_displacement:.6f})"
        )


def trial_move(system, context, rng, rewrap='all', minimum_image=False):
    """
    Attempt to displace one random particle

    Args:
        system (System): the liquid, modified in place
        context (RunContext): the counters of the run, modified in place
        rng (numpy.random.Generator): the source of uniform random numbers
        rewrap (str): [all] fold every particle after the move;
            [single] only fold the moved particle, which diverges numerically
        minimum_image (bool): if true, use the minimum image distance

    Return:
        bool: True if the move was accepted
    """
    if rewrap not in REWRAP_MODES:
        raise ValueError("Invalid rewrap mode", rewrap)
    i = rng.integers(system.n)
    energy_before = particle_energy(system, i, minimum_image=minimum_image)
    position_before = system.positions[i].copy()

    system.positions[i] += context.max_displacement * (rng.random(3) - 0.5)
    if rewrap == 'all':
        geometry.rewrap_all(system)
    elif rewrap == 'single':
        geometry.rewrap_one(system, i)

    energy_after = particle_energy(system, i, minimum_image=minimum_image)
    delta = energy_after - energy_before

    with np.errstate(over='ignore'):  # exp(inf) is a valid acceptance
        is_accepted = np.exp(-delta) > rng.random()

    if is_accepted:
        context.n_accept += 1
        context.energy += delta
    else:
        system.positions[i] = position_before
    context.n_attempt += 1
    return bool(is_accepted)


def adjust_step(max_displacement, n_accept, n_attempt, target_ratio):
    """
    Shrink the step if the cumulative acceptance ratio is below the target,
        otherwise grow it. Nothing changes before the first attempt.

    Return:
        float: the new maximum displacement
    """
    if n_attempt == 0:
        return max_displacement
    if n_accept / n_attempt < target_ratio:
        return max_displacement * SHRINK
    else:
        return max_displacement * GROW


def get_cycles(n, steps_per_particle, target_ratio):
    """
    The number of trial moves of a run, steps_per_particle * n / target_ratio
    """
    return int(np.floor(steps_per_particle * n / target_ratio))


def _check_run(steps_per_particle, target_ratio, rewrap):
    is_int = isinstance(steps_per_particle, Integral)
    if not is_int or steps_per_particle < 1:
        raise ValueError(
            "The steps per particle must be a positive integer",
            steps_per_particle
        )
    if not (0 < target_ratio < 1):
        raise ValueError("The target ratio must be in (0, 1)", target_ratio)
    if rewrap not in REWRAP_MODES:
        raise ValueError("Invalid rewrap mode", rewrap)


def iter_thermalize(
        system, steps_per_particle, target_ratio, rng=None, seed=None,
        rewrap='all', minimum_image=False
    ):
    """
    Thermalise the system step by step, the steps are strictly sequential

    Args:
        system (System): the liquid, modified in place
        steps_per_particle (int): the number of moves per particle, before
            dividing by the target ratio
        target_ratio (float): the desired acceptance ratio, in (0, 1)
        rng (numpy.random.Generator): the source of random numbers, if it
            is None a new generator is created from the seed
        seed (int): the seed of the new generator
        rewrap (str): the folding after each move, see `trial_move`
        minimum_image (bool): if true, use the minimum image distance

    Return:
        generator: yields (step, context) after each step, the step starts
            from 1. The context is the same object throughout the run.
            The arguments are checked before the generator is returned.
    """
    _check_run(steps_per_particle, target_ratio, rewrap)
    if rng is None:
        rng = np.random.default_rng(seed)
    cycles = get_cycles(system.n, steps_per_particle, target_ratio)
    return _iter_steps(
        system, cycles, target_ratio, rng, rewrap, minimum_image
    )


def _iter_steps(system, cycles, target_ratio, rng, rewrap, minimum_image):
    context = RunContext(system_energy(system, minimum_image=minimum_image))
    for step in range(1, cycles + 1):
        trial_move(
            system, context, rng, rewrap=rewrap, minimum_image=minimum_image
        )
        context.max_displacement = adjust_step(
            context.max_displacement, context.n_accept, context.n_attempt,
            target_ratio
        )
        yield step, context


def thermalize(
        system, steps_per_particle, target_ratio, rng=None, seed=None,
        report=print_progress, rewrap='all', minimum_image=False
    ):
    """
    Run the full thermalisation, reporting one record per step

    Args:
        report (callable or None): the progress sink, called with
            (energy, max_displacement, ratio) after every step

    See `iter_thermalize` for the other arguments.

    Return:
        tuple: (system, context) at the end of the run
    """
    steps = iter_thermalize(
        system, steps_per_particle, target_ratio, rng=rng, seed=seed,
        rewrap=rewrap, minimum_image=minimum_image
    )
    for _, context in steps:
        if report is not None:
            report(*context.record())
    return system, context
