from . import analysis, config, crystal, energy, geometry, mc, potential, report
from .errors import LiquidError, AllocationFailure, OutputFailure
from .system import System, new_system
from .geometry import wrap, rewrap_all, distance
from .potential import radial_potential, pair_potential
from .energy import particle_energy, system_energy
from .mc import RunContext, trial_move, adjust_step, thermalize, iter_thermalize
from .report import print_progress, ProgressLog
from .analysis import save_snapshot, dump_xyz, XYZ
