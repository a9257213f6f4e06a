#!/usr/bin/env python3
import os
import sys
import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt
mpl.rcParams['font.size'] = 14

import liquid


config_file = sys.argv[1] if len(sys.argv) > 1 else 'configure.ini'
conf = liquid.config.load_config(config_file)

os.makedirs('figure', exist_ok=True)
positions = liquid.analysis.load_snapshot(os.path.join('result', conf['filename']))
system = liquid.System(conf['n_lateral'], conf['fill_fraction'], positions)

# Progress of the thermalisation
log = liquid.ProgressLog.from_csv(os.path.join('result', 'progress.csv'))
log.plot(save=os.path.join('figure', 'progress.pdf'))

# Structure of the final configuration
bc, gr = liquid.analysis.get_gr(system.positions, system.box_length, nbins=100)
plt.plot(bc, gr, color='teal')
plt.plot((bc[0], bc[-1]), (1, 1), color='k', lw=1, ls='--')
plt.xlabel('r / $\\sigma$')
plt.ylabel('g(r)')
plt.title(f"$\\phi$ = {conf['fill_fraction']}, N = {system.n}")
plt.tight_layout()
plt.savefig(os.path.join('figure', 'gr.pdf'))
plt.close()

# Frames along the trajectory
dump_name = os.path.join('result', 'trajectory.xyz')
if os.path.isfile(dump_name):
    frames = liquid.XYZ(dump_name)
    for frame, step, box_length in zip(frames, frames.steps, frames.box_lengths):
        bc, gr = liquid.analysis.get_gr(frame, box_length, nbins=100)
        print(f"step {step}: first peak at r = {bc[np.argmax(gr)]:.4f}")
    frames.close()
