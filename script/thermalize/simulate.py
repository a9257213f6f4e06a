#!/usr/bin/env python3
import os
import sys

import liquid


config_file = sys.argv[1] if len(sys.argv) > 1 else 'configure.ini'

try:
    conf = liquid.config.load_config(config_file)
except (OSError, ValueError) as err:
    sys.exit(f"Invalid configuration: {err}")

os.makedirs('result', exist_ok=True)
snapshot_name = os.path.join('result', conf['filename'])
dump_name = os.path.join('result', 'trajectory.xyz')
progress_name = os.path.join('result', 'progress.csv')
dump_frequency = conf['dump_frequency']

try:
    system = liquid.new_system(conf['n_lateral'], conf['fill_fraction'], report=True)
except liquid.LiquidError as err:
    sys.exit(str(err))

print(system)

log = liquid.ProgressLog(conf['report_frequency'])  # thinned like the console
sink = liquid.report.every(conf['report_frequency'], liquid.print_progress)

def report(energy, max_displacement, ratio):
    log(energy, max_displacement, ratio)
    sink(energy, max_displacement, ratio)

if dump_frequency > 0:
    f_xyz = open(dump_name, 'w')  # start a new trajectory
    f_xyz.close()

try:
    steps = liquid.iter_thermalize(
        system, conf['steps_per_particle'], conf['target_ratio'],
        seed=conf['seed'], rewrap=conf['rewrap'],
        minimum_image=conf['minimum_image'],
    )
except ValueError as err:
    sys.exit(f"Invalid run parameters: {err}")

try:
    for step, context in steps:
        report(*context.record())
        if dump_frequency > 0 and step % dump_frequency == 0:
            liquid.dump_xyz(dump_name, system, step=step)
    liquid.save_snapshot(system, snapshot_name)
except liquid.LiquidError as err:
    sys.exit(str(err))

log.to_csv(progress_name)
print(context)
print(f"Final energy: {context.energy:.6f}, acceptance ratio: {context.ratio:.4f}")
