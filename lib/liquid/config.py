import os
import configparser

from .mc import REWRAP_MODES


DEFAULTS = {
    'Run': {
        'seed': '',
        'report_frequency': '1',
        'dump_frequency': '0',
        'filename': 'snapshot.dat',
        'rewrap': 'all',
        'minimum_image': 'no',
    },
}


def load_config(filename='configure.ini'):
    """
    Load the parameters of a thermalisation run from an ini file

    .. code-block:: ini

        [System]
        n_lateral = 8
        fill_fraction = 0.35

        [Run]
        steps_per_particle = 100
        target_ratio = 0.3
        seed = 42

    Args:
        filename (str): the path to the ini file

    Return:
        dict: the parameters, keyed by the option names
    """
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"Configuration file not found: {filename}")
    conf = configparser.ConfigParser()
    conf.read_dict(DEFAULTS)
    conf.read(filename)

    try:
        run = conf['Run']
        seed = run['seed'].strip()
        config = {
            'n_lateral': conf.getint('System', 'n_lateral'),
            'fill_fraction': conf.getfloat('System', 'fill_fraction'),
            'steps_per_particle': int(float(run['steps_per_particle'])),
            'target_ratio': conf.getfloat('Run', 'target_ratio'),
            'seed': int(seed) if seed else None,
            'report_frequency': int(float(run['report_frequency'])),
            'dump_frequency': int(float(run['dump_frequency'])),
            'filename': run['filename'],
            'rewrap': run['rewrap'].strip().lower(),
            'minimum_image': run.getboolean('minimum_image'),
        }
    except (KeyError, configparser.Error) as err:
        raise ValueError(f"Missing option in {filename}: {err}") from err

    if config['n_lateral'] < 1:
        raise ValueError("n_lateral must be positive", config['n_lateral'])
    if not (0 < config['fill_fraction'] < 1):
        raise ValueError("fill_fraction must be in (0, 1)", config['fill_fraction'])
    if config['steps_per_particle'] < 1:
        raise ValueError(
            "steps_per_particle must be positive", config['steps_per_particle']
        )
    if not (0 < config['target_ratio'] < 1):
        raise ValueError("target_ratio must be in (0, 1)", config['target_ratio'])
    if config['report_frequency'] < 1:
        raise ValueError(
            "report_frequency must be positive", config['report_frequency']
        )
    if config['dump_frequency'] < 0:
        raise ValueError(
            "dump_frequency can't be negative", config['dump_frequency']
        )
    if config['rewrap'] not in REWRAP_MODES:
        raise ValueError("Invalid rewrap mode", config['rewrap'])
    return config
