import re
import numpy as np
import pandas as pd

from .errors import OutputFailure

INT_TYPES = (
    int, np.int8, np.uint8, np.int16, np.uint16,
    np.int32, np.uint32, np.int64, np.uint64
)


def save_snapshot(system, filename, fmt='%.6f'):
    """
    Write the positions of a system, one particle per line, three
        tab-separated values. An existing file is overwritten.

    Args:
        system (System): the liquid
        filename (str): the name of the output file
        fmt (str): the format of a single coordinate

    Return:
        None
    """
    try:
        with open(filename, 'w') as f:
            np.savetxt(f, system.positions, delimiter='\t', fmt=fmt)
    except OSError as err:
        raise OutputFailure(f"Cannot write snapshot to {filename}: {err}") from err


def load_snapshot(filename):
    """
    Load the positions written by `save_snapshot`

    Return:
        numpy.ndarray: the positions, shape (n, 3)
    """
    return np.loadtxt(filename, delimiter='\t', ndmin=2)


def dump_xyz(filename, system, step=None):
    """
    Append the current configuration of a system to an xyz trajectory.
        The comment line holds the step and the box length, as
        "step=10 box_length=2.28700000", and is read back by `XYZ`.

    Args:
        filename (str): the name of the xyz file, it can be an existing file
        system (System): the liquid to be dumped
        step (int): the Monte Carlo step of the frame, omitted if None

    Return:
        None
    """
    fields = [] if step is None else [f"step={step}"]
    fields.append(f"box_length={system.box_length:.8f}")
    try:
        with open(filename, 'a') as f:
            f.write(f"{system.n}\n{' '.join(fields)}\n")
            np.savetxt(
                f, system.positions, delimiter=' ', fmt='A %.8e %.8e %.8e'
            )
    except OSError as err:
        raise OutputFailure(f"Cannot dump frame to {filename}: {err}") from err


class XYZ:
    """
    Iter the frames in an xyz file, organised as

    Frame 1
    Frame 2
    ...

    For each frame, the content is

    Header   # one-line with the number of particles
    Comment  # one-line of key=value fields, e.g. step=10 box_length=2.287
    Data     # many-lines data to be loaded as a numpy array

    The file is parsed once to find where each frame starts, the frames
        themselves are loaded lazily with `pandas.read_csv`.

    Attributes:
        numbers (list): the number of particles in each frame
        comments (list): the comment line of each frame
        steps (list): the step of each frame, None if it is not recorded
        box_lengths (list): the box length of each frame, None if it is
            not recorded
        __f (io.TextIOWrapper): a file object obtained by `open()`
        __frame_cursors (list): the stream position of the first data line
            of each frame.
    """
    header_pattern = r'(\d+)\n'
    field_pattern = r'(\w+)=(\S+)'

    def __init__(self, filename, usecols=(1, 2, 3)):
        self.numbers = []
        self.comments = []
        self.steps = []
        self.box_lengths = []
        self.__frame = 0
        self.__frame_cursors = []
        self.__usecols = list(usecols)
        self.__f = open(filename, 'r')
        self.__parse()

    def __next__(self):
        if self.__frame < len(self):
            self.__frame += 1
            return self[self.__frame - 1]
        else:
            self.__frame = 0
            raise StopIteration

    def __getitem__(self, i):
        """
        Args:
            i (int or slice): the frame number

        Return:
            np.ndarray: the positions of all particles in a frame, shape (n, dim)
        """
        if type(i) in INT_TYPES:
            if self.numbers[i] == 0:
                return np.empty((0, len(self.__usecols)))
            self.__f.seek(self.__frame_cursors[i])
            result = pd.read_csv(
                self.__f, nrows=self.numbers[i], sep=' ', header=None,
                index_col=False, usecols=self.__usecols,
            ).values
            return result
        elif type(i) == slice:
            return [self[frame] for frame in range(*i.indices(len(self)))]
        raise TypeError("Invalid frame index", i)

    def __len__(self):
        return len(self.numbers)

    def __iter__(self): return self

    def __parse(self):
        self.__f.seek(0)
        line = self.__f.readline()
        while line:
            is_head = re.match(self.header_pattern, line)
            if not is_head:
                raise RuntimeError("Failed to parse the xyz header", line)
            n_particle = int(is_head.group(1))
            self.numbers.append(n_particle)
            comment = self.__f.readline().rstrip('\n')
            fields = dict(re.findall(self.field_pattern, comment))
            self.comments.append(comment)
            self.steps.append(int(fields['step']) if 'step' in fields else None)
            self.box_lengths.append(
                float(fields['box_length']) if 'box_length' in fields else None
            )
            self.__frame_cursors.append(self.__f.tell())
            for _ in range(n_particle):
                self.__f.readline()
            line = self.__f.readline()

    def close(self):
        self.__f.close()

    def __del__(self):
        self.__f.close()


def get_gr(positions, box_length, nbins=50, r_max=None):
    """
    Calculate the radial distribution function of a periodic configuration,
        using the minimum image convention.

    Args:
        positions (numpy.ndarray): the particle locations, shape (n, 3)
        box_length (float): the edge of the cubic box
        nbins (int): the number of bins
        r_max (float): the largest distance, default is half of the box

    Return:
        tuple: (bin_centres, gr)
    """
    if r_max is None:
        r_max = box_length / 2.0
    n = len(positions)
    i, j = np.triu_indices(n, k=1)
    shift = positions[i] - positions[j]
    shift -= box_length * np.round(shift / box_length)
    dist = np.linalg.norm(shift, axis=1)
    be = np.linspace(0, r_max, nbins + 1)
    bc = (be[1:] + be[:-1]) / 2
    hist, _ = np.histogram(dist, bins=be)
    shell = 4.0 / 3.0 * np.pi * (be[1:] ** 3 - be[:-1] ** 3)
    density = n / box_length ** 3
    gr = 2.0 * hist / n / shell / density
    return bc, gr
