import pandas as pd
import matplotlib.pyplot as plt


def print_progress(energy, max_displacement, ratio):
    """
    Print one line of (energy, max_displacement, acceptance ratio)
    """
    print(f"{energy:.6f}\t{max_displacement:.6f}\t{ratio:.6f}")


def every(frequency, sink):
    """
    Forward only every [frequency]th record to the sink

    Args:
        frequency (int): the number of records between two forwarded ones
        sink (callable): the progress sink, called as
            sink(energy, max_displacement, ratio)

    Return:
        callable: the thinned sink
    """
    if frequency < 1:
        raise ValueError("The report frequency must be positive", frequency)
    count = 0

    def thinned(energy, max_displacement, ratio):
        nonlocal count
        if count % frequency == 0:
            sink(energy, max_displacement, ratio)
        count += 1
    return thinned


class ProgressLog:
    """
    A progress sink that keeps the records of a thermalisation run. Only
        every [frequency]th record is kept, the first step is always kept.

    Attributes:
        records (list): the (energy, max_displacement, ratio) tuples
        steps (list): the step of each record, starting from 1
        frequency (int): the number of steps between two kept records
    """
    columns = ('energy', 'max_displacement', 'ratio')

    def __init__(self, frequency=1):
        if frequency < 1:
            raise ValueError("The log frequency must be positive", frequency)
        self.frequency = frequency
        self.records = []
        self.steps = []
        self.__count = 0

    def __call__(self, energy, max_displacement, ratio):
        if self.__count % self.frequency == 0:
            self.records.append((energy, max_displacement, ratio))
            self.steps.append(self.__count + 1)
        self.__count += 1

    def __len__(self):
        return len(self.records)

    def to_dataframe(self):
        """
        Return:
            pandas.DataFrame: one row per kept record, indexed by the step
        """
        df = pd.DataFrame(self.records, columns=self.columns)
        df.index = pd.Index(self.steps, name='step')
        return df

    def to_csv(self, filename):
        self.to_dataframe().to_csv(filename)

    @classmethod
    def from_csv(cls, filename):
        """
        Load the records saved by `ProgressLog.to_csv`
        """
        df = pd.read_csv(filename, index_col='step')
        self = cls()
        self.records = [tuple(row) for row in df[list(cls.columns)].values]
        self.steps = [int(step) for step in df.index]
        return self

    def plot(self, save="progress.pdf"):
        """
        Plot the energy, step size and acceptance ratio against the steps

        Args:
            save (str): if it is not empty, the plot will be saved using
                [save] as filename, otherwise it is shown.
        """
        df = self.to_dataframe()
        fig, ax = plt.subplots(3, 1, sharex=True)
        for axis, key, color in zip(ax, self.columns, ('k', 'teal', 'tomato')):
            axis.plot(df.index, df[key], color=color)
            axis.set_ylabel(key.replace('_', ' ').title())
        ax[-1].set_xlabel("Step")
        fig.set_size_inches(8, 8)
        plt.tight_layout()
        if save:
            plt.savefig(save)
        else:
            plt.show()
        plt.close(fig)
