class LiquidError(Exception):
    """
    Base class of the fatal errors raised by the simulation
    """


class AllocationFailure(LiquidError, MemoryError):
    """
    The storage of the particle positions can not be obtained
    """


class OutputFailure(LiquidError, OSError):
    """
    A snapshot or trajectory destination can not be opened or written
    """
