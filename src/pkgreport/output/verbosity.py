"""Verbosity levels and output-type masks."""

from enum import IntEnum, IntFlag


class Verbosity(IntEnum):
    """Verbosity levels for reporting output.

    Levels are ordered from least to most verbose:
    - QUIET: only results and errors, no progress
    - NORMAL: default output, progress included
    - HIGH: -v, step details and liveness indicators
    - DEBUG: -vv, diagnostic traces
    """

    QUIET = 0
    NORMAL = 1
    HIGH = 2
    DEBUG = 3

    @classmethod
    def from_flags(cls, verbose: int = 0, quiet: bool = False) -> "Verbosity":
        """Create Verbosity from front-end flags.

        Parameters
        ----------
        verbose : int
            Number of ``-v`` flags given
        quiet : bool
            Whether quiet mode was requested; wins over ``verbose``

        Returns
        -------
        Verbosity
            Corresponding verbosity level
        """
        if quiet:
            return cls.QUIET
        if verbose >= 2:
            return cls.DEBUG
        if verbose == 1:
            return cls.HIGH
        return cls.NORMAL

    @classmethod
    def from_name(cls, name: str) -> "Verbosity":
        """Look up a level by case-insensitive name (``"high"`` -> ``HIGH``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            msg = f"Unknown verbosity level: {name!r}"
            raise ValueError(msg) from None


class OutputType(IntFlag):
    """Output types; an event mask selects the types it is rendered for."""

    NORMAL = 0x01
    XML = 0x02
    ALL = 0xFF
