"""
Abstract base class for percolation models.

A percolation model is an n x n grid of sites, each blocked or open. Sites
are opened one at a time and never closed again. A site is *full* when a
chain of open neighbouring sites connects it to the top row, and the system
*percolates* when some site in the bottom row is full.
"""

from abc import ABC, abstractmethod

import numpy as np


class InvalidArgumentError(ValueError):
    """Raised when a model or driver is constructed with an illegal size."""


class OutOfRangeError(IndexError):
    """Raised when a site coordinate lies outside the grid."""


def check_size(n, name: str = 'n') -> int:
    """
    Validate a grid size or trial count.

    Args:
        n: Value to check, must be a positive integer
        name: Argument name used in the error message

    Returns:
        n as a plain int
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(f"Illegal {name}: {n!r} is not an integer")
    if n <= 0:
        raise InvalidArgumentError(f"Illegal {name}: {n} (must be > 0)")
    return int(n)


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_site(n: int, i, j) -> None:
    """Raise OutOfRangeError unless i and j are integers with 0 <= i, j < n."""
    if not (_is_index(i) and _is_index(j)):
        raise OutOfRangeError(f"Illegal site ({i!r}, {j!r}): coordinates must be integers")
    if not (0 <= i < n and 0 <= j < n):
        raise OutOfRangeError(f"Illegal site ({i}, {j}) for a {n} x {n} system")


class Percolation(ABC):
    """
    Abstract base class for all percolation models.

    Subclasses keep their own grid and connectivity state; nothing is
    shared between implementations.
    """

    @property
    @abstractmethod
    def n(self) -> int:
        """Side length of the grid."""
        pass

    @abstractmethod
    def open(self, i: int, j: int) -> None:
        """
        Open site (i, j) if it is not already open.

        Args:
            i: Row index in [0, n)
            j: Column index in [0, n)
        """
        pass

    @abstractmethod
    def is_open(self, i: int, j: int) -> bool:
        """Return True if site (i, j) is open."""
        pass

    @abstractmethod
    def is_full(self, i: int, j: int) -> bool:
        """Return True if site (i, j) is connected to the top row."""
        pass

    @abstractmethod
    def number_of_open_sites(self) -> int:
        """Return the number of distinct open sites."""
        pass

    @abstractmethod
    def percolates(self) -> bool:
        """Return True if an open path joins the top row to the bottom row."""
        pass
