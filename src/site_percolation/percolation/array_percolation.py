"""
Percolation model backed by a plain boolean grid.

Fullness is recomputed from scratch on every query by flood filling from
the open sites of the top row. Queries cost O(n^2), which makes this model
a simple reference to check UFPercolation against rather than something to
run experiments with.
"""

import numpy as np

from .base import Percolation, check_size, check_site

# (di, dj) offsets for the north, east, south and west neighbours
NEIGHBOURS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class ArrayPercolation(Percolation):
    """
    n x n percolation system answering is_full() by flood fill.

    Example:
        perc = ArrayPercolation(3)
        for i in range(3):
            perc.open(i, 0)
        perc.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Construct an n x n system with all sites blocked.

        Args:
            n: Side length of the grid, must be > 0
        """
        self._n = check_size(n)
        self._open = np.zeros((self._n, self._n), dtype=bool)
        self._open_sites = 0

    @property
    def n(self) -> int:
        return self._n

    def open(self, i: int, j: int) -> None:
        check_site(self._n, i, j)
        if not self._open[i, j]:
            self._open[i, j] = True
            self._open_sites += 1

    def is_open(self, i: int, j: int) -> bool:
        check_site(self._n, i, j)
        return bool(self._open[i, j])

    def is_full(self, i: int, j: int) -> bool:
        check_site(self._n, i, j)
        return bool(self._flood_fill()[i, j])

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def percolates(self) -> bool:
        # Equivalent to is_full(n - 1, k) for some column k
        return bool(self._flood_fill()[-1].any())

    def _flood_fill(self) -> np.ndarray:
        """
        Mark every open site reachable from an open site in row 0.

        Depth-first search with an explicit stack, so the traversal depth is
        not limited by the interpreter's recursion limit.

        Returns:
            Boolean array of shape (n, n), True where the site is full
        """
        n = self._n
        is_open = self._open
        full = np.zeros((n, n), dtype=bool)

        stack = [(0, col) for col in range(n - 1, -1, -1)]
        while stack:
            i, j = stack.pop()
            if i < 0 or i >= n or j < 0 or j >= n:
                continue
            if not is_open[i, j] or full[i, j]:
                continue
            full[i, j] = True
            for di, dj in NEIGHBOURS:
                stack.append((i + di, j + dj))

        return full
