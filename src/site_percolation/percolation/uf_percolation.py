"""
Percolation model backed by a union-find structure.

Two virtual elements are added to the n^2 sites: a source joined to every
open site of the top row and a sink joined to every open site of the bottom
row. percolates() is then a single connected(source, sink) query.

Once the system percolates, a bottom-row site can reach the source through
the sink without any open path to the top. is_full() therefore asks a
second structure that has the source but no sink.

Element IDs:
    source      -> 0
    site (i, j) -> i * n + j + 1
    sink        -> n * n + 1
"""

import numpy as np

from .base import Percolation, check_size, check_site
from .union_find import WeightedQuickUnionUF


class UFPercolation(Percolation):
    """
    n x n percolation system with incrementally maintained connectivity.

    open() costs a handful of union() calls; is_full() and percolates() are
    a single connected() query each.
    """

    SOURCE = 0

    def __init__(self, n: int):
        """
        Construct an n x n system with all sites blocked.

        Args:
            n: Side length of the grid, must be > 0
        """
        self._n = check_size(n)
        self._open = np.zeros((self._n, self._n), dtype=bool)
        self._open_sites = 0
        self._sink = self._n * self._n + 1
        self._uf = WeightedQuickUnionUF(self._n * self._n + 2)
        self._top_uf = WeightedQuickUnionUF(self._n * self._n + 1)

    @property
    def n(self) -> int:
        return self._n

    @property
    def sink(self) -> int:
        return self._sink

    def encode(self, i: int, j: int) -> int:
        """Return the union-find element ID of site (i, j)."""
        return self._n * i + j + 1

    def open(self, i: int, j: int) -> None:
        n = self._n
        check_site(n, i, j)
        if self._open[i, j]:
            return

        self._open[i, j] = True
        self._open_sites += 1

        site = self.encode(i, j)

        if i == 0:
            self._uf.union(self.SOURCE, site)
            self._top_uf.union(self.SOURCE, site)
        if i == n - 1:
            self._uf.union(self._sink, site)

        for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if 0 <= ni < n and 0 <= nj < n and self._open[ni, nj]:
                neighbour = self.encode(ni, nj)
                self._uf.union(site, neighbour)
                self._top_uf.union(site, neighbour)

    def is_open(self, i: int, j: int) -> bool:
        check_site(self._n, i, j)
        return bool(self._open[i, j])

    def is_full(self, i: int, j: int) -> bool:
        check_site(self._n, i, j)
        return bool(self._open[i, j]) and self._top_uf.connected(self.SOURCE, self.encode(i, j))

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def percolates(self) -> bool:
        return self._uf.connected(self.SOURCE, self._sink)
