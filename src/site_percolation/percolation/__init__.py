"""Percolation models and threshold estimation."""

from .base import Percolation, InvalidArgumentError, OutOfRangeError
from .union_find import WeightedQuickUnionUF
from .array_percolation import ArrayPercolation
from .uf_percolation import UFPercolation
from .stats import PercolationStats, run_trial
from .grid_file import read_grid_file, load_percolation

__all__ = [
    'Percolation',
    'InvalidArgumentError',
    'OutOfRangeError',
    'WeightedQuickUnionUF',
    'ArrayPercolation',
    'UFPercolation',
    'PercolationStats',
    'run_trial',
    'read_grid_file',
    'load_percolation',
]
