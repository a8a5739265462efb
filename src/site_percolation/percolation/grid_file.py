"""
Grid input files.

A grid file holds whitespace-separated integers: the grid size n followed
by zero or more (i, j) pairs naming the sites to open, e.g.

    3
    0 0
    1 0
    2 0
"""

from pathlib import Path
from typing import Tuple, Type, Union

import numpy as np

from .base import Percolation
from .uf_percolation import UFPercolation


def read_grid_file(path: Union[str, Path]) -> Tuple[int, np.ndarray]:
    """
    Read a grid file.

    Args:
        path: Path to the grid file

    Returns:
        Tuple of (n, sites) where sites has shape (k, 2), one row per site
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")

    tokens = path.read_text().split()
    if not tokens:
        raise ValueError(f"Grid file is empty: {path}")

    try:
        values = np.array([int(t) for t in tokens], dtype=np.int64)
    except ValueError:
        raise ValueError(f"Grid file contains non-integer values: {path}") from None

    n = int(values[0])
    coords = values[1:]
    if len(coords) % 2 != 0:
        raise ValueError(
            f"Grid file has an odd number of coordinates ({len(coords)}): {path}"
        )

    return n, coords.reshape(-1, 2)


def load_percolation(path: Union[str, Path],
                     model: Type[Percolation] = UFPercolation) -> Percolation:
    """
    Build a percolation system from a grid file, opening every listed site.

    Args:
        path: Path to the grid file
        model: Percolation implementation to instantiate

    Returns:
        The populated percolation model
    """
    n, sites = read_grid_file(path)
    perc = model(n)
    for i, j in sites:
        perc.open(int(i), int(j))
    return perc
