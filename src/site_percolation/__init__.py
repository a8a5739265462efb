"""
Site Percolation - percolation models and threshold estimation.

This package provides tools for:
- Modelling an n x n grid of open/blocked sites
- Answering full/percolates queries by flood fill or union-find
- Estimating the percolation threshold with Monte Carlo trials
"""

__version__ = "1.0.0"
