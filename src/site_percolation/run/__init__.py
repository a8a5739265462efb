"""Experiment definitions."""

from .config import ExperimentConfig

__all__ = ['ExperimentConfig']
