"""Timing helpers for experiment reports."""

import time
from typing import Optional


class Timer:
    """
    Context manager measuring wall-clock time of a block.

    Example:
        with Timer() as t:
            stats = PercolationStats(200, 100)
        print(format_duration(t.elapsed))
    """

    def __init__(self):
        self.start_time = None
        self.elapsed = None

    def __enter__(self) -> 'Timer':
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start_time
        return False


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'

    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        return f"{seconds / 60:.1f}m"
    else:
        return f"{seconds / 3600:.2f}h"
