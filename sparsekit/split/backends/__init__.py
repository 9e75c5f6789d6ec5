"""
Backends for the train/test splitter.
"""

from sparsekit.split.backends.cpu import CPUSplitBackend, clock_seed

__all__ = [
    "CPUSplitBackend",
    "clock_seed",
]
