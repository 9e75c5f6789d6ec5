"""
Shared compute infrastructure for sparsekit.

Submodules:
    timing: Execution timing utilities
"""

from sparsekit.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
