"""
Core infrastructure for sparsekit.

Shared abstractions used by the domain subpackages (split, smat, matrix).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from sparsekit.core.result import Result
from sparsekit.core.exceptions import (
    SparseKitError,
    ValidationError,
    InvalidArgumentError,
    DimensionError,
    FormatError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "SparseKitError",
    "ValidationError",
    "InvalidArgumentError",
    "DimensionError",
    "FormatError",
]
