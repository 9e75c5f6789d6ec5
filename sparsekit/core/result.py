"""
Generic result container for sparsekit computations.

The Result class provides a standardized envelope that pipeline-style
operations (currently the train/test splitter) return from their backends.
Domains define their own parameter payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (seed, counts, shape)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (e.g. the train/test matrices)
        info: Structured metadata (seed used, entry counts)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SplitParams(train=train, test=test),
        ...     info={'seed': 12345, 'nnz': 10, 'n_train': 9},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_split'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
