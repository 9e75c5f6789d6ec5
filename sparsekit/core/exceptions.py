"""
Exception hierarchy for sparsekit.

All exceptions inherit from SparseKitError to allow catching any
library-specific error. I/O failures are not wrapped: OSError raised by
the file system propagates to the caller unchanged.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class SparseKitError(Exception):
    """Base exception for all sparsekit errors."""
    pass


class ValidationError(SparseKitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    An argument is outside its accepted range or set of options.

    Raised for a split fraction outside [0, 1], an unsupported element
    type for printing, or an axis other than 1 or 2 for a membership test.

    Attributes:
        name: Parameter name
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class FormatError(SparseKitError, ValueError):
    """
    Malformed SMAT input.

    Raised when the header or a data line of an SMAT source cannot be
    parsed, or when the source ends before the declared number of
    entries has been read.

    Attributes:
        line_number: 1-based line number of the offending line, if known
        line: Raw text of the offending line, if available
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line
