"""
Exception hierarchy for staz.

All exceptions inherit from StazError to allow catching any
library-specific error. Every exception class carries the ErrorKind that
the public API records in the last-error slot when it converts the
exception into a NaN sentinel (see staz.core.errors).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Kind of failure recorded by the last public operation."""
    NONE = 'none'
    INVALID_INPUT = 'invalid_input'
    ZERO_DIVISION = 'zero_division'
    MATH_DOMAIN = 'math_domain'
    NAN_PROPAGATION = 'nan_propagation'
    OUT_OF_RANGE = 'out_of_range'
    ALLOCATION_FAILURE = 'allocation_failure'

    @property
    def message(self) -> str:
        """Human-readable description of this kind."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ErrorKind.NONE: "No error",
    ErrorKind.INVALID_INPUT: "Invalid input: sample is missing, empty or malformed",
    ErrorKind.ZERO_DIVISION: "Division by zero",
    ErrorKind.MATH_DOMAIN: "Math domain error: even root of a negative value",
    ErrorKind.NAN_PROPAGATION: "An intermediate computation produced NaN",
    ErrorKind.OUT_OF_RANGE: "Quantile position out of range",
    ErrorKind.ALLOCATION_FAILURE: "Could not allocate scratch memory",
}


class StazError(Exception):
    """Base exception for all staz errors."""
    kind = ErrorKind.INVALID_INPUT


class ValidationError(StazError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: absent or
    empty samples, unknown enum members, malformed quantile arguments.
    """
    kind = ErrorKind.INVALID_INPUT


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a sample is not one-dimensional or when paired samples
    have different lengths.
    """
    pass


class OutOfRangeError(ValidationError):
    """
    Quantile position outside [1, division - 1].

    Attributes:
        position: The requested position
        division: The requested division
    """
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(
        self,
        message: str,
        position: int | None = None,
        division: int | None = None,
    ):
        super().__init__(message)
        self.position = position
        self.division = division


class NumericalError(StazError):
    """
    Numerical computation failed.

    Base class for errors arising from the arithmetic itself rather than
    from the shape of the input.
    """
    kind = ErrorKind.NAN_PROPAGATION


class ZeroDivisionStatError(NumericalError):
    """
    A ratio or reciprocal has a zero denominator.

    Attributes:
        operation: Name of the statistic being computed
        index: Position of the offending element, if a single element is
            responsible (e.g. a zero in the harmonic mean)
    """
    kind = ErrorKind.ZERO_DIVISION

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        index: int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.index = index


class MathDomainError(NumericalError):
    """
    Argument outside the domain of a real function.

    Attributes:
        value: The offending argument (e.g. a negative product)
    """
    kind = ErrorKind.MATH_DOMAIN

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class NaNPropagationError(NumericalError):
    """
    An upstream computation produced NaN and a composed statistic
    refused to build on it.

    Attributes:
        source: Name of the intermediate quantity that was NaN
    """
    kind = ErrorKind.NAN_PROPAGATION

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class AllocationError(StazError):
    """
    Scratch buffer allocation failed.

    Attributes:
        n_elements: Size of the buffer that could not be allocated
    """
    kind = ErrorKind.ALLOCATION_FAILURE

    def __init__(self, message: str, n_elements: int | None = None):
        super().__init__(message)
        self.n_elements = n_elements
