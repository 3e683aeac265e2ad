"""
Core infrastructure for staz.

This module provides the shared abstractions used by the statistics
themselves.

Key components:
    exceptions: Exception hierarchy and ErrorKind
    errors: Per-context last-error slot and the signals_errors decorator
    validation: Input validators
    result: Generic Result[P] envelope
    timing: Section timer
    tolerances: Numerical tolerance tiers
"""

from staz.core.result import Result
from staz.core.errors import (
    clear_error,
    error_message,
    last_error,
    raise_errors,
    signals_errors,
)
from staz.core.exceptions import (
    ErrorKind,
    StazError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
    NumericalError,
    ZeroDivisionStatError,
    MathDomainError,
    NaNPropagationError,
    AllocationError,
)

__all__ = [
    # Result
    "Result",
    # Error slot
    "ErrorKind",
    "last_error",
    "error_message",
    "clear_error",
    "raise_errors",
    "signals_errors",
    # Exceptions
    "StazError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "NumericalError",
    "ZeroDivisionStatError",
    "MathDomainError",
    "NaNPropagationError",
    "AllocationError",
]
