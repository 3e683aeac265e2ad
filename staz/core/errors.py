"""
Last-error reporting for the public API.

Public operations never raise library errors at the caller by default.
Instead they return a sentinel (NaN, or a composite whose fields are all
NaN) and record an ErrorKind that the caller inspects afterwards:

    >>> m = harmonic_mean([1, 2, 0, 4])
    >>> math.isnan(m), last_error()
    (True, <ErrorKind.ZERO_DIVISION: 'zero_division'>)

The slot is a ContextVar, so every thread and every asyncio task sees its
own value. Two threads computing statistics at the same time cannot
observe each other's errors.

Inside ``with raise_errors():`` the same operations record the slot and
then re-raise the StazError instead of returning the sentinel.
"""

from __future__ import annotations

import functools
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, TypeVar

from staz.core.exceptions import AllocationError, ErrorKind, StazError

F = TypeVar('F', bound=Callable[..., Any])

_last_error: ContextVar[ErrorKind] = ContextVar('staz_last_error', default=ErrorKind.NONE)
_raise_errors: ContextVar[bool] = ContextVar('staz_raise_errors', default=False)


def last_error() -> ErrorKind:
    """Error kind recorded by the most recent public operation in this context."""
    return _last_error.get()


def error_message(kind: ErrorKind | None = None) -> str:
    """
    Human-readable message for an error kind.

    Args:
        kind: Kind to describe. Defaults to the current last error.
    """
    if kind is None:
        kind = _last_error.get()
    return kind.message


def set_error(kind: ErrorKind) -> None:
    """Overwrite the last-error slot of the current context."""
    _last_error.set(kind)


def clear_error() -> None:
    """Reset the last-error slot of the current context to ErrorKind.NONE."""
    _last_error.set(ErrorKind.NONE)


@contextmanager
def raise_errors() -> Iterator[None]:
    """
    Make public operations raise instead of returning sentinels.

    Usage:
        with raise_errors():
            harmonic_mean([1, 0])   # raises ZeroDivisionStatError
    """
    token = _raise_errors.set(True)
    try:
        yield
    finally:
        _raise_errors.reset(token)


def signals_errors(sentinel: Callable[[], Any]) -> Callable[[F], F]:
    """
    Decorator turning library exceptions into a sentinel plus last-error kind.

    The wrapped function's slot is reset to NONE on entry. A StazError
    raised inside is recorded and replaced by ``sentinel()``. A MemoryError
    from any scratch allocation is recorded as ALLOCATION_FAILURE the same
    way. Any other exception propagates untouched.

    Args:
        sentinel: Zero-argument factory for the failure value.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _last_error.set(ErrorKind.NONE)
            try:
                return func(*args, **kwargs)
            except StazError as e:
                _last_error.set(e.kind)
                if _raise_errors.get():
                    raise
                return sentinel()
            except MemoryError as e:
                _last_error.set(ErrorKind.ALLOCATION_FAILURE)
                if _raise_errors.get():
                    raise AllocationError(
                        f"{func.__name__}: cannot allocate scratch memory"
                    ) from e
                return sentinel()
        return wrapper  # type: ignore[return-value]
    return decorator
